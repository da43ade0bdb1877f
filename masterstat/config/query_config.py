"""
Query Configuration - settings shared by the CLI and library callers
"""

from dataclasses import dataclass, field, fields
from typing import Any, Dict, List

from .validation import (
    ConfigValidationError,
    validate_master_address,
    validate_timeout,
)

DEFAULT_MASTERS = [
    "master.quakeworld.nu:27000",
    "master.quakeservers.net:27000",
]

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class QueryConfig:
    """Master query settings"""

    # Targets
    masters: List[str] = field(default_factory=lambda: list(DEFAULT_MASTERS))

    # Network
    timeout: float = 2.0

    # Output
    log_level: str = "INFO"
    json_output: bool = False

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            'masters': list(self.masters),
            'timeout': self.timeout,
            'log_level': self.log_level,
            'json_output': self.json_output,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'QueryConfig':
        """Create from dictionary, ignoring unknown keys"""
        known = {f.name for f in fields(cls)}
        return cls(**{key: value for key, value in data.items() if key in known})

    def update(self, **kwargs):
        """Update configuration values"""
        for key, value in kwargs.items():
            if hasattr(self, key):
                setattr(self, key, value)

    def validate(self) -> 'QueryConfig':
        """Validate all settings, normalising the timeout to seconds"""
        if not self.masters:
            raise ConfigValidationError("At least one master address is required")

        for master in self.masters:
            validate_master_address(master)

        self.timeout = validate_timeout(self.timeout)

        level = str(self.log_level).upper()
        if level not in LOG_LEVELS:
            raise ConfigValidationError(f"Log level must be one of: {', '.join(LOG_LEVELS)}")
        self.log_level = level

        return self
