"""
Configuration system for masterstat
"""

from .query_config import DEFAULT_MASTERS, QueryConfig
from .validation import ConfigValidationError

__all__ = ['QueryConfig', 'DEFAULT_MASTERS', 'ConfigValidationError']
