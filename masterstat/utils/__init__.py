"""
masterstat utilities
"""

from .logging_config import LayerTagFormatter, configure_logging, module_tag

__all__ = [
    'LayerTagFormatter',
    'configure_logging',
    'module_tag',
]
