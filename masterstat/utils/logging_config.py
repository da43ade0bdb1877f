"""
Console logging for masterstat

One handler sits on the package logger; every record is tagged with the
layer it came from (transport, parser, query, fan-out, CLI).
"""

import logging
from typing import Optional, TextIO

PACKAGE_LOGGER = 'masterstat'

MODULE_TAGS = (
    ('masterstat.query_multiple', '[MULTI]'),
    ('masterstat.transport', '[UDP]'),
    ('masterstat.protocol', '[PROTO]'),
    ('masterstat.testing', '[MOCK]'),
    ('masterstat.query', '[QUERY]'),
    ('masterstat.cli', '[CLI]'),
)


def module_tag(logger_name: str) -> str:
    """Tag for a logger name, ``[MASTERSTAT]`` when no layer matches"""
    for module_name, tag in MODULE_TAGS:
        if logger_name == module_name or logger_name.startswith(module_name + '.'):
            return tag
    return '[MASTERSTAT]'


class LayerTagFormatter(logging.Formatter):
    """Formatter that fills ``%(tag)s`` from the record's logger name"""

    def __init__(self, fmt: str = '%(asctime)s - %(tag)s %(levelname)s - %(message)s'):
        super().__init__(fmt=fmt, datefmt='%H:%M:%S')

    def format(self, record):
        record.tag = module_tag(record.name)
        return super().format(record)


def configure_logging(level: int = logging.INFO, stream: Optional[TextIO] = None) -> logging.Logger:
    """Route masterstat records at ``level`` or above to ``stream`` (stderr by default).

    Calling it again only changes the level; the handler is installed once.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    if not logger.handlers:
        handler = logging.StreamHandler(stream)
        handler.setFormatter(LayerTagFormatter())
        logger.addHandler(handler)
        logger.propagate = False

    return logger
