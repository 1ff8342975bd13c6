"""Logging configuration driven by the DEBUG setting."""

from fnmatch import fnmatchcase
from typing import Optional
import logging
import sys

from lokalise_mcp.config.loader import ConfigLoader

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


class DebugPatternFilter(logging.Filter):
    """Let DEBUG records through only for loggers matching a pattern.

    Records at INFO and above always pass.
    """

    def __init__(self, pattern: str):
        super().__init__()
        self.patterns = [p.strip() for p in pattern.split(",") if p.strip()]

    def filter(self, record: logging.LogRecord) -> bool:
        if record.levelno > logging.DEBUG:
            return True
        return any(fnmatchcase(record.name, pattern) for pattern in self.patterns)


def configure_logging(config_loader: ConfigLoader, force: bool = False) -> Optional[str]:
    """Configure root logging on stderr.

    stdout is reserved for the stdio MCP transport and command output.

    Args:
        config_loader: Loaded configuration
        force: Replace handlers installed by an earlier call

    Returns:
        The active debug pattern, or None when debug logging is off
    """
    pattern = config_loader.get_debug_pattern()
    level = logging.DEBUG if pattern else logging.WARNING

    logging.basicConfig(level=level, stream=sys.stderr, format=LOG_FORMAT, force=force)
    root = logging.getLogger()
    root.setLevel(level)

    if pattern and pattern != "*":
        for handler in root.handlers:
            handler.addFilter(DebugPatternFilter(pattern))

    return pattern
