import logging
import logging.config
import re
from pathlib import Path
from typing import Optional

# ANSI escape codes (colours, bold, ...)
ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;]*m")

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class StripAnsiFilter(logging.Filter):
    """Strip ANSI colour codes from log records written to files."""

    def filter(self, record: logging.LogRecord) -> bool:  # type: ignore[override]
        if isinstance(record.msg, str):
            record.msg = ANSI_ESCAPE_RE.sub("", record.msg)
        return True


def attach_strip_ansi_to_file_handlers() -> None:
    """
    Attach StripAnsiFilter to every FileHandler on the root logger.

    Call after logging.config.fileConfig(...) so the handlers declared in
    logging.ini already exist.
    """
    root_logger = logging.getLogger()
    for handler in root_logger.handlers:
        if isinstance(handler, logging.FileHandler):
            handler.addFilter(StripAnsiFilter())


def configure_logging(config_path: Optional[Path] = None, level: str = "INFO") -> bool:
    """
    Configure logging from an ini file, falling back to basicConfig.

    Returns True when the ini file was used.
    """
    if config_path is not None and config_path.exists():
        logging.config.fileConfig(config_path, disable_existing_loggers=False)
        attach_strip_ansi_to_file_handlers()
        return True

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=DEFAULT_LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    return False
