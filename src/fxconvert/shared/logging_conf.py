# src/fxconvert/shared/logging_conf.py
"""
Logging Configuration - Where Converter Diagnostics Go

The converter reports through module loggers under the ``fxconvert``
namespace: RateSource logs each provider that fails before the fallback is
tried, CurrencyConverter logs which state a conversion ended in, and
RateStore logs persistence errors it swallows so a conversion never fails
on a cache write. None of that is visible until a host calls
setup_logging, normally through fxconvert.app.configure_logging, which
feeds it these settings:

- LOG_FILE / LOG_DIR: rotating file target (LOG_DIR wins, file is fxconvert.log)
- FXCONVERT_LOG_STDOUT: mirror records to stdout (default true)
- LOG_MAX_BYTES / LOG_BACKUP_COUNT: rotation limits

Every provider request goes through requests, whose urllib3 pool logs a
line per connection at DEBUG; that logger is held at WARNING so a debug
session shows fallback decisions rather than socket chatter.

Files that USE this module:
- fxconvert.app (configure_logging wires settings into setup_logging)

Files that this module USES:
- None (pure configuration module)
"""
import logging
import sys
from pathlib import Path
from typing import List, Optional, Union
from logging.handlers import RotatingFileHandler

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s :: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_FILE_NAME = "fxconvert.log"
NOISY_LOGGERS = ("urllib3",)


def resolve_log_path(
    log_file: Optional[Union[str, Path]] = None,
    log_dir: Optional[Union[str, Path]] = None,
) -> Optional[Path]:
    """Return the rotating log file to write, creating its directory."""
    if log_dir:
        path = Path(log_dir) / LOG_FILE_NAME
    elif log_file:
        path = Path(log_file)
    else:
        return None
    path.parent.mkdir(parents=True, exist_ok=True)
    return path


def setup_logging(
    level=logging.INFO,
    log_file: Optional[Union[str, Path]] = None,
    log_dir: Optional[Union[str, Path]] = None,
    log_stdout: bool = True,
    max_bytes: int = 10 * 1024 * 1024,  # 10MB
    backup_count: int = 5,
) -> Optional[Path]:
    """
    Install root handlers for converter diagnostics.

    Replaces whatever handlers the root logger had, so calling it again
    (e.g. after settings change in tests) does not duplicate output.

    Args:
        level: Root logging level (default: logging.INFO)
        log_file: Optional path to a log file
        log_dir: Optional directory for fxconvert.log; takes precedence over log_file
        log_stdout: Whether to mirror records to stdout
        max_bytes: Maximum size per log file before rotation (default: 10MB)
        backup_count: Number of rotated files to keep (default: 5)

    Returns:
        The log file path, or None when logging only to stdout
    """
    formatter = logging.Formatter(LOG_FORMAT, DATE_FORMAT)
    handlers: List[logging.Handler] = []

    log_path = resolve_log_path(log_file, log_dir)
    if log_path is not None:
        handlers.append(RotatingFileHandler(
            log_path,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        ))

    # stdout stays on when there is nowhere else to write
    if log_stdout or not handlers:
        handlers.append(logging.StreamHandler(sys.stdout))

    for handler in handlers:
        handler.setFormatter(formatter)

    logging.basicConfig(level=level, handlers=handlers, force=True)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))

    logging.getLogger(__name__).info(
        "Logging configured: file=%s, stdout=%s, level=%s",
        log_path, log_stdout or log_path is None, logging.getLevelName(level),
    )
    return log_path
