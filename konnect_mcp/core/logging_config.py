from pathlib import Path
import logging
import sys
from typing import Optional
from datetime import datetime

from konnect_mcp.core.config import get_config


def _is_server_file_handler(h: logging.Handler, logs_dir: Path, base: str, ext: str) -> bool:
    """True for a FileHandler writing a `<base>_<timestamp><ext>` file in `logs_dir`."""
    if not isinstance(h, logging.FileHandler):
        return False
    path = Path(h.baseFilename)
    try:
        same_dir = path.parent.resolve() == logs_dir.resolve()
    except OSError:
        return False
    return same_dir and path.name.startswith(f"{base}_") and path.suffix == ext


def setup_logging(
    logs_dir: Optional[str | Path] = None,
    log_file_name: Optional[str] = None,
    level: Optional[str | int] = None,
) -> logging.Logger:
    """Configure root logging to stderr and a file under `logs_dir`.

    Idempotent: calling multiple times won't add duplicate handlers.
    stdout carries the MCP stdio transport, so console output goes to stderr.
    Defaults for directory, file name and level come from the `logging` section of config.yaml.
    """
    log_cfg = (get_config() or {}).get("logging", {}) or {}

    if logs_dir is None:
        logs_dir = Path.cwd() / log_cfg.get("dir", "logs")
    else:
        logs_dir = Path(logs_dir)
    if log_file_name is None:
        log_file_name = log_cfg.get("file_name", "server.log")
    if level is None:
        level = log_cfg.get("level", "INFO")
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    formatter = logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s")

    base = Path(log_file_name).stem
    ext = Path(log_file_name).suffix or ".log"

    # One server file handler per process; each run writes to a timestamped file
    if not any(_is_server_file_handler(h, logs_dir, base, ext) for h in root_logger.handlers):
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_file = logs_dir / f"{base}_{timestamp}{ext}"
        try:
            logs_dir.mkdir(parents=True, exist_ok=True)
            fh = logging.FileHandler(log_file, encoding="utf-8")
            fh.setFormatter(formatter)
            fh.setLevel(level)
            root_logger.addHandler(fh)
        except OSError:
            # unwritable log dir: stderr only
            pass

    stream_stderr_exists = any(
        isinstance(h, logging.StreamHandler) and getattr(h, "stream", None) is sys.stderr
        for h in root_logger.handlers
    )
    if not stream_stderr_exists:
        sh = logging.StreamHandler(sys.stderr)
        sh.setFormatter(formatter)
        sh.setLevel(level)
        root_logger.addHandler(sh)

    # httpx logs every request at INFO; the client already does
    logging.getLogger("httpx").setLevel(logging.WARNING)

    return logging.getLogger("konnect_mcp")
