import logging
import logging.config
import re
from pathlib import Path
from typing import Optional

# Regex để bắt các ANSI escape code (màu, bold, v.v.)
ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;]*m")

DEFAULT_LOGGING_CONFIG_PATH = Path(__file__).resolve().parent.parent.parent / "logging.ini"


class StripAnsiFilter(logging.Filter):
    """Filter dùng để xoá mã màu ANSI khỏi log record (phù hợp cho file log)."""

    def filter(self, record: logging.LogRecord) -> bool:  # type: ignore[override]
        if isinstance(record.msg, str):
            record.msg = ANSI_ESCAPE_RE.sub("", record.msg)
        return True


def attach_strip_ansi_to_file_handlers() -> None:
    """
    Gắn StripAnsiFilter vào tất cả FileHandler hiện có.

    Nên gọi sau khi logging.config.fileConfig(...) đã chạy,
    để các handler từ logging.ini đã được khởi tạo đầy đủ.
    """
    root_logger = logging.getLogger()
    for handler in root_logger.handlers:
        if isinstance(handler, logging.FileHandler):
            handler.addFilter(StripAnsiFilter())


def configure_logging(
    config_path: Optional[Path] = None,
    level: str = "INFO",
    log_file: str = "app.log",
) -> None:
    """
    Configure logging from logging.ini, or fall back to a basic console setup.

    `level` applies to the root logger in both cases; `log_file` names the
    rotating application log inside logs/.
    """
    config_path = config_path or DEFAULT_LOGGING_CONFIG_PATH
    if config_path.exists():
        # File handlers write into logs/, make sure it exists
        log_dir = config_path.parent / "logs"
        log_dir.mkdir(exist_ok=True)
        logging.config.fileConfig(
            config_path,
            defaults={"logdir": log_dir.as_posix(), "logfile": log_file},
            disable_existing_loggers=False,
        )
        logging.getLogger().setLevel(level)
        attach_strip_ansi_to_file_handlers()
        logging.getLogger(__name__).info(f"Logging configured from {config_path}")
    else:
        logging.basicConfig(
            level=level,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        logging.getLogger(__name__).info(
            f"Logging config file not found at {config_path}, using basic configuration"
        )
