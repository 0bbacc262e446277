"""Entry point: runs the taskboard REST backend."""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

import uvicorn

from config.settings import settings

BASE_DIR = Path(__file__).resolve().parent.parent.parent

# ── Logging ────────────────────────────────────────────────


def setup_logging(level: str | None = None) -> None:
    level_value = logging.getLevelName((level or settings.log_level).upper())
    log_dir = BASE_DIR / "logs"
    log_dir.mkdir(exist_ok=True)

    formatter = logging.Formatter(
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # File handler
    fh = RotatingFileHandler(
        log_dir / "taskboard.log",
        maxBytes=5 * 1024 * 1024,  # 5 MB
        backupCount=3,
        encoding="utf-8",
    )
    fh.setFormatter(formatter)
    fh.setLevel(level_value)

    # Console handler
    ch = logging.StreamHandler()
    ch.setFormatter(formatter)
    ch.setLevel(level_value)

    root = logging.getLogger()
    root.setLevel(level_value)
    root.addHandler(fh)
    root.addHandler(ch)

    # Quiet noisy loggers
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)


# ── Main ───────────────────────────────────────────────────


def main() -> None:
    setup_logging()
    logger = logging.getLogger(__name__)
    logger.info("Starting Taskboard API on %s:%d", settings.server_host, settings.server_port)

    from taskboard.web.app import create_app

    uvicorn.run(
        create_app(),
        host=settings.server_host,
        port=settings.server_port,
        log_config=None,
    )
    logger.info("Goodbye!")


if __name__ == "__main__":
    main()
