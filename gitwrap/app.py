"""Bootstrap: logging setup and repository construction from config."""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path

import structlog

from gitwrap.core.config import GitwrapConfig
from gitwrap.git.repository import GitRepository
from gitwrap.git.runner import CommandRunner

logger = structlog.get_logger()


def configure_logging(config: GitwrapConfig, *, log_dir: Path | None = None) -> None:
    """Set up structlog with console output and optional rotating JSON file handler."""
    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
    ]

    root_logger = logging.getLogger()
    root_logger.setLevel(config.log_level)
    root_logger.handlers.clear()

    # Console handler writes to stderr; stdout carries command output
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=structlog.dev.ConsoleRenderer(),
        )
    )
    root_logger.addHandler(console_handler)

    log_dir = log_dir or config.log_dir
    if log_dir is not None:
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            log_dir / "gitwrap.log",
            maxBytes=config.log_max_bytes,
            backupCount=config.log_backup_count,
        )
        file_handler.setFormatter(
            structlog.stdlib.ProcessorFormatter(
                processor=structlog.processors.JSONRenderer(),
            )
        )
        root_logger.addHandler(file_handler)

    structlog.configure(
        processors=shared_processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def build_repository(
    config: GitwrapConfig,
    path: Path | None = None,
    *,
    runner: CommandRunner | None = None,
) -> GitRepository:
    """Create a repository for *path* (default: config) with configured defaults."""
    repo = GitRepository(
        path or config.repository_path,
        git_binary=config.git_binary,
        runner=runner,
    )
    for operation in config.option_overrides:
        repo.set_defaults(operation, config.defaults_for(operation))

    logger.info(
        "repository_ready",
        path=str(repo.path),
        git_binary=config.git_binary,
        overridden=[op.value for op in config.option_overrides],
    )
    return repo
