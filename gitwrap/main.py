"""CLI entry point: print a summary of the configured repository."""

import sys

import structlog

from gitwrap.app import build_repository, configure_logging
from gitwrap.core.config import GitwrapConfig
from gitwrap.exceptions import GitwrapError
from gitwrap.git import formatter
from gitwrap.git.repository import GitRepository

logger = structlog.get_logger()


def main() -> int:
    try:
        config = GitwrapConfig()
    except Exception as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        print("Check the GITWRAP_* environment variables or .env file.", file=sys.stderr)
        return 1

    configure_logging(config)

    if not GitRepository.is_initialized(config.repository_path):
        print(f"Not a git repository: {config.repository_path}", file=sys.stderr)
        return 1

    repo = build_repository(config)
    try:
        summary = formatter.format_summary(
            repo.get_statuses(),
            repo.get_branches(),
            repo.get_logs(config.summary_log_limit),
            max_entries=config.summary_log_limit,
        )
    except GitwrapError as e:
        logger.error("summary_failed", error=str(e), commands=len(repo.history()))
        print(f"git failed: {e}", file=sys.stderr)
        return 1

    print(summary)
    return 0


def run() -> None:
    sys.exit(main())
