"""Composition root for the Inkwell publishing system.

This module is the ONLY location that imports both core domain logic
and concrete adapter implementations. All wiring of dependencies
happens here, creating a clear entry point for the application.

Module Structure:
- Configuration loading via config module
- Adapter instantiation
- Core service initialization
- Interactive CLI loop
"""

import asyncio
import json
import logging
import sys
from typing import Any

from inkwell.adapters.cli.commands import CLICommandHandler
from inkwell.adapters.logger.stdlib import StdlibLoggerAdapter
from inkwell.adapters.notification.stdout import StdoutNotificationAdapter
from inkwell.adapters.store.memory import (
    InMemoryArticleRepository,
    InMemoryCommentService,
    InMemoryUserRepository,
)
from inkwell.config import Settings, load_settings
from inkwell.core.article_publisher import ArticlePublisher
from inkwell.core.models import User
from inkwell.core.ports import LoggerPort, NotificationPort
from inkwell.core.user_service import UserService


async def _run_cli_interactive(cli_handler: CLICommandHandler) -> None:
    """Run interactive CLI loop.

    Provides a REPL-like interface for the service commands.

    Args:
        cli_handler: CLICommandHandler instance for executing commands.
    """
    logger = logging.getLogger(__name__)
    logger.info("Starting interactive CLI. Type 'help' for available commands or 'exit' to quit.")

    loop = asyncio.get_running_loop()

    while True:
        try:
            command_line = await loop.run_in_executor(None, input, "inkwell> ")
            command_line = command_line.strip()

            if not command_line:
                continue

            if command_line.lower() == "exit":
                logger.info("Exiting CLI")
                break

            if command_line.lower() == "help":
                _print_cli_help()
                continue

            parts = command_line.split(maxsplit=1)
            command = parts[0].lower()
            args_str = parts[1] if len(parts) > 1 else ""

            try:
                args = json.loads(args_str) if args_str else {}
            except json.JSONDecodeError:
                logger.error("Invalid JSON arguments. Use 'help' for command syntax.")
                continue

            try:
                result = await _execute_cli_command(cli_handler, command, args)
                print(json.dumps(result, indent=2, default=str))
            except Exception as e:
                logger.error(f"Command execution error: {e}", exc_info=True)
                print(json.dumps({"status": "error", "message": str(e)}, indent=2))

        except EOFError:
            logger.info("EOF received, exiting CLI")
            break
        except KeyboardInterrupt:
            logger.info("Interrupted by user")
            continue


def _require(args: dict[str, Any], *names: str) -> None:
    for name in names:
        if name not in args:
            raise ValueError(f"Missing required parameter: {name}")


async def _execute_cli_command(
    cli_handler: CLICommandHandler,
    command: str,
    args: dict[str, Any],
) -> dict[str, Any]:
    """Execute a CLI command.

    Args:
        cli_handler: CLICommandHandler instance.
        command: Command name.
        args: Command arguments.

    Returns:
        Command result dictionary.

    Raises:
        ValueError: If command is not recognized or a parameter is missing.
    """
    if command == "publish":
        _require(args, "author_id", "title", "content")
        return await cli_handler.publish_article(
            author_id=args["author_id"],
            title=args["title"],
            content=args["content"],
        )

    elif command == "register":
        _require(args, "name", "email")
        return await cli_handler.register_user(name=args["name"], email=args["email"])

    elif command == "update-email":
        _require(args, "user_id", "email")
        return await cli_handler.update_email(user_id=args["user_id"], email=args["email"])

    elif command == "comment":
        _require(args, "article_id", "user_id", "content")
        return await cli_handler.add_comment(
            article_id=args["article_id"],
            user_id=args["user_id"],
            content=args["content"],
        )

    elif command == "list-users":
        return await cli_handler.list_users()

    elif command == "list-articles":
        return await cli_handler.list_articles()

    else:
        raise ValueError(f"Unknown command: {command}. Use 'help' for available commands.")


def _print_cli_help() -> None:
    """Print CLI help message."""
    help_text = """
Available Commands (JSON format):

  publish        {"author_id": "...", "title": "...", "content": "..."}
  register       {"name": "...", "email": "..."}
  update-email   {"user_id": "...", "email": "..."}
  comment        {"article_id": "...", "user_id": "...", "content": "..."}
  list-users
  list-articles
  help
  exit

Provide the JSON after the command name on the same line.
    """
    print(help_text)


def configure_logging(log_level: str, log_format: str) -> None:
    """Configure application logging.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_format: Log format (json, text).
    """
    level = getattr(logging, log_level, logging.INFO)

    if log_format == "json":
        format_str = '{"time": "%(asctime)s", "level": "%(levelname)s", "message": "%(message)s"}'
    else:
        format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logging.basicConfig(
        level=level,
        format=format_str,
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
    )


def build_cli_handler(settings: Settings) -> CLICommandHandler:
    """Instantiate adapters and core services from settings.

    Args:
        settings: Validated application settings.

    Returns:
        CLICommandHandler wired to fresh in-memory stores.
    """
    logger = logging.getLogger(__name__)

    notification: NotificationPort | None = None
    if settings.notification_backend == "stdout":
        notification = StdoutNotificationAdapter(verbose=settings.notifications_verbose)
        logger.info("Notification adapter: Stdout")
    else:
        logger.info("Notifications disabled")

    logger_port: LoggerPort | None = None
    if settings.service_logger_name:
        logger_port = StdlibLoggerAdapter(settings.service_logger_name)

    seed = []
    for entry in settings.seed_users:
        name, _, email = entry.partition(":")
        seed.append(User.create(name=name.strip(), email=email.strip()))
    if seed:
        logger.info(f"Seeded {len(seed)} users")

    articles = InMemoryArticleRepository()
    users = InMemoryUserRepository(seed)

    publisher = ArticlePublisher(
        repository=articles,
        logger_port=logger_port,
        notification=notification,
    )
    user_service = UserService(
        user_repository=users,
        notification=notification,
        logger_port=logger_port,
    )
    comments = InMemoryCommentService(
        articles=articles,
        users=users,
        notification=notification,
    )

    return CLICommandHandler(
        publisher=publisher,
        users=user_service,
        articles=articles,
        comments=comments,
    )


async def bootstrap() -> None:
    """Load configuration, wire adapters, and start the interactive CLI.

    This is the composition root: the single place where all components
    are instantiated and wired together.

    Raises:
        ValidationError: If configuration is invalid.
    """
    settings = load_settings()

    configure_logging(settings.log_level, settings.log_format)
    logger = logging.getLogger(__name__)
    logger.info("Loading Inkwell...")

    cli_handler = build_cli_handler(settings)
    await _run_cli_interactive(cli_handler)


def main() -> None:
    """Application entry point.

    Exit codes:
        0: Successful shutdown
        1: Fatal bootstrap or runtime error
        130: Interrupted by user (SIGINT/KeyboardInterrupt)
    """
    logger = logging.getLogger(__name__)
    try:
        asyncio.run(bootstrap())
    except KeyboardInterrupt:
        logger.warning("Shutdown requested by user (SIGINT)")
        sys.exit(130)
    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
