"""Entry point for the Python IDE command line.

This module provides a terminal front end for the editor core.
It handles:
- Configuration loading
- Logging setup
- check: list the likely errors in a source file
- run: check a file, then mock-run it if it is clean
- explain: show the explanation for one error kind
- kinds: list the error kinds with explanations
"""

import argparse
import asyncio
import sys
from pathlib import Path

import structlog

from python_ide._version import __version__
from python_ide.config.schema import IDEConfig
from python_ide.utils.async_helpers import IDEError

log = structlog.get_logger()


def setup_logging(debug: bool = False, log_format: str = "console") -> None:
    """Configure structured logging.

    Args:
        debug: Enable debug logging if True
        log_format: Output format ("json" or "console")
    """
    from python_ide.utils.logging import LogFormat, LogLevel, configure_logging

    level = LogLevel.DEBUG if debug else LogLevel.WARNING
    configure_logging(level=level, log_format=LogFormat(log_format.lower()))


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments.

    Args:
        argv: Arguments to parse (defaults to sys.argv)

    Returns:
        Parsed argument namespace
    """
    parser = argparse.ArgumentParser(
        prog="python-ide",
        description="Python IDE - spot likely Python mistakes and explain them",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        default=None,
        help="Path to a YAML configuration file (default: built-in settings)",
    )

    parser.add_argument(
        "-d",
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    parser.add_argument(
        "--format",
        choices=["json", "console"],
        default="console",
        help="Log output format (default: console)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    check_parser = subparsers.add_parser("check", help="List likely errors in a file")
    check_parser.add_argument("file", type=Path, help="Python source file")

    run_parser = subparsers.add_parser("run", help="Check a file, then mock-run it")
    run_parser.add_argument("file", type=Path, help="Python source file")
    run_parser.add_argument(
        "--no-delay",
        action="store_true",
        help="Skip the simulated execution delay",
    )

    explain_parser = subparsers.add_parser("explain", help="Explain an error kind")
    explain_parser.add_argument("kind", help="Error kind, e.g. TypeError")

    subparsers.add_parser("kinds", help="List error kinds with explanations")

    return parser.parse_args(argv)


def _load_settings(config_path: Path | None) -> IDEConfig:
    from python_ide.config.loader import load_config

    if config_path is None:
        return IDEConfig()

    config = load_config(config_path)
    log.info("configuration_loaded", path=str(config_path))
    return config


def cmd_check(source: str) -> int:
    from python_ide.core.console import format_error_list, status_text
    from python_ide.core.error_detector import detect

    errors = detect(source)
    if errors:
        print(format_error_list(errors))
    print(status_text(errors))
    return 1 if errors else 0


async def cmd_run(source: str, config: IDEConfig, no_delay: bool = False) -> int:
    from python_ide.config.schema import ExecutorConfig
    from python_ide.core.console import format_error_list, format_output
    from python_ide.core.executor import MockExecutor
    from python_ide.core.session import EditorSession
    from python_ide.models.session import RunStatus

    executor_config = ExecutorConfig(min_delay=0, max_delay=0) if no_delay else config.executor
    session = EditorSession(executor=MockExecutor(executor_config), config=config.session)
    session.update_code(source)

    result = await session.run()

    if result.status is RunStatus.BLOCKED:
        print(format_error_list(session.errors))
        print(session.status_text)
        return 1

    if result.status is RunStatus.FAILED:
        print(result.output)
        return 1

    print(format_output(result.output))
    return 0


def cmd_explain(kind: str) -> int:
    from python_ide.core.console import format_tooltip
    from python_ide.core.knowledge_base import lookup

    info = lookup(kind)
    print(format_tooltip(kind, info))
    return 0 if info is not None else 1


def cmd_kinds() -> int:
    from python_ide.core.knowledge_base import kinds

    for kind in kinds():
        print(kind)
    return 0


def _read_source(path: Path) -> str:
    if not path.exists():
        raise FileNotFoundError(f"Source file not found: {path}")
    return path.read_text(encoding="utf-8")


def run_command(args: argparse.Namespace) -> int:
    """Dispatch a parsed command.

    Args:
        args: Parsed argument namespace

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    try:
        config = _load_settings(args.config)
    except FileNotFoundError as e:
        log.error("configuration_not_found", error=str(e))
        return 1
    except (ValueError, IDEError) as e:
        log.error("configuration_invalid", error=str(e))
        return 1

    if args.config is not None:
        from python_ide.utils.logging import configure_logging

        configure_logging(
            level="DEBUG" if args.debug else config.logging.level,
            log_format=config.logging.format,
            file_path=config.logging.file.path if config.logging.file.enabled else None,
            file_enabled=config.logging.file.enabled,
        )

    try:
        if args.command == "check":
            return cmd_check(_read_source(args.file))
        if args.command == "run":
            return asyncio.run(cmd_run(_read_source(args.file), config, args.no_delay))
        if args.command == "explain":
            return cmd_explain(args.kind)
        return cmd_kinds()

    except FileNotFoundError as e:
        log.error("source_file_not_found", error=str(e))
        return 1
    except UnicodeDecodeError as e:
        log.error("source_file_unreadable", path=str(args.file), error=str(e))
        return 1
    except Exception as e:
        log.exception("fatal_error", error=str(e))
        return 1


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    setup_logging(debug=args.debug, log_format=args.format)

    try:
        return run_command(args)
    except KeyboardInterrupt:
        log.info("interrupted")
        return 130


if __name__ == "__main__":
    sys.exit(main())
