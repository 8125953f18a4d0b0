import argparse
import io
import logging
import sys
from typing import TextIO

from file_explorer.config.settings import settings
from file_explorer.container import DependencyContainer, container
from file_explorer.entities.session import Session
from file_explorer.exceptions import ConfigurationError


def configure_logging(level: int, log_file: str | None = None) -> None:
    # stdout belongs to the shell; logs go to stderr or a file
    handler: logging.Handler = (
        logging.FileHandler(log_file) if log_file else logging.StreamHandler(sys.stderr)
    )
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[handler],
        force=True,
    )


def tolerant_stdin() -> TextIO:
    # undecodable bytes become U+FFFD instead of ending the session
    stream = sys.stdin
    if isinstance(stream, io.TextIOWrapper):
        stream.reconfigure(errors="replace")
    return stream


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="file-explorer",
        description="Interactive shell for browsing and editing the local file system.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (default: FILE_EXPLORER_LOG_LEVEL or WARNING)",
    )
    parser.add_argument(
        "--pretty",
        dest="pretty",
        action="store_true",
        help="Render output with colors",
    )
    parser.add_argument(
        "--no-pretty",
        dest="pretty",
        action="store_false",
        help="Plain text output",
    )
    parser.set_defaults(pretty=settings.pretty)
    return parser


def main(
    argv: list[str] | None = None,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    deps: DependencyContainer | None = None,
) -> int:
    args = build_parser().parse_args(argv)

    level = settings.log_level
    if args.log_level:
        try:
            level = settings.parse_log_level(args.log_level)
        except ConfigurationError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 2
    configure_logging(level, settings.log_file)

    deps = deps or container
    writer = deps.get_console_writer(pretty=args.pretty, stream=stdout)
    loop = deps.get_command_loop(writer=writer, app_name=settings.app_name)
    return loop.run(Session.from_cwd(), stdin=stdin or tolerant_stdin())


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
