#!/usr/bin/env python3

import argparse
import logging
import sys
import tomllib
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError

from game_interface.client.text_console import TextInteractionPort
from game_interface.core.line_channel import SocketLineChannel
from logger import setup_logging
from orchestration import RoundController
from session.game_configuration import HangmanConfiguration


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hangman",
        description="Play hangman against a remote hangman server",
    )
    parser.add_argument(
        "-d", "--debug", action="store_true", help="print debugging info"
    )
    parser.add_argument(
        "-p", "--port", type=int, default=None, help="server port (overrides config)"
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        default=None,
        help="TOML file with a [tool.hangman] table (default: ./pyproject.toml)",
    )
    parser.add_argument(
        "server", nargs="?", default=None, help="name of an alternate hangman server"
    )
    return parser


def load_configuration(config_file: Optional[Path]) -> HangmanConfiguration:
    """Load configuration from TOML, falling back to defaults when there is none.

    An explicitly requested file that does not exist is an error.
    """
    try:
        return HangmanConfiguration.from_toml(config_file)
    except (FileNotFoundError, KeyError):
        if config_file is not None:
            raise
        return HangmanConfiguration()


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_configuration(args.config)
    except (FileNotFoundError, KeyError, tomllib.TOMLDecodeError, ValidationError) as e:
        parser.error(f"invalid configuration: {e}")

    overrides = {}
    if args.server:
        overrides["server_host"] = args.server
    if args.port is not None:
        overrides["server_port"] = args.port
    if args.debug:
        overrides["debug"] = True
    if overrides:
        try:
            config = HangmanConfiguration(**{**config.model_dump(), **overrides})
        except ValidationError as e:
            parser.error(str(e))

    logger = setup_logging(
        log_level=logging.DEBUG if config.debug else logging.INFO,
        json_log_file=config.json_log_file,
    )

    channel = SocketLineChannel(
        config.server_host,
        config.server_port,
        connect_timeout=config.connect_timeout_seconds,
        read_timeout=config.read_timeout_seconds,
        encoding=config.encoding,
        logger=logger,
    )
    controller = RoundController(channel, TextInteractionPort(), config, logger=logger)

    try:
        history = controller.run()
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return 130

    return 1 if history.failed else 0


if __name__ == "__main__":
    sys.exit(main())
