"""Entry point: ``python -m eternal_quest``.

Supports two modes:
  - ``python -m eternal_quest``          → Interactive console menu (default)
  - ``python -m eternal_quest serve``    → FastAPI server over the same ledger
"""

from __future__ import annotations

import argparse
import logging

logger = logging.getLogger(__name__)

_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Eternal Quest — goal tracking with points and levels")
    sub = parser.add_subparsers(dest="command")

    # --- Console mode (default) ---
    play = sub.add_parser("play", help="Run the interactive console menu (default)")
    play.add_argument("--save-file", type=str, default="eternal_quest.txt")
    play.add_argument("--load", action="store_true", help="Load the save file before the first prompt")
    play.add_argument("--points-per-level", type=int, default=1000)
    play.add_argument("--log-level", type=str, default="WARNING", choices=_LOG_LEVELS)

    # --- Server mode ---
    srv = sub.add_parser("serve", help="Start the FastAPI server")
    srv.add_argument("--host", type=str, default="127.0.0.1")
    srv.add_argument("--port", type=int, default=8000)
    srv.add_argument("--save-file", type=str, default="eternal_quest.txt")
    srv.add_argument("--load", action="store_true", help="Load the save file at startup")
    srv.add_argument("--points-per-level", type=int, default=1000)
    srv.add_argument("--log-level", type=str, default="INFO", choices=_LOG_LEVELS)

    return parser


def _run_console(args: argparse.Namespace) -> None:
    from eternal_quest.cli.console import ConsoleDriver
    from eternal_quest.config import QuestConfig
    from eternal_quest.core.ledger import QuestLedger
    from eternal_quest.utils.logging import setup_logging

    config = QuestConfig(
        points_per_level=args.points_per_level,
        save_file=args.save_file,
        load_on_start=args.load,
        log_level=args.log_level,
    )
    setup_logging(config.log_level)

    ledger = QuestLedger(config.points_per_level)
    if config.load_on_start:
        ledger.load(config.save_file)

    ConsoleDriver(ledger, config.save_file).run()


def _run_server(args: argparse.Namespace) -> None:
    import uvicorn

    from eternal_quest.api.app import create_app
    from eternal_quest.config import QuestConfig

    config = QuestConfig(
        points_per_level=args.points_per_level,
        save_file=args.save_file,
        load_on_start=args.load,
        host=args.host,
        port=args.port,
        log_level=args.log_level,
    )
    app = create_app(config)
    uvicorn.run(app, host=config.host, port=config.port, log_level=config.log_level.lower())


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    # Default to console mode if no subcommand given
    if args.command is None:
        args = parser.parse_args(["play"])
    if args.command == "serve":
        _run_server(args)
    else:
        _run_console(args)


if __name__ == "__main__":
    main()
