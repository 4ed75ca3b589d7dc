import argparse
import logging
import sys

from config.settings import load_settings
from demo import run_demo
from errors import StorageInitError
from server import serve
from service.repository_service import Database

logger = logging.getLogger(__name__)


def setup_logging(level: str):
    # stdout carries the sheets and the MCP stream
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stderr,
        force=True,
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser("ttrpg", description="Tabletop RPG character sheets")

    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--demo", dest="mode", action="store_const", const="demo",
                      help="print sample character sheets (default)")
    mode.add_argument("--server", dest="mode", action="store_const", const="server",
                      help="serve the character tools over MCP stdio")
    parser.set_defaults(mode="demo")

    parser.add_argument("--db", help="SQLite file to bootstrap (overrides TTRPG_DB_PATH)")
    parser.add_argument("--verbose", action="store_true", help="log at DEBUG level")
    return parser


def main(argv=None) -> int:
    args = _build_parser().parse_args(argv)

    settings = load_settings(args.db)
    setup_logging("DEBUG" if args.verbose else settings.log_level)

    try:
        if args.mode == "server":
            with Database.init(settings.db_path) as db:
                serve(db)
        else:
            run_demo(settings)
    except StorageInitError as e:
        logger.debug("Bootstrap failed", exc_info=True)
        print(e, file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
