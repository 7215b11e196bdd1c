"""
Development server for the TrendFetch API.

    python run_app.py                       # settings from the environment / .env
    python run_app.py --port 8080 --no-debug
    python run_app.py --check-config        # report configuration problems and exit
"""
import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

sys.path.insert(0, str(Path(__file__).parent / "src"))

from trendfetch.api import create_app
from trendfetch.config import Config
from trendfetch.logger import get_logger, setup_logger

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run the TrendFetch scrape/export API.")
    parser.add_argument("--host", default=Config.FLASK_HOST, help="Bind address")
    parser.add_argument("--port", type=int, default=Config.FLASK_PORT, help="Bind port")
    parser.add_argument(
        "--debug",
        action=argparse.BooleanOptionalAction,
        default=Config.FLASK_DEBUG,
        help="Flask debug mode and reloader",
    )
    parser.add_argument("--log-level", default=None, help="Override LOG_LEVEL, e.g. DEBUG")
    parser.add_argument(
        "--check-config",
        action="store_true",
        help="Validate configuration, print the summary and exit",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    if args.log_level:
        setup_logger(level=args.log_level)

    if args.check_config:
        for key, value in Config.get_summary().items():
            logger.info(f"{key} = {value}")
        for error in Config.validate():
            logger.error(f"Config: {error}")
        return 0 if Config.is_valid() else 1

    for error in Config.validate():
        logger.warning(f"Config: {error}")

    app = create_app()
    logger.info(f"Starting TrendFetch dev server on {args.host}:{args.port} (debug={args.debug})")
    app.run(host=args.host, port=args.port, debug=args.debug)
    return 0


if __name__ == "__main__":
    sys.exit(main())
