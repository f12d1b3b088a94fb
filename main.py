"""
Ludo Duel - launcher
Starts the two-player board in a browser.
"""

import argparse
import sys

from loguru import logger

from ludo_duel.config import config
from ludo_duel_interface.app import LudoApp


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play two-player Ludo in the browser")
    parser.add_argument(
        "--seed",
        type=int,
        default=config.SEED,
        help="Seed for the dice (defaults to LUDO_SEED, else random)",
    )
    parser.add_argument("--host", type=str, default="0.0.0.0")
    parser.add_argument("--port", type=int, default=7860)
    parser.add_argument("--share", action="store_true", help="Create a public Gradio link")
    parser.add_argument(
        "--hide-token-ids", action="store_true", help="Do not label tokens"
    )
    parser.add_argument("--log-level", type=str, default="INFO")
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    logger.remove()
    logger.add(sys.stderr, level=args.log_level.upper())

    app = LudoApp(seed=args.seed, show_token_ids=not args.hide_token_ids)
    app.launch(server_name=args.host, server_port=args.port, share=args.share)


if __name__ == "__main__":
    main()
