"""
Guessing Game CLI - Play one session in the terminal.

Usage:
    guessing-game                      Guess a number in [1, 100]
    guessing-game --high 1000          Widen the range
    guessing-game --seed 7             Reproducible target
    guessing-game --reveal-secret      Print the target up front

Exit status:
    0  Target guessed
    1  Input ended or failed before the target was guessed
    2  Invalid configuration
"""

import argparse
import logging
import random
import sys

from .config import GameConfig
from .errors import ConfigError, InputError
from .session import GuessSession, StreamLineSource


logger = logging.getLogger("guessing_game.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Guess the secret number",
        prog="guessing-game",
    )
    parser.add_argument("--low", type=int, help="Lowest possible target (env GUESS_LOW)")
    parser.add_argument("--high", type=int, help="Highest possible target (env GUESS_HIGH)")
    parser.add_argument("--seed", type=int, help="Seed the random source")
    parser.add_argument(
        "--reveal-secret",
        action="store_true",
        default=None,
        help="Print the secret number at start (env GUESS_REVEAL_SECRET)",
    )
    parser.add_argument("--log-level", help="Logging level (env GUESS_LOG_LEVEL)")
    return parser


def main(argv=None, stdin=None, stdout=None, environ=None) -> int:
    """Main CLI entry point. Returns the process exit status."""
    args = build_parser().parse_args(argv)
    stdout = stdout if stdout is not None else sys.stdout

    try:
        config = GameConfig.from_env(
            environ,
            low=args.low,
            high=args.high,
            reveal_secret=args.reveal_secret,
            log_level=args.log_level,
        )
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        for err in e.details.get("errors", []):
            location = ".".join(str(part) for part in err.get("loc", ())) or "config"
            print(f"  - {location}: {err.get('msg')}", file=sys.stderr)
        return 2

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    # basicConfig is a no-op once the root logger has handlers
    logging.getLogger("guessing_game").setLevel(config.log_level)

    rng = random.Random(args.seed)
    print("Guess the number!", file=stdout)
    session = GuessSession(rng=rng, config=config, output=stdout)

    try:
        session.run(StreamLineSource(stdin))
    except InputError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


def run():
    sys.exit(main())


if __name__ == "__main__":
    run()
