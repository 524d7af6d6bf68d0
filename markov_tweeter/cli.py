"""
cli.py - command line entry point
Features:
- Trains a TwitterBot on a CSV export of tweets
- Prints generated tweets and chain stats with Rich tables
- Optionally writes the tweets to a file (append or overwrite)

Usage:
markov-tweeter data/sample_tweets.csv --count 5 --length 140 --seed 7
"""

import argparse
import sys
from typing import List, Optional

from rich.console import Console
from rich.table import Table
from rich import box

from markov_tweeter.bot import TwitterBot
from markov_tweeter.core.errors import MarkovError
from markov_tweeter.utils.config_manager import Config
from markov_tweeter.utils.logger_utils import configure_logging, get_log

console = Console()


def build_parser(cfg: Config) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="markov-tweeter", description="Generate tweets from a Markov chain")
    parser.add_argument("csv", nargs="?", default=cfg["tweets_path"], help="CSV file with one tweet per line")
    parser.add_argument("--column", type=int, default=cfg["tweet_column"], help="Column holding the tweet text (0-based)")
    parser.add_argument("--count", type=int, default=cfg["num_tweets"], help="Number of tweets to generate")
    parser.add_argument("--length", type=int, default=cfg["tweet_length"], help="Approximate tweet length in characters")
    parser.add_argument("--out", type=str, default=None, help="Write the tweets to this file")
    parser.add_argument("--append", action="store_true", help="Append to --out instead of overwriting it")
    parser.add_argument("--seed", type=int, default=cfg["seed"], help="Seed for reproducible output")
    parser.add_argument("--log-level", type=str, default=cfg["log_level"], help="DEBUG, INFO, WARNING or ERROR")
    return parser


def _config_path(argv: Optional[List[str]]) -> Optional[str]:
    pre = argparse.ArgumentParser(add_help=False)
    pre.add_argument("--config", type=str, default=None)
    known, _ = pre.parse_known_args(argv)
    return known.config


def _show_tweets(tweets: List[str]):
    table = Table(title="Generated tweets", box=box.SIMPLE, show_edge=False)
    table.add_column("#", justify="right", style="cyan")
    table.add_column("Tweet", style="bold")
    table.add_column("Chars", justify="right", style="magenta")
    for i, t in enumerate(tweets, 1):
        table.add_row(str(i), t, str(len(t)))
    console.print(table)


def _show_stats(bot: TwitterBot):
    table = Table(title="Chain", box=box.MINIMAL)
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="white")
    for k, v in bot.chain.stats().items():
        table.add_row(k, str(v))
    console.print(table)


def main(argv: Optional[List[str]] = None) -> int:
    cfg_path = _config_path(argv)
    cfg = Config(cfg_path)
    parser = build_parser(cfg)
    parser.add_argument("--config", type=str, default=cfg_path, help="JSON config file")
    args = parser.parse_args(argv)

    try:
        configure_logging(path=cfg["log_path"], level=args.log_level)
    except ValueError as e:
        parser.error(str(e))

    if args.seed is not None:
        cfg.data["seed"] = args.seed

    try:
        bot = TwitterBot(args.csv, args.column, config=cfg)
        if args.out:
            tweets = bot.write_tweets_to_file(args.count, args.length, args.out, args.append)
        else:
            tweets = bot.generate_tweets(args.count, args.length)
    except FileNotFoundError as e:
        console.print(f"[red]Error:[/red] {e}")
        get_log().error(str(e))
        return 2
    except MarkovError as e:
        console.print(f"[red]Error:[/red] {e}")
        get_log().error(f"{type(e).__name__}: {e}")
        return 2

    _show_stats(bot)
    _show_tweets(tweets)
    if args.out:
        console.print(f"[green]Wrote {len(tweets)} tweets to[/green] {args.out}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
