# markov_tweeter/context/tweet_parser.py
"""
Turns a CSV export of tweets into Markov training data.

Each line of the file is one tweet record; the text lives in a fixed column.
Tweets are cleaned (URLs removed, split into sentences, words lower-cased and
filtered) and every non-empty sentence becomes one training sequence.
"""

import csv
from contextlib import closing
from typing import List, Optional

from markov_tweeter.utils.file_io import iter_file_lines
from markov_tweeter.utils.logger_utils import get_log
from .tokenizer import parse_and_clean_tweet


def extract_column(csv_line: Optional[str], column: int) -> Optional[str]:
    """
    Return field `column` (0-based) of a CSV line, or None if the line is None,
    the column is negative or the line has too few fields.
    Quoted fields may contain commas.
    """
    if csv_line is None or column < 0:
        return None
    fields = next(csv.reader([csv_line]), [])
    if column >= len(fields):
        return None
    return fields[column]


def csv_file_to_tweets(path: str, column: int) -> List[str]:
    """Every tweet text found in `column` of the file, in file order."""
    tweets = []
    skipped = 0
    with closing(iter_file_lines(path)) as lines:
        for line in lines:
            text = extract_column(line, column)
            if text is None:
                skipped += 1
                continue
            tweets.append(text)
    if skipped:
        get_log().debug(f"{path}: skipped {skipped} lines without column {column}")
    return tweets


def csv_file_to_training_data(path: str, column: int) -> List[List[str]]:
    """All cleaned, non-empty sentences of all tweets in the file."""
    data = []
    tweets = csv_file_to_tweets(path, column)
    for tweet in tweets:
        data.extend(s for s in parse_and_clean_tweet(tweet) if s)
    get_log().info(f"Parsed {len(tweets)} tweets into {len(data)} sentences from {path}")
    return data
