# markov_tweeter/context/__init__.py
# cleaning and parsing of raw tweets into training sentences

from .normalizer import remove_urls, replace_punctuation, clean_word
from .tokenizer import sentence_split, parse_and_clean_sentence, parse_and_clean_tweet
from .tweet_parser import extract_column, csv_file_to_tweets, csv_file_to_training_data

__all__ = [
    "remove_urls",
    "replace_punctuation",
    "clean_word",
    "sentence_split",
    "parse_and_clean_sentence",
    "parse_and_clean_tweet",
    "extract_column",
    "csv_file_to_tweets",
    "csv_file_to_training_data",
]
