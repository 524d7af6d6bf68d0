# bot.py - trains a MarkovChain on tweets and writes generated tweets out

from __future__ import annotations

from typing import Iterable, List, Optional

from markov_tweeter.context.tweet_parser import csv_file_to_training_data
from markov_tweeter.core.markov_chain import MarkovChain
from markov_tweeter.core.protocols import RandomSource
from markov_tweeter.core.random_source import RandomNumberGenerator
from markov_tweeter.core.text_generator import TextGenerator
from markov_tweeter.utils.config_manager import Config
from markov_tweeter.utils.file_io import write_strings_to_file
from markov_tweeter.utils.logger_utils import get_log


class TwitterBot:
    """
    Glue between the tweet parser, the Markov chain, the text generator and
    the output file. One random source drives both the walks and the
    punctuation, so a seeded bot is fully reproducible.
    """

    def __init__(
        self,
        csv_file: str,
        tweet_column: int,
        rng: Optional[RandomSource] = None,
        config: Optional[Config] = None,
    ) -> None:
        sentences = csv_file_to_training_data(csv_file, tweet_column)
        with get_log().time_block(f"training on {csv_file}"):
            self._build(sentences, rng, config)

    @classmethod
    def from_sentences(
        cls,
        sentences: Iterable[List[str]],
        rng: Optional[RandomSource] = None,
        config: Optional[Config] = None,
    ) -> "TwitterBot":
        """Build a bot from already-cleaned sentences instead of a CSV file."""
        bot = cls.__new__(cls)
        bot._build(sentences, rng, config)
        return bot

    def _build(self, sentences, rng, config) -> None:
        self.cfg = config or Config()
        self.rng = rng or RandomNumberGenerator(self.cfg["seed"])
        self.chain = MarkovChain(self.rng)
        self.train_all(sentences)
        self.generator = TextGenerator(self.chain, self.rng, self.cfg.generator_config())

    def train_all(self, sentences: Iterable[List[str]]) -> None:
        for sentence in sentences:
            self.chain.train(sentence)
        stats = self.chain.stats()
        get_log().info(
            f"Chain trained: {stats['sentences']} sentences, "
            f"{stats['vocabulary']} words, {stats['start_words']} start words"
        )

    def generate_tweet(self, length: int) -> str:
        return self.generator.generate(length)

    def generate_tweets(self, num_tweets: int, tweet_length: int) -> List[str]:
        return self.generator.generate_many(num_tweets, tweet_length)

    def write_tweets_to_file(self, num_tweets: int, tweet_length: int, file_path: str, append: bool) -> List[str]:
        """Generate `num_tweets` tweets, write them one per line and return them."""
        tweets = self.generate_tweets(num_tweets, tweet_length)
        write_strings_to_file(tweets, file_path, append)
        return tweets
