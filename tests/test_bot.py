# tests/test_bot.py
from pathlib import Path

from markov_tweeter.bot import TwitterBot
from markov_tweeter.core.random_source import ListNumberGenerator, RandomNumberGenerator
from markov_tweeter.core.text_generator import PUNCTUATION
from markov_tweeter.utils.config_manager import Config

SAMPLE_CSV = str(Path(__file__).parents[1] / "data" / "sample_tweets.csv")


def test_from_sentences_deterministic():
    bot = TwitterBot.from_sentences([["hello", "world"]], rng=ListNumberGenerator([0, 0, 0, 7]))
    assert bot.generate_tweet(8) == "hello world."
    assert bot.generate_tweets(2, 8) == ["hello world.", "hello world."]


def test_trains_from_csv(isolated_log):
    bot = TwitterBot(SAMPLE_CSV, 2, rng=RandomNumberGenerator(5))
    stats = bot.chain.stats()
    assert stats["sentences"] > 0
    assert "i" in bot.chain
    tweets = bot.generate_tweets(10, 140)
    assert len(tweets) == 10
    assert all(t[-1] in PUNCTUATION and len(t) <= 280 for t in tweets)
    assert "Chain trained" in open(isolated_log.path, encoding="utf-8").read()


def test_seed_from_config_is_reproducible():
    cfg = Config(seed=11)
    first = TwitterBot(SAMPLE_CSV, 2, config=cfg).generate_tweets(3, 100)
    second = TwitterBot(SAMPLE_CSV, 2, config=cfg).generate_tweets(3, 100)
    assert first == second


def test_write_tweets_to_file(tmp_path):
    out = tmp_path / "generated.txt"
    bot = TwitterBot(SAMPLE_CSV, 2, rng=RandomNumberGenerator(1))
    written = bot.write_tweets_to_file(3, 60, str(out), append=False)
    assert out.read_text(encoding="utf-8").splitlines() == written
    bot.write_tweets_to_file(2, 60, str(out), append=True)
    assert len(out.read_text(encoding="utf-8").splitlines()) == 5
    bot.write_tweets_to_file(1, 60, str(out), append=False)
    assert len(out.read_text(encoding="utf-8").splitlines()) == 1
