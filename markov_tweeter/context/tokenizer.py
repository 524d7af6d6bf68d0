# markov_tweeter/context/tokenizer.py
# splits tweets into sentences and sentences into cleaned words

from typing import List

from .normalizer import clean_word, remove_urls, replace_punctuation


def sentence_split(tweet: str) -> List[str]:
    """Split on sentence-ending marks; returns the trimmed, non-empty sentences."""
    out = []
    for sentence in replace_punctuation(tweet).split("."):
        sentence = sentence.strip()
        if sentence:
            out.append(sentence)
    return out


def parse_and_clean_sentence(sentence: str) -> List[str]:
    """
    Return the clean words of a sentence in order. Marks stuck to a word
    ("dog!") are blanked out first; words that still fail clean_word are dropped.
    """
    words = []
    for raw in sentence.split(" "):
        w = clean_word(replace_punctuation(raw, " "))
        if w is not None:
            words.append(w)
    return words


def parse_and_clean_tweet(tweet: str) -> List[List[str]]:
    """Strip URLs, split into sentences and clean each one (sentences may come back empty)."""
    return [parse_and_clean_sentence(s) for s in sentence_split(remove_urls(tweet))]
