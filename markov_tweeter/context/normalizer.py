# markov_tweeter/context/normalizer.py
import re
from typing import Optional

from markov_tweeter.core.text_generator import PUNCTUATION

_url_re = re.compile(r"\bhttp\S*")
_bad_word_re = re.compile(r"[^\w']")  # anything but word chars and apostrophes


def remove_urls(s: str) -> str:
    """Delete every URL-like word (anything starting with 'http')."""
    return _url_re.sub("", s)


def replace_punctuation(s: str, repl: str = ".") -> str:
    """Replace each sentence-ending mark with `repl`."""
    for mark in PUNCTUATION:
        s = s.replace(mark, repl)
    return s


def clean_word(word: str) -> Optional[str]:
    """
    Trim and lower-case a word. Returns None for empty words and for words
    holding anything other than letters, digits, underscores or apostrophes.
    """
    cleaned = word.strip().lower()
    if not cleaned or _bad_word_re.search(cleaned):
        return None
    return cleaned
