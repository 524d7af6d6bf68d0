"""
markov_tweeter

Generates tweet-sized text from a first-order Markov chain trained on a CSV
export of tweets.
"""

__version__ = "0.1.0"
