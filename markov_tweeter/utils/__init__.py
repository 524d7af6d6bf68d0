# markov_tweeter/utils - logging, config and file helpers
