# config_manager.py - JSON config manager

import json
import os
from typing import Any, Dict, Optional

from markov_tweeter.core.text_generator import GeneratorConfig
from markov_tweeter.utils.logger_utils import get_log

DEFAULTS: Dict[str, Any] = {
    "max_tweet_length": 280,
    "tweet_column": 2,
    "tweets_path": os.path.join("data", "sample_tweets.csv"),
    "num_tweets": 10,
    "tweet_length": 140,
    "seed": None,  # None -> seeded from the OS
    "log_level": "INFO",
    "log_path": os.path.join("logs", "markov_tweeter.log"),
}


class Config:
    """
    Settings for the bot and the CLI.
    With path=None nothing is read from or written to disk.
    """

    def __init__(self, path: Optional[str] = None, **overrides):
        self.path = path
        self.data = dict(DEFAULTS)
        if path is not None:
            self._load()
        for key, val in overrides.items():
            self._assign(key, val)

    def _load(self):
        if not os.path.exists(self.path):
            return
        try:
            with open(self.path, "r", encoding="utf8") as f:
                loaded = json.load(f)
        except (OSError, ValueError) as e:
            get_log().warning(f"Config {self.path} unreadable, using defaults: {e}")
            return
        if not isinstance(loaded, dict):
            get_log().warning(f"Config {self.path} is not a JSON object, using defaults")
            return
        for key, val in loaded.items():
            if key not in self.data:
                get_log().warning(f"Config {self.path}: ignoring unknown option {key!r}")
                continue
            self._assign(key, val)

    def save(self):
        if self.path is None:
            return
        parent = os.path.dirname(self.path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        with open(self.path, "w", encoding="utf8") as f:
            json.dump(self.data, f, indent=2)

    def show(self):
        for k, v in self.data.items():
            print(f"{k:18} = {v}")

    def get(self, key: str) -> Any:
        return self.data[key]

    def __getitem__(self, key: str) -> Any:
        return self.data[key]

    def set(self, key: str, val: Any):
        self._assign(key, val)
        self.save()

    def _assign(self, key: str, val: Any):
        if key not in self.data:
            raise KeyError(f"No such option: {key}")
        default = DEFAULTS[key]
        # coerce to the default's type, None defaults accept ints
        if val is None or default is None:
            self.data[key] = None if val is None else int(val)
        else:
            self.data[key] = type(default)(val)

    def as_dict(self) -> Dict[str, Any]:
        return dict(self.data)

    def generator_config(self) -> GeneratorConfig:
        return GeneratorConfig(max_length=self.data["max_tweet_length"])
