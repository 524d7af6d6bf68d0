# logger_utils.py - for logging messages and timing metrics, timestamps etc

import os
import sys
import time
from datetime import datetime
from typing import Optional, TextIO

# Directory where all log files will be stored
LOG_DIR = "logs"

# Path to the default log file, can be overriden
DEFAULT_LOG_PATH = os.path.join(LOG_DIR, "markov_tweeter.log")

LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class Log:
    """Lightweight logger for writing messages and tracking metrics."""
    COLORS = {
        "DEBUG": "\033[90m",   # gray
        "INFO": "\033[94m",    # blue
        "WARNING": "\033[93m", # yellow
        "ERROR": "\033[91m",   # red
        "RESET": "\033[0m",
    }

    def __init__(
        self,
        path: Optional[str] = None,
        level: str = "INFO",
        echo: bool = False,
        use_color: bool = True,
        stream: TextIO = sys.stderr,
    ):
        self.path = path or DEFAULT_LOG_PATH
        self.level = _check_level(level)
        self.echo = echo
        self.use_color = use_color
        self.stream = stream

    def enabled(self, level: str) -> bool:
        return LEVELS.index(level) >= LEVELS.index(self.level)

    def write(self, level: str, msg: str):
        """
        Append a log message to the log file with a timestamp.
        Each entry is written as: [YYYY-MM-DD HH:MM:SS] LEVEL   | message
        Messages below the configured level are dropped.
        """
        level = _check_level(level)
        if not self.enabled(level):
            return
        ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        self._emit(f"[{ts}] {level:<7} | {msg}", level)

    def _emit(self, line: str, level: Optional[str] = None):
        parent = os.path.dirname(self.path)
        if parent:
            os.makedirs(parent, exist_ok=True)  # create the folder if it doesn't already exist
        with open(self.path, "a", encoding="utf-8") as f:
            f.write(line + "\n")

        if not self.echo:
            return
        # console echo (color enabled etc)
        if self.use_color and level in self.COLORS:
            self.stream.write(f"{self.COLORS[level]}{line}{self.COLORS['RESET']}\n")
        else:
            self.stream.write(line + "\n")

    # Public logging methods
    def debug(self, msg: str):
        self.write("DEBUG", msg)

    def info(self, msg: str):
        self.write("INFO", msg)

    def warning(self, msg: str):
        self.write("WARNING", msg)

    def error(self, msg: str):
        self.write("ERROR", msg)

    def metric(self, tag, value, unit=""):
        """
        Record a metric (like timing or counts).
        Example: [12:45:02] training done: 0.123s
        Metrics are logged at INFO.
        """
        if not self.enabled("INFO"):
            return
        ts = datetime.now().strftime("%H:%M:%S")
        self._emit(f"[{ts}] {tag}: {value}{unit}", "INFO")

    def time_block(self, label):
        """
        Helper for measuring execution time of a code block.
        To use:
            with get_log().time_block("training"):
                do_some_work()
        It automatically logs how long the block took.
        """
        return _Timer(self, label)


class _Timer:
    """Context manager used internally to measure time for a code block."""
    def __init__(self, log: Log, label):
        self.log = log
        self.label = label
        self.start = time.perf_counter()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        """When exiting the 'with' block, calculate how long it took and record it as a metric."""
        self.elapsed = round(time.perf_counter() - self.start, 3)
        self.log.metric(f"{self.label} done", self.elapsed, "s")


def _check_level(level: str) -> str:
    level = str(level).upper()
    if level not in LEVELS:
        raise ValueError(f"Unknown log level: {level!r} (expected one of {', '.join(LEVELS)})")
    return level


_shared = Log()


def get_log() -> Log:
    """Shared logger used across the package."""
    return _shared


def configure_logging(path: Optional[str] = None, level: Optional[str] = None, echo: Optional[bool] = None) -> Log:
    """Reconfigure the shared logger in place and return it."""
    if path is not None:
        _shared.path = path
    if level is not None:
        _shared.level = _check_level(level)
    if echo is not None:
        _shared.echo = echo
    return _shared
