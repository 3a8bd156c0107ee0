# logger_utils.py - logging of shell/app activity and timing metrics

import os
import sys
import time
from datetime import datetime
from typing import Optional, TextIO

# Directory where log files are stored, created on first write
LOG_DIR = "logs"

# Path to the default log file, can be overridden per Log instance
DEFAULT_LOG_PATH = os.path.join(LOG_DIR, "trie_dictionary.log")

LEVELS = {"DEBUG": 10, "INFO": 20, "WARNING": 30, "ERROR": 40}


def _append(path: str, line: str) -> None:
    folder = os.path.dirname(path)
    if folder:
        os.makedirs(folder, exist_ok=True)
    with open(path, "a", encoding="utf-8") as f:
        f.write(line + "\n")


class Log:
    """Lightweight logger writing timestamped lines to a file and the console."""
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
        use_color: bool = True,
        level: str = "INFO",
        echo: bool = True,
        stream: Optional[TextIO] = None,
    ):
        if level.upper() not in LEVELS:
            raise ValueError(f"unknown log level {level!r}")
        self.path = path or DEFAULT_LOG_PATH
        self.use_color = use_color
        self.level = level.upper()
        self.echo = echo
        self.stream = stream

    @classmethod
    def from_config(cls, cfg) -> "Log":
        """File-only Log built from a Config (the console belongs to rich/textual)."""
        return cls(
            path=cfg.get("log_path"),
            use_color=cfg.get("use_color"),
            level=cfg.get("log_level"),
            echo=False,
        )

    def write(self, level: str, msg: str) -> None:
        """
        Append a log message to the log file with a timestamp.
        Each entry is written as: [YYYY-MM-DD HH:MM:SS] LEVEL   | message
        Messages below the configured level are dropped.
        """
        level = level.upper()
        if LEVELS.get(level, 0) < LEVELS[self.level]:
            return

        ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        line = f"[{ts}] {level:<7} | {msg}"
        _append(self.path, line)

        if not self.echo:
            return
        out = self.stream or sys.stdout
        # print to console (color enabled etc)
        if self.use_color and level in self.COLORS:
            out.write(f"{self.COLORS[level]}{line}{self.COLORS['RESET']}\n")
        else:
            out.write(line + "\n")

    # Public logging methods
    def debug(self, msg: str) -> None:
        self.write("DEBUG", msg)

    def info(self, msg: str) -> None:
        self.write("INFO", msg)

    def warning(self, msg: str) -> None:
        self.write("WARNING", msg)

    def error(self, msg: str) -> None:
        self.write("ERROR", msg)

    def metric(self, tag: str, value, unit: str = "") -> None:
        """
        Record a metric (timing, counts) in the log file.
        Example: [12:45:02] suggest latency: 0.123s
        """
        ts = datetime.now().strftime("%H:%M:%S")
        _append(self.path, f"[{ts}] {tag}: {value}{unit}")

    def time_block(self, label: str) -> "_Timer":
        """
        Helper for measuring execution time of a code block.
        To use:
            with log.time_block("load_words"):
                do_some_work()
        The duration is recorded as a metric on exit.
        """
        return _Timer(self, label)


class _Timer:
    """Context manager used internally to measure time for a code block."""
    def __init__(self, log: Log, label: str):
        self.log = log
        self.label = label
        self.start = time.perf_counter()
        self.elapsed = 0.0

    def __enter__(self):
        self.start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb):
        """When leaving the block, work out how long it took and record it."""
        self.elapsed = time.perf_counter() - self.start
        self.log.metric(f"{self.label} done", round(self.elapsed, 6), "s")
        return False
