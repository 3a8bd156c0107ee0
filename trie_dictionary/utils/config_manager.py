# config_manager.py - JSON config manager

import json
import logging
import os
from typing import Any, Dict, List, Tuple

from trie_dictionary.utils.logger_utils import LEVELS

logger = logging.getLogger(__name__)

DEFAULTS: Dict[str, Any] = {
    "max_distance": 2,       # spelling suggestion edit threshold
    "max_suggestions": 10,   # rows shown by the shell/app
    "log_level": "INFO",
    "log_path": os.path.join("logs", "trie_dictionary.log"),
    "use_color": True,
}

_TRUE = {"true", "1", "yes"}
_FALSE = {"false", "0", "no"}

# smallest accepted value per integer option
_MINIMUMS = {"max_distance": 0, "max_suggestions": 1}


def parse_bool(key: str, val: Any) -> bool:
    if isinstance(val, bool):
        return val
    s = str(val).strip().lower()
    if s in _TRUE:
        return True
    if s in _FALSE:
        return False
    raise ValueError(
        f"Invalid boolean for '{key}': {val!r} (expected true/false, 1/0 or yes/no)"
    )


class Config:
    def __init__(self, path="config.json", autosave=True):
        self.path = path
        self.autosave = autosave
        self.data: Dict[str, Any] = dict(DEFAULTS)
        self._load()

    def _load(self):
        if os.path.exists(self.path):
            try:
                with open(self.path, "r", encoding="utf8") as f:
                    loaded = json.load(f)
            except (OSError, json.JSONDecodeError) as e:
                logger.warning("could not read config %s: %s (using defaults)", self.path, e)
                return
            if not isinstance(loaded, dict):
                logger.warning("config %s is not a JSON object (using defaults)", self.path)
                return
            for k, v in loaded.items():
                if k not in self.data:
                    logger.warning("ignoring unknown config key %r", k)
                    continue
                try:
                    self.data[k] = self._coerce(k, v)
                except ValueError as e:
                    logger.warning("%s (keeping %r)", e, self.data[k])
        elif self.autosave:
            self.save()

    def _coerce(self, key, val):
        kind = type(DEFAULTS[key])
        if kind is bool:
            return parse_bool(key, val)
        try:
            out = kind(val)
        except (TypeError, ValueError) as e:
            raise ValueError(f"Invalid value for '{key}': {val!r}") from e

        if key in _MINIMUMS and out < _MINIMUMS[key]:
            raise ValueError(f"Invalid value for '{key}': {val!r} (must be >= {_MINIMUMS[key]})")
        if key == "log_level":
            out = out.strip().upper()
            if out not in LEVELS:
                raise ValueError(
                    f"Invalid value for '{key}': {val!r} (expected one of {', '.join(LEVELS)})"
                )
        return out

    def save(self):
        folder = os.path.dirname(self.path)
        if folder:
            os.makedirs(folder, exist_ok=True)
        with open(self.path, "w", encoding="utf8") as f:
            json.dump(self.data, f, indent=2)

    def get(self, key):
        return self.data[key]

    def show(self) -> List[Tuple[str, Any]]:
        return list(self.data.items())

    def set(self, key, val):
        if key not in self.data:
            raise KeyError(f"No such option: {key}")
        self.data[key] = self._coerce(key, val)
        if self.autosave:
            self.save()
