# tests/test_utils.py - logger, metrics and timing helpers
import io
import time

import pytest

from trie_dictionary.utils.timing import timed
from trie_dictionary.utils.logger_utils import Log
from trie_dictionary.utils.metrics_tracker import Metrics


@pytest.fixture
def log_path(tmp_path):
    return str(tmp_path / "logs" / "test.log")


def test_log_writes_file_and_stream(log_path):
    stream = io.StringIO()
    log = Log(path=log_path, use_color=False, stream=stream)
    log.info("hello")
    log.error("broken")
    lines = open(log_path, encoding="utf-8").read().splitlines()
    assert len(lines) == 2
    assert lines[0].endswith("INFO    | hello")
    assert "ERROR   | broken" in lines[1]
    assert stream.getvalue().splitlines() == lines


def test_log_level_filter(log_path):
    log = Log(path=log_path, level="warning", echo=False)
    log.debug("quiet")
    log.info("quiet")
    log.warning("loud")
    content = open(log_path, encoding="utf-8").read()
    assert "quiet" not in content
    assert "loud" in content


def test_log_color(log_path):
    stream = io.StringIO()
    Log(path=log_path, stream=stream).warning("careful")
    assert stream.getvalue().startswith(Log.COLORS["WARNING"])
    assert stream.getvalue().rstrip("\n").endswith(Log.COLORS["RESET"])


def test_log_rejects_unknown_level(log_path):
    with pytest.raises(ValueError):
        Log(path=log_path, level="LOUD")


def test_time_block_records_metric(log_path):
    log = Log(path=log_path, echo=False)
    with log.time_block("build") as tb:
        time.sleep(0.001)
    assert tb.elapsed > 0
    assert "build done:" in open(log_path, encoding="utf-8").read()


def test_metrics_averages():
    m = Metrics()
    m.record("search_time", 0.2)
    m.record("search_time", 0.4)
    m.record("insert_time", 1.0)
    assert m.avg("search_time") == pytest.approx(0.3)
    assert m.count("search_time") == 2
    assert m.avg("missing") == 0.0
    assert m.rows() == [("insert_time", 1, 1.0), ("search_time", 2, pytest.approx(0.3))]
    m.reset()
    assert m.rows() == []


def test_timed_without_metrics():
    @timed()
    def add(a, b):
        return a + b

    res, elapsed = add(1, 2)
    assert res == 3
    assert elapsed >= 0
    assert add.__name__ == "add"


def test_timed_records_into_metrics():
    m = Metrics()

    @timed(m)
    def lookup(word):
        return word.upper()

    assert lookup("cat")[0] == "CAT"
    lookup("dog")
    assert m.count("lookup_time") == 2

    out, _ = timed(m, "search_time")(len)("abc")
    assert out == 3
    assert m.count("search_time") == 1
    assert [k for k, _, _ in m.rows()] == ["lookup_time", "search_time"]
