# tests/test_logger_utils.py
import io

import pytest

from markov_tweeter.utils.logger_utils import Log


def test_level_filtering(tmp_path):
    log = Log(path=str(tmp_path / "app.log"), level="WARNING")
    log.info("quiet")
    log.warning("loud")
    text = (tmp_path / "app.log").read_text(encoding="utf-8")
    assert "quiet" not in text
    assert "WARNING | loud" in text


def test_echo_to_stream(tmp_path):
    stream = io.StringIO()
    log = Log(path=str(tmp_path / "logs" / "app.log"), echo=True, use_color=False, stream=stream)
    log.error("boom")
    assert "ERROR   | boom" in stream.getvalue()
    assert (tmp_path / "logs" / "app.log").exists()


def test_time_block_records_metric(tmp_path):
    log = Log(path=str(tmp_path / "app.log"))
    with log.time_block("training") as t:
        pass
    assert t.elapsed >= 0
    assert "training done:" in (tmp_path / "app.log").read_text(encoding="utf-8")


def test_bad_level():
    with pytest.raises(ValueError):
        Log(level="LOUD")
