# tests/test_file_io.py
import pytest

from markov_tweeter.context.tweet_parser import csv_file_to_tweets
from markov_tweeter.core.errors import InvalidArgument
from markov_tweeter.utils import file_io
from markov_tweeter.utils.file_io import iter_file_lines, write_strings_to_file


def test_write_overwrite_then_append(tmp_path):
    out = tmp_path / "nested" / "tweets.txt"
    write_strings_to_file(["one.", "two!"], str(out), append=False)
    assert out.read_text(encoding="utf-8") == "one.\ntwo!\n"

    write_strings_to_file(["three?"], str(out), append=True)
    assert out.read_text(encoding="utf-8").splitlines() == ["one.", "two!", "three?"]

    write_strings_to_file(["four;"], str(out), append=False)
    assert out.read_text(encoding="utf-8").splitlines() == ["four;"]


def test_write_logs_line_count(tmp_path, isolated_log):
    write_strings_to_file(["a.", "b."], str(tmp_path / "t.txt"))
    assert "Wrote 2 lines" in open(isolated_log.path, encoding="utf-8").read()


def test_iter_file_lines(tmp_path):
    path = tmp_path / "lines.txt"
    path.write_text("first\r\nsecond\n\nlast", encoding="utf-8")
    assert list(iter_file_lines(str(path))) == ["first", "second", "", "last"]


def test_iter_file_lines_bad_paths(tmp_path):
    with pytest.raises(InvalidArgument):
        iter_file_lines(None)
    with pytest.raises(FileNotFoundError):
        iter_file_lines(str(tmp_path / "missing.txt"))


def test_closing_lines_early_releases_file(tmp_path, monkeypatch):
    path = tmp_path / "lines.txt"
    path.write_text("one\ntwo\nthree\n", encoding="utf-8")
    handles = []

    def tracking_open(*args, **kwargs):
        fh = open(*args, **kwargs)
        handles.append(fh)
        return fh

    monkeypatch.setattr(file_io, "open", tracking_open, raising=False)

    unread = iter_file_lines(str(path))
    unread.close()
    assert handles == []

    lines = iter_file_lines(str(path))
    assert next(lines) == "one"
    lines.close()
    assert len(handles) == 1 and handles[0].closed


def test_csv_reader_closes_file(tmp_path, monkeypatch):
    path = tmp_path / "tweets.csv"
    path.write_text("1,2020,hi there\n", encoding="utf-8")
    handles = []

    def tracking_open(*args, **kwargs):
        fh = open(*args, **kwargs)
        handles.append(fh)
        return fh

    monkeypatch.setattr(file_io, "open", tracking_open, raising=False)
    assert csv_file_to_tweets(str(path), 2) == ["hi there"]
    assert handles and all(fh.closed for fh in handles)
