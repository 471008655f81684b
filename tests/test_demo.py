import io

from printlib.demo import append_words, main


def test_append_words_one_per_line(tmp_path):
    log = tmp_path / "log.txt"
    words = ["alpha", "beta", "gamma"]
    append_words(words, log)
    assert log.read_text(encoding="utf-8").splitlines() == words


def test_append_words_keeps_existing_content(tmp_path):
    log = tmp_path / "log.txt"
    log.write_text("first\n", encoding="utf-8")
    append_words(["second"], log)
    assert log.read_text(encoding="utf-8").splitlines() == ["first", "second"]


def test_append_words_with_no_words_creates_nothing(tmp_path):
    log = tmp_path / "log.txt"
    append_words([], log)
    assert log.exists() is False


def test_main_without_log_path_fails(monkeypatch, capsys):
    monkeypatch.delenv("LOG_PATH", raising=False)
    assert main([]) == 1
    assert "undefined environment variable: LOG_PATH" in capsys.readouterr().err


def test_main_splits_stdin_on_whitespace(monkeypatch, tmp_path):
    log = tmp_path / "out.log"
    monkeypatch.setenv("LOG_PATH", str(log))
    monkeypatch.setattr("sys.stdin", io.StringIO("one two\n  three\t four\n\n"))
    assert main([]) == 0
    assert log.read_text(encoding="utf-8").splitlines() == ["one", "two", "three", "four"]


def test_main_appends_across_runs(monkeypatch, tmp_path):
    log = tmp_path / "out.log"
    monkeypatch.setenv("LOG_PATH", str(log))
    monkeypatch.setattr("sys.stdin", io.StringIO("x\n"))
    assert main([]) == 0
    monkeypatch.setattr("sys.stdin", io.StringIO("y\n"))
    assert main([]) == 0
    assert log.read_text(encoding="utf-8").splitlines() == ["x", "y"]