import threading
from datetime import datetime

import pytest

from sckit.log import FILE_SIZE_LIMIT, Logger, LogLevel, set_thread_name


@pytest.fixture
def quiet_logger():
    logger = Logger()
    logger.set_stdout(False)
    yield logger
    try:
        logger.close()
    except RuntimeError:
        pass


def _collector(logger):
    received = []
    logger.set_callback(lambda level, message: received.append((level, message)))
    return received


def _log_all(logger):
    logger.debug("test \n")
    logger.info("test \n")
    logger.warn("test \n")
    logger.error("test \n")


@pytest.mark.parametrize("name", ["errrorr", "errox", "err"])
def test_invalid_level_name_rejected(quiet_logger, name):
    received = _collector(quiet_logger)
    with pytest.raises(ValueError):
        quiet_logger.set_level(name)
    quiet_logger.debug("test \n")
    assert received == []
    assert quiet_logger.level == LogLevel.INFO


@pytest.mark.parametrize(
    "name, expected",
    [
        ("debuG", [LogLevel.DEBUG, LogLevel.INFO, LogLevel.WARN, LogLevel.ERROR]),
        ("DEBUG", [LogLevel.DEBUG, LogLevel.INFO, LogLevel.WARN, LogLevel.ERROR]),
        ("iNfO", [LogLevel.INFO, LogLevel.WARN, LogLevel.ERROR]),
        ("INFO", [LogLevel.INFO, LogLevel.WARN, LogLevel.ERROR]),
        ("WARN", [LogLevel.WARN, LogLevel.ERROR]),
        ("OFF", []),
    ],
)
def test_level_filtering(quiet_logger, name, expected):
    received = _collector(quiet_logger)
    quiet_logger.set_level(name)
    _log_all(quiet_logger)
    assert [level for level, _ in received] == expected


def test_callback_gets_formatted_message(quiet_logger):
    received = _collector(quiet_logger)
    quiet_logger.info("value is %d, name %s", 3, "x")
    assert received == [(LogLevel.INFO, "value is 3, name x")]


def test_message_without_args_keeps_percent(quiet_logger):
    received = _collector(quiet_logger)
    quiet_logger.warn("100%")
    assert received == [(LogLevel.WARN, "100%")]


def test_callback_removed(quiet_logger):
    received = _collector(quiet_logger)
    quiet_logger.set_callback(None)
    quiet_logger.info("x")
    assert received == []


def test_stdout_header_format(capsys):
    with Logger() as logger:
        logger.info("hello\n")
    out = capsys.readouterr().out
    assert out[0] == "["
    stamp = out[1:20]
    parsed = datetime.strptime(stamp, "%Y-%m-%d %H:%M:%S")
    assert parsed.strftime("%Y-%m-%d %H:%M:%S") == stamp
    assert out[20:] == "][INFO ][Thread] hello\n"


def test_error_goes_to_stderr(capsys):
    with Logger() as logger:
        logger.error("bad\n")
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.endswith("[ERROR][Thread] bad\n")


def test_default_level_hides_debug(capsys):
    with Logger() as logger:
        logger.debug("hidden\n")
    assert capsys.readouterr().out == ""


def test_stdout_disabled(capsys):
    with Logger() as logger:
        logger.set_stdout(False)
        logger.info("hidden\n")
        logger.error("hidden\n")
    captured = capsys.readouterr()
    assert captured.out == "" and captured.err == ""


def test_thread_name_in_header(capsys):
    def worker():
        set_thread_name("My thread")
        logger.info("from thread\n")

    with Logger() as logger:
        thread = threading.Thread(target=worker)
        thread.start()
        thread.join()
    assert "[INFO ][My thread] from thread\n" in capsys.readouterr().out


def test_thread_name_truncated(capsys):
    def worker():
        set_thread_name("n" * 40)
        logger.info("x")

    with Logger() as logger:
        thread = threading.Thread(target=worker)
        thread.start()
        thread.join()
    out = capsys.readouterr().out
    assert "[" + "n" * 31 + "] x" in out
    assert "n" * 32 not in out


def test_file_rotation(quiet_logger, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    message = "testtesttesttesttesttesttesttesttesttesttesttest"
    received = _collector(quiet_logger)
    quiet_logger.set_file("prev.txt", "current.txt")
    for _ in range(100000):
        quiet_logger.error(message)
    quiet_logger.close()
    assert len(received) == 100000
    assert received[-1] == (LogLevel.ERROR, message)
    prev = tmp_path / "prev.txt"
    assert prev.stat().st_size >= FILE_SIZE_LIMIT
    assert f"[ERROR][Thread] {message}" in prev.read_text()
    assert (tmp_path / "current.txt").exists()


def test_file_contains_header(quiet_logger, tmp_path):
    current = tmp_path / "current.txt"
    quiet_logger.set_file(tmp_path / "prev.txt", current)
    quiet_logger.error("line one\n")
    quiet_logger.close()
    text = current.read_text()
    assert text.startswith("\n[")
    assert "[ERROR][Thread] line one\n" in text


def test_set_file_rejects_long_names(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    long_a = "a" * 255
    long_b = "b" * 256
    short_c = "c" * 199

    logger = Logger()
    logger.set_stdout(False)
    logger.set_file("prev1.txt", "current1.txt")
    logger.info("h1+")

    with pytest.raises(ValueError):
        logger.set_file(long_a, short_c)
    logger.info("nolog1")

    logger.set_file("prev1.txt", "current1.txt")
    logger.info("h2+")

    with pytest.raises(ValueError):
        logger.set_file(short_c, long_a)
    logger.info("nolog2")

    logger.set_file("prev1.txt", "current1.txt")
    logger.info("h3+")
    logger.close()

    text = (tmp_path / "current1.txt").read_text()
    assert "h1+" in text
    assert "h2+" in text
    assert "h3+" in text
    assert "nolog1" not in text
    assert "nolog2" not in text

    logger = Logger()
    with pytest.raises(ValueError):
        logger.set_file(long_b, short_c)
    with pytest.raises(ValueError):
        logger.set_file(short_c, long_b)
    logger.close()
    with pytest.raises(RuntimeError):
        logger.close()


@pytest.mark.parametrize("prev, current", [(None, "test.txt"), ("test.txt", None)])
def test_set_file_none_disables(quiet_logger, tmp_path, prev, current):
    path = tmp_path / "log.txt"
    quiet_logger.set_file(tmp_path / "old.txt", path)
    quiet_logger.info("kept")
    quiet_logger.set_file(prev, current)
    quiet_logger.info("dropped")
    quiet_logger.close()
    text = path.read_text()
    assert "kept" in text
    assert "dropped" not in text


def test_set_file_missing_directory(quiet_logger, tmp_path):
    missing = tmp_path / "no" / "such" / "dir"
    with pytest.raises(OSError):
        quiet_logger.set_file(missing / "prev.txt", missing / "current.txt")


def test_log_after_close_raises():
    logger = Logger()
    logger.close()
    with pytest.raises(RuntimeError):
        logger.info("x")