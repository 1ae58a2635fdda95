import pytest

from jsonrest.logs import ConsoleLogger, Logger, get_logger, log, set_logger


class RecordingLogger(Logger):
    def __init__(self):
        self.messages = []

    def log(self, message):
        self.messages.append(message)


@pytest.fixture(autouse=True)
def reset_logger():
    previous = get_logger()
    set_logger(None)
    yield
    set_logger(previous)


def test_logger_is_abstract():
    with pytest.raises(TypeError):
        Logger()


def test_console_logger_writes_verbatim(capsys):
    ConsoleLogger().log("Connection open\r\n")
    assert capsys.readouterr().out == "Connection open\r\n"


def test_log_forwards_to_installed_logger():
    recorder = RecordingLogger()
    set_logger(recorder)
    log("first")
    log("second")
    assert recorder.messages == ["first", "second"]
    assert get_logger() is recorder


def test_log_converts_to_text():
    recorder = RecordingLogger()
    set_logger(recorder)
    log(42)
    assert recorder.messages == [str(42)]


def test_log_without_logger_is_silent(capsys):
    log("nobody listens")
    assert capsys.readouterr().out == ""
    assert get_logger() is None


def test_console_logger_through_log(capsys):
    set_logger(ConsoleLogger())
    log("abc")
    log("def")
    assert capsys.readouterr().out == "abcdef"