import io

import pytest

from siegeengine.log import Logger, LogType


@pytest.fixture
def setup(tmp_path):
    stream = io.StringIO()
    log = Logger(stream=stream)
    path = tmp_path / "log.txt"
    return log, stream, path


def test_disabled_by_default_writes_nothing(setup):
    log, stream, path = setup
    log.log(LogType.INFO, "hello")
    assert stream.getvalue() == ""
    assert not log.can_log(LogType.ERROR)


def test_enabled_writes_label_and_message(setup):
    log, stream, path = setup
    log.configure(True, False, path)
    log.log(LogType.INFO, "Loaded Resource<image>: ", "a.png")
    expected = "[INFO] Loaded Resource<image>: a.png\n"
    assert stream.getvalue() == expected
    assert path.read_text(encoding="utf-8") == expected


def test_verbose_only_when_requested(setup):
    log, stream, path = setup
    log.configure(True, False, path)
    assert not log.can_log(LogType.VERBOSE)
    log.log(LogType.VERBOSE, "quiet")
    assert stream.getvalue() == ""
    log.configure(True, True, path)
    assert log.can_log(LogType.VERBOSE)
    log.log(LogType.VERBOSE, "loud")
    assert stream.getvalue() == "[VERBOSE] loud\n"


@pytest.mark.parametrize("log_type", list(LogType))
def test_every_type_uses_its_name_as_label(setup, log_type):
    log, stream, path = setup
    log.configure(True, True, path)
    log.log(log_type, "x")
    assert stream.getvalue() == f"[{log_type.name}] x\n"


def test_configure_clears_existing_file(setup):
    log, stream, path = setup
    path.write_text("old content\n", encoding="utf-8")
    log.configure(False, False, path)
    assert path.read_text(encoding="utf-8") == ""


def test_lines_are_appended(setup):
    log, stream, path = setup
    log.configure(True, False, path)
    log.log(LogType.WARN, "one")
    log.log(LogType.ERROR, "two", 3)
    assert path.read_text(encoding="utf-8").splitlines() == ["[WARN] one", "[ERROR] two3"]


def test_non_string_arguments_are_formatted(setup):
    log, stream, path = setup
    log.configure(True, False, path)
    log.log(LogType.DEBUGGING, "scaled to ", 64, "x", 32)
    assert stream.getvalue() == "[DEBUGGING] scaled to 64x32\n"