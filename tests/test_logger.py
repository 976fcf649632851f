import io
import threading

import pytest

from ogb.logger import (
    LogLevel,
    default_logger,
    format_log_line,
    version_number,
    version_string,
)


@pytest.mark.parametrize(
    "level, prefix",
    [
        (LogLevel.VERBOSE, "[VERBOSE]: "),
        (LogLevel.INFO, "[INFO]:    "),
        (LogLevel.WARNING, "[WARNING]: "),
        (LogLevel.ERROR, "[ERROR]:   "),
    ],
)
def test_format_prefixes(level, prefix):
    assert format_log_line(level, "hello") == prefix + "hello\n"


def test_prefixes_align_messages():
    starts = {format_log_line(level, "x").index("x") for level in LogLevel}
    assert len(starts) == 1


def test_unknown_level_raises():
    with pytest.raises(ValueError):
        format_log_line(99, "nope")


def test_default_logger_writes_to_stream():
    stream = io.StringIO()
    default_logger(LogLevel.WARNING, "careful", stream)
    default_logger(LogLevel.INFO, "done", stream)
    assert stream.getvalue() == (
        format_log_line(LogLevel.WARNING, "careful")
        + format_log_line(LogLevel.INFO, "done")
    )


def test_default_logger_writes_to_stdout(capsys):
    default_logger(LogLevel.ERROR, "broken")
    assert capsys.readouterr().out == format_log_line(LogLevel.ERROR, "broken")


def test_default_logger_lines_stay_whole_across_threads():
    stream = io.StringIO()
    threads = [
        threading.Thread(target=default_logger, args=(LogLevel.INFO, f"m{i}", stream))
        for i in range(20)
    ]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    lines = stream.getvalue().splitlines()
    assert sorted(lines) == sorted(
        format_log_line(LogLevel.INFO, f"m{i}").rstrip("\n") for i in range(20)
    )


def test_version_string_parts():
    major, minor, patch = version_string().split(".")
    assert (int(major), int(minor), int(patch)) == (0, 1, 9)
    assert len(minor) == 2 and len(patch) == 3


def test_version_number():
    assert version_number() == 1009
    assert version_number() % 1000 == int(version_string().split(".")[2])