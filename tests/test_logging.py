from __future__ import annotations

import re

import pytest

from colfeat.common.logging import Timed, log_stdout


def test_log_stdout_is_timestamped(capsys: pytest.CaptureFixture[str]) -> None:
    log_stdout("hello")
    out = capsys.readouterr().out
    assert re.match(r"^\[\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\] hello\n$", out)


def test_timed_records_elapsed() -> None:
    with Timed() as t:
        sum(range(1000))
    assert t.elapsed is not None and t.elapsed >= 0.0
