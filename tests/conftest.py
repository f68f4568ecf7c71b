from __future__ import annotations

from datetime import date

import pytest

from pokelogs.services.aggregator import Aggregator
from pokelogs.services.parser import LogParser
from pokelogs.services.storage import LogStore

TODAY = date(2024, 3, 10)


@pytest.fixture
def write_log(tmp_path):
    def _write(*lines: str):
        path = tmp_path / "logs.txt"
        path.write_text("".join(line + "\n" for line in lines), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def make_aggregator(write_log):
    def _make(*lines: str) -> Aggregator:
        return Aggregator(LogStore(str(write_log(*lines))), LogParser())

    return _make
