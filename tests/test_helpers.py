from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

from hostprobe.helpers import (
    FatalError,
    InternalError,
    ScopeGuard,
    cannot_be_reached,
    glob,
    interval_to_string,
    parse_version,
    random_uuid,
    time_to_string,
    time_to_string_iso,
)


def test_scope_guard_runs_on_exit():
    calls = []
    with ScopeGuard(lambda: calls.append(1)):
        assert calls == []
    assert calls == [1]


def test_scope_guard_runs_on_exception():
    calls = []
    with pytest.raises(FatalError):
        with ScopeGuard(lambda: calls.append(1)):
            raise FatalError("boom")
    assert calls == [1]


def test_time_to_string():
    assert time_to_string(datetime(1970, 1, 1, 0, 0, 42)) == "1970-01-01-00-00-42"


def test_time_to_string_iso_round_trip():
    instant = datetime(2021, 6, 1, 12, 30, 15, tzinfo=timezone.utc)
    text = time_to_string_iso(instant)
    parsed = datetime.strptime(text, "%Y-%m-%dT%H:%M:%S%z")
    assert parsed == instant


def test_interval_to_string():
    assert interval_to_string(42) == "42s"
    assert interval_to_string(timedelta(seconds=42)) == "42s"
    assert interval_to_string(42.9) == "42s"


def test_cannot_be_reached():
    with pytest.raises(InternalError, match="should not be reachable"):
        cannot_be_reached()


@pytest.mark.parametrize(
    "text, expected",
    [
        ("2.0.4", 200040000),
        ("2.0.4-123", 200040123),
        ("2.0.4-rc1-123", 200040123),
        ("2.0.4-rc1", 200040000),
        ("v2.0.4", 200040000),
    ],
)
def test_parse_version(text, expected):
    assert parse_version(text) == expected


@pytest.mark.parametrize("text", ["", "x.x.x", "x.x"])
def test_parse_version_invalid(text):
    with pytest.raises(ValueError):
        parse_version(text)


def test_parse_version_orders():
    assert parse_version("1.9.9") < parse_version("2.0.0") < parse_version("2.0.0-1")


def test_random_uuid_shape():
    a = random_uuid()
    b = random_uuid()
    assert a != b
    assert a.isalnum() and a.isascii()
    assert 2 <= len(a) <= 22


def test_glob(tmp_path: Path):
    for name in ("a", "b", "c"):
        (tmp_path / name).write_text("")
    found = glob(tmp_path / "*")
    assert sorted(p.name for p in found) == ["a", "b", "c"]
    assert len(glob(tmp_path / "*", 2)) == 2
    assert glob(tmp_path / "nothing*") == []