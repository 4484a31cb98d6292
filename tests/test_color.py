import io
import sys

import pytest

from hostprobe import color


class _Terminal(io.StringIO):
    def isatty(self):
        return True


@pytest.fixture
def terminal(monkeypatch):
    monkeypatch.setattr(sys, "stdout", _Terminal())


@pytest.fixture
def pipe(monkeypatch):
    monkeypatch.setattr(sys, "stdout", io.StringIO())


def test_is_tty_true_on_terminal(terminal):
    assert color.is_tty() is True


def test_is_tty_false_on_pipe(pipe):
    assert color.is_tty() is False


@pytest.mark.parametrize(
    "func, escape",
    [
        (color.gray, "\033[30m"),
        (color.green, "\033[32m"),
        (color.red, "\033[31m"),
        (color.yellow, "\033[33m"),
    ],
)
def test_colours_on_terminal(terminal, func, escape):
    assert func("go") == escape + "go" + "\033[0m"


@pytest.mark.parametrize("func", [color.gray, color.green, color.red, color.yellow])
def test_colours_plain_when_not_terminal(pipe, func):
    assert func("go") == "go"


def test_normal_never_adds_escapes(terminal):
    assert color.normal("go") == "go"