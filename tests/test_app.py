"""Command line parsing for the launcher."""

import pytest

pytest.importorskip("PySide6.QtWidgets")

from noughts.app import parse_args  # noqa: E402


def test_defaults():
    args, rest = parse_args([])
    assert args.log_level == "WARNING"
    assert args.seed is None
    assert rest == []


def test_seed_and_level_with_qt_args():
    args, rest = parse_args(["--seed", "7", "--log-level", "DEBUG", "--reverse"])
    assert args.seed == 7
    assert args.log_level == "DEBUG"
    assert rest == ["--reverse"]
