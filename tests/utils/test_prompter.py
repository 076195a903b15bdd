"""Tests for the numbered-list Prompter."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest

from ghproj_cli.utils.prompter import Prompter


def _prompter() -> Prompter:
    return Prompter(console=MagicMock())


def test_returns_zero_based_index():
    with patch("ghproj_cli.utils.prompter.typer.prompt", return_value="2"):
        assert _prompter().select("Pick", "", ["a", "b", "c"]) == 1


def test_reasks_on_invalid_choice():
    with patch("ghproj_cli.utils.prompter.typer.prompt", side_effect=["x", "9", "3"]) as prompt:
        assert _prompter().select("Pick", "", ["a", "b", "c"]) == 2
    assert prompt.call_count == 3


def test_default_points_at_matching_option():
    with patch("ghproj_cli.utils.prompter.typer.prompt", return_value="2") as prompt:
        _prompter().select("Pick", "b", ["a", "b"])
    assert prompt.call_args.kwargs["default"] == "2"


def test_lists_options():
    prompter = _prompter()
    with patch("ghproj_cli.utils.prompter.typer.prompt", return_value="1"):
        prompter.select("Which owner would you like to use?", "", ["monalisa", "github"])
    printed = [call.args[0] for call in prompter.console.print.call_args_list]
    assert "  1. monalisa" in printed
    assert "  2. github" in printed


def test_no_options():
    with pytest.raises(ValueError):
        _prompter().select("Pick", "", [])
