"""Tests for main module."""

from diet_tracker.cli.prompts import Prompter
from diet_tracker.config import Settings
from diet_tracker.main import main


def test_main_runs_without_error(capsys, settings: Settings) -> None:
    """Test that main function executes successfully."""
    main(settings, Prompter(read=lambda _prompt: "3"))
    captured = capsys.readouterr()
    assert "Diet Planner & Nutrition Tracker" in captured.out
