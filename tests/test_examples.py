"""Tests for the command-line examples."""

import importlib.util
import sys
from pathlib import Path

import pytest

EXAMPLES_DIR = Path(__file__).resolve().parents[1] / "examples"


def load_example(name):
    spec = importlib.util.spec_from_file_location(f"example_{name}", EXAMPLES_DIR / f"{name}.py")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_ask_choice_retries_on_non_numeric_input(monkeypatch, capsys):
    """Test that digit-like characters that int() rejects are re-prompted."""
    play_quiz = load_example("play_quiz")
    answers = iter(["²", "abc", "2"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))

    assert play_quiz.ask_choice(3) == 1
    assert capsys.readouterr().out.count("Please enter a panel number.") == 2


def test_ask_choice_quit(monkeypatch):
    """Test that q ends the quiz."""
    play_quiz = load_example("play_quiz")
    monkeypatch.setattr("builtins.input", lambda prompt="": "q")

    with pytest.raises(KeyboardInterrupt):
        play_quiz.ask_choice(3)


def test_visualize_task_rejects_too_few_options(monkeypatch, tmp_path):
    """Test that an invalid option count exits with status 1."""
    matplotlib = pytest.importorskip("matplotlib")
    matplotlib.use("Agg")
    visualize_task = load_example("visualize_task")
    output = tmp_path / "task.png"
    monkeypatch.setattr(
        sys, "argv", ["visualize_task.py", "--options", "1", "--no-display", "--output", str(output)]
    )

    with pytest.raises(SystemExit) as excinfo:
        visualize_task.main()

    assert excinfo.value.code == 1
    assert not output.exists()


def test_visualize_task_saves_plot(monkeypatch, tmp_path):
    """Test saving a task plot."""
    matplotlib = pytest.importorskip("matplotlib")
    matplotlib.use("Agg")
    visualize_task = load_example("visualize_task")
    output = tmp_path / "task.png"
    monkeypatch.setattr(
        sys, "argv", ["visualize_task.py", "--seed", "1", "--no-display", "--reveal", "--output", str(output)]
    )

    visualize_task.main()

    assert output.exists()
