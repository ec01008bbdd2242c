"""Tests for the ``bst_demo`` demonstration script."""

from __future__ import annotations

from pathlib import Path
import random

import pytest

import bst_demo
from bstree.demo_config import DemoConfig


def test_random_values_respects_range_and_count() -> None:
    values = bst_demo.random_values(10, 20, 500, random.Random(1))
    assert len(values) == 500
    assert all(10 <= value < 20 for value in values)


def test_random_values_is_reproducible_with_seeded_generator() -> None:
    first = bst_demo.random_values(0, 1000, 25, random.Random(42))
    second = bst_demo.random_values(0, 1000, 25, random.Random(42))
    assert first == second


def test_random_values_validates_arguments() -> None:
    assert bst_demo.random_values(0, 1, 0) == []
    with pytest.raises(ValueError):
        bst_demo.random_values(0, 10, -1)
    with pytest.raises(ValueError):
        bst_demo.random_values(5, 5, 3)


def test_run_demo_reports_balanced_trees() -> None:
    lines = bst_demo.run_demo(DemoConfig(seed=7))

    assert lines[0] == "Initial tree balanced? Yes"
    assert any(line.startswith("After inserting 20 values balanced?") for line in lines)
    assert "Rebalanced tree balanced? Yes" in lines
    inorder_lines = [line for line in lines if line.startswith("  inorder:")]
    assert len(inorder_lines) == 2


def test_run_demo_with_empty_samples() -> None:
    config = DemoConfig(initial_count=0, insert_count=0)
    lines = bst_demo.run_demo(config)
    assert lines[0] == "Initial tree balanced? Yes"
    assert "  inorder:     []" in lines
    assert lines[-1] == "<empty>"


def test_cli_is_deterministic_with_seed(capsys: pytest.CaptureFixture[str]) -> None:
    assert bst_demo.main(["--seed", "5"]) == 0
    first = capsys.readouterr().out
    assert bst_demo.main(["--seed", "5"]) == 0
    second = capsys.readouterr().out

    assert first == second
    assert "Rebalanced tree balanced? Yes" in first.splitlines()


def test_cli_reads_config_file(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    config_path = tmp_path / "demo.yaml"
    config_path.write_text("initial_count: 3\ninitial_min: 1\ninitial_max: 2\n", encoding="utf-8")

    assert bst_demo.main(["--config", str(config_path), "--seed", "1"]) == 0
    lines = capsys.readouterr().out.splitlines()

    assert lines[1] == "  level-order: [1]"


def test_cli_reports_invalid_config(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    config_path = tmp_path / "bad.yaml"
    config_path.write_text("insert_count: -5\n", encoding="utf-8")

    assert bst_demo.main(["--config", str(config_path)]) == 1
    assert "Failed to load demo configuration" in caplog.text


def test_cli_reports_missing_config(tmp_path: Path) -> None:
    assert bst_demo.main(["--config", str(tmp_path / "absent.yaml")]) == 1


def test_run_demo_levels_layout() -> None:
    config = DemoConfig(initial_count=3, initial_min=1, initial_max=2, insert_count=0)
    lines = bst_demo.run_demo(config, layout="levels")
    assert lines[-1] == "1"


def test_run_demo_rejects_unknown_layout() -> None:
    with pytest.raises(ValueError):
        bst_demo.run_demo(DemoConfig(), layout="diagonal")


def test_cli_levels_layout(capsys: pytest.CaptureFixture[str]) -> None:
    assert bst_demo.main(["--seed", "2", "--layout", "levels"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert not any("└──" in line for line in lines)
