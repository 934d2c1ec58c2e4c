"""Tests for the command line runner."""
from __future__ import annotations

from main import main


def test_runner_prints_level_and_ranked_slots(data_dir, capsys) -> None:
    assert main(["u1", "--team", "t1", "--data", data_dir]) == 0

    out = capsys.readouterr().out
    assert "Candidate u1: Lv.3 Intermediate (47.5 pts)" in out
    assert "38% to next level, 12 pts needed" in out
    assert out.index("s4 ") < out.index("s1 ")


def test_runner_ranks_applicants_for_slot(data_dir, capsys) -> None:
    assert main(["--slot", "s1", "--data", data_dir]) == 0

    lines = capsys.readouterr().out.splitlines()
    assert lines[1:] == ["u1 70", "u2 70", "u3 20"]
