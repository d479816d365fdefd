"""
Tests for the interactive entry point.
"""
import pytest
from jobs import InvalidJobError
from report import read_node_report
from run_simulation import main, prompt_workload


def scripted(*lines):
    """input() replacement that returns the given lines in order."""
    remaining = list(lines)

    def input_fn(prompt=""):
        return remaining.pop(0)
    return input_fn


def test_prompt_workload_reads_jobs_and_choices():
    jobs, ordering, placement = prompt_workload(scripted("2", "0 4 8 5", "1 2 2 2", "3", "2"))
    assert [(j.jid, j.arrival, j.cores, j.memory, j.duration) for j in jobs] == [
        (1, 0, 4, 8, 5),
        (2, 1, 2, 2, 2),
    ]
    assert (ordering, placement) == ("3", "2")


def test_prompt_workload_accepts_tokens_on_one_line():
    jobs, ordering, placement = prompt_workload(scripted("1 0 4 8 5 2 3"))
    assert len(jobs) == 1
    assert (ordering, placement) == ("2", "3")


@pytest.mark.parametrize("lines", [
    ("x",),
    ("-1",),
    ("1", "0 four 8 5"),
    ("1", "0 -4 8 5"),
])
def test_prompt_workload_rejects_malformed_input(lines):
    with pytest.raises(InvalidJobError):
        prompt_workload(scripted(*lines))


def test_main_writes_report(tmp_path, capsys):
    output = tmp_path / "nodes.csv"
    status = main(["--nodes", "2", "--output", str(output)],
                  input_fn=scripted("1", "0 4 8 5", "1", "1"))

    assert status == 0
    out = capsys.readouterr().out
    assert "Job ID 1 assigned to Node ID 1 at time 0" in out
    assert read_node_report(output) == [(1, 20, 56, 5), (2, 24, 64, 0)]


def test_main_falls_back_on_unknown_policies(tmp_path, capsys):
    output = tmp_path / "nodes.csv"
    status = main(["--nodes", "2", "--output", str(output)],
                  input_fn=scripted("1", "0 4 8 5", "7", "zz"))

    assert status == 0
    out = capsys.readouterr().out
    assert "using FCFS" in out
    assert "using First Fit" in out
    assert "Job ID 1 assigned to Node ID 1 at time 0" in out


def test_main_reports_unsatisfiable_job(tmp_path, capsys):
    output = tmp_path / "nodes.csv"
    status = main(["--nodes", "2", "--output", str(output)],
                  input_fn=scripted("1", "0 30 8 5", "1", "1"))

    assert status == 1
    assert "Simulation aborted" in capsys.readouterr().err
    assert not output.exists()


def test_main_reports_invalid_input(tmp_path, capsys):
    status = main(["--output", str(tmp_path / "nodes.csv")],
                  input_fn=scripted("1", "0 4 8 0"))
    assert status == 1
    assert "Invalid input" in capsys.readouterr().err


def test_main_synthetic_workload(tmp_path):
    output = tmp_path / "nodes.csv"
    status = main(["--synthetic", "30", "--seed", "5", "--nodes", "4",
                   "--ordering", "sjf", "--placement", "best-fit", "--output", str(output)])
    assert status == 0
    assert [row[0] for row in read_node_report(output)] == [1, 2, 3, 4]


def test_main_reports_truncated_input(tmp_path, capsys):
    lines = ["1"]

    def input_fn(prompt=""):
        if not lines:
            raise EOFError
        return lines.pop(0)

    status = main(["--output", str(tmp_path / "nodes.csv")], input_fn=input_fn)

    assert status == 1
    assert "unexpected end of input" in capsys.readouterr().err
