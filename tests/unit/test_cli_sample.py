import csv
import io
import json

import pytest

from robotraj.cli import sample as cli


@pytest.fixture
def waypoint_file(tmp_path):
    path = tmp_path / "waypoints.json"
    path.write_text(json.dumps({"times": [0, 1, 2], "waypoints": [[0, 1, 0], [2, 2, 4]]}))
    return path


def _rows(text):
    return list(csv.reader(io.StringIO(text)))


def test_samples_file_to_csv(waypoint_file, capsys):
    code = cli.main([str(waypoint_file), "--rate", "4"])
    assert code == 0

    rows = _rows(capsys.readouterr().out)
    assert rows[0] == ["t", "p0", "p1", "v0", "v1", "a0", "a1"]
    body = rows[1:]
    assert len(body) == 9
    assert float(body[0][0]) == 0.0
    assert float(body[-1][0]) == 2.0
    assert [float(x) for x in body[-1][1:3]] == [0.0, 4.0]
    # Middle sample sits on the second knot
    assert float(body[4][1]) == pytest.approx(1.0)


def test_reads_stdin_without_header(monkeypatch, capsys):
    doc = {"times": [0, 1, 2], "waypoints": [[0, 0, 0]], "mode": "rotation"}
    monkeypatch.setattr("sys.stdin", io.StringIO(json.dumps(doc)))

    assert cli.main(["-", "--rate", "2", "--no-header"]) == 0
    rows = _rows(capsys.readouterr().out)
    assert len(rows) == 5
    assert all(len(r) == 4 for r in rows)


def test_invalid_trajectory_returns_error(tmp_path, capsys):
    path = tmp_path / "bad.json"
    path.write_text(json.dumps({"times": [0, 1], "waypoints": [[0, 1]]}))
    assert cli.main([str(path)]) == 1
    assert capsys.readouterr().out == ""


def test_missing_file_returns_error(tmp_path):
    assert cli.main([str(tmp_path / "missing.json")]) == 1


def test_mode_override(waypoint_file, capsys):
    assert cli.main([str(waypoint_file), "--mode", "quaternion", "--rate", "1", "-q"]) == 0
    rows = _rows(capsys.readouterr().out)
    assert len(rows) == 4


def test_log_level_selection():
    parser = cli.build_parser()
    assert cli._log_level(parser.parse_args(["-vv"])) == 10
    assert cli._log_level(parser.parse_args(["-q"])) == 30
    assert cli._log_level(parser.parse_args(["--log-level", "TRACE"])) == 5


@pytest.mark.parametrize(
    "document",
    [
        [0, 1, 2],
        "not an object",
        {"times": {"a": 1}, "waypoints": [[0, 1, 0]]},
        {"times": [0, 1, 2], "waypoints": [[0, "x", 0]]},
        {"waypoints": [[0, 1, 0]]},
    ],
)
def test_malformed_document_returns_error(tmp_path, capsys, document):
    path = tmp_path / "malformed.json"
    path.write_text(json.dumps(document))
    assert cli.main([str(path)]) == 1
    assert capsys.readouterr().out == ""


@pytest.mark.parametrize("rate", ["inf", "nan", "0", "-2"])
def test_bad_rate_returns_error(waypoint_file, capsys, rate):
    assert cli.main([str(waypoint_file), "--rate", rate]) == 1
    assert capsys.readouterr().out == ""
