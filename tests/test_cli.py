import json

import pytest
from conftest import build_upload, build_wcif

from scramblematch.cli import (
    COMMANDS,
    create_completer,
    execute_interactive_command,
    main,
)
from scramblematch.controllers.session import ScrambleSession


def _write(path, data):
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


@pytest.fixture
def files(tmp_path):
    wcif = _write(tmp_path / "wcif.json", build_wcif({"333": 2, "333mbf": 1}))
    scrambles = _write(
        tmp_path / "scrambles.json",
        build_upload(
            "Test Open 2025",
            [("333", 1, ["A"]), ("333", 2, ["B"]), ("333mbf", 1, ["M1", "M2"])],
        ),
    )
    return tmp_path, wcif, scrambles


def test_assign_writes_wcif(files):
    tmp_path, wcif, scrambles = files
    output = tmp_path / "out.json"

    code = main(["assign", "--wcif", str(wcif), "--scrambles", str(scrambles), "--output", str(output)])

    assert code == 0
    document = json.loads(output.read_text(encoding="utf-8"))
    events = {e["id"]: e for e in document["events"]}
    assert events["333"]["rounds"][1]["scrambleSets"][0]["scrambles"] == ["B"]
    assert events["333mbf"]["rounds"][0]["scrambleSets"][0]["scrambles"] == ["M1", "M2"]


def test_clear_overwrites_input(files):
    tmp_path, wcif, scrambles = files
    main(["assign", "--wcif", str(wcif), "--scrambles", str(scrambles)])

    assert main(["clear", "--wcif", str(wcif)]) == 0

    document = json.loads(wcif.read_text(encoding="utf-8"))
    assert all(not r["scrambleSets"] for e in document["events"] for r in e["rounds"])


def test_export_results(files):
    tmp_path, wcif, scrambles = files
    output = tmp_path / "results.json"

    code = main(
        [
            "export-results",
            "--wcif",
            str(wcif),
            "--scrambles",
            str(scrambles),
            "--output",
            str(output),
            "--program-version",
            "9.9",
        ]
    )

    assert code == 0
    document = json.loads(output.read_text(encoding="utf-8"))
    assert document["scrambleProgram"] == "Scramble Match 9.9"
    assert document["events"][0]["rounds"][0]["groups"][0]["scrambles"] == ["A"]


def test_status(files, capsys):
    _, wcif, scrambles = files
    assert main(["status", "--wcif", str(wcif)]) == 0
    out = capsys.readouterr().out
    assert "Rounds without scrambles: 3" in out

    assert main(["status", "--wcif", str(wcif), "--scrambles", str(scrambles)]) == 0
    assert "Every round has scrambles" in capsys.readouterr().out


def test_missing_file_is_reported(tmp_path, capsys):
    code = main(["clear", "--wcif", str(tmp_path / "missing.json")])
    assert code == 1
    assert "Could not load" in capsys.readouterr().out


def test_invalid_competition_is_reported(tmp_path, capsys):
    wcif = _write(tmp_path / "wcif.json", {"id": "NoEvents"})
    assert main(["clear", "--wcif", str(wcif)]) == 1
    assert "events" in capsys.readouterr().out


def test_interactive_commands(files, capsys):
    tmp_path, wcif, scrambles = files
    session = ScrambleSession()

    execute_interactive_command(session, "load", [str(wcif)])
    execute_interactive_command(session, "upload", [str(scrambles)])
    execute_interactive_command(session, "assign", [])
    execute_interactive_command(session, "save", [str(tmp_path / "saved.json")])
    execute_interactive_command(session, "results", [str(tmp_path / "results.json")])

    assert (tmp_path / "saved.json").exists()
    assert json.loads((tmp_path / "results.json").read_text(encoding="utf-8"))["persons"] == []
    assert "Every round has scrambles" in capsys.readouterr().out

    execute_interactive_command(session, "remove", ["1"])
    assert session.uploaded == []


def test_interactive_argument_errors(files):
    session = ScrambleSession()
    with pytest.raises(ValueError):
        execute_interactive_command(session, "load", [])
    with pytest.raises(ValueError):
        execute_interactive_command(session, "remove", ["3"])


def test_completer_has_both_formats():
    options = create_completer().options
    for cmd in COMMANDS:
        assert cmd in options
        assert f"/{cmd}" in options


def _rounds(path):
    document = json.loads(path.read_text(encoding="utf-8"))
    return {
        r["id"]: [s["scrambles"] for s in r["scrambleSets"]]
        for e in document["events"]
        for r in e["rounds"]
    }


@pytest.fixture
def multi_attempt_files(tmp_path):
    wcif = _write(tmp_path / "wcif.json", build_wcif({"333fm": 1, "333mbf": 1}))
    scrambles = _write(
        tmp_path / "scrambles.json",
        build_upload(
            "Test Open 2025",
            [("333fm", 1, ["F1", "F2", "F3"]), ("333mbf", 1, ["M1", "M2", "M3"])],
        ),
    )
    return tmp_path, wcif, scrambles


def test_second_assign_keeps_saved_multi_attempt_rounds(multi_attempt_files):
    _, wcif, scrambles = multi_attempt_files
    assign = ["assign", "--wcif", str(wcif), "--scrambles", str(scrambles)]

    assert main(assign) == 0
    first = _rounds(wcif)
    assert main(assign) == 0

    assert _rounds(wcif) == first
    assert first["333mbf-r1"] == [["M1", "M2", "M3"]]
    assert first["333fm-r1"] == [["F1", "F2", "F3"]]


def test_results_from_saved_wcif_keep_multi_blind_attempts(multi_attempt_files):
    tmp_path, wcif, scrambles = multi_attempt_files
    output = tmp_path / "results.json"
    main(["assign", "--wcif", str(wcif), "--scrambles", str(scrambles)])

    code = main(
        ["export-results", "--wcif", str(wcif), "--output", str(output), "--program-version", "1.0"]
    )

    assert code == 0
    events = {
        e["eventId"]: e for e in json.loads(output.read_text(encoding="utf-8"))["events"]
    }
    assert events["333mbf"]["rounds"][0]["groups"][0]["scrambles"] == ["M1", "M2", "M3"]
    assert events["333fm"]["rounds"][0]["groups"][0]["scrambles"] == ["F1", "F2", "F3"]


def test_later_run_assigns_rounds_left_empty(tmp_path):
    wcif = _write(tmp_path / "wcif.json", build_wcif({"222": 1, "333": 2}))
    first = _write(
        tmp_path / "first.json",
        build_upload("Test Open 2025", [("222", 1, ["T"]), ("333", 1, ["A"])]),
    )
    second = _write(
        tmp_path / "second.json",
        build_upload("Test Open 2025", [("333", 1, ["A2"]), ("333", 2, ["B"])]),
    )

    main(["assign", "--wcif", str(wcif), "--scrambles", str(first)])
    main(["assign", "--wcif", str(wcif), "--scrambles", str(second)])

    rounds = _rounds(wcif)
    assert rounds["222-r1"] == [["T"]]
    assert rounds["333-r1"] == [["A"]]
    assert rounds["333-r2"] == [["B"]]

    document = json.loads(wcif.read_text(encoding="utf-8"))
    ids = [s["id"] for e in document["events"] for r in e["rounds"] for s in r["scrambleSets"]]
    assert len(ids) == len(set(ids))
