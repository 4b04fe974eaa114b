import pytest
from conftest import build_upload, build_wcif

from scramblematch.controllers.competition import (
    export_available,
    round_type_id,
    to_results_json,
    to_wcif,
    unassigned_rounds,
)
from scramblematch.controllers.scrambles import auto_assign, transform_uploaded_scrambles
from scramblematch.exceptions import InvalidCompetitionFileException
from scramblematch.models.competition import Competition, ids_from_round_id, round_id


def _assigned_competition(allocator):
    competition = Competition.from_dict(build_wcif({"333": 2, "333fm": 1, "333mbf": 1}))
    pool = [
        transform_uploaded_scrambles(
            build_upload(
                "Comp",
                [
                    ("333", 1, ["A1", "A2"]),
                    ("333", 1, ["B1"]),
                    ("333", 2, ["C1"]),
                    ("333fm", 1, ["F1", "F2"]),
                    ("333mbf", 1, ["M1", "M2", "M3"]),
                ],
            ),
            allocator,
        )
    ]
    return auto_assign(competition, pool)


def test_round_ids():
    assert round_id("333fm", 2) == "333fm-r2"
    assert ids_from_round_id("333fm-r2") == ("333fm", 2)
    assert ids_from_round_id("333mbf-r1") == ("333mbf", 1)


@pytest.mark.parametrize("value", ["333", "333-r", "-r1", "333-rx"])
def test_invalid_round_ids(value):
    with pytest.raises(InvalidCompetitionFileException):
        ids_from_round_id(value)


def test_competition_file_requires_events():
    with pytest.raises(InvalidCompetitionFileException):
        Competition.from_dict({"id": "Comp"})
    with pytest.raises(InvalidCompetitionFileException):
        Competition.from_dict([])


def test_missing_scramble_sets_read_as_empty():
    wcif = build_wcif({"333": 1})
    del wcif["events"][0]["rounds"][0]["scrambleSets"]

    competition = Competition.from_dict(wcif)

    assert competition.events[0].rounds[0].scramble_sets == ()
    assert to_wcif(competition)["events"][0]["rounds"][0]["scrambleSets"] == []


def test_to_wcif_keeps_unmodelled_members():
    wcif = build_wcif({"333": 1})
    wcif["schedule"] = {"startDate": "2025-05-01", "numberOfDays": 1}
    wcif["events"][0]["qualification"] = None

    document = to_wcif(Competition.from_dict(wcif))

    assert document == wcif


def test_to_wcif_writes_interchange_scramble_sets(allocator):
    document = to_wcif(_assigned_competition(allocator))
    events = {e["id"]: e for e in document["events"]}

    r1 = events["333"]["rounds"][0]["scrambleSets"]
    assert [s["scrambles"] for s in r1] == [["A1", "A2"], ["B1"]]
    assert set(r1[0]) == {"id", "scrambles", "extraScrambles"}

    (fm,) = events["333fm"]["rounds"][0]["scrambleSets"]
    assert fm["scrambles"] == ["F1", "F2"]
    assert fm["extraScrambles"] == []

    (mbf,) = events["333mbf"]["rounds"][0]["scrambleSets"]
    assert mbf["scrambles"] == ["M1", "M2", "M3"]


def test_unassigned_rounds(allocator):
    competition = Competition.from_dict(build_wcif({"333": 2}))
    assert unassigned_rounds(competition) == [("333", 1), ("333", 2)]
    assert not export_available(competition)

    assigned = _assigned_competition(allocator)
    assert unassigned_rounds(assigned) == []
    assert export_available(assigned)


def test_results_json(allocator):
    document = to_results_json(_assigned_competition(allocator), "1.2.0")

    assert document["formatVersion"] == "WCA Results 0.3"
    assert document["competitionId"] == "TestOpen2025"
    assert document["persons"] == []
    assert document["scrambleProgram"] == "Scramble Match 1.2.0"

    events = {e["eventId"]: e for e in document["events"]}
    first, final = events["333"]["rounds"]
    assert first["roundId"] == "1"
    assert first["formatId"] == "a"
    assert first["results"] == []
    assert first["groups"] == [
        {"group": "A", "scrambles": ["A1", "A2"], "extraScrambles": []},
        {"group": "B", "scrambles": ["B1"], "extraScrambles": []},
    ]
    assert final["roundId"] == "f"
    assert events["333fm"]["rounds"][0]["groups"] == [
        {"group": "A", "scrambles": ["F1", "F2"], "extraScrambles": []}
    ]


def test_results_json_without_program_name():
    competition = Competition.from_dict(build_wcif({"333": 1}))
    document = to_results_json(competition, "2.0", program_name=None)
    assert document["scrambleProgram"] == "2.0"
    assert document["events"][0]["rounds"][0]["groups"] == []


def test_round_type_ids():
    wcif = build_wcif({"333": 4, "222": 2})
    wcif["events"][1]["rounds"][0]["cutoff"] = {"numberOfAttempts": 2, "attemptResult": 1500}
    wcif["events"][1]["rounds"][1]["cutoff"] = {"numberOfAttempts": 2, "attemptResult": 1500}
    competition = Competition.from_dict(wcif)

    three, two = competition.events
    assert [round_type_id(three, r) for r in three.rounds] == ["1", "2", "3", "f"]
    assert [round_type_id(two, r) for r in two.rounds] == ["d", "c"]
