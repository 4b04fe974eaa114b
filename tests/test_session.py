import pytest
from conftest import build_upload, build_wcif

from scramblematch.controllers.session import ScrambleSession
from scramblematch.exceptions import (
    DuplicateScrambleSetIdException,
    NoCompetitionLoadedException,
)
from scramblematch.models.config import MatcherConfig
from scramblematch.models.scrambles import ScrambleSetIdAllocator


def test_operations_need_a_competition():
    session = ScrambleSession()
    assert not session.has_competition
    with pytest.raises(NoCompetitionLoadedException):
        session.auto_assign()


def test_assign_export_and_clear():
    session = ScrambleSession()
    session.load_competition(build_wcif({"333": 1, "333fm": 1}))
    session.upload(build_upload("Comp", [("333", 1, ["A"]), ("333fm", 1, ["X", "Y"])]))

    before = session.competition
    after = session.auto_assign()

    assert after is session.competition
    assert before.events[0].rounds[0].scramble_sets == ()
    wcif = session.export_wcif()
    assert wcif["events"][1]["rounds"][0]["scrambleSets"][0]["scrambles"] == ["X", "Y"]

    session.clear()
    assert session.summary()["unassigned_rounds"] == [("333", 1), ("333fm", 1)]


def test_summary_counts_unused_sets():
    session = ScrambleSession()
    session.load_competition(build_wcif({"333": 1}))
    session.upload(build_upload("One", [("333", 1, ["A"]), ("333", 2, ["B"])]))
    session.upload(build_upload("Two", [("333", 1, ["C"])]))
    session.auto_assign()

    summary = session.summary()

    assert summary["competition"] == "Test Open 2025"
    assert summary["events"] == 1
    assert summary["rounds"] == 1
    assert summary["uploaded_files"] == ["One", "Two"]
    assert summary["unused_scramble_sets"] == {"333": 2}
    assert summary["unassigned_rounds"] == []


def test_remove_upload_makes_later_group_available():
    session = ScrambleSession()
    session.load_competition(build_wcif({"333": 1}))
    session.upload(build_upload("First", [("333", 1, ["A"])]))
    session.upload(build_upload("Second", [("333", 1, ["B"])]))

    session.auto_assign()
    assert session.competition.events[0].rounds[0].scramble_sets[0].sheet_name == "First"

    removed = session.remove_upload(0)
    session.clear()
    session.auto_assign()

    assert removed.competition_name == "First"
    assert session.competition.events[0].rounds[0].scramble_sets[0].sheet_name == "Second"


def test_duplicate_ids_are_detected():
    allocator = ScrambleSetIdAllocator()
    session = ScrambleSession(allocator=allocator)
    session.upload(build_upload("One", [("333", 1, ["A"])]))

    # A second allocator sharing the session would issue id 1 again
    session.allocator = ScrambleSetIdAllocator()
    with pytest.raises(DuplicateScrambleSetIdException):
        session.upload(build_upload("Two", [("333", 1, ["B"])]))
    assert len(session.uploaded) == 1


def test_results_use_config():
    session = ScrambleSession(MatcherConfig(scramble_program="Matcher"))
    session.load_competition(build_wcif({"333": 1}))

    document = session.export_results("3.1")

    assert document["scrambleProgram"] == "Matcher 3.1"
    assert session.results_file_name() == "Results for Test Open 2025.json"


def test_loaded_ids_are_not_issued_again():
    wcif = build_wcif({"333": 2})
    wcif["events"][0]["rounds"][0]["scrambleSets"] = [
        {"id": 7, "scrambles": ["A"], "extraScrambles": []}
    ]
    session = ScrambleSession()
    session.load_competition(wcif)

    uploaded = session.upload(build_upload("Comp", [("333", 2, ["B"])]))
    session.auto_assign()

    assert [s.id for s in uploaded.sheets] == [8]
    assert session.competition.events[0].rounds[1].scramble_sets[0].scrambles == ("B",)
