import pytest

from scramblematch.models.scrambles import ScrambleSetIdAllocator


def build_wcif(rounds_by_event, name="Test Open 2025"):
    """Minimal WCIF document: {event_id: number_of_rounds}."""
    return {
        "formatVersion": "1.0",
        "id": name.replace(" ", ""),
        "name": name,
        "persons": [],
        "events": [
            {
                "id": event_id,
                "rounds": [
                    {
                        "id": f"{event_id}-r{number}",
                        "format": "a",
                        "cutoff": None,
                        "scrambleSetCount": 1,
                        "results": [],
                        "scrambleSets": [],
                    }
                    for number in range(1, count + 1)
                ],
            }
            for event_id, count in rounds_by_event.items()
        ],
    }


def build_upload(competition_name, sheets):
    """Uploaded scramble file from (event, round, scrambles) tuples."""
    return {
        "competitionName": competition_name,
        "sheets": [
            {
                "event": event,
                "round": number,
                "title": f"{event} Round {number}",
                "scrambles": list(scrambles),
                "extraScrambles": [],
            }
            for event, number, scrambles in sheets
        ],
    }


@pytest.fixture
def allocator():
    return ScrambleSetIdAllocator()
