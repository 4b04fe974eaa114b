"""Type hints used in Scramble Match."""

from typing import Any, Dict, Sequence, Tuple

# Event ids are plain WCA strings ("333", "333fm", "333mbf", ...)
EventId = str
# Scramble set ids handed out by the allocator
ScrambleSetId = int

# One scramble set as written into a WCIF round
WcifScrambleSet = Dict[str, Any]
# A raw TNoodle sheet as found in an uploaded scramble file
RawSheet = Dict[str, Any]
# (event_id, round_number)
RoundKey = Tuple[EventId, int]
# Uploaded groups, in upload order
UploadedPool = Sequence["UploadedScrambleFile"]

#  LocalWords:  TNoodle WCIF
