"""Train record files.

One train per line, nine whitespace-separated integers::

    trainID arrivalTime departureTime platform capacity availableSeats currentTrack waitingForTrack priority

``-1`` in the platform and track columns means "none" and becomes ``None`` on
the loaded :class:`Train`. Parsing a line stops at the first missing or
non-integer token; later fields keep their defaults. Ranges are not validated
here, see :func:`check_track_fields`.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Optional

from railyard.core.models import NO_TRACK, Train

logger = logging.getLogger(__name__)

FIELDS = (
    "id",
    "arrival_time",
    "departure_time",
    "platform",
    "capacity",
    "available_seats",
    "current_track",
    "waiting_for_track",
    "priority",
)
_OPTIONAL_FIELDS = {"platform", "current_track", "waiting_for_track"}


def _from_sentinel(value: int) -> Optional[int]:
    return None if value == NO_TRACK else value


def _to_sentinel(value: Optional[int]) -> int:
    return NO_TRACK if value is None else value


def parse_train_line(line: str) -> Train:
    values = {"id": 0, "arrival_time": 0, "departure_time": 0}
    for name, token in zip(FIELDS, line.split()):
        try:
            number = int(token)
        except ValueError:
            break
        values[name] = _from_sentinel(number) if name in _OPTIONAL_FIELDS else number
    return Train(**values)


def format_train_line(train: Train) -> str:
    row = []
    for name in FIELDS:
        value = getattr(train, name)
        row.append(_to_sentinel(value) if name in _OPTIONAL_FIELDS else value)
    return " ".join(str(v) for v in row)


def parse_trains(lines: Iterable[str]) -> List[Train]:
    return [parse_train_line(line) for line in lines if line.strip()]


def load_trains(path: str | Path) -> List[Train]:
    """Read a train record file; an unreadable file yields no trains."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as e:
        logger.error("Could not open the file %s: %s", path, e)
        return []
    trains = parse_trains(text.splitlines())
    logger.info("Loaded %d trains from %s", len(trains), path)
    return trains


def dump_trains(trains: List[Train], path: str | Path) -> None:
    lines = [format_train_line(t) for t in trains]
    Path(path).write_text("\n".join(lines) + ("\n" if lines else ""), encoding="utf-8")


def check_track_fields(trains: List[Train], total_tracks: int) -> List[str]:
    # Data-quality messages; never raises
    issues: List[str] = []
    for t in trains:
        for name in ("current_track", "waiting_for_track"):
            track = getattr(t, name)
            if track is not None and not (0 <= track < total_tracks):
                issues.append(f"Train {t.id}: {name} {track} outside 0..{total_tracks - 1}")
        if t.waiting_for_track is not None and t.waiting_for_track == t.current_track:
            issues.append(f"Train {t.id}: waits for track {t.current_track} it already holds")
    for msg in issues:
        logger.warning(msg)
    return issues
