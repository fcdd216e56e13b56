from typing import Callable, Dict, List, Optional

from railyard.core.models import Train

PREFERENCES = ("less time", "less cost", "both")


def _time_score(t: Train) -> Optional[float]:
    return float(t.arrival_time)


def _cost_score(t: Train) -> Optional[float]:
    # fewer free seats is treated as the cheaper option
    return float(t.available_seats)


def _combined_score(t: Train) -> Optional[float]:
    if t.available_seats == 0:
        return None
    return t.arrival_time / t.available_seats


_SCORERS: Dict[str, Callable[[Train], Optional[float]]] = {
    "less time": _time_score,
    "less cost": _cost_score,
    "both": _combined_score,
}


def recommend_train(trains: List[Train], preference: str) -> Optional[Train]:
    """Pick the train with the lowest score for ``preference``; first one wins ties."""
    scorer = _SCORERS.get(preference)
    if scorer is None:
        raise ValueError(f"Invalid preference {preference!r}; expected one of {', '.join(PREFERENCES)}")
    best: Optional[Train] = None
    best_score: Optional[float] = None
    for t in trains:
        score = scorer(t)
        if score is None:
            continue
        if best_score is None or score < best_score:
            best, best_score = t, score
    return best
