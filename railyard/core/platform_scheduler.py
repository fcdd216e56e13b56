import logging
from typing import List

from .models import Train

logger = logging.getLogger(__name__)

# Greedy platform scheduler:
# - Iterate trains in the order given (callers sort first if they want priority/arrival order)
# - For each train, take the lowest-index platform already free at its arrival time
# - Trains with no free platform are reported back; no backtracking or requeueing


def schedule_trains(trains: List[Train], platform_count: int) -> List[int]:
    """Assign platforms in place and return the ids of trains that got none."""
    availability = [0] * max(platform_count, 0)
    unscheduled = assign_platforms(trains, availability)
    logger.info("Train scheduling completed: %d scheduled, %d unscheduled",
                len(trains) - len(unscheduled), len(unscheduled))
    return unscheduled


def assign_platforms(trains: List[Train], availability: List[int]) -> List[int]:
    # availability[p] = earliest time platform p is free; mutated as trains are placed
    unscheduled: List[int] = []
    for train in trains:
        p = _first_free_platform(availability, train.arrival_time)
        if p is None:
            logger.warning("Train %s could not be scheduled on any platform.", train.id)
            unscheduled.append(train.id)
            continue
        train.platform = p
        # departure is not validated against arrival; the platform frees at departure regardless
        availability[p] = train.departure_time
    return unscheduled


def _first_free_platform(availability: List[int], arrival: int):
    for p, free_at in enumerate(availability):
        if free_at <= arrival:
            return p
    return None
