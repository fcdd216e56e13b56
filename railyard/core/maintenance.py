from typing import List


def shortest_job_first(tasks: List[int]) -> List[int]:
    # Maintenance order: shortest task duration first, ties keep input order
    return sorted(tasks)
