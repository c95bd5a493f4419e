"""
Checklist progress: completion percentage, color tier and phase grouping.

Pure functions over task rows; a task may be a dict (raw Supabase row) or
any object with ``completed`` / ``phase`` attributes (TaskResponse).
"""

from enum import Enum
from typing import Any, Iterable, List, NamedTuple

from wedding_planner.config.checklist_config import PHASES


class ProgressTier(str, Enum):
    GREEN = "green"
    YELLOW = "yellow"
    ORANGE = "orange"
    RED = "red"


class ClientStatus(str, Enum):
    COMPLETED = "completed"
    IN_PROGRESS = "in_progress"
    NOT_STARTED = "not_started"


class TaskProgress(NamedTuple):
    total: int
    completed: int
    percentage: int


class PhaseGroup(NamedTuple):
    phase: str
    tasks: list
    completed: int
    total: int


def _field(task: Any, name: str) -> Any:
    if isinstance(task, dict):
        return task.get(name)
    return getattr(task, name, None)


def round_half_up(numerator: int, denominator: int) -> int:
    """Nearest integer to numerator / denominator, halves rounded up. Both must be non-negative."""
    if denominator <= 0:
        return 0
    return (2 * numerator + denominator) // (2 * denominator)


def percentage(completed: int, total: int) -> int:
    return round_half_up(100 * completed, total)


def compute_progress(tasks: Iterable[Any]) -> TaskProgress:
    """round(100 * completed / total); 0 for an empty checklist"""
    total = 0
    completed = 0
    for task in tasks:
        total += 1
        if _field(task, "completed"):
            completed += 1
    return TaskProgress(total=total, completed=completed, percentage=percentage(completed, total))


def progress_tier(value: int) -> ProgressTier:
    if value >= 80:
        return ProgressTier.GREEN
    if value >= 50:
        return ProgressTier.YELLOW
    if value >= 25:
        return ProgressTier.ORANGE
    return ProgressTier.RED


def client_status(value: int) -> ClientStatus:
    if value >= 100:
        return ClientStatus.COMPLETED
    if value > 0:
        return ClientStatus.IN_PROGRESS
    return ClientStatus.NOT_STARTED


def group_tasks_by_phase(tasks: Iterable[Any]) -> List[PhaseGroup]:
    """All phases in fixed order, each with its tasks in input order. Unknown phases are left out."""
    buckets = {phase: [] for phase in PHASES}
    for task in tasks:
        phase = _field(task, "phase")
        if phase in buckets:
            buckets[phase].append(task)

    groups = []
    for phase in PHASES:
        phase_tasks = buckets[phase]
        groups.append(PhaseGroup(
            phase=phase,
            tasks=phase_tasks,
            completed=sum(1 for t in phase_tasks if _field(t, "completed")),
            total=len(phase_tasks),
        ))
    return groups
