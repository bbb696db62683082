"""Client-side task filtering"""
import logging
from datetime import date
from typing import Callable, List, Optional

from app.models.task import DateRange, Task, TaskFilters

logger = logging.getLogger(__name__)

ALL = "all"

TaskPredicate = Callable[[Task], bool]


def _is_active(value: Optional[str]) -> bool:
    return bool(value) and value != ALL


def _equals(field: str, expected: str) -> TaskPredicate:
    def predicate(task: Task) -> bool:
        actual = getattr(task, field)
        return actual is not None and getattr(actual, "value", actual) == expected
    return predicate


def _matches_search(query: str) -> TaskPredicate:
    needle = query.lower()

    def predicate(task: Task) -> bool:
        haystacks = (task.title, task.description, task.patient_name)
        return any(text and needle in text.lower() for text in haystacks)
    return predicate


def _within(date_range: DateRange) -> TaskPredicate:
    try:
        start = date.fromisoformat(date_range.start)
        end = date.fromisoformat(date_range.end)
    except ValueError:
        logger.warning(
            f"Ignoring malformed date range {date_range.start!r}..{date_range.end!r}; no task matches"
        )
        return lambda task: False

    return lambda task: task.due_date is not None and start <= task.due_date <= end


def build_predicates(filters: TaskFilters) -> List[TaskPredicate]:
    predicates: List[TaskPredicate] = []

    for field in ("status", "patient_id", "category", "priority", "dimension"):
        value = getattr(filters, field)
        if _is_active(value):
            predicates.append(_equals(field, value))

    if filters.search_query:
        predicates.append(_matches_search(filters.search_query))

    if filters.date_range is not None:
        predicates.append(_within(filters.date_range))

    return predicates


def filter_tasks(tasks: List[Task], filters: Optional[TaskFilters] = None) -> List[Task]:
    """
    Apply the optional filter criteria to a task list.

    All active criteria must hold (AND). Input order is preserved and no task
    is duplicated, so the result is always a subsequence of ``tasks``.

    Args:
        tasks: Tasks to refine
        filters: Criteria; None applies no filtering

    Returns:
        The matching tasks, in input order
    """
    if filters is None:
        return list(tasks)

    predicates = build_predicates(filters)
    return [task for task in tasks if all(predicate(task) for predicate in predicates)]
