"""
Unit tests for the client-side task filter engine.
"""
from datetime import date

from app.models.task import DateRange, TaskFilters
from app.services.task.task_filter import filter_tasks

from .fakes import make_task


def _tasks():
    return [
        make_task(id="a", status="pending", patient_id="p1", patient_name="Sarah Johnson",
                  priority="high", due_date=date(2025, 1, 10), dimension="mental"),
        make_task(id="b", status="completed", category="provider-level", patient_id="p2",
                  patient_name="Mark Johnson", due_date=date(2025, 1, 12),
                  title="Psychiatric referral", description="Refer to Dr. Smith"),
        make_task(id="c", status="pending", category="system-level", priority="low",
                  due_date=date(2025, 1, 20), title="Insurance authorization"),
        make_task(id="d", status="scheduled", patient_id="p1", patient_name="Sarah Johnson",
                  due_date=None, dimension="sleep"),
    ]


def _ids(tasks):
    return [t.id for t in tasks]


def test_no_filters_returns_everything():
    tasks = _tasks()
    assert filter_tasks(tasks) == tasks
    assert filter_tasks(tasks, TaskFilters()) == tasks


def test_all_values_are_identity_with_full_range():
    tasks = [t for t in _tasks() if t.due_date is not None]
    filters = TaskFilters(
        status="all",
        patient_id="all",
        category="all",
        priority="all",
        dimension="all",
        search_query="",
        date_range=DateRange(start="0001-01-01", end="9999-12-31"),
    )
    assert filter_tasks(tasks, filters) == tasks


def test_result_is_ordered_subset():
    tasks = _tasks()
    result = filter_tasks(tasks, TaskFilters(status="pending"))
    assert _ids(result) == ["a", "c"]
    assert all(t in tasks for t in result)


def test_criteria_are_conjunctive():
    filters = TaskFilters(status="pending", patient_id="p1", priority="high")
    assert _ids(filter_tasks(_tasks(), filters)) == ["a"]


def test_category_and_dimension():
    assert _ids(filter_tasks(_tasks(), TaskFilters(category="provider-level"))) == ["b"]
    assert _ids(filter_tasks(_tasks(), TaskFilters(dimension="sleep"))) == ["d"]


def test_search_matches_patient_name_case_insensitively():
    assert _ids(filter_tasks(_tasks(), TaskFilters(search_query="sarah"))) == ["a", "d"]


def test_search_does_not_match_other_patient():
    result = filter_tasks(_tasks(), TaskFilters(search_query="SARAH"))
    assert "b" not in _ids(result)


def test_search_covers_title_and_description():
    assert _ids(filter_tasks(_tasks(), TaskFilters(search_query="insurance"))) == ["c"]
    assert _ids(filter_tasks(_tasks(), TaskFilters(search_query="dr. smith"))) == ["b"]


def test_date_range_is_inclusive_and_drops_undated_tasks():
    filters = TaskFilters(date_range=DateRange(start="2025-01-10", end="2025-01-12"))
    assert _ids(filter_tasks(_tasks(), filters)) == ["a", "b"]


def test_malformed_date_range_matches_nothing():
    filters = TaskFilters(date_range=DateRange(start="last tuesday", end="2025-01-31"))
    assert filter_tasks(_tasks(), filters) == []


def test_unknown_status_matches_nothing():
    assert filter_tasks(_tasks(), TaskFilters(status="archived")) == []
