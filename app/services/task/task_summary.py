"""Task summary and per-patient aggregation"""
from datetime import date
from typing import Dict, List, Optional

from app.models.task import (
    PatientOption,
    PatientTaskSummary,
    SLAStatus,
    Task,
    TaskPriority,
    TaskStats,
    TaskStatus,
    TaskSummary,
    normalize_status,
)
from app.services.task.task_urgency import is_task_overdue

# Statuses counted as "pending" on the dashboard. in-progress is deliberately absent.
OPEN_STATUSES = frozenset({
    TaskStatus.PENDING,
    TaskStatus.ACKNOWLEDGED,
    TaskStatus.SCHEDULED,
    TaskStatus.TODO,
})


def is_open(task: Task) -> bool:
    return task.status in OPEN_STATUSES


def summarize_tasks(tasks: List[Task], today: Optional[date] = None) -> TaskSummary:
    """
    Reduce a task list into dashboard counts.

    Overdue counts every task past its due date that is not completed, so
    declined or cancelled tasks still count once their due date passes.

    Args:
        tasks: Tasks to summarize
        today: Reference date for overdue checks (defaults to the current date)

    Returns:
        TaskSummary with every category and priority present, zero when absent
    """
    today = today or date.today()
    summary = TaskSummary(total=len(tasks))

    for task in tasks:
        if is_open(task):
            summary.pending += 1
        elif task.status == TaskStatus.COMPLETED:
            summary.completed += 1

        if is_task_overdue(task, today):
            summary.overdue += 1

        summary.by_category[task.category.value] += 1
        summary.by_priority[task.priority.value] += 1

    return summary


def compute_task_stats(tasks: List[Task], today: Optional[date] = None) -> TaskStats:
    """Summary plus per-status counts for the dashboard header"""
    today = today or date.today()
    stats = TaskStats(**summarize_tasks(tasks, today).model_dump())
    stats.overdue = 0

    for task in tasks:
        if task.status == TaskStatus.SCHEDULED:
            stats.scheduled += 1
        elif task.status == TaskStatus.IN_PROGRESS:
            stats.in_progress += 1
        elif task.status == TaskStatus.DECLINED:
            stats.declined += 1

        if task.sla_status == SLAStatus.OVERDUE or is_task_overdue(task, today):
            stats.overdue += 1

        stats.by_outcome[normalize_status(task.status).value] += 1

    return stats


def summarize_by_patient(tasks: List[Task], today: Optional[date] = None) -> List[PatientTaskSummary]:
    """
    Group tasks by patient and summarize each group.

    Tasks without both a patient id and name are skipped. The first task seen
    for a patient supplies the display name. Results are ordered by pending
    count, highest first; ties keep first-seen order.
    """
    today = today or date.today()
    groups: Dict[str, PatientTaskSummary] = {}

    for task in tasks:
        if not task.patient_id or not task.patient_name:
            continue

        summary = groups.get(task.patient_id)
        if summary is None:
            summary = PatientTaskSummary(patient_id=task.patient_id, patient_name=task.patient_name)
            groups[task.patient_id] = summary

        summary.total_tasks += 1
        if is_open(task):
            summary.pending_tasks += 1
        elif task.status == TaskStatus.COMPLETED:
            summary.completed_tasks += 1
        if is_task_overdue(task, today):
            summary.overdue_tasks += 1
        if task.priority == TaskPriority.HIGH:
            summary.high_priority_tasks += 1

    return sorted(groups.values(), key=lambda s: s.pending_tasks, reverse=True)


def unique_patients(rows: List[Dict[str, Optional[str]]]) -> List[PatientOption]:
    """Distinct patients from (patient_id, patient_name) rows, sorted by name"""
    seen: Dict[str, str] = {}
    for row in rows:
        patient_id = row.get("patient_id")
        patient_name = row.get("patient_name")
        if patient_id and patient_name and patient_id not in seen:
            seen[patient_id] = patient_name

    options = [PatientOption(id=pid, name=name) for pid, name in seen.items()]
    return sorted(options, key=lambda p: p.name.lower())
