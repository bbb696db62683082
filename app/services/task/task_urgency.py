"""Urgency and SLA classification for tasks"""
from datetime import date, timedelta
from typing import Optional

from app.config import TASK_DUE_SOON_DAYS
from app.models.task import SLAStatus, Task, TaskStatus, TaskUrgency

# Days ahead of today that still count as "due soon"
DUE_SOON_DAYS = TASK_DUE_SOON_DAYS

_URGENCY_EXEMPT_STATUSES = {TaskStatus.COMPLETED, TaskStatus.CANCELLED}


def is_task_overdue(task: Task, today: Optional[date] = None) -> bool:
    """A task is overdue once its due date has passed, unless it is completed"""
    if task.due_date is None or task.status == TaskStatus.COMPLETED:
        return False
    return task.due_date < (today or date.today())


def classify_urgency(
    task: Task,
    today: Optional[date] = None,
    due_soon_days: int = DUE_SOON_DAYS,
) -> TaskUrgency:
    """
    Classify a task as overdue, due-soon or normal.

    Completed and cancelled tasks are always normal, as are tasks with no
    due date.
    """
    if task.status in _URGENCY_EXEMPT_STATUSES or task.due_date is None:
        return TaskUrgency.NORMAL

    today = today or date.today()
    if task.due_date < today:
        return TaskUrgency.OVERDUE
    if task.due_date <= today + timedelta(days=due_soon_days):
        return TaskUrgency.DUE_SOON
    return TaskUrgency.NORMAL


def compute_sla_status(task: Task, today: Optional[date] = None) -> SLAStatus:
    if task.status == TaskStatus.COMPLETED:
        return SLAStatus.COMPLETED

    urgency = classify_urgency(task, today)
    if urgency == TaskUrgency.OVERDUE:
        return SLAStatus.OVERDUE
    if urgency == TaskUrgency.DUE_SOON:
        return SLAStatus.AT_RISK
    return SLAStatus.ON_TIME


def with_sla_status(task: Task, today: Optional[date] = None) -> Task:
    """Return a copy of the task carrying its computed SLA badge"""
    return task.model_copy(update={"sla_status": compute_sla_status(task, today)})
