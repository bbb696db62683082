"""Care task services"""
from .task_filter import filter_tasks
from .task_service import TaskService
from .task_summary import compute_task_stats, summarize_by_patient, summarize_tasks, unique_patients
from .task_urgency import classify_urgency, compute_sla_status, is_task_overdue, with_sla_status

__all__ = [
    "TaskService",
    "filter_tasks",
    "summarize_tasks",
    "compute_task_stats",
    "summarize_by_patient",
    "unique_patients",
    "classify_urgency",
    "compute_sla_status",
    "is_task_overdue",
    "with_sla_status",
]
