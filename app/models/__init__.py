"""Domain models for the application"""
from .task import (
    CATEGORY_STATUSES,
    DateRange,
    PatientOption,
    PatientTaskSummary,
    SLAStatus,
    StatusOutcome,
    Task,
    TaskCategory,
    TaskCreate,
    TaskFilters,
    TaskPriority,
    TaskStats,
    TaskStatus,
    TaskStatusUpdate,
    TaskSummary,
    TaskUpdate,
    TaskUrgency,
    is_status_allowed,
    normalize_status,
    statuses_for_category,
)

__all__ = [
    'Task', 'TaskCreate', 'TaskUpdate', 'TaskStatusUpdate',
    'TaskCategory', 'TaskStatus', 'TaskPriority', 'TaskUrgency',
    'SLAStatus', 'StatusOutcome', 'CATEGORY_STATUSES',
    'DateRange', 'TaskFilters',
    'TaskSummary', 'TaskStats', 'PatientTaskSummary', 'PatientOption',
    'statuses_for_category', 'is_status_allowed', 'normalize_status',
]
