"""Task domain model"""
from datetime import date, datetime
from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, Field, computed_field


class TaskCategory(str, Enum):
    """Level of care coordination a task belongs to"""
    PROVIDER = "provider-level"
    PATIENT = "patient-level"
    SYSTEM = "system-level"
    COMMUNITY = "community-level"


class TaskStatus(str, Enum):
    """Shared status vocabulary across all task categories"""
    PENDING = "pending"
    SCHEDULED = "scheduled"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"
    DECLINED = "declined"
    CANCELLED = "cancelled"
    ACKNOWLEDGED = "acknowledged"
    UNREACHABLE = "unreachable"
    IN_CONTACT = "in-contact"
    ENROLLED = "enrolled"
    WITHDRAWN = "withdrawn"
    TODO = "todo"
    NO_SHOW = "no-show"


class TaskPriority(str, Enum):
    """Task priority (badge coloring and sort only)"""
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class TaskUrgency(str, Enum):
    OVERDUE = "overdue"
    DUE_SOON = "due-soon"
    NORMAL = "normal"


class SLAStatus(str, Enum):
    """Timeliness badge shown next to a task"""
    ON_TIME = "on-time"
    AT_RISK = "at-risk"
    OVERDUE = "overdue"
    COMPLETED = "completed"


class StatusOutcome(str, Enum):
    """Normalized projection of a task status"""
    OPEN = "open"
    COMPLETED = "completed"
    DECLINED = "declined"


# Statuses presentable for each category
CATEGORY_STATUSES: Dict[TaskCategory, List[TaskStatus]] = {
    TaskCategory.PROVIDER: [
        TaskStatus.PENDING,
        TaskStatus.SCHEDULED,
        TaskStatus.COMPLETED,
        TaskStatus.DECLINED,
        TaskStatus.NO_SHOW,
        TaskStatus.CANCELLED,
    ],
    TaskCategory.PATIENT: [
        TaskStatus.ACKNOWLEDGED,
        TaskStatus.DECLINED,
        TaskStatus.PENDING,
    ],
    TaskCategory.SYSTEM: [
        TaskStatus.COMPLETED,
        TaskStatus.UNREACHABLE,
        TaskStatus.DECLINED,
        TaskStatus.PENDING,
        TaskStatus.IN_CONTACT,
    ],
    TaskCategory.COMMUNITY: [
        TaskStatus.ENROLLED,
        TaskStatus.IN_PROGRESS,
        TaskStatus.COMPLETED,
        TaskStatus.WITHDRAWN,
        TaskStatus.DECLINED,
        TaskStatus.PENDING,
    ],
}

_DECLINED_STATUSES = {
    TaskStatus.DECLINED,
    TaskStatus.CANCELLED,
    TaskStatus.WITHDRAWN,
    TaskStatus.UNREACHABLE,
    TaskStatus.NO_SHOW,
}


def statuses_for_category(category: TaskCategory) -> List[TaskStatus]:
    """Statuses a task of the given category can be set to"""
    return list(CATEGORY_STATUSES.get(category, [TaskStatus.PENDING]))


def is_status_allowed(category: TaskCategory, status: TaskStatus) -> bool:
    return status in CATEGORY_STATUSES.get(category, [])


def normalize_status(status: TaskStatus) -> StatusOutcome:
    """Collapse a category-specific status into open / completed / declined"""
    if status == TaskStatus.COMPLETED:
        return StatusOutcome.COMPLETED
    if status in _DECLINED_STATUSES:
        return StatusOutcome.DECLINED
    return StatusOutcome.OPEN


class TaskBase(BaseModel):
    """Base task fields for creation"""
    category: TaskCategory
    status: TaskStatus = TaskStatus.PENDING
    title: str
    description: str = ""
    priority: TaskPriority = TaskPriority.MEDIUM
    due_date: Optional[date] = None
    assignee: Optional[str] = None
    dimension: Optional[str] = None
    estimated_time: Optional[str] = None
    blockers: List[str] = Field(default_factory=list)

    patient_id: Optional[str] = None
    patient_name: Optional[str] = None

    provider_name: Optional[str] = None
    provider_specialty: Optional[str] = None
    provider_organization: Optional[str] = None

    community_resource_name: Optional[str] = None
    community_location: Optional[str] = None

    system_name: Optional[str] = None
    system_location: Optional[str] = None


class TaskCreate(TaskBase):
    """Task creation model"""
    pass


class TaskUpdate(BaseModel):
    """Task update model - all fields optional"""
    category: Optional[TaskCategory] = None
    status: Optional[TaskStatus] = None
    title: Optional[str] = None
    description: Optional[str] = None
    priority: Optional[TaskPriority] = None
    due_date: Optional[date] = None
    assignee: Optional[str] = None
    dimension: Optional[str] = None
    estimated_time: Optional[str] = None
    blockers: Optional[List[str]] = None
    patient_id: Optional[str] = None
    patient_name: Optional[str] = None
    updated_at: Optional[datetime] = None


class TaskStatusUpdate(BaseModel):
    status: TaskStatus


class Task(TaskBase):
    """Complete task model from database"""
    id: str
    sla_status: Optional[SLAStatus] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True

    @computed_field
    @property
    def entity_name(self) -> str:
        """Display name of who or what the task is about, by category"""
        names = {
            TaskCategory.PROVIDER: self.provider_name,
            TaskCategory.PATIENT: self.patient_name,
            TaskCategory.COMMUNITY: self.community_resource_name,
            TaskCategory.SYSTEM: self.system_name,
        }
        return names.get(self.category) or "Unknown"

    @computed_field
    @property
    def entity_details(self) -> Optional[str]:
        if self.category == TaskCategory.PROVIDER:
            parts = [p for p in (self.provider_specialty, self.provider_organization) if p]
            return " - ".join(parts) or None
        if self.category == TaskCategory.COMMUNITY:
            return self.community_location
        if self.category == TaskCategory.SYSTEM:
            return self.system_location
        return None


class DateRange(BaseModel):
    """Inclusive ISO date window ("YYYY-MM-DD" on both ends)"""
    start: str
    end: str


class TaskFilters(BaseModel):
    """
    Optional, conjunctive task predicates.

    None or "all" disables a predicate; an empty search query matches everything.
    """
    status: Optional[str] = None
    patient_id: Optional[str] = None
    category: Optional[str] = None
    priority: Optional[str] = None
    dimension: Optional[str] = None
    search_query: str = ""
    date_range: Optional[DateRange] = None


def _zero_counts(enum_cls) -> Dict[str, int]:
    return {member.value: 0 for member in enum_cls}


class TaskSummary(BaseModel):
    """Counts derived from a task list (never persisted)"""
    total: int = 0
    pending: int = 0
    completed: int = 0
    overdue: int = 0
    by_category: Dict[str, int] = Field(default_factory=lambda: _zero_counts(TaskCategory))
    by_priority: Dict[str, int] = Field(default_factory=lambda: _zero_counts(TaskPriority))


class TaskStats(TaskSummary):
    """Dashboard header statistics"""
    scheduled: int = 0
    in_progress: int = 0
    declined: int = 0
    by_outcome: Dict[str, int] = Field(default_factory=lambda: _zero_counts(StatusOutcome))


class PatientTaskSummary(BaseModel):
    patient_id: str
    patient_name: str
    total_tasks: int = 0
    pending_tasks: int = 0
    completed_tasks: int = 0
    overdue_tasks: int = 0
    high_priority_tasks: int = 0


class PatientOption(BaseModel):
    """Patient entry for the task filter picker"""
    id: str
    name: str
