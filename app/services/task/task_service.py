"""
Care Task Service

Handles the dashboard's task reads and writes:
- Fetching task lists from Supabase for a date window
- Client-side refinement with the task filter engine
- Summaries, stats and per-patient rollups
- Status updates and basic CRUD

Store failures never propagate: they are logged and degrade to an empty
result, None or False. Nothing is retried.
"""

import logging
from datetime import date
from typing import List, Optional

from supabase import Client

from app.infra.supabase.repositories.tasks import TaskRepository
from app.models.task import (
    DateRange,
    PatientOption,
    PatientTaskSummary,
    Task,
    TaskCreate,
    TaskFilters,
    TaskStats,
    TaskStatus,
    TaskSummary,
    TaskUpdate,
)
from app.services.task.task_filter import filter_tasks
from app.services.task.task_summary import (
    compute_task_stats,
    summarize_by_patient,
    summarize_tasks,
    unique_patients,
)
from app.services.task.task_urgency import with_sla_status
from app.utils.date_range import default_date_range

logger = logging.getLogger(__name__)


class TaskService:
    """Service for dashboard task queries and updates"""

    def __init__(self, supabase_client: Client):
        self.supabase = supabase_client
        self.task_repo = TaskRepository(supabase_client)

    def _decorate(self, tasks: List[Task], today: Optional[date] = None) -> List[Task]:
        return [with_sla_status(task, today) for task in tasks]

    async def list_tasks(
        self,
        filters: Optional[TaskFilters] = None,
        today: Optional[date] = None,
        decorate: bool = True,
    ) -> List[Task]:
        """
        List tasks matching the given filters.

        The store narrows by date window and equality predicates; the filter
        engine then applies the full criteria (including patient name search).

        Args:
            filters: Filter criteria; the date window defaults to the last 7 days
            today: Reference date for SLA badges
            decorate: Replace each stored sla_status with the computed badge

        Returns:
            Matching tasks ordered by due date, or [] if the store is unavailable
        """
        filters = filters or TaskFilters()
        if filters.date_range is None:
            filters = filters.model_copy(update={"date_range": default_date_range(today)})

        try:
            tasks = await self.task_repo.find_in_range(
                filters.date_range,
                filters=filters.model_dump(include={"status", "patient_id", "category", "priority"}),
                search_query=filters.search_query,
            )
        except Exception as e:
            logger.error(f"Error fetching tasks: {e}")
            return []

        tasks = filter_tasks(tasks, filters)
        return self._decorate(tasks, today) if decorate else tasks

    async def list_pending_tasks(self, date_range: Optional[DateRange] = None, today: Optional[date] = None) -> List[Task]:
        date_range = date_range or default_date_range(today)
        try:
            tasks = await self.task_repo.find_pending(date_range)
        except Exception as e:
            logger.error(f"Error fetching pending tasks: {e}")
            return []
        return self._decorate(tasks, today)

    async def list_tasks_by_status(
        self,
        status: TaskStatus,
        date_range: Optional[DateRange] = None,
        today: Optional[date] = None,
    ) -> List[Task]:
        date_range = date_range or default_date_range(today)
        try:
            tasks = await self.task_repo.find_by_status(status, date_range)
        except Exception as e:
            logger.error(f"Error fetching tasks by status '{status.value}': {e}")
            return []
        return self._decorate(tasks, today)

    async def get_summary(self, filters: Optional[TaskFilters] = None, today: Optional[date] = None) -> TaskSummary:
        tasks = await self.list_tasks(filters, today)
        return summarize_tasks(tasks, today)

    async def get_stats(self, date_range: Optional[DateRange] = None, today: Optional[date] = None) -> TaskStats:
        """Header statistics for every task due in the window

        Rows keep their stored sla_status so a stored overdue badge still counts.
        """
        tasks = await self.list_tasks(TaskFilters(date_range=date_range), today, decorate=False)
        return compute_task_stats(tasks, today)

    async def get_patient_summaries(
        self,
        filters: Optional[TaskFilters] = None,
        today: Optional[date] = None,
    ) -> List[PatientTaskSummary]:
        tasks = await self.list_tasks(filters, today)
        return summarize_by_patient(tasks, today)

    async def get_unique_patients(self) -> List[PatientOption]:
        try:
            rows = await self.task_repo.find_patient_rows()
        except Exception as e:
            logger.error(f"Error fetching patients: {e}")
            return []
        return unique_patients(rows)

    async def get_task(self, task_id: str) -> Optional[Task]:
        try:
            task = await self.task_repo.find_by_id(task_id)
        except Exception as e:
            logger.error(f"Error fetching task {task_id}: {e}")
            return None
        return with_sla_status(task) if task else None

    async def update_task_status(self, task_id: str, status: TaskStatus) -> bool:
        """
        Set a task's status.

        Any status may be set from any other; transitions are not validated.

        Returns:
            True if the task was found and updated
        """
        try:
            task = await self.task_repo.update_status(task_id, status)
        except Exception as e:
            logger.error(f"Error updating task status for {task_id}: {e}")
            return False

        if task is None:
            logger.warning(f"Task {task_id} not found for status update")
            return False

        logger.info(f"Task {task_id} status set to '{status.value}'")
        return True

    async def create_task(self, data: TaskCreate) -> Optional[Task]:
        try:
            task = await self.task_repo.create(data)
        except Exception as e:
            logger.error(f"Error creating task: {e}")
            return None

        logger.info(f"Created {task.category.value} task {task.id}")
        return with_sla_status(task)

    async def update_task(self, task_id: str, data: TaskUpdate) -> Optional[Task]:
        try:
            task = await self.task_repo.update(task_id, data)
        except Exception as e:
            logger.error(f"Error updating task {task_id}: {e}")
            return None
        return with_sla_status(task) if task else None

    async def delete_task(self, task_id: str) -> bool:
        try:
            deleted = await self.task_repo.delete(task_id)
        except Exception as e:
            logger.error(f"Error deleting task {task_id}: {e}")
            return False

        if deleted:
            logger.info(f"Deleted task {task_id}")
        return deleted
