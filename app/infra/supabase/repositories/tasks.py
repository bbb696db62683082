"""Task repository"""
from datetime import datetime, timezone
from typing import List, Optional, Dict, Any

from supabase import Client  # type: ignore

from app.models.task import DateRange, Task, TaskCreate, TaskStatus, TaskUpdate

from .base import BaseRepository

# Filter keys pushed down to the store as equality predicates
_EQ_FILTER_COLUMNS = ("status", "patient_id", "category", "priority")

# Characters that break the or() filter grammar; such searches are left to the client-side filter
_POSTGREST_RESERVED = frozenset(",()\"\\:")


class TaskRepository(BaseRepository[Task, TaskCreate, TaskUpdate]):
    """Repository for care task operations"""

    def __init__(self, client: Client):
        super().__init__(client, "tasks", Task)

    def _in_range(self, query, date_range: DateRange):
        return query.gte("due_date", date_range.start).lte("due_date", date_range.end)

    async def find_in_range(
        self,
        date_range: DateRange,
        filters: Optional[Dict[str, Any]] = None,
        search_query: str = "",
    ) -> List[Task]:
        """Find tasks due within a date range

        Args:
            date_range: Inclusive due date window
            filters: Equality predicates keyed by column; None or "all" values are skipped
            search_query: Case-insensitive match against title, description or patient name.
                Skipped when it contains characters the or() grammar reserves

        Returns:
            Tasks ordered by due date (earliest first)
        """
        query = self._in_range(self._table().select("*"), date_range)

        for column in _EQ_FILTER_COLUMNS:
            value = (filters or {}).get(column)
            if value and value != "all":
                query = query.eq(column, value)

        if search_query and not _POSTGREST_RESERVED.intersection(search_query):
            query = query.or_(
                f"title.ilike.%{search_query}%,description.ilike.%{search_query}%,"
                f"patient_name.ilike.%{search_query}%"
            )

        response = query.order("due_date", desc=False).execute()
        return self._to_models(response.data)

    async def find_pending(self, date_range: DateRange) -> List[Task]:
        """Find pending tasks in a window, earliest due first then by priority"""
        query = (
            self._table()
            .select("*")
            .eq("status", TaskStatus.PENDING.value)
        )
        response = (
            self._in_range(query, date_range)
            .order("due_date", desc=False)
            .order("priority", desc=True)
            .execute()
        )
        return self._to_models(response.data)

    async def find_by_status(self, status: TaskStatus, date_range: DateRange) -> List[Task]:
        query = self._table().select("*").eq("status", status.value)
        response = self._in_range(query, date_range).order("due_date", desc=False).execute()
        return self._to_models(response.data)

    async def find_patient_rows(self) -> List[Dict[str, Any]]:
        """Fetch (patient_id, patient_name) pairs for tasks linked to a patient"""
        response = (
            self._table()
            .select("patient_id, patient_name")
            .not_.is_("patient_id", "null")
            .not_.is_("patient_name", "null")
            .execute()
        )
        return response.data or []

    async def update_status(self, task_id: str, status: TaskStatus) -> Optional[Task]:
        """Set a task's status; any target status is accepted"""
        update_data = TaskUpdate(status=status, updated_at=datetime.now(timezone.utc))
        return await self.update(task_id, update_data)
