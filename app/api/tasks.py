import logging
from datetime import date
from typing import Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel
from supabase import Client

from app.infra.supabase import get_supabase_client
from app.models.task import (
    DateRange,
    PatientOption,
    PatientTaskSummary,
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
    is_status_allowed,
    statuses_for_category,
)
from app.services.task import TaskService
from app.utils.date_range import list_time_filters, resolve_time_filter

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/tasks", tags=["tasks"])


def get_task_service(client: Client = Depends(get_supabase_client)) -> TaskService:
    return TaskService(client)


def get_date_range(
    time_filter: Optional[str] = Query(None, description="1week, 2weeks, 1month, 2months or 3months"),
    start: Optional[date] = Query(None, description="Inclusive start date (YYYY-MM-DD)"),
    end: Optional[date] = Query(None, description="Inclusive end date (YYYY-MM-DD)"),
) -> Optional[DateRange]:
    """Resolve the requested window; explicit start/end win over a time filter"""
    if start and end:
        return DateRange(start=start.isoformat(), end=end.isoformat())
    if start or end:
        raise HTTPException(status_code=400, detail="Both start and end are required for a custom range")

    if time_filter:
        try:
            return resolve_time_filter(time_filter)
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))

    return None


def get_task_filters(
    date_range: Optional[DateRange] = Depends(get_date_range),
    status: Optional[str] = None,
    patient_id: Optional[str] = None,
    category: Optional[str] = None,
    priority: Optional[str] = None,
    dimension: Optional[str] = None,
    search: str = "",
) -> TaskFilters:
    return TaskFilters(
        status=status,
        patient_id=patient_id,
        category=category,
        priority=priority,
        dimension=dimension,
        search_query=search,
        date_range=date_range,
    )


class TaskResponse(BaseModel):
    task: Task


class TaskListResponse(BaseModel):
    tasks: List[Task]
    count: int


class StatusUpdateResponse(BaseModel):
    success: bool


class DeleteResponse(BaseModel):
    success: bool
    message: str


# Read endpoints
@router.get("", response_model=TaskListResponse)
async def list_tasks(
    filters: TaskFilters = Depends(get_task_filters),
    service: TaskService = Depends(get_task_service),
):
    """List tasks in the requested window matching the filters"""
    tasks = await service.list_tasks(filters)
    return {"tasks": tasks, "count": len(tasks)}


@router.get("/pending", response_model=TaskListResponse)
async def list_pending_tasks(
    date_range: Optional[DateRange] = Depends(get_date_range),
    service: TaskService = Depends(get_task_service),
):
    tasks = await service.list_pending_tasks(date_range)
    return {"tasks": tasks, "count": len(tasks)}


@router.get("/summary", response_model=TaskSummary)
async def get_task_summary(
    filters: TaskFilters = Depends(get_task_filters),
    service: TaskService = Depends(get_task_service),
):
    return await service.get_summary(filters)


@router.get("/stats", response_model=TaskStats)
async def get_task_stats(
    date_range: Optional[DateRange] = Depends(get_date_range),
    service: TaskService = Depends(get_task_service),
):
    return await service.get_stats(date_range)


@router.get("/patients", response_model=List[PatientOption])
async def list_patients(service: TaskService = Depends(get_task_service)):
    """Patients that have at least one task, for the filter picker"""
    return await service.get_unique_patients()


@router.get("/patient-summaries", response_model=List[PatientTaskSummary])
async def list_patient_summaries(
    filters: TaskFilters = Depends(get_task_filters),
    service: TaskService = Depends(get_task_service),
):
    return await service.get_patient_summaries(filters)


@router.get("/time-filters", response_model=List[Dict[str, str]])
async def get_time_filters():
    return list_time_filters()


@router.get("/categories/{category}/statuses", response_model=List[TaskStatus])
async def get_category_statuses(category: TaskCategory):
    return statuses_for_category(category)


@router.get("/priorities", response_model=List[TaskPriority])
async def get_priorities():
    return list(TaskPriority)


@router.get("/{task_id}", response_model=TaskResponse)
async def get_task(task_id: str, service: TaskService = Depends(get_task_service)):
    task = await service.get_task(task_id)

    if not task:
        raise HTTPException(status_code=404, detail="Task not found")

    return {"task": task}


# Write endpoints
@router.post("", response_model=TaskResponse)
async def create_task(request: TaskCreate, service: TaskService = Depends(get_task_service)):
    """Create a task; its initial status must belong to its category"""
    if not is_status_allowed(request.category, request.status):
        raise HTTPException(
            status_code=400,
            detail=f"Status '{request.status.value}' is not valid for {request.category.value} tasks",
        )

    task = await service.create_task(request)

    if not task:
        raise HTTPException(status_code=500, detail="Failed to create task")

    return {"task": task}


@router.put("/{task_id}", response_model=TaskResponse)
async def update_task(task_id: str, request: TaskUpdate, service: TaskService = Depends(get_task_service)):
    task = await service.update_task(task_id, request)

    if not task:
        raise HTTPException(status_code=404, detail="Task not found")

    return {"task": task}


@router.patch("/{task_id}/status", response_model=StatusUpdateResponse)
async def update_task_status(
    task_id: str,
    request: TaskStatusUpdate,
    service: TaskService = Depends(get_task_service),
):
    """Set a task's status (any status is accepted)"""
    success = await service.update_task_status(task_id, request.status)

    if not success:
        raise HTTPException(status_code=404, detail="Task not found")

    return {"success": True}


@router.delete("/{task_id}", response_model=DeleteResponse)
async def delete_task(task_id: str, service: TaskService = Depends(get_task_service)):
    success = await service.delete_task(task_id)

    if not success:
        raise HTTPException(status_code=404, detail="Task not found")

    return {"success": True, "message": "Task deleted successfully"}
