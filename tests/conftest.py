# tests/conftest.py

from __future__ import annotations

from datetime import date, timedelta

import pytest
from fastapi.testclient import TestClient

from app.api.tasks import get_task_service
from app.main import app
from app.services.task import TaskService

from .fakes import FakeSupabaseClient, task_row

TODAY = date(2025, 1, 15)


@pytest.fixture()
def today() -> date:
    """Frozen reference date so overdue/urgency checks are deterministic."""
    return TODAY


@pytest.fixture()
def task_rows() -> list[dict]:
    """
    A small mixed task table around TODAY.

    Two patients (Sarah has more open work than Mark), one system-level task
    with no patient, and one completed task.
    """
    return [
        task_row(
            id="t1",
            title="Follow-up depression assessment",
            patient_id="p1",
            patient_name="Sarah Johnson",
            priority="high",
            status="pending",
            due_date=TODAY - timedelta(days=1),
        ),
        task_row(
            id="t2",
            title="Medication adherence check",
            category="community-level",
            community_resource_name="Harbor Pharmacy",
            patient_id="p2",
            patient_name="Mark Johnson",
            status="completed",
            due_date=TODAY - timedelta(days=5),
        ),
        task_row(
            id="t3",
            title="Psychiatric referral",
            category="provider-level",
            provider_name="Dr. Smith",
            patient_id="p1",
            patient_name="Sarah Johnson",
            status="scheduled",
            priority="high",
            due_date=TODAY + timedelta(days=2),
        ),
        task_row(
            id="t4",
            title="Insurance authorization",
            category="system-level",
            system_name="Blue Shield",
            status="in-contact",
            priority="low",
            due_date=TODAY + timedelta(days=6),
        ),
    ]


@pytest.fixture()
def fake_client(task_rows: list[dict]) -> FakeSupabaseClient:
    return FakeSupabaseClient(task_rows)


@pytest.fixture()
def service(fake_client: FakeSupabaseClient) -> TaskService:
    return TaskService(fake_client)


@pytest.fixture()
def api_client(fake_client: FakeSupabaseClient):
    """FastAPI TestClient with the task service wired to the fake store."""
    app.dependency_overrides[get_task_service] = lambda: TaskService(fake_client)
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
