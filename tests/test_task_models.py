"""
Unit tests for per-category statuses and entity display helpers.
"""
from app.models.task import (
    StatusOutcome,
    TaskCategory,
    TaskStatus,
    is_status_allowed,
    normalize_status,
    statuses_for_category,
)

from .fakes import make_task


def test_category_status_subsets():
    assert statuses_for_category(TaskCategory.PATIENT) == [
        TaskStatus.ACKNOWLEDGED,
        TaskStatus.DECLINED,
        TaskStatus.PENDING,
    ]
    assert TaskStatus.NO_SHOW in statuses_for_category(TaskCategory.PROVIDER)
    assert is_status_allowed(TaskCategory.COMMUNITY, TaskStatus.ENROLLED)
    assert not is_status_allowed(TaskCategory.PATIENT, TaskStatus.ENROLLED)


def test_every_category_allows_pending_and_declined():
    for category in TaskCategory:
        assert is_status_allowed(category, TaskStatus.PENDING)
        assert is_status_allowed(category, TaskStatus.DECLINED)


def test_normalize_status():
    assert normalize_status(TaskStatus.COMPLETED) == StatusOutcome.COMPLETED
    assert normalize_status(TaskStatus.NO_SHOW) == StatusOutcome.DECLINED
    assert normalize_status(TaskStatus.UNREACHABLE) == StatusOutcome.DECLINED
    assert normalize_status(TaskStatus.IN_PROGRESS) == StatusOutcome.OPEN
    assert normalize_status(TaskStatus.TODO) == StatusOutcome.OPEN


def test_entity_name_by_category():
    assert make_task(category="provider-level", provider_name="Dr. Smith").entity_name == "Dr. Smith"
    assert make_task(patient_name="Sarah Johnson").entity_name == "Sarah Johnson"
    assert make_task(category="community-level", community_resource_name="YMCA").entity_name == "YMCA"
    assert make_task(category="system-level").entity_name == "Unknown"


def test_entity_details():
    provider = make_task(
        category="provider-level",
        provider_specialty="Psychiatry",
        provider_organization="Bay Clinic",
    )
    assert provider.entity_details == "Psychiatry - Bay Clinic"
    assert make_task(category="provider-level").entity_details is None
    assert make_task(category="system-level", system_location="Oakland").entity_details == "Oakland"
    assert make_task(patient_name="Sarah Johnson").entity_details is None
