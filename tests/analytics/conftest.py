"""Shared fixtures for the analytics test suite."""

import pytest

from app.application.reports import ReportService
from fakes import FIXED_TODAY, InMemoryReportRepository


@pytest.fixture
def report_repo() -> InMemoryReportRepository:
    return InMemoryReportRepository()


@pytest.fixture
def report_service(report_repo: InMemoryReportRepository) -> ReportService:
    return ReportService(report_repo, today=lambda: FIXED_TODAY)
