"""In-memory report store and stub metric sources for the analytics tests."""

from __future__ import annotations

from datetime import date
from typing import Any, Dict, List, Optional

from app.application.analytics import AnalyticsService
from app.application.reports import ReportService
from shared.models.database import ReportDB

FIXED_TODAY = date(2026, 10, 19)


def _copy(report: ReportDB) -> ReportDB:
    return ReportDB(
        report_id=report.report_id,
        scope=report.scope,
        metrics=report.metrics,
        generated_date=report.generated_date,
    )


class InMemoryReportRepository:
    """Report store keyed by id; hands out copies like a real session would."""

    def __init__(self) -> None:
        self.rows: Dict[int, ReportDB] = {}
        self.saves = 0
        self.deletes: List[int] = []
        self._next_id = 1

    def seed(self, scope: str, metrics: str, generated_date: date) -> ReportDB:
        report = ReportDB(
            report_id=self._next_id,
            scope=scope,
            metrics=metrics,
            generated_date=generated_date,
        )
        self._next_id += 1
        self.rows[report.report_id] = _copy(report)
        return report

    async def save(self, report: ReportDB) -> ReportDB:
        self.saves += 1
        if report.report_id is None:
            report.report_id = self._next_id
            self._next_id += 1
        self.rows[report.report_id] = _copy(report)
        return report

    async def find_by_id(self, report_id: int) -> Optional[ReportDB]:
        stored = self.rows.get(report_id)
        return _copy(stored) if stored is not None else None

    async def find_all(self) -> List[ReportDB]:
        return [_copy(self.rows[key]) for key in sorted(self.rows)]

    async def delete_by_id(self, report_id: int) -> None:
        self.deletes.append(report_id)
        self.rows.pop(report_id, None)


class StubMetricSource:
    """Metric repository stand-in: every query returns the rows given for it."""

    def __init__(self, **rows: Any) -> None:
        self._rows = rows
        self.calls: List[str] = []

    def __getattr__(self, name: str):
        if name.startswith("_"):
            raise AttributeError(name)

        async def query():
            self.calls.append(name)
            return self._rows.get(name, [])

        return query


def build_analytics_service(
    reports: ReportService,
    *,
    audit_enabled: bool = True,
    **sources: StubMetricSource,
) -> AnalyticsService:
    return AnalyticsService(
        reports,
        activity=sources.get("activity", StubMetricSource()),
        goal=sources.get("goal", StubMetricSource()),
        challenge=sources.get("challenge", StubMetricSource()),
        user=sources.get("user", StubMetricSource()),
        program=sources.get("program", StubMetricSource()),
        audit_enabled=audit_enabled,
    )
