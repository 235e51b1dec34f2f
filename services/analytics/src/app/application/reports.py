"""CRUD and audit logging for report records."""

from datetime import date
from typing import Callable, List

from app.core.metrics import AUDIT_REPORTS, audit_events
from app.infrastructure.repositories import ReportRepository

from shared.models.database import ReportDB
from shared.utils.errors import NotFoundError
from shared.utils.logger import get_logger

logger = get_logger(__name__)


class ReportService:
    """Report store facade used by the API and by every metric query."""

    def __init__(
        self,
        reports: ReportRepository,
        today: Callable[[], date] = date.today,
    ):
        self.reports = reports
        self._today = today

    async def log_metric(self, scope: str, metric_name: str) -> None:
        """Persist an audit row recording that ``metric_name`` was computed."""
        await self.reports.save(
            ReportDB(scope=scope, metrics=metric_name, generated_date=self._today())
        )
        AUDIT_REPORTS.labels(scope=scope, metric=metric_name).inc()
        audit_events.log_event("metric_computed", {"scope": scope, "metric": metric_name})

    async def create_report(self, scope: str, metrics: str) -> ReportDB:
        report = await self.reports.save(
            ReportDB(scope=scope, metrics=metrics, generated_date=self._today())
        )
        logger.info(f"Report {report.report_id} created for scope {scope}")
        return report

    async def list_reports(self) -> List[ReportDB]:
        return await self.reports.find_all()

    async def get_report(self, report_id: int) -> ReportDB:
        report = await self.reports.find_by_id(report_id)
        if report is None:
            logger.info(f"Report {report_id} not found")
            raise NotFoundError(
                f"Report not found with id {report_id}",
                details={"report_id": report_id},
            )
        return report

    async def update_report(self, report_id: int, scope: str, metrics: str) -> ReportDB:
        """Replace scope and metrics; the id and generated date are kept."""
        report = await self.get_report(report_id)
        report.scope = scope
        report.metrics = metrics
        return await self.reports.save(report)

    async def delete_report(self, report_id: int) -> None:
        await self.reports.delete_by_id(report_id)
        logger.info(f"Report {report_id} deleted")
