"""Metric endpoints: audit write, aggregation query, series mapping."""

from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, List, Optional, Sequence

from app.application.reports import ReportService
from app.application.series import (
    FLOAT,
    INTEGER,
    STRING,
    LabeledSeries,
    SeriesType,
    map_monthly_trend,
    map_series,
)
from app.infrastructure.repositories import (
    ActivityMetricsRepository,
    ChallengeMetricsRepository,
    GoalMetricsRepository,
    ProgramMetricsRepository,
    UserMetricsRepository,
)

from shared.utils.logger import get_logger

logger = get_logger(__name__)

SCOPE_ORG = "ORG"
SCOPE_MANAGER = "MANAGER"


@dataclass(frozen=True)
class MetricDefinition:
    """Fixed binding of one metric to its audit entry, source query and label."""

    key: str
    scope: str
    metric_name: str
    label: str
    source: str
    query: str
    x_type: SeriesType = STRING
    y_type: SeriesType = INTEGER
    monthly: bool = False


METRICS: Dict[str, MetricDefinition] = {
    definition.key: definition
    for definition in (
        MetricDefinition(
            "participation_status", SCOPE_ORG, "Participation Status",
            "Participation Status", "activity", "participation_status",
        ),
        MetricDefinition(
            "department_participation", SCOPE_MANAGER, "Department Participation",
            "Department Participation", "activity", "participation_by_department",
        ),
        MetricDefinition(
            "program_participation", SCOPE_ORG, "Program Participation",
            "Program Participation", "activity", "participation_by_program",
        ),
        MetricDefinition(
            "category_participation", SCOPE_ORG, "Category Participation",
            "Category Participation", "activity", "participation_by_category",
        ),
        MetricDefinition(
            "monthly_trend", SCOPE_ORG, "Monthly Trend",
            "Monthly Trend", "activity", "monthly_trend", monthly=True,
        ),
        MetricDefinition(
            "challenge_completion", SCOPE_ORG, "Challenge Completion",
            "Challenge Completion", "challenge", "challenge_completion",
        ),
        MetricDefinition(
            "engagement_by_department", SCOPE_ORG, "Department Engagement",
            "Department Engagement", "goal", "engagement_by_department",
            y_type=FLOAT,
        ),
        MetricDefinition(
            "manager_team_size", SCOPE_MANAGER, "Team Size",
            "Manager Team Size", "user", "manager_team_size",
        ),
        MetricDefinition(
            "completion_status", SCOPE_ORG, "Completion Status",
            "Activity Completion Status", "activity", "completion_status",
        ),
        MetricDefinition(
            "goal_status", SCOPE_ORG, "Goal Status",
            "Goal Status", "goal", "goal_status",
        ),
        MetricDefinition(
            "program_status", SCOPE_ORG, "Program Status",
            "Program Status", "program", "program_status_count",
        ),
    )
}


class AnalyticsService:
    """Runs the named metrics against their metric sources."""

    def __init__(
        self,
        reports: ReportService,
        activity: ActivityMetricsRepository,
        goal: GoalMetricsRepository,
        challenge: ChallengeMetricsRepository,
        user: UserMetricsRepository,
        program: ProgramMetricsRepository,
        audit_enabled: bool = True,
    ):
        self.reports = reports
        self.audit_enabled = audit_enabled
        self._sources = {
            "activity": activity,
            "goal": goal,
            "challenge": challenge,
            "user": user,
            "program": program,
        }

    def _query(self, definition: MetricDefinition) -> Callable[[], Awaitable[Sequence[Any]]]:
        return getattr(self._sources[definition.source], definition.query)

    async def compute(self, key: str) -> LabeledSeries:
        """
        Compute one metric by key.

        The audit row is written before the query runs, so a failing query
        still leaves its audit entry behind.
        """
        definition = METRICS[key]
        if self.audit_enabled:
            await self.reports.log_metric(definition.scope, definition.metric_name)

        rows: Optional[List[Any]] = await self._query(definition)()
        logger.debug(f"{definition.label}: {len(rows or ())} rows")

        if definition.monthly:
            return map_monthly_trend(definition.label, rows)
        return map_series(definition.label, rows, definition.x_type, definition.y_type)

    async def participation_status(self) -> LabeledSeries[str, int]:
        return await self.compute("participation_status")

    async def department_participation(self) -> LabeledSeries[str, int]:
        return await self.compute("department_participation")

    async def program_participation(self) -> LabeledSeries[str, int]:
        return await self.compute("program_participation")

    async def category_participation(self) -> LabeledSeries[str, int]:
        return await self.compute("category_participation")

    async def monthly_trend(self) -> LabeledSeries[str, float]:
        return await self.compute("monthly_trend")

    async def challenge_completion(self) -> LabeledSeries[str, int]:
        return await self.compute("challenge_completion")

    async def engagement_by_department(self) -> LabeledSeries[str, float]:
        return await self.compute("engagement_by_department")

    async def manager_team_size(self) -> LabeledSeries[str, int]:
        return await self.compute("manager_team_size")

    async def completion_status(self) -> LabeledSeries[str, int]:
        return await self.compute("completion_status")

    async def goal_status(self) -> LabeledSeries[str, int]:
        return await self.compute("goal_status")

    async def program_status(self) -> LabeledSeries[str, int]:
        return await self.compute("program_status")
