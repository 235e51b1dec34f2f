"""Metric orchestration: audit row, source query and label for every metric."""

import asyncio

import pytest

from app.application.analytics import METRICS, AnalyticsService
from fakes import StubMetricSource, build_analytics_service
from shared.utils.errors import SeriesTypeMismatchError


def _run(coroutine):
    return asyncio.run(coroutine)


# method, scope, logged metric, label, source, query
EXPECTED_BINDINGS = [
    ("participation_status", "ORG", "Participation Status", "Participation Status",
     "activity", "participation_status"),
    ("department_participation", "MANAGER", "Department Participation",
     "Department Participation", "activity", "participation_by_department"),
    ("program_participation", "ORG", "Program Participation", "Program Participation",
     "activity", "participation_by_program"),
    ("category_participation", "ORG", "Category Participation", "Category Participation",
     "activity", "participation_by_category"),
    ("monthly_trend", "ORG", "Monthly Trend", "Monthly Trend", "activity", "monthly_trend"),
    ("challenge_completion", "ORG", "Challenge Completion", "Challenge Completion",
     "challenge", "challenge_completion"),
    ("engagement_by_department", "ORG", "Department Engagement", "Department Engagement",
     "goal", "engagement_by_department"),
    ("manager_team_size", "MANAGER", "Team Size", "Manager Team Size",
     "user", "manager_team_size"),
    ("completion_status", "ORG", "Completion Status", "Activity Completion Status",
     "activity", "completion_status"),
    ("goal_status", "ORG", "Goal Status", "Goal Status", "goal", "goal_status"),
    ("program_status", "ORG", "Program Status", "Program Status",
     "program", "program_status_count"),
]


def test_every_metric_is_bound():
    assert set(METRICS) == {binding[0] for binding in EXPECTED_BINDINGS}


@pytest.mark.unit
@pytest.mark.parametrize("method,scope,metric,label,source,query", EXPECTED_BINDINGS)
def test_metric_binding(report_service, report_repo, method, scope, metric, label, source, query):
    stub = StubMetricSource()
    service = build_analytics_service(report_service, **{source: stub})

    series = _run(getattr(service, method)())

    assert series.label == label
    assert series.data == []
    assert stub.calls == [query]
    assert report_repo.saves == 1
    stored = report_repo.rows[1]
    assert (stored.scope, stored.metrics) == (scope, metric)


@pytest.mark.unit
def test_participation_status_scenario(report_service, report_repo):
    activity = StubMetricSource(participation_status=[("Active", 50)])
    service = build_analytics_service(report_service, activity=activity)

    series = _run(service.participation_status())

    assert series.label == "Participation Status"
    assert [(p.x, p.y) for p in series.data] == [("Active", 50)]
    assert len(report_repo.rows) == 1
    stored = report_repo.rows[1]
    assert stored.scope == "ORG"
    assert stored.metrics == "Participation Status"


@pytest.mark.unit
def test_monthly_trend_uses_month_names(report_service):
    activity = StubMetricSource(monthly_trend=[(1, 4), (None, None), (13, 2)])
    service = build_analytics_service(report_service, activity=activity)

    series = _run(service.monthly_trend())

    assert [(p.x, p.y) for p in series.data] == [("Jan", 4.0), ("Other", 0.0), ("13", 2.0)]


@pytest.mark.unit
def test_engagement_values_are_floats(report_service):
    goal = StubMetricSource(engagement_by_department=[("IT", 75), ("HR", None)])
    service = build_analytics_service(report_service, goal=goal)

    series = _run(service.engagement_by_department())

    assert [(p.x, p.y) for p in series.data] == [("IT", 75.0), ("HR", None)]
    assert isinstance(series.data[0].y, float)


@pytest.mark.unit
def test_count_metric_rejects_text_counts(report_service):
    program = StubMetricSource(program_status_count=[("ACTIVE", "many")])
    service = build_analytics_service(report_service, program=program)

    with pytest.raises(SeriesTypeMismatchError):
        _run(service.program_status())


@pytest.mark.unit
def test_audit_can_be_disabled(report_service, report_repo):
    goal = StubMetricSource(goal_status=[("DONE", 3)])
    service = build_analytics_service(report_service, goal=goal, audit_enabled=False)

    series = _run(service.goal_status())

    assert [(p.x, p.y) for p in series.data] == [("DONE", 3)]
    assert report_repo.saves == 0


@pytest.mark.unit
def test_audit_row_is_written_before_the_query(report_service, report_repo):
    class FailingSource(StubMetricSource):
        async def challenge_completion(self):
            raise RuntimeError("query failed")

    service = build_analytics_service(report_service, challenge=FailingSource())

    with pytest.raises(RuntimeError, match="query failed"):
        _run(service.challenge_completion())
    assert report_repo.saves == 1


@pytest.mark.unit
def test_compute_by_key_matches_named_method(report_service):
    user = StubMetricSource(manager_team_size=[("Priya", 6)])
    service: AnalyticsService = build_analytics_service(report_service, user=user)

    by_key = _run(service.compute("manager_team_size"))
    by_name = _run(service.manager_team_size())

    assert by_key == by_name
