import time
from typing import Awaitable, Callable, List

from app.api.schemas import ReportRequest, ReportResponse, SeriesResponse
from app.application.analytics import AnalyticsService
from app.application.reports import ReportService
from app.application.series import LabeledSeries
from app.core.config import get_analytics_config
from app.core.metrics import REQUEST_COUNT, REQUEST_LATENCY
from app.dependencies.providers import get_analytics_service, get_report_service
from fastapi import APIRouter, Depends, status
from fastapi.responses import PlainTextResponse

from shared.auth.dependencies import require_roles
from shared.auth.models import Role, TokenData
from shared.models.database import ReportDB

config = get_analytics_config()
router = APIRouter(prefix=config.api_prefix, tags=["analytics"])

analyst = require_roles(Role.ADMIN, Role.MANAGER)
admin_only = require_roles(Role.ADMIN)


def _observe(method: str, endpoint: str, status_code: int, start: float) -> None:
    REQUEST_COUNT.labels(method=method, endpoint=endpoint, status=str(status_code)).inc()
    REQUEST_LATENCY.labels(method=method, endpoint=endpoint).observe(
        time.perf_counter() - start
    )


def _to_response(report: ReportDB) -> ReportResponse:
    return ReportResponse(
        report_id=report.report_id,
        scope=report.scope,
        metrics=report.metrics,
        generated_date=report.generated_date,
    )


async def _series(
    endpoint: str, compute: Callable[[], Awaitable[LabeledSeries]]
) -> SeriesResponse:
    start = time.perf_counter()
    series = await compute()
    _observe("GET", endpoint, 200, start)
    return SeriesResponse.from_series(series)


# --- Graph endpoints ---


@router.get("/participation/status", response_model=SeriesResponse)
async def participation_status(
    _: TokenData = Depends(analyst),
    service: AnalyticsService = Depends(get_analytics_service),
) -> SeriesResponse:
    return await _series("/participation/status", service.participation_status)


@router.get("/participation/department", response_model=SeriesResponse)
async def department_participation(
    _: TokenData = Depends(analyst),
    service: AnalyticsService = Depends(get_analytics_service),
) -> SeriesResponse:
    return await _series("/participation/department", service.department_participation)


@router.get("/participation/program", response_model=SeriesResponse)
async def program_participation(
    _: TokenData = Depends(analyst),
    service: AnalyticsService = Depends(get_analytics_service),
) -> SeriesResponse:
    return await _series("/participation/program", service.program_participation)


@router.get("/participation/category", response_model=SeriesResponse)
async def category_participation(
    _: TokenData = Depends(analyst),
    service: AnalyticsService = Depends(get_analytics_service),
) -> SeriesResponse:
    return await _series("/participation/category", service.category_participation)


@router.get("/trend/monthly", response_model=SeriesResponse)
async def monthly_trend(
    _: TokenData = Depends(analyst),
    service: AnalyticsService = Depends(get_analytics_service),
) -> SeriesResponse:
    return await _series("/trend/monthly", service.monthly_trend)


@router.get("/challenge/completion", response_model=SeriesResponse)
async def challenge_completion(
    _: TokenData = Depends(analyst),
    service: AnalyticsService = Depends(get_analytics_service),
) -> SeriesResponse:
    return await _series("/challenge/completion", service.challenge_completion)


@router.get("/engagement/department", response_model=SeriesResponse)
async def engagement_by_department(
    _: TokenData = Depends(analyst),
    service: AnalyticsService = Depends(get_analytics_service),
) -> SeriesResponse:
    return await _series("/engagement/department", service.engagement_by_department)


@router.get("/manager/team-size", response_model=SeriesResponse)
async def manager_team_size(
    _: TokenData = Depends(analyst),
    service: AnalyticsService = Depends(get_analytics_service),
) -> SeriesResponse:
    return await _series("/manager/team-size", service.manager_team_size)


@router.get("/activity/completion-status", response_model=SeriesResponse)
async def completion_status(
    _: TokenData = Depends(analyst),
    service: AnalyticsService = Depends(get_analytics_service),
) -> SeriesResponse:
    return await _series("/activity/completion-status", service.completion_status)


@router.get("/goal/status", response_model=SeriesResponse)
async def goal_status(
    _: TokenData = Depends(analyst),
    service: AnalyticsService = Depends(get_analytics_service),
) -> SeriesResponse:
    return await _series("/goal/status", service.goal_status)


@router.get("/program/status", response_model=SeriesResponse)
async def program_status(
    _: TokenData = Depends(analyst),
    service: AnalyticsService = Depends(get_analytics_service),
) -> SeriesResponse:
    return await _series("/program/status", service.program_status)


# --- Reports ---


@router.post(
    "/reports",
    response_model=ReportResponse,
    status_code=status.HTTP_201_CREATED,
    tags=["reports"],
)
async def create_report(
    request: ReportRequest,
    _: TokenData = Depends(analyst),
    service: ReportService = Depends(get_report_service),
) -> ReportResponse:
    start = time.perf_counter()
    report = await service.create_report(request.scope, request.metrics)
    _observe("POST", "/reports", 201, start)
    return _to_response(report)


@router.get("/reports", response_model=List[ReportResponse], tags=["reports"])
async def list_reports(
    _: TokenData = Depends(analyst),
    service: ReportService = Depends(get_report_service),
) -> List[ReportResponse]:
    start = time.perf_counter()
    reports = await service.list_reports()
    _observe("GET", "/reports", 200, start)
    return [_to_response(report) for report in reports]


@router.get("/reports/{report_id}", response_model=ReportResponse, tags=["reports"])
async def get_report(
    report_id: int,
    _: TokenData = Depends(analyst),
    service: ReportService = Depends(get_report_service),
) -> ReportResponse:
    start = time.perf_counter()
    report = await service.get_report(report_id)
    _observe("GET", "/reports/{report_id}", 200, start)
    return _to_response(report)


@router.put("/reports/{report_id}", response_model=ReportResponse, tags=["reports"])
async def update_report(
    report_id: int,
    request: ReportRequest,
    _: TokenData = Depends(analyst),
    service: ReportService = Depends(get_report_service),
) -> ReportResponse:
    start = time.perf_counter()
    report = await service.update_report(report_id, request.scope, request.metrics)
    _observe("PUT", "/reports/{report_id}", 200, start)
    return _to_response(report)


@router.delete(
    "/reports/{report_id}", response_class=PlainTextResponse, tags=["reports"]
)
async def delete_report(
    report_id: int,
    _: TokenData = Depends(admin_only),
    service: ReportService = Depends(get_report_service),
) -> PlainTextResponse:
    start = time.perf_counter()
    await service.delete_report(report_id)
    _observe("DELETE", "/reports/{report_id}", 200, start)
    return PlainTextResponse("Report deleted successfully")
