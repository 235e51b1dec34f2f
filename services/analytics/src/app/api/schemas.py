"""Pydantic models for the analytics endpoints."""

from datetime import date
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from app.application.series import LabeledSeries


class DataPointSchema(BaseModel):
    """One chart point."""

    x: Optional[Any] = None
    y: Optional[Any] = None


class SeriesResponse(BaseModel):
    """Labeled series, one chart's worth of data."""

    label: str
    data: List[DataPointSchema] = Field(default_factory=list)

    @classmethod
    def from_series(cls, series: LabeledSeries) -> "SeriesResponse":
        return cls(
            label=series.label,
            data=[DataPointSchema(x=point.x, y=point.y) for point in series.data],
        )


class ReportRequest(BaseModel):
    """Create/update body for a report."""

    scope: str = Field(..., description="ORG or MANAGER")
    metrics: str = Field(..., min_length=1, max_length=500, description="Metric description")


class ReportResponse(BaseModel):
    """Persisted report record."""

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    report_id: int = Field(..., alias="reportId")
    scope: str
    metrics: str
    generated_date: date = Field(..., alias="generatedDate")
