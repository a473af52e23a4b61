"""Export endpoints — download support or brand-monitoring data as CSV, JSON or a text report."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Body, Response
from pydantic import BaseModel, ConfigDict, Field

from sentiment_watchdog.adapters.export import brand_report, support_report
from sentiment_watchdog.domain.entities.export import ExportedFile

logger = logging.getLogger(__name__)

router = APIRouter(tags=["export"])


class ExportRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    format: str | None = None
    messages: list[dict[str, Any]] = Field(default_factory=list)
    alerts: list[dict[str, Any]] = Field(default_factory=list)
    stats: dict[str, Any] = Field(default_factory=dict)
    time_range: str | None = Field(default=None, alias="timeRange")


def _attachment(exported: ExportedFile) -> Response:
    return Response(
        content=exported.content,
        media_type=exported.media_type,
        headers={"Content-Disposition": exported.content_disposition},
    )


@router.post("/export-data")
async def export_data(body: ExportRequest):
    """Support messages, alerts and stats as a downloadable file."""
    exported = support_report.render(
        body.format, body.messages, body.alerts, body.stats, time_range=body.time_range
    )
    logger.info("Exported %d messages as %s", len(body.messages), exported.filename)
    return _attachment(exported)


@router.post("/export-brand-data")
async def export_brand_data(payload: dict[str, Any] = Body(...)):
    """Brand mentions, alerts and analytics as a downloadable file."""
    exported = brand_report.render(payload.get("format"), payload)
    logger.info(
        "Exported %d brand mentions as %s",
        len(payload.get("mentions") or []),
        exported.filename,
    )
    return _attachment(exported)
