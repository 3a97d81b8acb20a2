from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import Mapping
from uuid import UUID

from homehealth.database import get_db
from homehealth.dependencies import get_baselines, get_scoring_config
from homehealth.routers.properties import get_property_or_404
from homehealth.schemas.report import ReportResponse
from homehealth.scoring import ReferenceBaseline, ScoringConfig
from homehealth.services.report_service import build_property_report

router = APIRouter(prefix="/properties/{property_id}/report", tags=["reports"])


@router.get("", response_model=ReportResponse)
def get_report(
    property_id: UUID,
    db: Session = Depends(get_db),
    config: ScoringConfig = Depends(get_scoring_config),
    baselines: Mapping[str, ReferenceBaseline] = Depends(get_baselines),
):
    """
    Home health report for a property.

    Uses the worst reading per metric across all rooms. Categories without
    any reading come back with score null and insufficient_data true.
    """
    prop = get_property_or_404(db, property_id)
    return build_property_report(db, prop, config, baselines)
