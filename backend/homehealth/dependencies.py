"""FastAPI dependencies shared by the routers."""
from typing import Mapping

from fastapi import Request

from homehealth.scoring import ReferenceBaseline, ScoringConfig


def get_scoring_config(request: Request) -> ScoringConfig:
    """Scoring config built once during startup."""
    return request.app.state.scoring_config


def get_baselines(request: Request) -> Mapping[str, ReferenceBaseline]:
    return request.app.state.baselines
