from fastapi import APIRouter, Depends

from homehealth.dependencies import get_scoring_config
from homehealth.schemas.report import CatalogResponse, MetricDefinitionResponse
from homehealth.scoring import ScoringConfig, TwoSidedIdeal

router = APIRouter(prefix="/catalog", tags=["catalog"])


@router.get("", response_model=CatalogResponse)
def get_catalog(config: ScoringConfig = Depends(get_scoring_config)):
    """List recognized metrics with their bounds and category weights."""
    metrics = []
    for definition in config.catalog:
        ideal = definition.curve if isinstance(definition.curve, TwoSidedIdeal) else None
        metrics.append(MetricDefinitionResponse(
            key=definition.key,
            label=definition.label,
            category=definition.category,
            unit=definition.unit,
            good_max=definition.good_max,
            fair_max=definition.fair_max,
            ideal_low=ideal.low if ideal else None,
            ideal_high=ideal.high if ideal else None,
            weight=config.weights_for(definition.category).get(definition.key, 0.0),
        ))
    return CatalogResponse(metrics=metrics, overall_weights=dict(config.overall_weights))
