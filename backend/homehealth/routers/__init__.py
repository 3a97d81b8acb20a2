from homehealth.routers.catalog import router as catalog_router
from homehealth.routers.properties import router as properties_router
from homehealth.routers.measurements import router as measurements_router
from homehealth.routers.reports import router as reports_router

__all__ = ["catalog_router", "properties_router", "measurements_router", "reports_router"]
