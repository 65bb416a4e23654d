"""Observability endpoints: Prometheus metrics and health."""

from fastapi import APIRouter, Depends, Response
from fastapi.responses import JSONResponse
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest
from sqlalchemy.orm import Session

from database import get_db
from .health import HealthStatus, check_database_health, check_schema_health, get_overall_health

router = APIRouter(tags=["Observability"])


@router.get("/metrics", include_in_schema=False)
def metrics():
    """Expose Prometheus metrics in text exposition format."""
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)


@router.get(
    "/health",
    summary="Health check endpoint",
    description="200 when healthy or degraded, 503 when the database is unreachable.",
)
def health_check(db: Session = Depends(get_db)):
    components = {
        "database": check_database_health(db),
        "schema": check_schema_health(db),
    }
    overall_status = get_overall_health(components)

    return JSONResponse(
        status_code=503 if overall_status == HealthStatus.UNHEALTHY else 200,
        content={
            "status": overall_status.value,
            "components": {
                name: {
                    "status": comp.status.value,
                    "message": comp.message,
                    "latency_ms": comp.latency_ms,
                }
                for name, comp in components.items()
            },
        },
    )
