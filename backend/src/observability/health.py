"""Health check utilities.

Two components are reported: database connectivity and the presence of
the tables the API writes to.
"""

import time
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, Optional

from sqlalchemy import inspect, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from .logging_config import get_logger

logger = get_logger(__name__)

REQUIRED_TABLES = ("user", "orders")


class HealthStatus(str, Enum):
    HEALTHY = "healthy"
    UNHEALTHY = "unhealthy"
    DEGRADED = "degraded"


@dataclass
class ComponentHealth:
    """Health status for a single component."""
    status: HealthStatus
    message: Optional[str] = None
    latency_ms: Optional[float] = None


def check_database_health(db: Session) -> ComponentHealth:
    """Round-trip a trivial query and report its latency."""
    try:
        start = time.perf_counter()
        db.execute(text("SELECT 1"))
        latency_ms = (time.perf_counter() - start) * 1000
    except SQLAlchemyError as e:
        logger.error(f"Database health check failed: {e}", exc_info=True)
        return ComponentHealth(status=HealthStatus.UNHEALTHY, message=f"Database error: {str(e)}")

    return ComponentHealth(
        status=HealthStatus.HEALTHY,
        message="Database connection OK",
        latency_ms=round(latency_ms, 2)
    )


def check_schema_health(db: Session, tables: Iterable[str] = REQUIRED_TABLES) -> ComponentHealth:
    """Report DEGRADED when migrations have not created every required table."""
    try:
        existing = set(inspect(db.connection()).get_table_names())
    except SQLAlchemyError as e:
        logger.error(f"Schema health check failed: {e}", exc_info=True)
        return ComponentHealth(status=HealthStatus.UNHEALTHY, message=f"Schema error: {str(e)}")

    missing = sorted(set(tables) - existing)
    if missing:
        return ComponentHealth(
            status=HealthStatus.DEGRADED,
            message=f"Missing tables: {', '.join(missing)}"
        )
    return ComponentHealth(status=HealthStatus.HEALTHY, message="Schema OK")


def get_overall_health(components: Dict[str, ComponentHealth]) -> HealthStatus:
    """UNHEALTHY wins over DEGRADED; HEALTHY only if every component is."""
    statuses = {c.status for c in components.values()}
    if HealthStatus.UNHEALTHY in statuses:
        return HealthStatus.UNHEALTHY
    if HealthStatus.DEGRADED in statuses:
        return HealthStatus.DEGRADED
    return HealthStatus.HEALTHY
