"""Orders module - order lifecycle service and HTTP API."""

from .service import OrderService, PATCHABLE_FIELDS

__all__ = ["OrderService", "PATCHABLE_FIELDS"]
