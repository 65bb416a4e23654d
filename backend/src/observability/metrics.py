"""Prometheus metrics for the order backend.

Defines operational metrics for monitoring and alerting.
"""

from prometheus_client import Counter

# Successful order mutations
order_operations_total = Counter(
    "orders_operations_total",
    "Total order operations completed",
    ["operation"]  # create|update|patch|delete
)

# Classified failures returned to clients
domain_errors_total = Counter(
    "orders_domain_errors_total",
    "Total classified domain errors returned to clients",
    ["kind"]  # VALIDATION|NOT_FOUND|FORBIDDEN|CONFLICT|BUSINESS_RULE|UNAUTHORIZED
)

# Authentication outcomes
auth_events_total = Counter(
    "orders_auth_events_total",
    "Authentication events",
    ["event"]  # register|login_success|login_failed|refresh
)
