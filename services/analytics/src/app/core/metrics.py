from prometheus_client import Counter, Histogram

from shared.utils.logging_config import AuditLogger

audit_events = AuditLogger("wellness-analytics")

REQUEST_COUNT = Counter(
    "analytics_requests_total",
    "Total number of requests",
    ["method", "endpoint", "status"],
)

REQUEST_LATENCY = Histogram(
    "analytics_request_latency_seconds",
    "Request latency in seconds",
    ["method", "endpoint"],
)

AUDIT_REPORTS = Counter(
    "analytics_audit_reports_total",
    "Audit report rows written by metric queries",
    ["scope", "metric"],
)
