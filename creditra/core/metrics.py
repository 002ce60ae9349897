"""Prometheus metrics for the Creditra backend.

Business Metrics:
- creditra_credit_lines_created_total: Credit lines created by initial status
- creditra_credit_line_transitions_total: Transition attempts by action/outcome
- creditra_risk_evaluations_total: Wallet evaluations by outcome

Technical Metrics:
- creditra_horizon_polls_total: Horizon poll cycles
- creditra_horizon_events_total: Contract events dispatched
- creditra_horizon_handler_failures_total: Event handlers that raised
- creditra_http_requests_total: HTTP requests by endpoint/status
"""

from prometheus_client import Counter, Histogram, REGISTRY, generate_latest
from prometheus_client.exposition import CONTENT_TYPE_LATEST


# =============================================================================
# Business Metrics
# =============================================================================

credit_lines_created = Counter(
    "creditra_credit_lines_created_total",
    "Total number of credit lines created",
    ["status"],
)

credit_line_transitions = Counter(
    "creditra_credit_line_transitions_total",
    "Credit line transition attempts",
    ["action", "outcome"],  # outcome: success, not_found, invalid_transition
)

risk_evaluations = Counter(
    "creditra_risk_evaluations_total",
    "Wallet risk evaluations",
    ["outcome"],  # evaluated, invalid_address
)


# =============================================================================
# Technical Metrics
# =============================================================================

horizon_polls = Counter(
    "creditra_horizon_polls_total",
    "Total number of Horizon poll cycles",
)

horizon_events = Counter(
    "creditra_horizon_events_total",
    "Total number of contract events dispatched to handlers",
)

horizon_handler_failures = Counter(
    "creditra_horizon_handler_failures_total",
    "Total number of event handlers that raised",
)

http_requests_total = Counter(
    "creditra_http_requests_total",
    "Total HTTP requests by endpoint and status",
    ["method", "endpoint", "status"],
)

http_request_latency = Histogram(
    "creditra_http_request_latency_seconds",
    "HTTP request latency by endpoint",
    ["method", "endpoint"],
    buckets=[0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0],
)


# =============================================================================
# Helper Functions
# =============================================================================

def record_credit_line_created(status: str) -> None:
    credit_lines_created.labels(status=status).inc()


def record_transition(action: str, outcome: str) -> None:
    """Record a transition attempt and its outcome."""
    credit_line_transitions.labels(action=action, outcome=outcome).inc()


def record_risk_evaluation(outcome: str) -> None:
    risk_evaluations.labels(outcome=outcome).inc()


def record_horizon_poll() -> None:
    horizon_polls.inc()


def record_horizon_event() -> None:
    horizon_events.inc()


def record_horizon_handler_failure() -> None:
    horizon_handler_failures.inc()


def record_http_request(method: str, endpoint: str, status: int, duration: float) -> None:
    """Record an HTTP request."""
    http_requests_total.labels(method=method, endpoint=endpoint, status=str(status)).inc()
    http_request_latency.labels(method=method, endpoint=endpoint).observe(duration)


def get_metrics() -> bytes:
    """Get current metrics in Prometheus format."""
    return generate_latest(REGISTRY)


def get_metrics_content_type() -> str:
    """Get the content type for metrics response."""
    return CONTENT_TYPE_LATEST
