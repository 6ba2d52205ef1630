# File: src/chaingate/monitoring/metrics.py

from typing import Optional

from prometheus_client import CollectorRegistry, Counter, Histogram


class MetricsCollector:
    """Prometheus metrics for upstream calls and block enrichment.

    Each collector owns its registry so several apps (or tests) can live in
    one process without clashing on metric names.
    """

    def __init__(self, registry: Optional[CollectorRegistry] = None):
        self.registry = registry or CollectorRegistry()

        # Upstream metrics
        self.upstream_requests = Counter(
            'chaingate_upstream_requests_total',
            'Upstream explorer requests by operation and outcome',
            ['operation', 'outcome'],
            registry=self.registry,
        )
        self.upstream_latency = Histogram(
            'chaingate_upstream_request_seconds',
            'Upstream explorer request latency',
            ['operation'],
            registry=self.registry,
        )

        # Enrichment metrics
        self.enriched_transactions = Counter(
            'chaingate_enriched_transactions_total',
            'Transactions fetched while enriching blocks',
            ['network'],
            registry=self.registry,
        )
        self.enrichment_failures = Counter(
            'chaingate_enrichment_failures_total',
            'Transaction lookups that failed while enriching blocks',
            ['network'],
            registry=self.registry,
        )

    def record_upstream_request(self, operation: str, outcome: str, duration: float):
        self.upstream_requests.labels(operation=operation, outcome=outcome).inc()
        self.upstream_latency.labels(operation=operation).observe(duration)

    def record_enrichment(self, network: str, succeeded: int, failed: int):
        self.enriched_transactions.labels(network=network).inc(succeeded)
        self.enrichment_failures.labels(network=network).inc(failed)
