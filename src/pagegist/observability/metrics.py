"""
Defines Prometheus metrics for the extraction and summarization pipeline.
"""

from __future__ import annotations

from typing import Any, Dict

from prometheus_client import REGISTRY as _PROM_REGISTRY
from prometheus_client import Counter as _OrigCounter
from prometheus_client import Histogram as _OrigHistogram

# ---------------------------------------------------------------------------
# Duplicate-safe Prometheus metric wrappers
# ---------------------------------------------------------------------------
# The test suite may import this module more than once; registering the same
# collector name twice raises, so an existing collector is reused instead.


def _duplicate_safe_factory(metric_cls):
    """Return a factory that reuses an existing collector if already present."""

    def _factory(name: str, documentation: str, *args, **kwargs):  # type: ignore[override]
        existing = _PROM_REGISTRY._names_to_collectors.get(name)
        if existing is not None:
            return existing  # type: ignore[return-value]

        try:
            return metric_cls(name, documentation, *args, **kwargs)  # type: ignore[call-arg]
        except ValueError:
            # Registration lost the race; use the collector that won.
            return _PROM_REGISTRY._names_to_collectors[name]  # type: ignore[return-value]

    return _factory


Counter = _duplicate_safe_factory(_OrigCounter)  # type: ignore[assignment]
Histogram = _duplicate_safe_factory(_OrigHistogram)  # type: ignore[assignment]


def _create_metrics() -> Dict[str, Any]:
    return {
        "documents_extracted": Counter(
            "pagegist_documents_extracted_total",
            "Documents whose main content was located, by winning strategy",
            ["strategy"],
        ),
        "pages_skipped": Counter(
            "pagegist_pages_skipped_total",
            "Pages rejected by the eligibility gate",
            ["reason"],
        ),
        "summaries_generated": Counter(
            "pagegist_summaries_generated_total",
            "Local summaries produced, by selection mode",
            ["mode"],
        ),
        "summarize_duration_seconds": Histogram(
            "pagegist_summarize_duration_seconds",
            "Time taken to summarize a document locally",
            buckets=[0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0],
        ),
    }


METRICS: Dict[str, Any] = _create_metrics()
