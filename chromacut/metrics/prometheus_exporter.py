"""Prometheus exporter helpers."""

from __future__ import annotations

from prometheus_client import Counter, Gauge


palette_extraction_total = Counter(
    "palette_extraction_total",
    "Total number of palette extraction requests.",
)

palette_extraction_failures_total = Counter(
    "palette_extraction_failures_total",
    "Palette extraction requests that failed to load or decode the image.",
)

active_image_fetches = Gauge(
    "active_image_fetches",
    "Number of image downloads currently in flight.",
)
