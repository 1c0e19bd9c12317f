"""Radial gauge geometry and layout engine."""

from radial_gauge.engine.registry import stage, Layer, get_registry
from radial_gauge.engine.context import GaugeContext
from radial_gauge.engine.pipeline import Pipeline, create_pipeline, initialize, render

__all__ = [
    "stage",
    "Layer",
    "get_registry",
    "GaugeContext",
    "Pipeline",
    "create_pipeline",
    "initialize",
    "render",
]
