"""Prompt analysis: keyword rule tables and the feature extractor."""

from __future__ import annotations

from .extractor import FeatureExtractor, extract, extract_ports

__all__ = [
    "FeatureExtractor",
    "extract",
    "extract_ports",
]
