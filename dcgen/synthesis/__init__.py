"""Configuration synthesis and patching."""

from __future__ import annotations

from .builder import ConfigSynthesizer, build
from .merge import DATABASE_FEATURES, TOOL_FEATURES, apply_feature_merges
from .patcher import ConfigPatcher, modify

__all__ = [
    "ConfigPatcher",
    "ConfigSynthesizer",
    "DATABASE_FEATURES",
    "TOOL_FEATURES",
    "apply_feature_merges",
    "build",
    "modify",
]
