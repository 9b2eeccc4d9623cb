"""Template catalog: built-in seed data, YAML seeds and the read-only registry."""

from __future__ import annotations

from pathlib import Path

from ..config import DcgenConfig
from .builtin import BUILTIN_TEMPLATES, FALLBACK_TEMPLATE
from .registry import TemplateCatalog
from .seed import load_seed


def build_catalog(config: DcgenConfig | None = None) -> TemplateCatalog:
    """Construct the catalog once from the built-in seed and any configured seed file."""
    if config is None:
        return TemplateCatalog()
    extra = load_seed(Path(config.catalog.seed)) if config.catalog.seed else []
    return TemplateCatalog.with_overrides(extra, fallback=config.catalog.fallback)


__all__ = [
    "BUILTIN_TEMPLATES",
    "FALLBACK_TEMPLATE",
    "TemplateCatalog",
    "build_catalog",
    "load_seed",
]
