"""Applies feature merges to an already persisted document."""

from __future__ import annotations

from typing import Optional

from ..errors import ConfigNotFound
from ..models import ConfigDocument, FeatureSet
from .merge import apply_feature_merges


class ConfigPatcher:
    """Patches a copy of an existing document; the name is left as it was."""

    def modify(self, existing: Optional[ConfigDocument], features: FeatureSet) -> ConfigDocument:
        if existing is None:
            raise ConfigNotFound("No existing devcontainer.json found")
        document = ConfigDocument(existing.to_dict())
        apply_feature_merges(document, features)
        return document


def modify(existing: Optional[ConfigDocument], features: FeatureSet) -> ConfigDocument:
    return ConfigPatcher().modify(existing, features)


__all__ = ["ConfigPatcher", "modify"]
