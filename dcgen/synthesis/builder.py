"""Builds a configuration document from a template and a feature set."""

from __future__ import annotations

from ..models import ConfigDocument, FeatureSet, TemplateDescriptor
from .merge import apply_feature_merges, rename


class ConfigSynthesizer:
    """Produces a fresh document per call; the template is never modified."""

    def build(self, template: TemplateDescriptor, features: FeatureSet) -> ConfigDocument:
        document = ConfigDocument(template.base_config)
        apply_feature_merges(document, features)
        rename(document, features.languages, features.frameworks)
        return document


def build(template: TemplateDescriptor, features: FeatureSet) -> ConfigDocument:
    return ConfigSynthesizer().build(template, features)


__all__ = ["ConfigSynthesizer", "build"]
