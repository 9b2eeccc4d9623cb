"""Tests for the audit trail text."""

from __future__ import annotations

from dcgen.catalog import TemplateCatalog
from dcgen.models import FeatureSet
from dcgen.reasoning import explain, explain_modification


def test_explain_names_template_and_contributing_categories() -> None:
    features = FeatureSet(
        languages=("python",),
        frameworks=("django",),
        databases=("postgresql",),
        ports=(8000,),
        extensions=("ms-python.python",),
        tools=("git",),
    )

    text = explain(features, TemplateCatalog().require("python"))

    assert text == (
        "Selected 'python' template based on detected technologies. "
        "Detected languages: python. "
        "Detected frameworks: django. "
        "Added database support for: postgresql. "
        "Configured port forwarding for: 8000. "
        "Added VS Code extensions for detected technologies. "
        "Added development tools: git."
    )


def test_explain_with_empty_features_only_names_template() -> None:
    text = explain(FeatureSet(), TemplateCatalog().fallback)

    assert text == "Selected 'universal' template based on detected technologies."


def test_explain_modification_lists_changes() -> None:
    text = explain_modification(FeatureSet(databases=("redis",), ports=(6379, 8080)))

    assert text == (
        "Modified configuration: Added database features: redis; "
        "Added port forwarding: 6379, 8080."
    )


def test_explain_modification_without_changes() -> None:
    assert explain_modification(FeatureSet()) == "No applicable modifications found in the request."
