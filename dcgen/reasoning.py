"""Human-readable audit trail for generated and patched documents."""

from __future__ import annotations

from typing import Iterable, List

from .models import FeatureSet, TemplateDescriptor


def explain(features: FeatureSet, template: TemplateDescriptor) -> str:
    """Describe which template was chosen and which feature categories contributed."""
    reasons: List[str] = [f"Selected '{template.name}' template based on detected technologies"]
    if features.languages:
        reasons.append(f"Detected languages: {_join(features.languages)}")
    if features.frameworks:
        reasons.append(f"Detected frameworks: {_join(features.frameworks)}")
    if features.databases:
        reasons.append(f"Added database support for: {_join(features.databases)}")
    if features.ports:
        reasons.append(f"Configured port forwarding for: {_join(features.ports)}")
    if features.extensions:
        reasons.append("Added VS Code extensions for detected technologies")
    if features.tools:
        reasons.append(f"Added development tools: {_join(features.tools)}")
    return ". ".join(reasons) + "."


def explain_modification(features: FeatureSet) -> str:
    """Summarise the changes a patch request contributed."""
    changes: List[str] = []
    if features.languages:
        changes.append(f"Added support for: {_join(features.languages)}")
    if features.databases:
        changes.append(f"Added database features: {_join(features.databases)}")
    if features.ports:
        changes.append(f"Added port forwarding: {_join(features.ports)}")
    if features.extensions:
        changes.append("Added VS Code extensions for detected technologies")
    if features.tools:
        changes.append(f"Added development tools: {_join(features.tools)}")
    if not changes:
        return "No applicable modifications found in the request."
    return f"Modified configuration: {'; '.join(changes)}."


def _join(values: Iterable[object]) -> str:
    return ", ".join(str(value) for value in values)


__all__ = ["explain", "explain_modification"]
