"""Merge rules shared by document synthesis and patching.

Each function targets exactly one document path and leaves every other field
alone. A rule with nothing to add does not create its path.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Sequence

from ..models import ConfigDocument, FeatureSet, unique

_FEATURE = "ghcr.io/devcontainers/features"

DATABASE_FEATURES: Dict[str, str] = {
    "postgresql": f"{_FEATURE}/postgres:1",
    "mongodb": f"{_FEATURE}/mongo:1",
    "redis": f"{_FEATURE}/redis:1",
}

TOOL_FEATURES: Dict[str, str] = {
    "docker": f"{_FEATURE}/docker-in-docker:2",
    "git": f"{_FEATURE}/git:1",
}

NAME_SUFFIX = "Development"
NAME_TAG_LIMIT = 3


def merge_ports(document: ConfigDocument, ports: Iterable[int]) -> None:
    additions = list(ports)
    if not additions:
        return
    document.forward_ports = unique([*document.forward_ports, *additions])


def merge_extensions(document: ConfigDocument, extensions: Iterable[str]) -> None:
    additions = list(extensions)
    if not additions:
        return
    document.extensions = unique([*document.extensions, *additions])


def merge_features(
    document: ConfigDocument, databases: Sequence[str], tools: Sequence[str]
) -> List[str]:
    """Insert feature identifiers for supported databases and tools; return those added."""
    identifiers = [DATABASE_FEATURES[tag] for tag in databases if tag in DATABASE_FEATURES]
    identifiers.extend(TOOL_FEATURES[tag] for tag in tools if tag in TOOL_FEATURES)
    for identifier in identifiers:
        document.set_feature(identifier, {})
    return identifiers


def rename(document: ConfigDocument, languages: Sequence[str], frameworks: Sequence[str]) -> None:
    stack = [*languages, *frameworks][:NAME_TAG_LIMIT]
    if not stack:
        return
    title = " & ".join(tag[:1].upper() + tag[1:] for tag in stack)
    document.name = f"{title} {NAME_SUFFIX}"


def apply_feature_merges(document: ConfigDocument, features: FeatureSet) -> None:
    """Ports, extensions and the features block, in that order."""
    merge_ports(document, features.ports)
    merge_extensions(document, features.extensions)
    merge_features(document, features.databases, features.tools)


__all__ = [
    "DATABASE_FEATURES",
    "TOOL_FEATURES",
    "apply_feature_merges",
    "merge_extensions",
    "merge_features",
    "merge_ports",
    "rename",
]
