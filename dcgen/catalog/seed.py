"""Loading extra template descriptors from a YAML seed file."""

from __future__ import annotations

from pathlib import Path
from typing import Any, List, Mapping

from ..config import ConfigError, as_str_list, read_yaml
from ..models import TemplateDescriptor


def load_seed(path: Path) -> List[TemplateDescriptor]:
    """Read a YAML list of template entries.

    Each entry needs a ``name``; ``description``, ``languages``,
    ``frameworks``, ``features``, ``category`` and ``config`` are optional.
    """
    if not path.exists():
        raise ConfigError(f"Catalog seed file not found: {path}")
    data = read_yaml(path)
    if isinstance(data, Mapping):
        data = data.get("templates", [])
    if not isinstance(data, list):
        raise ConfigError(f"{path.name} must contain a list of templates")

    templates: List[TemplateDescriptor] = []
    for index, entry in enumerate(data):
        templates.append(_descriptor_from_entry(entry, index, path))
    return templates


def _descriptor_from_entry(entry: Any, index: int, path: Path) -> TemplateDescriptor:
    if not isinstance(entry, Mapping):
        raise ConfigError(f"{path.name}: template #{index + 1} must be a mapping")
    name = entry.get("name")
    if not isinstance(name, str) or not name.strip():
        raise ConfigError(f"{path.name}: template #{index + 1} is missing a name")
    config = entry.get("config", {})
    if not isinstance(config, Mapping):
        raise ConfigError(f"{path.name}: config for template '{name}' must be a mapping")
    return TemplateDescriptor(
        name=name.strip(),
        description=str(entry.get("description") or ""),
        languages=tuple(as_str_list(entry.get("languages"))),
        frameworks=tuple(as_str_list(entry.get("frameworks"))),
        features=tuple(as_str_list(entry.get("features"))),
        category=str(entry.get("category") or "general"),
        base_config=config,
    )


__all__ = ["load_seed"]
