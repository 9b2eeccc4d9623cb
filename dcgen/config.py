"""Configuration loading for dcgen (.dcgen.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

CONFIG_FILENAME = ".dcgen.yml"
DEFAULT_DOCUMENT_PATH = ".devcontainer/devcontainer.json"
DEFAULT_INDENT = 2


class ConfigError(RuntimeError):
    """Raised when the configuration or catalog seed file cannot be parsed."""


@dataclass
class CatalogConfig:
    """Catalog seeding options."""

    seed: Optional[Path] = None
    fallback: str = "universal"


@dataclass
class DcgenConfig:
    """Represents the workspace settings defined in .dcgen.yml."""

    root: Path
    template: Optional[str] = None
    document_path: str = DEFAULT_DOCUMENT_PATH
    indent: int = DEFAULT_INDENT
    catalog: CatalogConfig = field(default_factory=CatalogConfig)


def load_config(config_path: Path) -> DcgenConfig:
    """Load configuration from disk, returning defaults when the file is absent."""
    config_file = _resolve_config_path(Path(config_path))
    root = config_file.parent.resolve()

    if not config_file.exists():
        return DcgenConfig(root=root)

    data = read_yaml(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    catalog_data = _as_dict(data.get("catalog"))
    catalog = CatalogConfig()
    if catalog_data:
        seed = _as_str(catalog_data.get("seed"))
        catalog.seed = root / seed if seed else None
        catalog.fallback = _as_str(catalog_data.get("fallback")) or catalog.fallback

    indent = _as_int(data.get("indent"))
    if indent is not None and indent < 0:
        raise ConfigError("indent must be zero or a positive integer")

    return DcgenConfig(
        root=root,
        template=_as_str(data.get("template")),
        document_path=_as_str(data.get("document_path")) or DEFAULT_DOCUMENT_PATH,
        indent=DEFAULT_INDENT if indent is None else indent,
        catalog=catalog,
    )


def read_yaml(path: Path) -> Any:
    """Parse a YAML file, mapping parser failures to :class:`ConfigError`."""
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Failed to read {path.name}: {exc}") from exc
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return {} if loaded is None else loaded


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    if config_path.name != CONFIG_FILENAME:
        return (config_path.parent / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) and not isinstance(value, bool) else None


def _as_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            return None
    return None


def as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float))]
    return []


__all__ = [
    "CONFIG_FILENAME",
    "CatalogConfig",
    "ConfigError",
    "DcgenConfig",
    "as_str_list",
    "load_config",
    "read_yaml",
]
