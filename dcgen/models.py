"""Core data models shared across dcgen components."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from .errors import MalformedDocument


def freeze(value: Any) -> Any:
    """Return a read-only view of nested mappings and sequences."""
    if isinstance(value, Mapping):
        return MappingProxyType({str(key): freeze(item) for key, item in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(freeze(item) for item in value)
    return value


def thaw(value: Any) -> Any:
    """Return a fresh, fully mutable deep copy of nested mappings and sequences."""
    if isinstance(value, Mapping):
        return {key: thaw(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [thaw(item) for item in value]
    return value


def unique(values: Iterable[Any]) -> Tuple[Any, ...]:
    """Deduplicate while keeping first-seen order."""
    seen: List[Any] = []
    for value in values:
        if value not in seen:
            seen.append(value)
    return tuple(seen)


@dataclass(frozen=True)
class FeatureSet:
    """Structured requirements extracted from a free-text request."""

    languages: Tuple[str, ...] = ()
    frameworks: Tuple[str, ...] = ()
    databases: Tuple[str, ...] = ()
    tools: Tuple[str, ...] = ()
    os: str = "ubuntu"
    ports: Tuple[int, ...] = ()
    extensions: Tuple[str, ...] = ()
    original_text: str = ""

    def __post_init__(self) -> None:
        for name in ("languages", "frameworks", "databases", "tools", "extensions"):
            object.__setattr__(self, name, unique(getattr(self, name)))
        ports = unique(int(port) for port in self.ports)
        object.__setattr__(self, "ports", tuple(port for port in ports if 1 <= port <= 65535))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "languages": list(self.languages),
            "frameworks": list(self.frameworks),
            "databases": list(self.databases),
            "tools": list(self.tools),
            "os": self.os,
            "ports": list(self.ports),
            "extensions": list(self.extensions),
            "original_text": self.original_text,
        }


@dataclass(frozen=True)
class TemplateDescriptor:
    """Catalog entry: a base configuration plus the metadata used for matching."""

    name: str
    description: str = ""
    languages: Tuple[str, ...] = ()
    frameworks: Tuple[str, ...] = ()
    features: Tuple[str, ...] = ()
    category: str = "general"
    base_config: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "languages", tuple(tag.lower() for tag in self.languages))
        object.__setattr__(self, "frameworks", tuple(tag.lower() for tag in self.frameworks))
        object.__setattr__(self, "features", tuple(self.features))
        object.__setattr__(self, "base_config", freeze(self.base_config))

    def summary(self) -> Dict[str, Any]:
        """Return the display fields as plain data."""
        return {
            "name": self.name,
            "description": self.description,
            "languages": list(self.languages),
            "frameworks": list(self.frameworks),
            "features": list(self.features),
            "category": self.category,
        }


class ConfigDocument:
    """A devcontainer.json document with typed access to the paths dcgen merges.

    Fields the engine does not recognise are kept verbatim in the underlying
    mapping and are returned unchanged by :meth:`to_dict`.
    """

    def __init__(self, data: Mapping[str, Any] | None = None) -> None:
        self._data: Dict[str, Any] = thaw(data) if data is not None else {}

    @classmethod
    def from_mapping(cls, data: Any) -> "ConfigDocument":
        """Validate the structure of ``data`` and wrap a copy of it."""
        if not isinstance(data, Mapping):
            raise MalformedDocument("Configuration document must be a JSON object")
        _expect(data, "forwardPorts", list)
        _expect(data, "features", Mapping)
        customizations = _expect(data, "customizations", Mapping)
        if customizations is not None:
            vscode = _expect(customizations, "vscode", Mapping, prefix="customizations.")
            if vscode is not None:
                _expect(vscode, "extensions", list, prefix="customizations.vscode.")
        features = data.get("features")
        if isinstance(features, Mapping):
            for key, options in features.items():
                if not isinstance(options, Mapping):
                    raise MalformedDocument(f"Options for feature '{key}' must be an object")
        return cls(data)

    @property
    def name(self) -> Optional[str]:
        value = self._data.get("name")
        return value if isinstance(value, str) else None

    @name.setter
    def name(self, value: str) -> None:
        self._data["name"] = value

    @property
    def image(self) -> Optional[str]:
        value = self._data.get("image")
        return value if isinstance(value, str) else None

    @property
    def forward_ports(self) -> List[Any]:
        return list(self._data.get("forwardPorts") or [])

    @forward_ports.setter
    def forward_ports(self, ports: Iterable[Any]) -> None:
        self._data["forwardPorts"] = list(ports)

    @property
    def extensions(self) -> List[str]:
        customizations = self._data.get("customizations") or {}
        vscode = customizations.get("vscode") or {}
        return list(vscode.get("extensions") or [])

    @extensions.setter
    def extensions(self, extensions: Iterable[str]) -> None:
        customizations = _child(self._data, "customizations")
        vscode = _child(customizations, "vscode")
        vscode["extensions"] = list(extensions)

    @property
    def features(self) -> Dict[str, Dict[str, Any]]:
        return thaw(self._data.get("features") or {})

    def set_feature(self, identifier: str, options: Mapping[str, Any] | None = None) -> None:
        features = _child(self._data, "features")
        features[identifier] = thaw(options or {})

    def get(self, key: str, default: Any = None) -> Any:
        return thaw(self._data.get(key, default))

    def to_dict(self) -> Dict[str, Any]:
        return thaw(self._data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ConfigDocument):
            return NotImplemented
        return self._data == other._data

    def __repr__(self) -> str:
        return f"ConfigDocument(name={self.name!r})"


def _child(data: Dict[str, Any], key: str) -> Dict[str, Any]:
    """Return the object stored at ``key``, replacing a missing or null value."""
    value = data.get(key)
    if value is None:
        value = data[key] = {}
    return value


def _expect(data: Mapping[str, Any], key: str, kind: type, *, prefix: str = "") -> Any:
    value = data.get(key)
    if value is not None and not isinstance(value, kind):
        expected = "an array" if kind is list else "an object"
        raise MalformedDocument(f"'{prefix}{key}' must be {expected}")
    return value
