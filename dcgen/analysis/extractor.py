"""Feature extraction from free-text environment requests."""

from __future__ import annotations

from typing import Dict, List, Mapping, Pattern, Sequence, Tuple

from ..models import FeatureSet, unique
from .rules import (
    DEFAULT_OS,
    EXPLICIT_PORT_PATTERN,
    EXPLICIT_PORT_RANGE,
    EXTENSION_RULES,
    OS_RULES,
    STANDALONE_PORT_PATTERN,
    STANDALONE_PORT_RANGE,
    TAG_RULES,
    ExtensionRule,
    RuleTable,
)


class FeatureExtractor:
    """Maps raw text to a :class:`FeatureSet` using static keyword tables.

    Extraction is total: text with no recognisable content yields empty
    collections and the default OS, never an error.
    """

    def __init__(
        self,
        tag_rules: Mapping[str, RuleTable] | None = None,
        extension_rules: Sequence[ExtensionRule] | None = None,
        os_rules: Sequence[Tuple[str, Pattern[str]]] | None = None,
    ) -> None:
        self.tag_rules = dict(tag_rules if tag_rules is not None else TAG_RULES)
        self.extension_rules = tuple(
            extension_rules if extension_rules is not None else EXTENSION_RULES
        )
        self.os_rules = tuple(os_rules if os_rules is not None else OS_RULES)

    def extract(self, text: str) -> FeatureSet:
        tags: Dict[str, List[str]] = {
            category: _match_tags(text, table) for category, table in self.tag_rules.items()
        }
        return FeatureSet(
            languages=tuple(tags.get("languages", [])),
            frameworks=tuple(tags.get("frameworks", [])),
            databases=tuple(tags.get("databases", [])),
            tools=tuple(tags.get("tools", [])),
            os=self._detect_os(text),
            ports=extract_ports(text),
            extensions=self._recommend_extensions(tags),
            original_text=text,
        )

    def _detect_os(self, text: str) -> str:
        for name, pattern in self.os_rules:
            if pattern.search(text):
                return name
        return DEFAULT_OS

    def _recommend_extensions(self, tags: Mapping[str, Sequence[str]]) -> Tuple[str, ...]:
        extensions: List[str] = []
        for rule in self.extension_rules:
            detected = tags.get(rule.category, ())
            if any(tag in rule.triggers for tag in detected):
                extensions.extend(rule.extensions)
        return unique(extensions)


def extract_ports(text: str) -> Tuple[int, ...]:
    """Union of explicit ``port N`` mentions and bare dev-range numbers."""
    low, high = EXPLICIT_PORT_RANGE
    explicit = [int(match) for match in EXPLICIT_PORT_PATTERN.findall(text)]
    ports = [port for port in explicit if low <= port <= high]

    low, high = STANDALONE_PORT_RANGE
    standalone = [int(match) for match in STANDALONE_PORT_PATTERN.findall(text)]
    ports.extend(port for port in standalone if low <= port <= high)
    return unique(ports)


def _match_tags(text: str, table: RuleTable) -> List[str]:
    return [
        tag for tag, patterns in table.items() if any(pattern.search(text) for pattern in patterns)
    ]


_DEFAULT_EXTRACTOR = FeatureExtractor()


def extract(text: str) -> FeatureSet:
    """Extract a feature set using the built-in rule tables."""
    return _DEFAULT_EXTRACTOR.extract(text)
