"""Read-only registry of template descriptors."""

from __future__ import annotations

from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

from ..errors import NoTemplateMatch, TemplateNotFound
from ..models import TemplateDescriptor
from .builtin import BUILTIN_TEMPLATES, FALLBACK_TEMPLATE


class TemplateCatalog:
    """Immutable collection of templates exposed through query operations only.

    Exactly one descriptor, named by ``fallback``, is the template returned when
    nothing else matches; constructing a catalog without it is a configuration
    defect and raises :class:`NoTemplateMatch`.
    """

    def __init__(
        self,
        templates: Iterable[TemplateDescriptor] | None = None,
        *,
        fallback: str = FALLBACK_TEMPLATE,
    ) -> None:
        entries: Tuple[TemplateDescriptor, ...] = tuple(
            templates if templates is not None else BUILTIN_TEMPLATES
        )
        seen: set[str] = set()
        for template in entries:
            if template.name in seen:
                raise ValueError(f"Duplicate template name in catalog: '{template.name}'")
            seen.add(template.name)
        if fallback not in seen:
            raise NoTemplateMatch(f"Fallback template '{fallback}' is missing from the catalog")
        self._templates = entries
        self._fallback_name = fallback

    @classmethod
    def with_overrides(
        cls,
        extra: Sequence[TemplateDescriptor],
        *,
        base: Sequence[TemplateDescriptor] | None = None,
        fallback: str = FALLBACK_TEMPLATE,
    ) -> "TemplateCatalog":
        """Combine a base seed with extra entries; same-named entries replace in place."""
        merged: List[TemplateDescriptor] = list(base if base is not None else BUILTIN_TEMPLATES)
        positions = {template.name: index for index, template in enumerate(merged)}
        for template in extra:
            index = positions.get(template.name)
            if index is None:
                positions[template.name] = len(merged)
                merged.append(template)
            else:
                merged[index] = template
        return cls(merged, fallback=fallback)

    @property
    def fallback(self) -> TemplateDescriptor:
        return self.require(self._fallback_name)

    def list(
        self,
        *,
        category: str | None = None,
        language: str | None = None,
        framework: str | None = None,
    ) -> List[TemplateDescriptor]:
        """Return templates satisfying every supplied predicate."""
        results: List[TemplateDescriptor] = []
        for template in self._templates:
            if category and template.category != category:
                continue
            if language and language.lower() not in template.languages:
                continue
            if framework and framework.lower() not in template.frameworks:
                continue
            results.append(template)
        return results

    def get(self, name: str) -> Optional[TemplateDescriptor]:
        for template in self._templates:
            if template.name == name:
                return template
        return None

    def require(self, name: str) -> TemplateDescriptor:
        template = self.get(name)
        if template is None:
            raise TemplateNotFound(name)
        return template

    def categories(self) -> List[str]:
        return sorted({template.category for template in self._templates})

    def names(self) -> List[str]:
        return [template.name for template in self._templates]

    def __iter__(self) -> Iterator[TemplateDescriptor]:
        return iter(self._templates)

    def __len__(self) -> int:
        return len(self._templates)


__all__ = ["TemplateCatalog"]
