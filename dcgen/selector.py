"""Template selection by weighted language/framework overlap."""

from __future__ import annotations

from typing import Optional, Sequence

from .catalog import TemplateCatalog
from .logging import get_logger
from .models import TemplateDescriptor

LANGUAGE_WEIGHT = 10
FRAMEWORK_WEIGHT = 5
FALLBACK_PENALTY = 1


class TemplateSelector:
    """Scores catalog entries against detected tags and picks one."""

    def __init__(self, catalog: TemplateCatalog) -> None:
        self.catalog = catalog
        self.logger = get_logger("selector")

    def find_best_match(
        self, languages: Sequence[str], frameworks: Sequence[str]
    ) -> TemplateDescriptor:
        """Return the highest-scoring template, the first one on ties.

        The fallback template loses one point so a specific template wins a
        tie against it. When no template matches anything at all the fallback
        is returned directly.
        """
        fallback = self.catalog.fallback
        best: Optional[TemplateDescriptor] = None
        best_score = 0
        any_match = False

        for template in self.catalog:
            raw = score_template(template, languages, frameworks)
            any_match = any_match or raw > 0
            score = raw - FALLBACK_PENALTY if template.name == fallback.name else raw
            self.logger.debug("Template %s scored %d", template.name, score)
            if best is None or score > best_score:
                best = template
                best_score = score

        if not any_match or best is None:
            return fallback
        return best


def score_template(
    template: TemplateDescriptor, languages: Sequence[str], frameworks: Sequence[str]
) -> int:
    """Raw match score before the fallback penalty."""
    score = 0
    for language in languages:
        if language.lower() in template.languages:
            score += LANGUAGE_WEIGHT
    for framework in frameworks:
        if framework.lower() in template.frameworks:
            score += FRAMEWORK_WEIGHT
    return score


__all__ = ["TemplateSelector", "score_template"]
