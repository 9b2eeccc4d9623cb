"""Plain-text reports for CLI output, rendered from Jinja templates."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

from jinja2 import Environment, FileSystemLoader

from .models import TemplateDescriptor
from .orchestrator import GenerationResult, WorkspaceStatus


class ReportRenderer:
    """Renders orchestrator results with the templates shipped in ``dcgen/templates``."""

    def __init__(self, templates_dir: Path | None = None) -> None:
        self.templates_dir = templates_dir or Path(__file__).with_name("templates")
        self._env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )

    def generation(self, result: GenerationResult, *, display_path: str) -> str:
        return self._env.get_template("generation.j2").render(
            result=result,
            features=result.features,
            path=display_path,
        )

    def templates(
        self,
        templates: Sequence[TemplateDescriptor],
        categories: Sequence[str],
        *,
        category: str | None = None,
    ) -> str:
        return self._env.get_template("templates.j2").render(
            templates=[template.summary() for template in templates],
            categories=categories,
            category=category,
        )

    def status(self, status: WorkspaceStatus, *, display_path: str) -> str:
        return self._env.get_template("status.j2").render(status=status, path=display_path)


__all__ = ["ReportRenderer"]
