"""Persistence for the workspace devcontainer.json document."""

from __future__ import annotations

import json
from pathlib import Path

from ..config import DEFAULT_DOCUMENT_PATH, DEFAULT_INDENT
from ..errors import ConfigNotFound, MalformedDocument
from ..models import ConfigDocument


class DocumentStore:
    """Loads and saves a single configuration document under a workspace root."""

    def __init__(
        self,
        workspace: Path,
        relative_path: str = DEFAULT_DOCUMENT_PATH,
        *,
        indent: int = DEFAULT_INDENT,
    ) -> None:
        self.workspace = Path(workspace)
        self.path = self.workspace / relative_path
        self.indent = indent

    def exists(self) -> bool:
        return self.path.is_file()

    def load(self) -> ConfigDocument:
        if not self.exists():
            raise ConfigNotFound(f"No existing devcontainer.json found at {self.path}")
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise MalformedDocument(f"Invalid JSON in {self.path}: {exc}") from exc
        return ConfigDocument.from_mapping(data)

    def render(self, document: ConfigDocument) -> str:
        return json.dumps(document.to_dict(), indent=self.indent) + "\n"

    def save(self, document: ConfigDocument) -> Path:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(self.render(document), encoding="utf-8")
        return self.path


__all__ = ["DocumentStore"]
