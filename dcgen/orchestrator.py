"""Pipeline orchestration for generate/modify/status flows."""

from __future__ import annotations

import difflib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from .analysis import FeatureExtractor
from .catalog import TemplateCatalog, build_catalog
from .config import ConfigError, DcgenConfig, load_config
from .errors import MalformedDocument
from .logging import get_logger
from .models import FeatureSet, TemplateDescriptor
from .reasoning import explain, explain_modification
from .selector import TemplateSelector
from .stores import DocumentStore
from .synthesis import ConfigPatcher, ConfigSynthesizer

MODIFIED_TEMPLATE = "modified"


@dataclass
class GenerationResult:
    """Outcome of a generate or modify run."""

    document: Dict[str, Any]
    path: Path
    reasoning: str
    template: str
    features: FeatureSet
    diff: str = ""
    dry_run: bool = False


@dataclass
class WorkspaceStatus:
    """What the persisted document says about a workspace."""

    config_exists: bool
    config_path: Path
    name: Optional[str] = None
    image: Optional[str] = None
    features: List[str] = field(default_factory=list)
    forward_ports: List[Any] = field(default_factory=list)
    error: Optional[str] = None


class Orchestrator:
    """Coordinates extraction, selection, synthesis and persistence."""

    def __init__(
        self,
        extractor: FeatureExtractor | None = None,
        synthesizer: ConfigSynthesizer | None = None,
        patcher: ConfigPatcher | None = None,
        catalog: TemplateCatalog | None = None,
    ) -> None:
        self.extractor = extractor or FeatureExtractor()
        self.synthesizer = synthesizer or ConfigSynthesizer()
        self.patcher = patcher or ConfigPatcher()
        self._catalog_override = catalog
        self._catalogs: Dict[Tuple[Optional[Path], str], TemplateCatalog] = {}
        self.logger = get_logger("orchestrator")

    def run_generate(
        self,
        prompt: str,
        workspace: str | Path = ".",
        *,
        template: str | None = None,
        dry_run: bool = False,
    ) -> GenerationResult:
        """Generate a document from ``prompt`` and write it into the workspace."""
        root = Path(workspace).expanduser().resolve()
        self.logger.info("Starting generate run for %s", root)
        config = self._load_config(root)
        catalog = self.catalog_for(config)

        features = self.extractor.extract(prompt)
        self._log_features(features)

        chosen = self._choose_template(catalog, features, template or config.template)
        self.logger.info("Using template '%s'", chosen.name)
        document = self.synthesizer.build(chosen, features)

        store = self._store(root, config)
        previous = _read_existing(store)
        rendered = store.render(document)
        diff = _unified_diff(previous, rendered, store.path.name)
        if not dry_run:
            store.save(document)
            self.logger.info("Wrote %s", store.path)

        return GenerationResult(
            document=document.to_dict(),
            path=store.path,
            reasoning=explain(features, chosen),
            template=chosen.name,
            features=features,
            diff=diff,
            dry_run=dry_run,
        )

    def run_modify(
        self,
        request: str,
        workspace: str | Path = ".",
        *,
        dry_run: bool = False,
    ) -> GenerationResult:
        """Patch the workspace document with the features found in ``request``."""
        root = Path(workspace).expanduser().resolve()
        self.logger.info("Starting modify run for %s", root)
        config = self._load_config(root)
        store = self._store(root, config)
        existing = store.load()

        features = self.extractor.extract(request)
        self._log_features(features)
        document = self.patcher.modify(existing, features)

        diff = _unified_diff(store.render(existing), store.render(document), store.path.name)
        if not dry_run:
            store.save(document)
            self.logger.info("Updated %s", store.path)

        return GenerationResult(
            document=document.to_dict(),
            path=store.path,
            reasoning=explain_modification(features),
            template=MODIFIED_TEMPLATE,
            features=features,
            diff=diff,
            dry_run=dry_run,
        )

    def run_status(self, workspace: str | Path = ".") -> WorkspaceStatus:
        root = Path(workspace).expanduser().resolve()
        config = self._load_config(root)
        store = self._store(root, config)
        status = WorkspaceStatus(config_exists=store.exists(), config_path=store.path)
        if not status.config_exists:
            return status
        try:
            document = store.load()
        except MalformedDocument as exc:
            self.logger.warning("Unreadable configuration at %s: %s", store.path, exc)
            status.error = str(exc)
            return status
        status.name = document.name
        status.image = document.image
        status.features = list(document.features)
        status.forward_ports = document.forward_ports
        return status

    def list_templates(
        self, workspace: str | Path = ".", *, category: str | None = None
    ) -> Tuple[List[TemplateDescriptor], List[str]]:
        config = self._load_config(Path(workspace).expanduser().resolve())
        catalog = self.catalog_for(config)
        return catalog.list(category=category), catalog.categories()

    def catalog_for(self, config: DcgenConfig) -> TemplateCatalog:
        """Return the catalog for a workspace, constructing each distinct seed once."""
        if self._catalog_override is not None:
            return self._catalog_override
        key = (config.catalog.seed, config.catalog.fallback)
        catalog = self._catalogs.get(key)
        if catalog is None:
            catalog = build_catalog(config)
            self._catalogs[key] = catalog
            self.logger.debug("Catalog loaded with %d templates", len(catalog))
        return catalog

    # ------------------------------------------------------------------
    # Internal helpers

    def _choose_template(
        self, catalog: TemplateCatalog, features: FeatureSet, name: str | None
    ) -> TemplateDescriptor:
        if name:
            return catalog.require(name)
        return TemplateSelector(catalog).find_best_match(features.languages, features.frameworks)

    def _load_config(self, root: Path) -> DcgenConfig:
        try:
            return load_config(root)
        except ConfigError as exc:
            self.logger.warning("Ignoring invalid workspace settings: %s", exc)
            return DcgenConfig(root=root)

    @staticmethod
    def _store(root: Path, config: DcgenConfig) -> DocumentStore:
        return DocumentStore(root, config.document_path, indent=config.indent)

    def _log_features(self, features: FeatureSet) -> None:
        self.logger.debug(
            "Extracted languages=%s frameworks=%s databases=%s tools=%s ports=%s os=%s",
            list(features.languages),
            list(features.frameworks),
            list(features.databases),
            list(features.tools),
            list(features.ports),
            features.os,
        )


def _read_existing(store: DocumentStore) -> str:
    if not store.exists():
        return ""
    return store.path.read_text(encoding="utf-8")


def _unified_diff(original: str, updated: str, filename: str) -> str:
    diff = difflib.unified_diff(
        original.splitlines(keepends=True),
        updated.splitlines(keepends=True),
        fromfile=f"{filename} (original)",
        tofile=f"{filename} (updated)",
    )
    return "".join(diff)


__all__ = ["GenerationResult", "Orchestrator", "WorkspaceStatus"]
