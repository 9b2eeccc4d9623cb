"""Tests for building documents from templates."""

from __future__ import annotations

from dcgen.analysis import extract
from dcgen.catalog import TemplateCatalog
from dcgen.models import FeatureSet, TemplateDescriptor, thaw
from dcgen.synthesis import ConfigSynthesizer


def _build(template_name: str, features: FeatureSet):
    template = TemplateCatalog().require(template_name)
    return ConfigSynthesizer().build(template, features)


def test_build_copies_template_fields() -> None:
    document = _build("python", FeatureSet())

    data = document.to_dict()
    assert data["image"] == "mcr.microsoft.com/devcontainers/python:3.11"
    assert data["postCreateCommand"] == "pip install -r requirements.txt"
    assert data["remoteUser"] == "vscode"
    assert data["name"] == "Python Development"


def test_build_unions_ports_without_duplicates() -> None:
    document = _build("python", FeatureSet(ports=(8000, 5432)))

    assert document.forward_ports == [8000, 5432]


def test_build_unions_extensions_with_template_extensions() -> None:
    document = _build("go", FeatureSet(extensions=("golang.go", "ms-python.python")))

    assert document.extensions == ["golang.go", "ms-vscode.vscode-json", "ms-python.python"]


def test_build_creates_extension_path_when_template_has_none() -> None:
    template = TemplateDescriptor(name="bare", base_config={"image": "debian"})

    document = ConfigSynthesizer().build(template, FeatureSet(extensions=("golang.go",)))

    assert document.to_dict()["customizations"] == {"vscode": {"extensions": ["golang.go"]}}


def test_build_adds_supported_database_and_tool_features() -> None:
    document = _build(
        "python",
        FeatureSet(databases=("postgresql", "redis", "mongodb"), tools=("docker", "git")),
    )

    assert set(document.features) == {
        "ghcr.io/devcontainers/features/python:1",
        "ghcr.io/devcontainers/features/postgres:1",
        "ghcr.io/devcontainers/features/redis:1",
        "ghcr.io/devcontainers/features/mongo:1",
        "ghcr.io/devcontainers/features/docker-in-docker:2",
        "ghcr.io/devcontainers/features/git:1",
    }
    assert document.features["ghcr.io/devcontainers/features/postgres:1"] == {}


def test_build_ignores_unrecognised_databases_and_tools() -> None:
    template = TemplateDescriptor(name="bare", base_config={"image": "debian"})

    document = ConfigSynthesizer().build(
        template, FeatureSet(databases=("mysql", "sqlite"), tools=("vim", "jq"))
    )

    assert "features" not in document.to_dict()


def test_build_renames_from_first_three_tags() -> None:
    features = FeatureSet(languages=("typescript", "python"), frameworks=("react", "django"))

    assert _build("react", features).name == "Typescript & Python & React Development"


def test_build_keeps_template_name_without_languages_or_frameworks() -> None:
    assert _build("rust", FeatureSet(ports=(9000,))).name == "Rust Development"


def test_build_preserves_unrecognised_fields() -> None:
    document = _build("docker-compose", FeatureSet(ports=(9000,)))

    data = document.to_dict()
    assert data["dockerComposeFile"] == "docker-compose.yml"
    assert data["service"] == "app"
    assert data["workspaceFolder"] == "/workspace"
    assert data["shutdownAction"] == "stopCompose"


def test_sequential_builds_do_not_leak_or_mutate_the_catalog() -> None:
    catalog = TemplateCatalog()
    template = catalog.require("python")
    before = thaw(template.base_config)
    synthesizer = ConfigSynthesizer()

    first = synthesizer.build(template, FeatureSet(ports=(9000,), extensions=("golang.go",)))
    second = synthesizer.build(template, FeatureSet(ports=(4000,)))

    assert 9000 in first.forward_ports
    assert 9000 not in second.forward_ports
    assert "golang.go" not in second.extensions
    assert thaw(catalog.require("python").base_config) == before


def test_mutating_a_built_document_does_not_touch_the_template() -> None:
    template = TemplateCatalog().require("go")
    document = ConfigSynthesizer().build(template, FeatureSet())

    document.set_feature("example", {"enabled": True})
    document.forward_ports = [1]

    assert "example" not in template.base_config["features"]
    assert template.base_config["forwardPorts"] == (8080,)


def test_build_from_extracted_prompt() -> None:
    template = TemplateCatalog().require("python")
    features = extract("Python app with PostgreSQL and Redis on port 5000")

    data = ConfigSynthesizer().build(template, features).to_dict()

    assert "ghcr.io/devcontainers/features/postgres:1" in data["features"]
    assert "ghcr.io/devcontainers/features/redis:1" in data["features"]
    assert data["forwardPorts"] == [8000, 5000]
    assert data["name"] == "Python Development"
