"""Tests for the feature extractor."""

from __future__ import annotations

import re

import pytest

from dcgen.analysis import FeatureExtractor, extract, extract_ports


@pytest.mark.parametrize(
    ("prompt", "language"),
    [
        ("JavaScript project with npm", "javascript"),
        ("TypeScript React app", "typescript"),
        ("Python Django application", "python"),
        ("Go microservice", "go"),
        ("Rust CLI tool with cargo", "rust"),
        ("Java Spring Boot application", "java"),
        ("PHP Laravel project", "php"),
        ("Ruby on Rails app", "ruby"),
        ("A C# service on dotnet", "csharp"),
        ("ASP.NET core api", "csharp"),
        ("Targets .NET 8", "csharp"),
        ("Native C++ engine built with CMake", "cpp"),
    ],
)
def test_extract_detects_languages(prompt: str, language: str) -> None:
    assert language in extract(prompt).languages


@pytest.mark.parametrize(
    ("prompt", "framework"),
    [
        ("React frontend application", "react"),
        ("Angular web app", "angular"),
        ("Vue.js project", "vue"),
        ("Express.js API server", "express"),
        ("Django web framework", "django"),
        ("Flask microframework", "flask"),
        ("FastAPI backend", "fastapi"),
        ("Spring Boot application", "spring"),
    ],
)
def test_extract_detects_frameworks(prompt: str, framework: str) -> None:
    assert framework in extract(prompt).frameworks


@pytest.mark.parametrize(
    ("prompt", "database"),
    [
        ("App with PostgreSQL database", "postgresql"),
        ("MySQL backend storage", "mysql"),
        ("MongoDB document store", "mongodb"),
        ("Redis cache layer", "redis"),
        ("SQLite embedded database", "sqlite"),
        ("Elasticsearch search engine", "elasticsearch"),
    ],
)
def test_extract_detects_databases(prompt: str, database: str) -> None:
    assert database in extract(prompt).databases


def test_extract_detects_tools() -> None:
    features = extract("Node.js development with Docker support, git and jq")

    assert features.tools == ("docker", "git", "jq")


def test_extract_matches_whole_words_only() -> None:
    features = extract("Going to the gymnasium with a typewriter")

    assert features.languages == ()
    assert features.tools == ()


def test_extract_is_case_insensitive() -> None:
    assert extract("PYTHON with FLASK").frameworks == ("flask",)


def test_extract_orders_tags_by_rule_table_and_deduplicates() -> None:
    features = extract("python django python flask python")

    assert features.languages == ("python",)
    assert features.frameworks == ("django", "flask")


def test_extract_collects_multiple_explicit_ports() -> None:
    features = extract("Node.js app on port 3000 with API on port 8080 and database on port 5432")

    assert set(features.ports) == {3000, 8080, 5432}
    assert len(features.ports) == 3


def test_explicit_port_accepts_small_numbers() -> None:
    assert extract_ports("serve docs on port 80") == (80,)


def test_explicit_port_rejects_out_of_range_values() -> None:
    assert extract_ports("port 0 and port 70000") == ()


def test_bare_number_in_dev_range_is_a_port() -> None:
    assert 3005 in extract("run the frontend on 3005").ports


def test_bare_number_outside_heuristic_range_is_ignored() -> None:
    features = extract("listen on 99999 or maybe 50 or 10000")

    assert 99999 not in features.ports
    assert 50 not in features.ports
    assert features.ports == ()


def test_bare_numbers_below_range_are_ignored() -> None:
    assert extract("Upgraded in 2024 and 3001").ports == (3001,)


def test_os_detection_uses_priority_order() -> None:
    assert extract("debian or alpine, whichever").os == "alpine"
    assert extract("a Debian base image").os == "debian"
    assert extract("nothing specific").os == "ubuntu"


def test_extensions_are_derived_from_detected_tags() -> None:
    features = extract("TypeScript React app with Python backend")

    assert features.extensions == (
        "ms-vscode.vscode-typescript-next",
        "ms-vscode.vscode-eslint",
        "ms-python.python",
        "ms-python.pylint",
        "bradlc.vscode-tailwindcss",
        "esbenp.prettier-vscode",
    )


def test_extensions_for_javascript_and_typescript_are_not_duplicated() -> None:
    features = extract("javascript and typescript together")

    assert features.extensions.count("ms-vscode.vscode-eslint") == 1


def test_extract_without_matches_is_empty_not_an_error() -> None:
    features = extract("")

    assert features.languages == ()
    assert features.frameworks == ()
    assert features.databases == ()
    assert features.tools == ()
    assert features.ports == ()
    assert features.extensions == ()
    assert features.os == "ubuntu"


def test_extract_is_idempotent() -> None:
    text = "Go API server with Gin framework on port 8080 and Redis"

    assert extract(text) == extract(text)


def test_extract_keeps_original_text() -> None:
    text = "Rust with Actix on port 8000"

    assert extract(text).original_text == text


def test_extractor_accepts_custom_rule_tables() -> None:
    extractor = FeatureExtractor(
        tag_rules={"languages": {"elixir": (re.compile(r"\belixir\b", re.IGNORECASE),)}},
        extension_rules=(),
    )

    features = extractor.extract("Elixir and Python")

    assert features.languages == ("elixir",)
    assert features.frameworks == ()
    assert features.extensions == ()
