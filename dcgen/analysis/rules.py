"""Keyword rule tables used by the feature extractor."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Dict, FrozenSet, Pattern, Tuple

RuleTable = Dict[str, Tuple[Pattern[str], ...]]


def _words(*alternatives: str) -> Pattern[str]:
    """Compile a case-insensitive pattern matching any alternative as a whole word."""
    body = "|".join(alternatives)
    return re.compile(rf"(?<!\w)(?:{body})(?!\w)", re.IGNORECASE)


LANGUAGE_RULES: RuleTable = {
    "javascript": (_words(r"javascript", r"js", r"node\.?js", r"npm", r"yarn"),),
    "typescript": (_words(r"typescript", r"ts"),),
    "python": (_words(r"python", r"py", r"django", r"flask", r"fastapi", r"pip"),),
    "go": (_words(r"go", r"golang"),),
    "rust": (_words(r"rust", r"cargo"),),
    "java": (_words(r"java", r"maven", r"gradle", r"spring"),),
    "php": (_words(r"php", r"composer", r"laravel", r"symfony"),),
    "ruby": (_words(r"ruby", r"rails", r"gem", r"bundler"),),
    "csharp": (
        _words(r"c#", r"csharp", r"dotnet"),
        # `.net` also counts as a suffix, as in ASP.NET
        re.compile(r"\.net\b", re.IGNORECASE),
    ),
    "cpp": (_words(r"c\+\+", r"cpp", r"cmake"),),
}

FRAMEWORK_RULES: RuleTable = {
    "react": (_words(r"react", r"jsx", r"next\.?js"),),
    "angular": (_words(r"angular", r"ng"),),
    "vue": (_words(r"vue", r"vuejs"),),
    "express": (_words(r"express", r"expressjs"),),
    "django": (_words(r"django"),),
    "flask": (_words(r"flask"),),
    "fastapi": (_words(r"fastapi", r"fast\s+api"),),
    "rails": (_words(r"rails", r"ruby\s+on\s+rails"),),
    "spring": (_words(r"spring", r"springboot", r"spring\s+boot"),),
    "gin": (_words(r"gin"),),
    "fiber": (_words(r"fiber"),),
    "actix": (_words(r"actix"),),
    "rocket": (_words(r"rocket"),),
}

DATABASE_RULES: RuleTable = {
    "postgresql": (_words(r"postgres", r"postgresql", r"psql"),),
    "mysql": (_words(r"mysql"),),
    "mongodb": (_words(r"mongo", r"mongodb"),),
    "redis": (_words(r"redis"),),
    "sqlite": (_words(r"sqlite"),),
    "elasticsearch": (_words(r"elasticsearch", r"elastic"),),
}

TOOL_RULES: RuleTable = {
    "docker": (_words(r"docker", r"container"),),
    "git": (_words(r"git", r"github", r"gitlab"),),
    "vim": (_words(r"vim", r"neovim", r"nvim"),),
    "zsh": (_words(r"zsh", r"oh-my-zsh"),),
    "curl": (_words(r"curl"),),
    "wget": (_words(r"wget"),),
    "jq": (_words(r"jq"),),
}

# Evaluated in this order; the first category key is the FeatureSet field name.
TAG_RULES: Dict[str, RuleTable] = {
    "languages": LANGUAGE_RULES,
    "frameworks": FRAMEWORK_RULES,
    "databases": DATABASE_RULES,
    "tools": TOOL_RULES,
}

EXPLICIT_PORT_PATTERN = re.compile(r"\bport\s+(\d+)\b", re.IGNORECASE)
EXPLICIT_PORT_RANGE = (1, 65535)

# Bare numbers are only trusted inside the usual dev-server range.
STANDALONE_PORT_PATTERN = re.compile(r"\b(\d{4,5})\b")
STANDALONE_PORT_RANGE = (3000, 9999)

DEFAULT_OS = "ubuntu"

# Priority order, not textual order.
OS_RULES: Tuple[Tuple[str, Pattern[str]], ...] = (
    ("alpine", _words(r"alpine", r"alpine\s+linux")),
    ("debian", _words(r"debian")),
)


@dataclass(frozen=True)
class ExtensionRule:
    """Recommends editor extensions when any trigger tag was detected."""

    category: str
    triggers: FrozenSet[str]
    extensions: Tuple[str, ...]


EXTENSION_RULES: Tuple[ExtensionRule, ...] = (
    ExtensionRule(
        "languages",
        frozenset({"typescript", "javascript"}),
        ("ms-vscode.vscode-typescript-next", "ms-vscode.vscode-eslint"),
    ),
    ExtensionRule("languages", frozenset({"python"}), ("ms-python.python", "ms-python.pylint")),
    ExtensionRule("languages", frozenset({"go"}), ("golang.go",)),
    ExtensionRule("languages", frozenset({"rust"}), ("rust-lang.rust-analyzer",)),
    ExtensionRule(
        "frameworks",
        frozenset({"react"}),
        ("bradlc.vscode-tailwindcss", "esbenp.prettier-vscode"),
    ),
)


__all__ = [
    "DATABASE_RULES",
    "DEFAULT_OS",
    "EXPLICIT_PORT_PATTERN",
    "EXPLICIT_PORT_RANGE",
    "EXTENSION_RULES",
    "ExtensionRule",
    "FRAMEWORK_RULES",
    "LANGUAGE_RULES",
    "OS_RULES",
    "RuleTable",
    "STANDALONE_PORT_PATTERN",
    "STANDALONE_PORT_RANGE",
    "TAG_RULES",
    "TOOL_RULES",
]
