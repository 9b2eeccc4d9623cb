"""Built-in template seed shipped with dcgen."""

from __future__ import annotations

from typing import Tuple

from ..models import TemplateDescriptor

FALLBACK_TEMPLATE = "universal"

_FEATURE = "ghcr.io/devcontainers/features"

BUILTIN_TEMPLATES: Tuple[TemplateDescriptor, ...] = (
    TemplateDescriptor(
        name="nodejs-typescript",
        description="Node.js development with TypeScript support",
        languages=("javascript", "typescript"),
        frameworks=("node", "express"),
        features=("Node.js", "TypeScript", "ESLint", "Prettier"),
        category="backend",
        base_config={
            "name": "Node.js & TypeScript Development",
            "image": "mcr.microsoft.com/devcontainers/typescript-node:18",
            "features": {f"{_FEATURE}/node:1": {"version": "18"}},
            "customizations": {
                "vscode": {
                    "extensions": [
                        "ms-vscode.vscode-typescript-next",
                        "ms-vscode.vscode-eslint",
                        "esbenp.prettier-vscode",
                        "ms-vscode.vscode-json",
                    ]
                }
            },
            "forwardPorts": [3000],
            "postCreateCommand": "npm install",
            "remoteUser": "node",
        },
    ),
    TemplateDescriptor(
        name="python",
        description="Python development with common packages and debugging",
        languages=("python",),
        frameworks=("django", "flask", "fastapi"),
        features=("Python", "pip", "pytest", "Black"),
        category="backend",
        base_config={
            "name": "Python Development",
            "image": "mcr.microsoft.com/devcontainers/python:3.11",
            "features": {f"{_FEATURE}/python:1": {"version": "3.11"}},
            "customizations": {
                "vscode": {
                    "extensions": [
                        "ms-python.python",
                        "ms-python.pylint",
                        "ms-python.black-formatter",
                        "ms-python.isort",
                    ]
                }
            },
            "forwardPorts": [8000],
            "postCreateCommand": "pip install -r requirements.txt",
            "remoteUser": "vscode",
        },
    ),
    TemplateDescriptor(
        name="go",
        description="Go development with standard tooling",
        languages=("go",),
        frameworks=("gin", "fiber", "echo"),
        features=("Go", "go mod", "gofmt", "gopls"),
        category="backend",
        base_config={
            "name": "Go Development",
            "image": "mcr.microsoft.com/devcontainers/go:1.21",
            "features": {f"{_FEATURE}/go:1": {"version": "1.21"}},
            "customizations": {"vscode": {"extensions": ["golang.go", "ms-vscode.vscode-json"]}},
            "forwardPorts": [8080],
            "postCreateCommand": "go mod download",
            "remoteUser": "vscode",
        },
    ),
    TemplateDescriptor(
        name="rust",
        description="Rust environment with Cargo and debugging",
        languages=("rust",),
        frameworks=("actix", "rocket", "warp"),
        features=("Rust", "Cargo", "rustfmt", "clippy"),
        category="backend",
        base_config={
            "name": "Rust Development",
            "image": "mcr.microsoft.com/devcontainers/rust:1",
            "features": {f"{_FEATURE}/rust:1": {"version": "latest"}},
            "customizations": {
                "vscode": {"extensions": ["rust-lang.rust-analyzer", "vadimcn.vscode-lldb"]}
            },
            "forwardPorts": [8000],
            "postCreateCommand": "cargo build",
            "remoteUser": "vscode",
        },
    ),
    TemplateDescriptor(
        name="java",
        description="Java with Maven/Gradle support",
        languages=("java",),
        frameworks=("spring", "springboot", "maven", "gradle"),
        features=("Java", "Maven", "Gradle", "JUnit"),
        category="backend",
        base_config={
            "name": "Java Development",
            "image": "mcr.microsoft.com/devcontainers/java:17",
            "features": {
                f"{_FEATURE}/java:1": {
                    "version": "17",
                    "installMaven": True,
                    "installGradle": True,
                }
            },
            "customizations": {
                "vscode": {
                    "extensions": ["vscjava.vscode-java-pack", "vmware.vscode-spring-boot"]
                }
            },
            "forwardPorts": [8080],
            "postCreateCommand": "mvn dependency:resolve",
            "remoteUser": "vscode",
        },
    ),
    TemplateDescriptor(
        name="php",
        description="PHP with Composer and debugging",
        languages=("php",),
        frameworks=("laravel", "symfony", "codeigniter"),
        features=("PHP", "Composer", "Xdebug"),
        category="backend",
        base_config={
            "name": "PHP Development",
            "image": "mcr.microsoft.com/devcontainers/php:8.2",
            "features": {f"{_FEATURE}/php:1": {"version": "8.2"}},
            "customizations": {
                "vscode": {
                    "extensions": ["bmewburn.vscode-intelephense-client", "xdebug.php-debug"]
                }
            },
            "forwardPorts": [8000],
            "postCreateCommand": "composer install",
            "remoteUser": "vscode",
        },
    ),
    TemplateDescriptor(
        name="ruby",
        description="Ruby with Rails support",
        languages=("ruby",),
        frameworks=("rails", "sinatra"),
        features=("Ruby", "Rails", "Bundler", "RSpec"),
        category="backend",
        base_config={
            "name": "Ruby Development",
            "image": "mcr.microsoft.com/devcontainers/ruby:3.2",
            "features": {f"{_FEATURE}/ruby:1": {"version": "3.2"}},
            "customizations": {
                "vscode": {"extensions": ["rebornix.ruby", "wingrunr21.vscode-ruby"]}
            },
            "forwardPorts": [3000],
            "postCreateCommand": "bundle install",
            "remoteUser": "vscode",
        },
    ),
    TemplateDescriptor(
        name="react",
        description="Modern React development stack",
        languages=("javascript", "typescript"),
        frameworks=("react", "next", "vite"),
        features=("React", "TypeScript", "Vite", "ESLint"),
        category="frontend",
        base_config={
            "name": "React Development",
            "image": "mcr.microsoft.com/devcontainers/typescript-node:18",
            "features": {f"{_FEATURE}/node:1": {"version": "18"}},
            "customizations": {
                "vscode": {
                    "extensions": [
                        "ms-vscode.vscode-typescript-next",
                        "bradlc.vscode-tailwindcss",
                        "esbenp.prettier-vscode",
                        "ms-vscode.vscode-eslint",
                        "ms-vscode.vscode-json",
                    ]
                }
            },
            "forwardPorts": [3000, 5173],
            "postCreateCommand": "npm install",
            "remoteUser": "node",
        },
    ),
    TemplateDescriptor(
        name="mean-stack",
        description="MongoDB, Express, Angular, Node.js stack",
        languages=("javascript", "typescript"),
        frameworks=("angular", "express", "mongodb"),
        features=("Node.js", "Angular", "MongoDB", "Express"),
        category="fullstack",
        base_config={
            "name": "MEAN Stack Development",
            "dockerComposeFile": "docker-compose.yml",
            "service": "app",
            "workspaceFolder": "/workspace",
            "features": {f"{_FEATURE}/node:1": {"version": "18"}},
            "customizations": {
                "vscode": {
                    "extensions": [
                        "ms-vscode.vscode-typescript-next",
                        "angular.ng-template",
                        "mongodb.mongodb-vscode",
                    ]
                }
            },
            "forwardPorts": [4200, 3000, 27017],
            "postCreateCommand": "npm install",
        },
    ),
    TemplateDescriptor(
        name="docker-compose",
        description="Multi-service development with Docker Compose",
        languages=("javascript", "python", "go"),
        frameworks=("microservices", "docker"),
        features=("Docker", "Docker Compose", "Multi-service"),
        category="fullstack",
        base_config={
            "name": "Docker Compose Development",
            "dockerComposeFile": "docker-compose.yml",
            "service": "app",
            "workspaceFolder": "/workspace",
            "shutdownAction": "stopCompose",
            "customizations": {
                "vscode": {
                    "extensions": [
                        "ms-azuretools.vscode-docker",
                        "ms-vscode-remote.remote-containers",
                    ]
                }
            },
            "forwardPorts": [3000, 8000, 5432],
            "postCreateCommand": 'echo "Multi-service environment ready"',
        },
    ),
    TemplateDescriptor(
        name=FALLBACK_TEMPLATE,
        description="Multi-language development environment",
        languages=("javascript", "python", "go", "rust", "java"),
        frameworks=("universal",),
        features=("Multiple Languages", "Git", "Docker", "SSH"),
        category="universal",
        base_config={
            "name": "Universal Development Environment",
            "image": "mcr.microsoft.com/devcontainers/universal:2",
            "features": {
                f"{_FEATURE}/docker-in-docker:2": {},
                f"{_FEATURE}/git:1": {},
                f"{_FEATURE}/github-cli:1": {},
            },
            "customizations": {
                "vscode": {
                    "extensions": [
                        "ms-vscode.vscode-json",
                        "ms-azuretools.vscode-docker",
                        "github.vscode-pull-request-github",
                    ]
                }
            },
            "forwardPorts": [3000, 8000, 8080],
            "postCreateCommand": 'echo "Universal environment ready"',
            "remoteUser": "codespace",
        },
    ),
)

__all__ = ["BUILTIN_TEMPLATES", "FALLBACK_TEMPLATE"]
