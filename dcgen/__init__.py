"""Generate and patch devcontainer.json documents from plain-text requests."""

__version__ = "0.3.0"
