"""Command implementations exposed by the preq CLI."""

from .create import create_pull_request

__all__ = ["create_pull_request"]
