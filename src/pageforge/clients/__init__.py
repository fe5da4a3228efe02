"""Clients for external services."""

from .backend import BackendClient

__all__ = ["BackendClient"]
