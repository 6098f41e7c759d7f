"""HTTP service mode exposing the operation registry."""

from .app import create_app, run_service

__all__ = ["create_app", "run_service"]
