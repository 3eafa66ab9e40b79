"""Decorators for cross-cutting concerns."""

from .error_handler import handle_validation_errors

__all__ = ["handle_validation_errors"]
