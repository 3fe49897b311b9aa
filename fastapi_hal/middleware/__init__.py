"""Middleware for HAL applications."""

from .error_handler import HalErrorMiddleware

__all__ = ["HalErrorMiddleware"]
