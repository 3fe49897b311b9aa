"""Routing helpers for HAL endpoints."""

from .base import HalRouter, hal_endpoint, to_response

__all__ = ["HalRouter", "hal_endpoint", "to_response"]
