"""Shared service-layer helpers."""

from hydration_service.core.services.base import BaseService

__all__ = ["BaseService"]
