"""Canonical resource entities and admission schemas."""

from .entities import API_VERSION, RESOURCE_TYPES, Resource, parse_resource

__all__ = ["API_VERSION", "RESOURCE_TYPES", "Resource", "parse_resource"]
