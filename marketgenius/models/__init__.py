"""Pydantic models for the MarketGenius API."""
from __future__ import annotations

from marketgenius.models.base import CamelModel, to_camel
from marketgenius.models.brief import BlogBrief

__all__ = ["BlogBrief", "CamelModel", "to_camel"]
