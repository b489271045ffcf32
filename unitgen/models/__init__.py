"""Data models for unit generation."""

from .unit import GeneratedUnitFile, UnitConfig

__all__ = ["UnitConfig", "GeneratedUnitFile"]
