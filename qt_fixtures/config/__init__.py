"""Configuration module for QueryTorque fixtures."""

from .settings import FixtureSettings, get_settings

__all__ = ["FixtureSettings", "get_settings"]
