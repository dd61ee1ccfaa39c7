"""Configuration management for cl10."""

from .config import Cl10Config
from .defaults import create_default_config

__all__ = ["Cl10Config", "create_default_config"]
