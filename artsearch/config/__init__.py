# Path: artsearch/config/__init__.py
# Purpose: Package initializer for configuration module.
# Layer: config.
# Details: Exposes settings models for application-wide configuration.

from .settings import AppSettings, SearchSettings, VisualSettings, configure_logging

__all__ = ["AppSettings", "SearchSettings", "VisualSettings", "configure_logging"]
