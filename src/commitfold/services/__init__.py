"""Service layer helpers (settings persistence)."""

from .settings import FoldingSettings, SettingsStore

__all__ = ["FoldingSettings", "SettingsStore"]
