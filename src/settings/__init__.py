from .store import Settings, SettingsStore

__all__ = ["Settings", "SettingsStore"]
