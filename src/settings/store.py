"""App preferences: appearance, daily notification time, onboarding flag."""

from datetime import time

import structlog
from pydantic import BaseModel, ValidationError

from storage import KeyValueStore, StorageKeys

logger = structlog.get_logger()


class Settings(BaseModel):
    dark_mode: bool = False
    notifications_enabled: bool = False
    daily_fact_time: time = time(9, 0)
    has_completed_onboarding: bool = False


class SettingsStore:
    def __init__(self, kv: KeyValueStore):
        self.kv = kv
        self.settings = self._load()

    def _load(self) -> Settings:
        data = self.kv.get_json(StorageKeys.SETTINGS) or {}
        try:
            return Settings.model_validate(data)
        except ValidationError as e:
            logger.warning("settings_load_failed", error=str(e))
            return Settings()

    def _save(self) -> None:
        self.kv.set_json(StorageKeys.SETTINGS, self.settings.model_dump(mode="json"))

    def update(self, **fields) -> Settings:
        """Validate and persist changed fields.

        Raises:
            ValueError: unknown field or invalid value.
        """
        unknown = set(fields) - set(Settings.model_fields)
        if unknown:
            raise ValueError(f"Unknown setting(s): {', '.join(sorted(unknown))}")
        merged = {**self.settings.model_dump(), **fields}
        try:
            self.settings = Settings.model_validate(merged)
        except ValidationError as e:
            raise ValueError(f"Invalid setting: {e}") from e
        self._save()
        return self.settings

    def toggle_dark_mode(self) -> bool:
        return self.update(dark_mode=not self.settings.dark_mode).dark_mode

    def toggle_notifications(self) -> bool:
        return self.update(notifications_enabled=not self.settings.notifications_enabled).notifications_enabled

    def set_daily_fact_time(self, value: time) -> None:
        self.update(daily_fact_time=value)

    def complete_onboarding(self) -> None:
        self.update(has_completed_onboarding=True)
