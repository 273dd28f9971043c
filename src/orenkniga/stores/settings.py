"""Persisted reader settings."""

import logging

from pydantic import ValidationError

from orenkniga.models.settings import ReaderSettings
from orenkniga.storage import KeyValueStore

log = logging.getLogger(__name__)


class SettingsStore:
    """Loads and saves ``ReaderSettings`` under a fixed key."""

    SETTINGS_KEY = "orenkniga-reader-settings"

    def __init__(self, store: KeyValueStore, key: str = SETTINGS_KEY):
        self.store = store
        self.key = key

    def load(self) -> ReaderSettings:
        """Return the persisted settings, or defaults if none are saved.

        Defaults are not written back until the first update.
        """
        raw = self.store.get(self.key)
        if raw is None:
            return ReaderSettings()

        try:
            return ReaderSettings.model_validate_json(raw)
        except ValidationError as e:
            log.warning("Discarding unreadable reader settings: %s", e)
            return ReaderSettings()

    def save(self, settings: ReaderSettings) -> None:
        """Persist settings."""
        self.store.set(self.key, settings.to_storage())

    def update(self, **changes: object) -> ReaderSettings:
        """Merge changes over the current settings, clamp, persist, return.

        Raises:
            TypeError: If a change names an unknown field
            ValidationError: If a value is not a number or enum value at all
        """
        unknown = set(changes) - set(ReaderSettings.model_fields)
        if unknown:
            raise TypeError(f"Unknown reader settings: {', '.join(sorted(unknown))}")

        current = self.load()
        updated = ReaderSettings.model_validate({**current.model_dump(), **changes})
        self.save(updated)
        return updated

    def reset(self) -> ReaderSettings:
        """Forget persisted settings and return the defaults."""
        self.store.delete(self.key)
        return ReaderSettings()
