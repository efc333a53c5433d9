import json
import logging
import os
from json import JSONDecodeError
from pathlib import Path

from passgen.password_settings import (
    DEFAULT_SETTINGS,
    GenerationSettings,
    InvalidSettingsError,
    validate_settings,
)


logger = logging.getLogger(__name__)

SETTINGS_KEY = "password-generator-settings"


class JsonFileStore:
    """
    Store cheie -> valoare peste un singur document JSON pe disc.
    Un fișier lipsă, gol sau corupt e tratat ca un store gol.
    """

    def __init__(self, file_path: str = "data/settings.json"):
        self.file_path = Path(file_path)

    def _read_all(self) -> dict:
        if not self.file_path.exists():
            return {}
        try:
            with open(self.file_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (JSONDecodeError, OSError, UnicodeDecodeError) as e:
            logger.warning("Ignoring unreadable store %s: %s", self.file_path, e)
            return {}
        if not isinstance(data, dict):
            logger.warning("Ignoring store %s: top level is not an object", self.file_path)
            return {}
        return data

    def _write_all(self, data: dict) -> bool:
        # scriere atomică: fișier temporar + replace
        tmp_path = self.file_path.with_suffix(self.file_path.suffix + ".tmp")
        try:
            self.file_path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=4)
            os.replace(tmp_path, self.file_path)
        except (OSError, TypeError, ValueError) as e:
            logger.error("Could not write store %s: %s", self.file_path, e)
            try:
                tmp_path.unlink()
            except FileNotFoundError:
                pass
            except OSError as cleanup_error:
                logger.warning("Could not remove temp file %s: %s", tmp_path, cleanup_error)
            return False
        return True

    def get(self, key: str, default=None):
        return self._read_all().get(key, default)

    def set(self, key: str, value) -> bool:
        data = self._read_all()
        data[key] = value
        return self._write_all(data)

    def remove(self, key: str) -> bool:
        data = self._read_all()
        if key not in data:
            return True
        del data[key]
        return self._write_all(data)

    def is_available(self) -> bool:
        """Verifică dacă putem scrie și șterge o cheie de test."""
        test_key = "__storage_test__"
        return self.set(test_key, "test") and self.remove(test_key)


class SettingsStore:
    """
    Încarcă/salvează GenerationSettings printr-un store cheie -> valoare.
    Datele persistate sunt revalidate la încărcare; orice problemă -> setările implicite.
    """

    def __init__(self, store: JsonFileStore, key: str = SETTINGS_KEY):
        self.store = store
        self.key = key

    def load(self) -> GenerationSettings:
        raw = self.store.get(self.key)
        if raw is None:
            return DEFAULT_SETTINGS

        try:
            settings = GenerationSettings.from_dict(raw)
        except InvalidSettingsError as e:
            logger.warning("Discarding persisted settings: %s", e)
            return DEFAULT_SETTINGS

        result = validate_settings(settings)
        if not result.is_valid:
            logger.warning("Discarding persisted settings: %s", "; ".join(result.errors))
            return DEFAULT_SETTINGS

        return settings

    def save(self, settings: GenerationSettings) -> bool:
        return self.store.set(self.key, settings.to_dict())

    def clear(self) -> bool:
        return self.store.remove(self.key)
