"""Settings dataclass and persistence helpers."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import asdict, dataclass, field, fields, replace
from pathlib import Path
from typing import Any, Dict, Mapping

__all__ = ["FoldingSettings", "SettingsStore"]

LOGGER = logging.getLogger(__name__)
_SETTINGS_DIR = Path.home() / ".commitfold"
_DEFAULT_SETTINGS_PATH = _SETTINGS_DIR / "settings.json"
_SETTINGS_VERSION = 1
_ENV_OVERRIDES: Mapping[str, str] = {
    "COMMITFOLD_LANGUAGE_ID": "language_id",
    "COMMITFOLD_LOG_DIR": "log_dir",
}
_BOOL_ENV_OVERRIDES: Mapping[str, str] = {
    "COMMITFOLD_ENABLED": "enabled",
    "COMMITFOLD_DEBUG_LOGGING": "debug_logging",
}
_TRUE_VALUES = {"1", "true", "yes", "on"}
_BOOL_FIELDS: tuple[str, ...] = ("enabled", "debug_logging")
_STR_FIELDS: tuple[str, ...] = ("language_id",)


@dataclass(slots=True)
class FoldingSettings:
    """User-configurable folding settings persisted between sessions."""

    enabled: bool = True
    language_id: str = "git-commit"
    debug_logging: bool = False
    log_dir: str | None = None
    metadata: dict[str, Any] = field(default_factory=dict)


class SettingsStore:
    """Persistence adapter for :class:`FoldingSettings`."""

    def __init__(self, path: Path | None = None) -> None:
        self._path = path or _DEFAULT_SETTINGS_PATH

    @property
    def path(self) -> Path:
        """Return the resolved path backing this store."""

        return self._path

    def load(self, *, overrides: Mapping[str, Any] | None = None) -> FoldingSettings:
        """Load settings from disk, applying CLI/environment overrides when present."""

        payload = self._read_payload()
        settings = FoldingSettings()
        if payload:
            data = self._normalize_payload(_filter_fields(payload))
            try:
                settings = FoldingSettings(**data)
            except TypeError as exc:
                LOGGER.warning("Settings payload contained unexpected data: %s", exc)
                settings = FoldingSettings()
            if payload.get("version") != _SETTINGS_VERSION:
                LOGGER.debug("Settings at %s use version %s", self._path, payload.get("version"))

        if overrides:
            settings = self._apply_overrides(settings, overrides, source="CLI")

        return self._apply_env_overrides(settings)

    def save(self, settings: FoldingSettings) -> Path:
        """Persist settings to disk with atomic file writes."""

        data = asdict(settings)
        data["version"] = _SETTINGS_VERSION
        body = json.dumps(data, indent=2, sort_keys=True)
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self._path.with_suffix(".tmp")
        tmp_path.write_text(body, encoding="utf-8")
        tmp_path.replace(self._path)
        LOGGER.debug("Settings saved to %s", self._path)
        return self._path

    def _read_payload(self) -> Dict[str, Any]:
        if not self._path.exists():
            return {}
        try:
            loaded = json.loads(self._path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return {}
        except json.JSONDecodeError as exc:
            LOGGER.warning("Settings file %s is not valid JSON: %s", self._path, exc)
            return {}
        if not isinstance(loaded, dict):
            LOGGER.warning("Settings file %s does not contain a JSON object", self._path)
            return {}
        return loaded

    def _normalize_payload(self, data: Dict[str, Any]) -> Dict[str, Any]:
        for name in _BOOL_FIELDS:
            if name not in data:
                continue
            value = data[name]
            if isinstance(value, bool):
                continue
            if isinstance(value, str):
                data[name] = value.strip().lower() in _TRUE_VALUES
            else:
                LOGGER.warning("Settings field %s has non-boolean value %r; using default", name, value)
                data.pop(name)
        for name in _STR_FIELDS:
            if name not in data:
                continue
            value = data[name]
            if isinstance(value, str) and value.strip():
                data[name] = value.strip()
            else:
                LOGGER.warning("Settings field %s has invalid value %r; using default", name, value)
                data.pop(name)
        log_dir = data.get("log_dir")
        if log_dir is not None and not isinstance(log_dir, str):
            LOGGER.warning("Settings field log_dir has non-string value %r; ignoring", log_dir)
            data.pop("log_dir")
        if not isinstance(data.get("metadata", {}), Mapping):
            LOGGER.debug("Ignoring non-mapping metadata payload of type %s", type(data["metadata"]))
            data.pop("metadata")
        return data

    def _apply_overrides(
        self,
        settings: FoldingSettings,
        overrides: Mapping[str, Any],
        *,
        source: str = "runtime",
    ) -> FoldingSettings:
        allowed = {item.name for item in fields(FoldingSettings)}
        filtered: Dict[str, Any] = {}
        for key, value in overrides.items():
            if key not in allowed or value is None:
                continue
            filtered[key] = value
        metadata_override = filtered.get("metadata")
        if isinstance(metadata_override, Mapping):
            merged_metadata = dict(settings.metadata or {})
            merged_metadata.update(metadata_override)
            filtered["metadata"] = merged_metadata
        if filtered:
            LOGGER.debug("Applying %s settings overrides: %s", source, sorted(filtered))
            settings = replace(settings, **filtered)
        return settings

    def _apply_env_overrides(self, settings: FoldingSettings) -> FoldingSettings:
        overrides: Dict[str, Any] = {}
        for env_name, field_name in _ENV_OVERRIDES.items():
            value = os.environ.get(env_name)
            if value is None:
                continue
            if not value.strip():
                LOGGER.warning("Environment override %s is empty; ignoring", env_name)
                continue
            overrides[field_name] = value.strip()
        for env_name, field_name in _BOOL_ENV_OVERRIDES.items():
            value = os.environ.get(env_name)
            if value is not None:
                overrides[field_name] = value.strip().lower() in _TRUE_VALUES
        if overrides:
            settings = self._apply_overrides(settings, overrides, source="environment")
        return settings


def _filter_fields(payload: Mapping[str, Any]) -> Dict[str, Any]:
    allowed = {item.name for item in fields(FoldingSettings)}
    return {key: value for key, value in payload.items() if key in allowed}
