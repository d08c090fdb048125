from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from about_settings.collectors.device_info_provider import (
    DEFAULT_CANDIDATE_MOUNTPOINTS,
    DEFAULT_HW_RELEASE,
    DEFAULT_OS_RELEASE,
    DEFAULT_SERIAL_PATH,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConfigPaths:
    path: Path


@dataclass(frozen=True)
class AboutSettingsConfig:
    os_release_path: str = DEFAULT_OS_RELEASE
    hw_release_path: str = DEFAULT_HW_RELEASE
    serial_path: str = DEFAULT_SERIAL_PATH
    candidate_mountpoints: tuple[str, ...] = DEFAULT_CANDIDATE_MOUNTPOINTS
    log_level: str = "INFO"


class ConfigService:
    def __init__(self, paths: ConfigPaths | None = None) -> None:
        self.paths = paths or ConfigPaths(path=self.default_path())

    @staticmethod
    def default_path() -> Path:
        xdg = os.environ.get("XDG_CONFIG_HOME")
        if xdg:
            base = Path(xdg)
        else:
            base = Path.home() / ".config"
        return base / "about_settings" / "config.json"

    def load(self) -> dict[str, Any]:
        p = self.paths.path
        if not p.exists():
            return {}
        try:
            with open(p, "r", encoding="utf-8") as f:
                obj = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("Ignoring unreadable config %s: %s", p, e)
            return {}
        return obj if isinstance(obj, dict) else {}

    def load_settings(self) -> AboutSettingsConfig:
        cfg = self.load()
        defaults = AboutSettingsConfig()

        paths = cfg.get("paths")
        if not isinstance(paths, dict):
            paths = {}

        candidates_obj = cfg.get("candidate_mountpoints")
        if isinstance(candidates_obj, list):
            candidates = tuple(str(x) for x in candidates_obj)
        else:
            candidates = defaults.candidate_mountpoints

        log_cfg = cfg.get("logging")
        if not isinstance(log_cfg, dict):
            log_cfg = {}

        return AboutSettingsConfig(
            os_release_path=str(paths.get("os_release") or defaults.os_release_path),
            hw_release_path=str(paths.get("hw_release") or defaults.hw_release_path),
            serial_path=str(paths.get("serial") or defaults.serial_path),
            candidate_mountpoints=candidates,
            log_level=str(log_cfg.get("level") or defaults.log_level).upper(),
        )
