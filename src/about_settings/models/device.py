from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

STORAGE_MASS = "mass"
STORAGE_SYSTEM = "system"
STORAGE_USER = "user"


@dataclass(frozen=True)
class MountRecord:
    mountpoint: str
    device: str


@dataclass(frozen=True)
class DiskUsageRow:
    storage_type: str
    path: str
    available: int
    total: int

    @property
    def used_percent(self) -> int:
        if self.total <= 0:
            return 0
        return int(round((self.total - self.available) * 100 / self.total))

    def as_dict(self) -> dict[str, Any]:
        return {
            "storageType": self.storage_type,
            "path": self.path,
            "available": self.available,
            "total": self.total,
        }


@dataclass(frozen=True)
class AboutData:
    total_disk_space: int
    available_disk_space: int
    disk_usage: list[DiskUsageRow]
    bluetooth_address: str
    wlan_mac_address: str
    imei: str
    serial: str
    software_version: str
    adaptation_version: str
    notes: list[str] = field(default_factory=list)
