from __future__ import annotations

import logging
from pathlib import Path

from about_settings.models.device import (
    STORAGE_MASS,
    STORAGE_SYSTEM,
    STORAGE_USER,
    DiskUsageRow,
)
from about_settings.services.platform_info import (
    DeviceInfo,
    MountTable,
    NetworkInfo,
    NetworkMode,
    StorageInfo,
)
from about_settings.services.release_file import ReleaseFileParser

logger = logging.getLogger(__name__)

DEFAULT_OS_RELEASE = "/etc/os-release"
DEFAULT_HW_RELEASE = "/etc/hw-release"
DEFAULT_SERIAL_PATH = "/config/serial/serial.txt"
DEFAULT_CANDIDATE_MOUNTPOINTS: tuple[str, ...] = ("/home",)

ROOT_PATH = "/"


class DeviceInfoProvider:
    def __init__(
        self,
        storage: StorageInfo | None = None,
        mounts: MountTable | None = None,
        network: NetworkInfo | None = None,
        device: DeviceInfo | None = None,
        os_release_path: str = DEFAULT_OS_RELEASE,
        hw_release_path: str = DEFAULT_HW_RELEASE,
        serial_path: str = DEFAULT_SERIAL_PATH,
        candidate_mountpoints: tuple[str, ...] = DEFAULT_CANDIDATE_MOUNTPOINTS,
    ) -> None:
        self.storage = storage or StorageInfo()
        self.mounts = mounts or MountTable()
        self.network = network or NetworkInfo()
        self.device = device or DeviceInfo()
        self.os_release_path = os_release_path
        self.hw_release_path = hw_release_path
        self.serial_path = serial_path
        self.candidate_mountpoints = tuple(candidate_mountpoints)

    def total_disk_space(self, path: str = ROOT_PATH) -> int:
        return self.storage.total(path)

    def available_disk_space(self, path: str = ROOT_PATH) -> int:
        return self.storage.available(path)

    def disk_usage_model(self) -> list[DiskUsageRow]:
        paths = [ROOT_PATH]

        # Later entries win, so an over-mount replaces what it hides.
        devices: dict[str, str] = {}
        for rec in self.mounts.records():
            devices[rec.mountpoint] = rec.device

        root_device = devices.get(ROOT_PATH)
        for mountpoint, device in devices.items():
            if mountpoint == ROOT_PATH or mountpoint in paths:
                continue
            if mountpoint in self.candidate_mountpoints and device != root_device:
                paths.append(mountpoint)

        logger.debug("Reporting disk usage for %s", paths)
        rows: list[DiskUsageRow] = []
        for path in paths:
            if len(paths) == 1:
                storage_type = STORAGE_MASS
            elif path == ROOT_PATH:
                storage_type = STORAGE_SYSTEM
            else:
                storage_type = STORAGE_USER
            rows.append(
                DiskUsageRow(
                    storage_type=storage_type,
                    path=path,
                    available=self.storage.available(path),
                    total=self.storage.total(path),
                )
            )
        return rows

    def bluetooth_address(self) -> str:
        return self.network.mac_address(NetworkMode.BLUETOOTH, 0)

    def wlan_mac_address(self) -> str:
        return self.network.mac_address(NetworkMode.WLAN, 0)

    def imei(self) -> str:
        return self.device.imei(0)

    def serial(self) -> str:
        # Device specific: the generic unique device id does not carry the
        # serial number on this hardware, so read the factory file instead.
        p = Path(self.serial_path)
        if not p.exists():
            return ""
        try:
            return p.read_bytes().decode("utf-8-sig", errors="replace").strip()
        except OSError as e:
            logger.warning("Serial file %s not readable: %s", p, e)
            return ""

    def software_version(self) -> str:
        return ReleaseFileParser(self.os_release_path)["VERSION"]

    def adaptation_version(self) -> str:
        return ReleaseFileParser(self.hw_release_path)["VERSION_ID"]
