from __future__ import annotations

import enum
import logging
import re
import subprocess
from pathlib import Path

import psutil

from about_settings.models.device import MountRecord

logger = logging.getLogger(__name__)

_CMD_TIMEOUT_S = 3
_MAC_RX = re.compile(r"([0-9A-Fa-f]{2}(?::[0-9A-Fa-f]{2}){5})")


class NetworkMode(enum.Enum):
    WLAN = "wlan"
    BLUETOOTH = "bluetooth"


class StorageInfo:
    def total(self, path: str = "/") -> int:
        try:
            return int(psutil.disk_usage(path).total)
        except OSError as e:
            logger.debug("disk_usage(%s) failed: %s", path, e)
            return 0

    def available(self, path: str = "/") -> int:
        try:
            return int(psutil.disk_usage(path).free)
        except OSError as e:
            logger.debug("disk_usage(%s) failed: %s", path, e)
            return 0


class MountTable:
    def records(self) -> list[MountRecord]:
        try:
            parts = psutil.disk_partitions(all=True)
        except Exception as e:  # noqa: BLE001
            logger.warning("Mount table not readable: %s", e)
            return []
        return [MountRecord(mountpoint=str(p.mountpoint), device=str(p.device)) for p in parts]


class NetworkInfo:
    def __init__(
        self,
        net_class_dir: str = "/sys/class/net",
        bluetooth_class_dir: str = "/sys/class/bluetooth",
    ) -> None:
        self.net_class_dir = Path(net_class_dir)
        self.bluetooth_class_dir = Path(bluetooth_class_dir)

    def mac_address(self, mode: NetworkMode, index: int = 0) -> str:
        if mode is NetworkMode.WLAN:
            return self._wlan_mac(index)
        return self._bluetooth_mac(index)

    def wlan_interfaces(self) -> list[str]:
        return sorted(self._wlan_addrs())

    def _wlan_addrs(self) -> dict[str, list]:
        try:
            addrs = psutil.net_if_addrs()
        except Exception as e:  # noqa: BLE001
            logger.debug("net_if_addrs failed: %s", e)
            return {}
        return {n: a for n, a in addrs.items() if self._is_wireless(n)}

    def _is_wireless(self, name: str) -> bool:
        d = self.net_class_dir / name
        return (d / "wireless").exists() or (d / "phy80211").exists()

    def _wlan_mac(self, index: int) -> str:
        # Names and addresses come from the same snapshot.
        wlan = self._wlan_addrs()
        names = sorted(wlan)
        if index < 0 or index >= len(names):
            return ""
        for a in wlan[names[index]]:
            if getattr(a, "family", None) == psutil.AF_LINK and a.address:
                return str(a.address).upper()
        return ""

    def _bluetooth_mac(self, index: int) -> str:
        if index < 0:
            return ""
        p = self.bluetooth_class_dir / f"hci{index}" / "address"
        try:
            text = p.read_text(encoding="utf-8").strip()
        except OSError:
            text = ""
        if _MAC_RX.fullmatch(text):
            return text.upper()

        try:
            out = subprocess.check_output(
                ["bluetoothctl", "list"],
                text=True,
                stderr=subprocess.DEVNULL,
                timeout=_CMD_TIMEOUT_S,
            )
        except (OSError, subprocess.SubprocessError) as e:
            logger.debug("bluetoothctl list failed: %s", e)
            return ""

        controllers: list[str] = []
        for line in out.splitlines():
            if not line.startswith("Controller"):
                continue
            m = _MAC_RX.search(line)
            if m:
                controllers.append(m.group(1).upper())
        return controllers[index] if index < len(controllers) else ""


class DeviceInfo:
    def imei(self, index: int = 0) -> str:
        if index < 0:
            return ""
        try:
            out = subprocess.check_output(
                ["mmcli", "-m", str(index), "-K"],
                text=True,
                stderr=subprocess.DEVNULL,
                timeout=_CMD_TIMEOUT_S,
            )
        except (OSError, subprocess.SubprocessError) as e:
            logger.debug("mmcli -m %s failed: %s", index, e)
            return ""
        return parse_equipment_identifier(out)


def parse_equipment_identifier(mmcli_output: str) -> str:
    for line in mmcli_output.splitlines():
        key, sep, value = line.partition(":")
        if not sep or key.strip() != "modem.generic.equipment-identifier":
            continue
        value = value.strip()
        return "" if value == "--" else value
    return ""
