from __future__ import annotations

from datetime import datetime

from about_settings.collectors.device_info_provider import DeviceInfoProvider
from about_settings.models.common import CollectorResult
from about_settings.models.device import AboutData


class AboutCollector:
    def __init__(self, provider: DeviceInfoProvider | None = None) -> None:
        self.provider = provider or DeviceInfoProvider()

    def collect(self) -> CollectorResult[AboutData]:
        ts = datetime.now()
        p = self.provider
        warnings: list[str] = []
        notes: list[str] = []

        identifiers = {
            "Software version": p.software_version(),
            "Adaptation version": p.adaptation_version(),
            "Serial": p.serial(),
            "IMEI": p.imei(),
            "WLAN MAC address": p.wlan_mac_address(),
            "Bluetooth address": p.bluetooth_address(),
        }
        for label, value in identifiers.items():
            if not value:
                notes.append(f"{label}: unavailable")

        # Statistics of 0 bytes mean the storage query for that path failed.
        disk_usage = p.disk_usage_model()
        for row in disk_usage:
            if row.total <= 0:
                warnings.append(f"Storage statistics unavailable: {row.path}")

        status = "OK" if not warnings else "WARN"
        data = AboutData(
            total_disk_space=p.total_disk_space(),
            available_disk_space=p.available_disk_space(),
            disk_usage=disk_usage,
            bluetooth_address=identifiers["Bluetooth address"],
            wlan_mac_address=identifiers["WLAN MAC address"],
            imei=identifiers["IMEI"],
            serial=identifiers["Serial"],
            software_version=identifiers["Software version"],
            adaptation_version=identifiers["Adaptation version"],
            notes=notes,
        )
        return CollectorResult(
            ts=ts,
            status=status,
            warning_count=len(warnings),
            warnings=warnings,
            data=data,
        )
