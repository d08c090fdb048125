"""Tests for the About snapshot collector."""

from unittest.mock import MagicMock

from about_settings.collectors.about_collector import AboutCollector
from about_settings.models.device import DiskUsageRow


def make_provider(**overrides):
    provider = MagicMock()
    values = {
        "total_disk_space": 100,
        "available_disk_space": 40,
        "disk_usage_model": [DiskUsageRow("mass", "/", 40, 100)],
        "bluetooth_address": "11:22:33:44:55:66",
        "wlan_mac_address": "AA:BB:CC:DD:EE:FF",
        "imei": "356938035643809",
        "serial": "JT-1",
        "software_version": "1.2.3",
        "adaptation_version": "0.5",
    }
    values.update(overrides)
    for name, value in values.items():
        getattr(provider, name).return_value = value
    return provider


class TestAboutCollector:
    def test_snapshot_contains_every_accessor(self):
        res = AboutCollector(make_provider()).collect()
        d = res.data
        assert res.status == "OK"
        assert res.warning_count == 0
        assert d.software_version == "1.2.3"
        assert d.adaptation_version == "0.5"
        assert d.serial == "JT-1"
        assert d.imei == "356938035643809"
        assert d.wlan_mac_address == "AA:BB:CC:DD:EE:FF"
        assert d.bluetooth_address == "11:22:33:44:55:66"
        assert d.total_disk_space == 100
        assert d.available_disk_space == 40
        assert [r.path for r in d.disk_usage] == ["/"]
        assert d.notes == []

    def test_unavailable_identifiers_become_notes(self):
        res = AboutCollector(make_provider(imei="", serial="")).collect()
        assert res.status == "OK"
        assert res.data.imei == ""
        assert "IMEI: unavailable" in res.data.notes
        assert "Serial: unavailable" in res.data.notes
        assert len(res.data.notes) == 2

    def test_failed_storage_statistics_warn(self):
        rows = [DiskUsageRow("system", "/", 40, 100), DiskUsageRow("user", "/home", 0, 0)]
        res = AboutCollector(make_provider(disk_usage_model=rows)).collect()
        assert res.status == "WARN"
        assert res.warning_count == 1
        assert res.warnings == ["Storage statistics unavailable: /home"]
        assert [r.path for r in res.data.disk_usage] == ["/", "/home"]
