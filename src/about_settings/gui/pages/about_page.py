from __future__ import annotations

from datetime import datetime

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QAbstractItemView,
    QGridLayout,
    QGroupBox,
    QLabel,
    QTableWidget,
    QTableWidgetItem,
    QVBoxLayout,
    QWidget,
)

from about_settings.models.common import CollectorResult
from about_settings.models.device import AboutData, DiskUsageRow

UNKNOWN = "Unknown"

_STORAGE_TITLES = {
    "mass": "Mass storage",
    "system": "System data",
    "user": "User data",
}


def _human_bytes(n: int) -> str:
    v = float(n)
    for unit in ("B", "KB", "MB", "GB", "TB"):
        if v < 1024.0:
            return f"{v:.1f}{unit}" if unit != "B" else f"{int(v)}B"
        v /= 1024.0
    return f"{v:.1f}PB"


class AboutPage(QWidget):
    def __init__(self) -> None:
        super().__init__()

        self._last_update = QLabel("Last Update: -")
        self._fields: dict[str, QLabel] = {}

        device = QGroupBox("Device")
        grid = QGridLayout(device)
        for row, title in enumerate(
            (
                "Software version",
                "Adaptation version",
                "Serial number",
                "IMEI",
                "WLAN MAC address",
                "Bluetooth address",
            )
        ):
            value = QLabel("-")
            value.setTextInteractionFlags(Qt.TextSelectableByMouse)
            grid.addWidget(QLabel(title), row, 0)
            grid.addWidget(value, row, 1)
            self._fields[title] = value

        storage = QGroupBox("Storage")
        self._storage = QTableWidget(0, 5)
        self._storage.setHorizontalHeaderLabels(["TYPE", "PATH", "AVAILABLE", "TOTAL", "USED%"])
        self._storage.setEditTriggers(QAbstractItemView.NoEditTriggers)
        self._storage.setSelectionBehavior(QAbstractItemView.SelectRows)
        self._storage.setAlternatingRowColors(True)
        self._storage.horizontalHeader().setStretchLastSection(True)
        QVBoxLayout(storage).addWidget(self._storage)

        self._notes = QLabel("")
        self._notes.setWordWrap(True)

        layout = QVBoxLayout(self)
        layout.addWidget(self._last_update)
        layout.addWidget(device)
        layout.addWidget(storage)
        layout.addWidget(self._notes)
        layout.addStretch(1)

    def set_data(self, result: CollectorResult[AboutData]) -> None:
        ts = result.ts.strftime("%F %T") if isinstance(result.ts, datetime) else str(result.ts)
        self._last_update.setText(f"Last Update: {ts}")

        d = result.data
        values = {
            "Software version": d.software_version,
            "Adaptation version": d.adaptation_version,
            "Serial number": d.serial,
            "IMEI": d.imei,
            "WLAN MAC address": d.wlan_mac_address,
            "Bluetooth address": d.bluetooth_address,
        }
        for title, value in values.items():
            self._fields[title].setText(value or UNKNOWN)

        self._fill_storage(d.disk_usage)
        self._notes.setText("\n".join(result.warnings + d.notes))

    def _fill_storage(self, rows: list[DiskUsageRow]) -> None:
        t = self._storage
        t.setRowCount(len(rows))
        for r, row in enumerate(rows):
            t.setItem(r, 0, QTableWidgetItem(_STORAGE_TITLES.get(row.storage_type, row.storage_type)))
            t.setItem(r, 1, QTableWidgetItem(row.path))
            t.setItem(r, 2, QTableWidgetItem(_human_bytes(row.available)))
            t.setItem(r, 3, QTableWidgetItem(_human_bytes(row.total)))
            t.setItem(r, 4, QTableWidgetItem(str(row.used_percent)))
        t.resizeColumnsToContents()
