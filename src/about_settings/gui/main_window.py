from __future__ import annotations

import logging
from typing import Any

from PySide6.QtCore import QThreadPool
from PySide6.QtWidgets import QMainWindow, QPushButton

from about_settings.collectors.about_collector import AboutCollector
from about_settings.collectors.device_info_provider import DeviceInfoProvider
from about_settings.gui.pages.about_page import AboutPage
from about_settings.gui.workers import Worker, WorkerJob
from about_settings.models.common import CollectorResult
from about_settings.models.device import AboutData
from about_settings.services.config_service import AboutSettingsConfig

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(self, settings: AboutSettingsConfig | None = None) -> None:
        super().__init__()
        self.setWindowTitle("About Device")
        self.resize(640, 560)

        settings = settings or AboutSettingsConfig()
        provider = DeviceInfoProvider(
            os_release_path=settings.os_release_path,
            hw_release_path=settings.hw_release_path,
            serial_path=settings.serial_path,
            candidate_mountpoints=settings.candidate_mountpoints,
        )
        self._collector = AboutCollector(provider)
        self._latest: CollectorResult[AboutData] | None = None

        self._thread_pool = QThreadPool.globalInstance()
        self._req_id = 0
        self._active_workers: set[Worker] = set()

        self._page = AboutPage()
        self.setCentralWidget(self._page)

        self.statusBar().showMessage("Ready")
        refresh_btn = QPushButton("Refresh")
        refresh_btn.clicked.connect(self.refresh)  # type: ignore[arg-type]
        self.statusBar().addPermanentWidget(refresh_btn)

        self.refresh()

    def refresh(self) -> None:
        self._req_id += 1

        w = Worker(WorkerJob(req_id=self._req_id, fn=self._collector.collect))
        self._active_workers.add(w)
        w.signals.result.connect(self._on_result)  # type: ignore[arg-type]
        w.signals.error.connect(self._on_worker_error)  # type: ignore[arg-type]
        w.signals.finished.connect(lambda _w=w: self._active_workers.discard(_w))  # type: ignore[arg-type]
        self._thread_pool.start(w)

    def _on_result(self, req_id: int, res: Any) -> None:
        if req_id != self._req_id:
            return
        if not isinstance(res, CollectorResult):
            return
        try:
            about_res: CollectorResult[AboutData] = res
            self._latest = about_res
            self._page.set_data(about_res)
            self.statusBar().showMessage(
                f"Updated: {about_res.ts.strftime('%F %T')} | Status: {about_res.status} | Warnings: {about_res.warning_count}"
            )
        except Exception as e:  # noqa: BLE001
            self._on_worker_error(str(e))

    def _on_worker_error(self, msg: str) -> None:
        logger.error("Refresh failed: %s", msg)
        self.statusBar().showMessage(f"Error: {msg}")
