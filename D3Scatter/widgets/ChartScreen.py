# widgets/ChartScreen.py

import logging
import os
from typing import Any, Optional

from PyQt5 import QtWidgets
from PyQt5.QtCore import QRect, QThread, QUrl, pyqtSignal, pyqtSlot
from PyQt5.QtWidgets import QMenu, QToolBar, QToolButton
from PyQt5.QtWebEngineWidgets import QWebEngineSettings, QWebEngineView

from D3Scatter.ChartBridge import ChartBridge
from D3Scatter.DataPointSubmitter import DataPointSubmitter
from D3Scatter.config import ChartConfig
from D3Scatter.generators import get_generator
from D3Scatter.widgets.ChartPage import ChartPage

logger = logging.getLogger(__name__)

D3_URL_PLACEHOLDER = "%D3_URL%"


class ScreenState:
    PAGE_NOT_READY = "page not ready"
    PAGE_READY = "page ready"
    STREAMING = "streaming"
    DONE = "done"
    FAILED = "failed"


class ChartScreen(QtWidgets.QWidget):
    """
    Hosts the web view rendering the D3 scatterplot and drives it with
    generated points.

    Once the page reports a successful load the chart is initialized with the
    configured domain, then a single DataPointSubmitter generates the batch on
    a background thread. Every point is handed back to this widget's thread
    before the page is touched.
    """

    chart_initialized = pyqtSignal()
    point_delivered = pyqtSignal(int, int, int)
    all_points_delivered = pyqtSignal(int)
    load_failed = pyqtSignal(str)

    def __init__(
        self,
        config: Optional[ChartConfig] = None,
        view: Optional[Any] = None,
        *,
        autoload: bool = True,
        parent: Optional[QtWidgets.QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self.config: ChartConfig = config if config is not None else ChartConfig()
        self.state: str = ScreenState.PAGE_NOT_READY
        self.submitter: Optional[DataPointSubmitter] = None

        self.setWindowTitle(f"Scatterplot: {self.config.chart_id}")

        self.toolbar = QToolBar("Chart Toolbar", self)
        self.toolbar.setMovable(False)
        self.toolbar.setFloatable(False)
        self.toolbar.setFixedHeight(24)
        self._create_actions()

        if view is None:
            view = QWebEngineView(self)
            view.setPage(ChartPage(view))
        self.view = view

        settings = self.view.settings()
        settings.setAttribute(QWebEngineSettings.JavascriptEnabled, True)
        if self.config.uses_remote_d3:
            settings.setAttribute(QWebEngineSettings.LocalContentCanAccessRemoteUrls, True)

        layout = QtWidgets.QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(self.toolbar)
        if isinstance(self.view, QtWidgets.QWidget):
            layout.addWidget(self.view)
        self.setLayout(layout)

        self.bridge = ChartBridge(self._run_script, self.config.chart_id)

        self.view.loadFinished.connect(self._on_load_finished)

        self.resize(600, 600)

        if autoload:
            self.load_page()

    def _create_actions(self) -> None:
        window_menu = QMenu("Window", self)
        window_menu.addAction("Maximize", self.showMaximized)
        window_menu.addAction("Restore", self.showNormal)
        window_menu.addAction("Screenshot", self.take_screenshot)
        window_menu.addAction("Close", self.close)

        window_button = QToolButton(self)
        window_button.setText("Window")
        window_button.setMenu(window_menu)
        window_button.setPopupMode(QToolButton.InstantPopup)
        self.toolbar.addWidget(window_button)

    def page_url(self) -> QUrl:
        return QUrl.fromLocalFile(os.path.abspath(self.config.page_path))

    def load_page(self) -> None:
        """
        Load the bundled page. The template gets the D3 script source spliced
        in (the bundled copy unless overridden) and is served with its own
        file URL as base so relative scripts resolve.
        """
        url = self.page_url()
        try:
            with open(self.config.page_path, "r", encoding="utf-8") as fh:
                html = fh.read()
        except OSError as e:
            logger.error("Could not read chart page %s: %s", self.config.page_path, e)
            self._fail(url.toString())
            return

        html = html.replace(D3_URL_PLACEHOLDER, self.config.d3_src)
        logger.info("Loading chart page %s", url.toString())
        self.view.setHtml(html, url)

    def _run_script(self, script: str) -> None:
        self.view.page().runJavaScript(script)

    def _fail(self, url: str) -> None:
        self.state = ScreenState.FAILED
        self.load_failed.emit(url)

    @pyqtSlot(bool)
    def _on_load_finished(self, ok: bool) -> None:
        if not ok:
            logger.warning("Chart page failed to load: %s", self.page_url().toString())
            self._fail(self.page_url().toString())
            return

        if self.bridge.initialized:
            logger.info("Page reloaded after initialization; ignoring")
            return

        self.state = ScreenState.PAGE_READY
        self.bridge.init_chart(self.config.domain)
        self.chart_initialized.emit()

        self._start_submitter()

    def _start_submitter(self) -> None:
        generator = get_generator(self.config.variant, seed=self.config.seed)
        self.submitter = DataPointSubmitter(generator, self.config.domain, self.config.point_count, parent=self)
        self.submitter.point_ready.connect(self._deliver_point)
        self.submitter.finished.connect(self._on_submitter_finished)
        self.state = ScreenState.STREAMING
        self.submitter.start()

    @pyqtSlot(int, int, int)
    def _deliver_point(self, index: int, x: int, y: int) -> None:
        if QThread.currentThread() != self.thread():
            raise RuntimeError("Points must be delivered on the thread owning the chart")
        logger.debug(
            "Point %d (%d, %d) -> %s", index, x, y, self.config.domain.classify(x, y)
        )
        self.bridge.add_point(x, y)
        self.point_delivered.emit(index, x, y)

    @pyqtSlot(int)
    def _on_submitter_finished(self, emitted: int) -> None:
        self.state = ScreenState.DONE
        logger.info("All %d points delivered to '%s'", self.bridge.points_added, self.config.chart_id)
        self.all_points_delivered.emit(self.bridge.points_added)

    def take_screenshot(self, filename: Optional[str] = None) -> str:
        pixmap = self.grab(QRect(0, 0, self.width(), self.height()))
        if filename is None:
            filename = f"screenshot_{id(self)}.png"
        pixmap.save(filename)
        return filename

    def closeEvent(self, event: Any) -> None:
        if self.submitter is not None and not self.submitter.join(timeout=1.0):
            logger.warning("Submitter thread still running at close")
        super().closeEvent(event)
