# widgets/ChartPage.py

import logging
from PyQt5.QtWebEngineWidgets import QWebEnginePage

logger = logging.getLogger(__name__)

_CONSOLE_LEVELS = {
    QWebEnginePage.InfoMessageLevel: logging.INFO,
    QWebEnginePage.WarningMessageLevel: logging.WARNING,
    QWebEnginePage.ErrorMessageLevel: logging.ERROR,
}


class ChartPage(QWebEnginePage):
    """Web page that forwards the chart's console output to the logger."""

    def javaScriptConsoleMessage(self, level, message, line_number, source_id):
        logger.log(
            _CONSOLE_LEVELS.get(level, logging.INFO),
            "[page] %s (%s:%d)", message, source_id, line_number,
        )
