"""
Run a chart screen as a standalone application.

Usage:
    $ python -m D3Scatter --variant linear --seed 7
"""
import sys

from PyQt5 import QtCore, QtWidgets

from D3Scatter.config import ChartConfig
from D3Scatter.logging_config import setup_logging
from D3Scatter.widgets.ChartScreen import ChartScreen


def main(argv=None) -> int:
    config = ChartConfig.from_args(sys.argv[1:] if argv is None else argv)
    setup_logging(level=config.log_level, log_file=config.log_file)

    # QtWebEngine needs shared contexts before the application exists
    QtCore.QCoreApplication.setAttribute(QtCore.Qt.AA_ShareOpenGLContexts)
    app = QtWidgets.QApplication.instance() or QtWidgets.QApplication(sys.argv)

    screen = ChartScreen(config)
    screen.show()

    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
