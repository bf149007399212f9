# main_linear_trend.py

import os
import sys
import logging
from PyQt5 import QtCore, QtWidgets

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), "../.."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from D3Scatter import ChartConfig, ChartDomain, ChartScreen, setup_logging


setup_logging(level=logging.DEBUG)

QtCore.QCoreApplication.setAttribute(QtCore.Qt.AA_ShareOpenGLContexts)
app = QtWidgets.QApplication.instance() or QtWidgets.QApplication([])

# y follows x / 15 + 150, so widen the y axis to fit the trend
config = ChartConfig(
    domain=ChartDomain.from_bounds(0, 10000, 100, 900),
    variant="linear",
    seed=7,
)
screen = ChartScreen(config)
screen.all_points_delivered.connect(lambda n: print(f"[main_linear_trend] {n} points drawn"))
screen.show()

app.exec()
