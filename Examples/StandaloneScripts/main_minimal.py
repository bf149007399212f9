# main_minimal.py

import os
import sys
from PyQt5 import QtCore, QtWidgets

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), "../.."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from D3Scatter import ChartConfig, ChartScreen, setup_logging


setup_logging()

QtCore.QCoreApplication.setAttribute(QtCore.Qt.AA_ShareOpenGLContexts)
app = QtWidgets.QApplication.instance() or QtWidgets.QApplication([])

# Uniform random points over x 0..10000, y 100..200
screen = ChartScreen(ChartConfig())
screen.show()

app.exec()
