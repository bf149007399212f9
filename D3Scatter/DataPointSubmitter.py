# DataPointSubmitter.py

import logging
import threading
from typing import Optional

from PyQt5.QtCore import QObject, pyqtSignal

from D3Scatter.BaseGenerator import GeneratorBase
from D3Scatter.Domain import ChartDomain

logger = logging.getLogger(__name__)

DEFAULT_POINT_COUNT = 20


class DataPointSubmitter(QObject):
    """
    Generates a fixed batch of points on a background thread.

    The submitter never touches the rendering surface. Each point is emitted
    through `point_ready`; receivers living on the GUI thread get the call
    queued onto their own thread by Qt's automatic connection.
    """

    point_ready = pyqtSignal(int, int, int)
    finished = pyqtSignal(int)

    def __init__(
        self,
        generator: GeneratorBase,
        domain: ChartDomain,
        count: int = DEFAULT_POINT_COUNT,
        parent: Optional[QObject] = None,
    ) -> None:
        super().__init__(parent)
        if count < 0:
            raise ValueError(f"Point count must be non-negative, got {count}")
        self.generator = generator
        self.domain = domain
        self.count = count
        self._thread: Optional[threading.Thread] = None

    def start(self) -> threading.Thread:
        if self._thread is not None:
            raise RuntimeError("DataPointSubmitter can only be started once")
        self._thread = threading.Thread(
            target=self.run,
            name="DataPointSubmitter",
            daemon=True,
        )
        self._thread.start()
        return self._thread

    def run(self) -> None:
        logger.info("Submitting %d points using %r", self.count, self.generator)
        emitted = 0
        for point in self.generator.generate(self.domain, self.count):
            self.point_ready.emit(point.index, point.x, point.y)
            emitted += 1
        logger.info("Submitter finished after %d points", emitted)
        self.finished.emit(emitted)

    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def join(self, timeout: Optional[float] = None) -> bool:
        if self._thread is None:
            return True
        self._thread.join(timeout)
        return not self._thread.is_alive()
