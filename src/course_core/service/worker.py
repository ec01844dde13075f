"""
Course calculation worker thread

입력 snapshot 은 "latest wins": 대기 중인 snapshot 은 새 snapshot 으로 덮어씀 (queue 없음).
결과는 callback 으로 fire-and-forget 전달.
"""
import logging
import threading
from typing import Callable, Optional

from ..course import CourseCalculator, CourseData, CourseInputs

logger = logging.getLogger(__name__)

ResultCallback = Callable[[CourseInputs, CourseData], None]


class CourseWorker:
    """
    별도 thread 에서 CourseCalculator 실행

    Example:
        >>> monitor = CourseMonitor(sink=print)
        >>> with CourseWorker(on_result=monitor.update) as worker:
        ...     worker.submit(inputs)
    """

    def __init__(
        self,
        on_result: ResultCallback,
        calculator: Optional[CourseCalculator] = None,
        name: str = "CourseWorker"
    ):
        self.calculator = calculator or CourseCalculator()
        self._on_result = on_result
        self._name = name
        self._condition = threading.Condition()
        self._pending: Optional[CourseInputs] = None
        self._busy = False
        self._running = False
        self._thread: Optional[threading.Thread] = None
        self.computed = 0
        self.superseded = 0

    @property
    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self):
        if self.is_running:
            return
        with self._condition:
            self._running = True
        self._thread = threading.Thread(target=self._run, name=self._name, daemon=True)
        self._thread.start()
        logger.debug("%s started", self._name)

    def stop(self, timeout: Optional[float] = 5.0):
        with self._condition:
            self._running = False
            self._pending = None
            self._condition.notify_all()
        if self._thread is not None:
            self._thread.join(timeout=timeout)
            if self._thread.is_alive():
                logger.warning("%s did not stop within %s s", self._name, timeout)
        self._thread = None
        logger.debug("%s stopped", self._name)

    def submit(self, inputs: CourseInputs) -> bool:
        """
        입력 snapshot 전달

        Returns:
            True if accepted (선박 위치가 없으면 건너뜀)
        """
        if inputs.position is None:
            logger.debug("No vessel position, skipping calculation")
            return False
        with self._condition:
            if self._pending is not None:
                self.superseded += 1
            self._pending = inputs
            self._condition.notify()
        return True

    def wait_idle(self, timeout: Optional[float] = None) -> bool:
        """대기 중인 snapshot 이 모두 처리될 때까지 대기 (callback 포함)"""
        with self._condition:
            return self._condition.wait_for(
                lambda: self._pending is None and not self._busy, timeout=timeout
            )

    def _run(self):
        while True:
            with self._condition:
                self._condition.wait_for(lambda: self._pending is not None or not self._running)
                if not self._running:
                    return
                inputs, self._pending = self._pending, None
                self._busy = True

            try:
                data = self.calculator.compute(inputs)
                self._on_result(inputs, data)
            except Exception:
                logger.exception("Course calculation failed")
            finally:
                with self._condition:
                    self.computed += 1
                    self._busy = False
                    self._condition.notify_all()

    def __enter__(self):
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.stop()
