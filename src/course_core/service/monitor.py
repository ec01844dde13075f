"""
Course monitor: 계산 결과를 watcher 에 전달하고 notification 생성
"""
import logging
from typing import Callable, List, Optional

from ..alarms import (
    ARRIVAL_CIRCLE_PATH,
    PERPENDICULAR_PATH,
    Notification,
    RangeWatcher,
    WatchEvent,
    arrival_circle_notification,
    clear_notification,
    perpendicular_notification,
)
from ..config import CourseConfig
from ..course import CalcMethod, CourseData, CourseInputs, CourseResult

logger = logging.getLogger(__name__)

NotificationSink = Callable[[Notification], None]


class CourseMonitor:
    """
    Arrival circle / perpendicular 통과 감시

    - arrival watcher: value = great circle distance, range = [0, arrival_circle]
    - perpendicular watcher: value = 1 (passed) / 0, range = [1, 2]

    목적지가 사라지면 (empty CourseData) 처음 한 번만 watcher 를 reset 하고 clear notification 전송.
    """

    def __init__(
        self,
        config: Optional[CourseConfig] = None,
        sink: Optional[NotificationSink] = None
    ):
        self.config = config or CourseConfig()
        self._sink = sink
        self.arrival_watcher = RangeWatcher(sample_size=self.config.arrival_sample_size)
        self.perpendicular_watcher = RangeWatcher(range_min=1, range_max=2)
        self._latest: Optional[CourseData] = None
        self._active = False
        self._unsubscribes: List[Callable[[], None]] = [
            self.arrival_watcher.subscribe(self._on_arrival_event),
            self.perpendicular_watcher.subscribe(self._on_perpendicular_event),
        ]

    @property
    def latest(self) -> Optional[CourseData]:
        return self._latest

    def current(self, method: Optional[CalcMethod] = None) -> Optional[CourseResult]:
        """
        설정된 계산 방식의 최신 결과

        Returns:
            CourseResult, 활성 목적지가 없으면 None
        """
        if self._latest is None or not self._latest.has_destination:
            return None
        return self._latest.for_method(method or self.config.calc_method)

    def update(self, inputs: CourseInputs, data: CourseData):
        """
        계산 결과 반영

        Args:
            inputs: 계산에 사용한 입력 snapshot
            data: 계산 결과
        """
        self._latest = data

        if not data.has_destination:
            if self._active:
                logger.debug("Destination cleared, resetting watchers")
                self._active = False
                self._clear()
            return

        self._active = True
        arrival_circle = inputs.arrival_circle
        self.arrival_watcher.range_max = arrival_circle if arrival_circle is not None else -1
        distance = data.great_circle.distance
        self.arrival_watcher.value = distance if distance is not None else -1
        self.perpendicular_watcher.value = 1 if data.passed_perpendicular else 0

    def close(self):
        for unsubscribe in self._unsubscribes:
            unsubscribe()
        self._unsubscribes = []

    def _clear(self):
        self.arrival_watcher.reset()
        self.perpendicular_watcher.reset()
        self._send(clear_notification(ARRIVAL_CIRCLE_PATH))
        self._send(clear_notification(PERPENDICULAR_PATH))

    def _on_arrival_event(self, event: WatchEvent):
        logger.debug("Arrival circle event: %s", event)
        notification = arrival_circle_notification(
            event, self.arrival_watcher.range_max, self.config.alarm_methods
        )
        if notification is not None:
            self._send(notification)

    def _on_perpendicular_event(self, event: WatchEvent):
        logger.debug("Perpendicular event: %s", event)
        notification = perpendicular_notification(event)
        if notification is not None:
            self._send(notification)

    def _send(self, notification: Notification):
        if self._sink is None:
            return
        self._sink(notification)
