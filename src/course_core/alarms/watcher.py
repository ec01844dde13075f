"""
Range watcher: 연속적인 값을 [range_min, range_max] 범위 진입/이탈 이벤트로 변환
"""
import logging
from typing import Callable, Dict, List, Optional, Tuple

from .types import WatchEvent, WatchEventType
from ..utils import is_number

logger = logging.getLogger(__name__)

WatchCallback = Callable[[WatchEvent], None]


class RangeWatcher:
    """
    Debounce 가 적용된 범위 감시 state machine

    값이 바뀔 때마다 sample counter 를 증가시키고 sample_size 에 도달하면 범위 판정.
    범위 경계가 바뀌면 현재 값으로 즉시 재판정.

    Transition table (이전 in_range, 현재 in_range):
        (False, True)  → ENTER (from_below)
        (True, True)   → IN
        (True, False)  → EXIT (is_below)
        (False, False) → 없음

    단일 writer 에서만 갱신해야 함 (이전/현재 비교 순서에 의존).
    """

    TRANSITIONS: Dict[Tuple[bool, bool], Optional[WatchEventType]] = {
        (False, True): WatchEventType.ENTER,
        (True, True): WatchEventType.IN,
        (True, False): WatchEventType.EXIT,
        (False, False): None,
    }

    def __init__(
        self,
        range_min: float = 0.0,
        range_max: float = 100.0,
        sample_size: int = 1
    ):
        """
        Args:
            range_min: 범위 하한 (포함)
            range_max: 범위 상한 (포함)
            sample_size: 판정 전에 필요한 값 변경 횟수 (1 = debounce 없음)
        """
        self._range_min = range_min
        self._range_max = range_max
        self._sample_size = 1
        self._sample_count = 0
        self._value = -1.0
        self._in_range: Optional[bool] = None
        self._subscribers: List[WatchCallback] = []
        self.sample_size = sample_size

    # ------------------------------------------------------------------
    # subscription

    def subscribe(self, callback: WatchCallback) -> Callable[[], None]:
        """
        이벤트 구독

        Returns:
            구독 해제 함수
        """
        self._subscribers.append(callback)

        def unsubscribe():
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def _emit(self, event: WatchEvent):
        for callback in list(self._subscribers):
            callback(event)

    # ------------------------------------------------------------------
    # properties

    @property
    def value(self) -> float:
        return self._value

    @value.setter
    def value(self, val: float):
        self.set_value(val)

    @property
    def range_min(self) -> float:
        return self._range_min

    @range_min.setter
    def range_min(self, val: float):
        self.set_range_min(val)

    @property
    def range_max(self) -> float:
        return self._range_max

    @range_max.setter
    def range_max(self, val: float):
        self.set_range_max(val)

    @property
    def sample_size(self) -> int:
        return self._sample_size

    @sample_size.setter
    def sample_size(self, val: int):
        if is_number(val) and int(val) == val and val > 0:
            self._sample_size = int(val)
        else:
            logger.debug("Ignoring invalid sample size %r", val)
        self._sample_count = 0

    @property
    def sample_count(self) -> int:
        return self._sample_count

    @property
    def in_range(self) -> bool:
        return bool(self._in_range)

    # ------------------------------------------------------------------
    # events

    def set_value(self, val: float):
        """새 값 입력. 값이 바뀐 경우만 sample 로 계산."""
        if not is_number(val):
            return
        previous = self._value
        self._value = val
        if val == previous:
            return
        self._sample_count += 1
        if self._sample_count < self._sample_size:
            return
        self._sample_count = 0
        self._evaluate(val, previous)

    def set_range_min(self, val: float):
        if not is_number(val) or val == self._range_min:
            return
        self._range_min = val
        self._evaluate(self._value, self._value)

    def set_range_max(self, val: float):
        if not is_number(val) or val == self._range_max:
            return
        self._range_max = val
        self._evaluate(self._value, self._value)

    def is_in_range(self, value: Optional[float] = None) -> bool:
        value = self._value if value is None else value
        return is_number(value) and self._range_min <= value <= self._range_max

    def reset(self):
        """감시 상태 초기화 (value -1, 범위 밖). 이벤트 없음."""
        self._value = -1.0
        self._in_range = False
        self._sample_count = 0

    def _evaluate(self, value: float, previous: float):
        now_in_range = self.is_in_range(value)
        transition = self.TRANSITIONS[(bool(self._in_range), now_in_range)]
        self._in_range = now_in_range

        if transition is WatchEventType.ENTER:
            self._emit(WatchEvent(transition, value, from_below=previous < self._range_min))
        elif transition is WatchEventType.IN:
            self._emit(WatchEvent(transition, value))
        elif transition is WatchEventType.EXIT:
            self._emit(WatchEvent(transition, value, is_below=value < self._range_min))

    def __repr__(self):
        return (
            f"RangeWatcher(value={self._value}, range=[{self._range_min}, {self._range_max}], "
            f"in_range={self.in_range}, samples={self._sample_count}/{self._sample_size})"
        )
