"""
Host 측 연결 계층

- CourseWorker: latest-wins 계산 thread
- CourseMonitor: watcher 연결 및 notification 생성
"""

from .worker import CourseWorker
from .monitor import CourseMonitor, NotificationSink

__all__ = [
    'CourseWorker',
    'CourseMonitor',
    'NotificationSink',
]
