"""Current-instant source for the not-in-past rule"""

from datetime import datetime
from typing import Callable

Clock = Callable[[], datetime]


def system_clock() -> datetime:
    """Local wall-clock time, naive like the stored reservation date/time"""
    return datetime.now()


def get_clock() -> Clock:
    """FastAPI dependency; tests override it with a fixed instant"""
    return system_clock
