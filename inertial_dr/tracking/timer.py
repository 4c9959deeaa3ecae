"""
Background thread firing a callback on a fixed period.
"""

import logging
import threading
from typing import Callable, Optional

logger = logging.getLogger(__name__)

class PeriodicTimer:
    """Calls a function every `period` seconds until stopped."""
    
    def __init__(self, period: float, callback: Callable[[], None], name: str = "periodic-timer"):
        if period <= 0:
            raise ValueError("period must be positive")
        self.period = period
        self.callback = callback
        self.name = name
        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None
    
    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()
    
    def start(self):
        if self.running:
            return
        self._stop_event.clear()
        self._thread = threading.Thread(target=self._loop, name=self.name, daemon=True)
        self._thread.start()
    
    def stop(self, timeout: float = 2.0):
        """Stop the timer and wait for an in-flight callback to finish."""
        self._stop_event.set()
        if self._thread and self._thread.is_alive() and self._thread is not threading.current_thread():
            self._thread.join(timeout=timeout)
        self._thread = None
    
    def _loop(self):
        # Event.wait doubles as an interruptible sleep
        while not self._stop_event.wait(self.period):
            try:
                self.callback()
            except Exception:
                logger.exception("%s callback failed", self.name)
