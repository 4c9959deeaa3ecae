"""
Boundary for the platform permission handshake.

Some platforms only deliver motion events after the user grants access.
The handshake itself belongs to the hosting application; the tracker only
needs to know whether access was granted.
"""

import logging
from ..errors import PermissionDenied, PermissionRequestFailed

logger = logging.getLogger(__name__)

class PermissionGate:
    """
    Asks the platform for motion sensor access.
    
    Subclasses implement _request() returning True when granted and False
    when refused. Any exception it raises counts as a failed request.
    """
    
    def request(self) -> None:
        """
        Request sensor access.
        
        Raises:
            PermissionDenied: access was refused
            PermissionRequestFailed: the request itself failed
        """
        try:
            granted = self._request()
        except (PermissionDenied, PermissionRequestFailed):
            raise
        except Exception as e:
            logger.warning("Sensor permission request failed: %s", e)
            raise PermissionRequestFailed(str(e)) from e
        
        if not granted:
            raise PermissionDenied("Sensor permission was denied")
    
    def _request(self) -> bool:
        raise NotImplementedError

class StaticPermissionGate(PermissionGate):
    """Gate with a fixed answer, for platforms that decide up front and for tests."""
    
    def __init__(self, granted: bool = True):
        self.granted = granted
        self.request_count = 0
    
    def _request(self) -> bool:
        self.request_count += 1
        return self.granted
