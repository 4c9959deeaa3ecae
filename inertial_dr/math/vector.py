"""
Three-component vector used for gravity, acceleration, velocity and position.
"""

import numpy as np
from dataclasses import dataclass
from typing import Iterable, Iterator

@dataclass
class Vector3:
    """3D vector with float64 components."""
    
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    
    def __post_init__(self):
        self.x = float(self.x)
        self.y = float(self.y)
        self.z = float(self.z)
    
    @classmethod
    def zero(cls) -> 'Vector3':
        return cls(0.0, 0.0, 0.0)
    
    @classmethod
    def from_array(cls, values: Iterable[float]) -> 'Vector3':
        """Build a vector from any 3-element sequence or numpy array."""
        arr = np.asarray(values, dtype=np.float64)
        if arr.shape != (3,):
            raise ValueError(f"Vector3 needs exactly 3 components, got shape {arr.shape}")
        return cls(arr[0], arr[1], arr[2])
    
    @property
    def as_array(self) -> np.ndarray:
        """Get vector as numpy array."""
        return np.array([self.x, self.y, self.z], dtype=np.float64)
    
    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z
    
    def __add__(self, other: 'Vector3') -> 'Vector3':
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)
    
    def __sub__(self, other: 'Vector3') -> 'Vector3':
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)
    
    def scale(self, factor: float) -> 'Vector3':
        return Vector3(self.x * factor, self.y * factor, self.z * factor)
    
    @property
    def magnitude(self) -> float:
        return float(np.sqrt(self.x**2 + self.y**2 + self.z**2))
    
    def __str__(self) -> str:
        return f"[{self.x:.2f}, {self.y:.2f}, {self.z:.2f}]"
