"""
Gesture3D Core Interfaces.
Defines the abstract contracts for feedback output.
"""

from abc import ABC, abstractmethod

from gesture3d.core.types import Cue

class ICuePlayer(ABC):
    """
    Abstract Protocol for audible gesture feedback.
    """
    @abstractmethod
    def play(self, cue: Cue) -> None: pass
    @abstractmethod
    def close(self) -> None: pass
