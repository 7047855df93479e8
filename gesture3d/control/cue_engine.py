"""
Gesture3D Cue Engine.
=====================

Decides *when* feedback fires. A cue fires on the rising edge of a gesture
flag (off -> on), never while the gesture is held, and never twice inside
its debounce window.

The edge detector starts from the idle gesture, so a hand that is already
posed on the first tracked frame fires its cue there.
"""
import time
from typing import Callable, Dict, List, Optional

from gesture3d.config import CONFIG
from gesture3d.core.types import Cue, Gesture, GestureState

# Both zoom directions share one sound
FLAG_CUES = {
    Gesture.ZOOM_IN: Cue.ZOOM,
    Gesture.ZOOM_OUT: Cue.ZOOM,
    Gesture.OPEN_HAND: Cue.ROTATE,
    Gesture.PEACE: Cue.MOVE,
    Gesture.FIST: Cue.FREEZE,
    Gesture.RESET: Cue.RESET,
}

class CueEngine:
    def __init__(self, clock: Callable[[], float] = time.monotonic, debounce: Optional[Dict[str, float]] = None):
        self.clock = clock
        self.debounce = {Cue[name]: secs for name, secs in (debounce or CONFIG["CUE_DEBOUNCE"]).items()}
        self.prev_flags: Dict[Gesture, bool] = GestureState.idle().flags()
        self.last_played: Dict[Cue, float] = {}

    def trigger(self, cue: Cue) -> bool:
        """Fires `cue` unless it is still inside its debounce window."""
        now = self.clock()
        last = self.last_played.get(cue)
        if last is not None and (now - last) < self.debounce.get(cue, 0.0):
            return False
        self.last_played[cue] = now
        return True

    def update(self, gesture: GestureState) -> List[Cue]:
        """Returns the cues fired by this frame, in precedence order."""
        flags = gesture.flags()
        fired = []
        for g, on in flags.items():
            if on and not self.prev_flags[g]:
                cue = FLAG_CUES[g]
                if cue not in fired and self.trigger(cue):
                    fired.append(cue)

        self.prev_flags = flags
        return fired
