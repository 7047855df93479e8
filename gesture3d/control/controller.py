"""
Gesture3D Scene Controller.
Acts as the central nervous system: landmarks in, pose + cues out.
"""

import logging
import time
from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional

from gesture3d.config import CONFIG, MODEL_PROFILES
from gesture3d.control.cue_engine import CueEngine
from gesture3d.core.interfaces import ICuePlayer
from gesture3d.core.state_manager import InteractionStateMachine
from gesture3d.core.types import Cue, Gesture, GestureState, InteractionConfig, Transform
from gesture3d.gesture_engine import GestureClassifier, dominant_gesture

MODEL_NAMES = list(MODEL_PROFILES)

@dataclass(frozen=True)
class FrameResult:
    gesture: GestureState
    dominant: Gesture
    transform: Transform
    cues: List[Cue] = field(default_factory=list)

class SceneController:
    """
    Owns the classifier, the selected model's interaction state and the cue
    engine. The interaction state lives exactly as long as its model stays
    selected.
    """
    def __init__(self, model: Optional[str] = None, cue_player: Optional[ICuePlayer] = None,
                 clock: Callable[[], float] = time.monotonic):
        self.classifier = GestureClassifier()
        self.cues = CueEngine(clock=clock)
        self.player = cue_player

        self.model = model or CONFIG["DEFAULT_MODEL"]
        self.interaction = InteractionStateMachine(InteractionConfig.from_profile(self.model))

        # [HUD] Last processed frame
        self.last_result = FrameResult(GestureState.idle(), Gesture.NONE, self.interaction.transform)

    @property
    def transform(self) -> Transform:
        return self.interaction.transform

    def _emit(self, cues: List[Cue]):
        if self.player is None:
            return
        for cue in cues:
            self.player.play(cue)

    def select_model(self, name: str):
        """
        Swap the displayed object. A newly selected object starts from rest;
        re-selecting the current one keeps its pose.
        Raises KeyError for names outside MODEL_PROFILES.
        """
        config = InteractionConfig.from_profile(name)
        if name != self.model:
            logging.info(f"Model selected: {name}")
            self.model = name
            self.interaction = InteractionStateMachine(config)
        if self.cues.trigger(Cue.SELECT):
            self._emit([Cue.SELECT])

    def process(self, landmarks: Any) -> FrameResult:
        """One render tick. `landmarks` is None when no hand is visible."""
        # 1. Perception -> Gesture
        gesture = self.classifier.process(landmarks)

        # 2. Gesture -> Pose
        transform = self.interaction.advance(gesture)

        # 3. Feedback
        fired = self.cues.update(gesture)
        self._emit(fired)

        self.last_result = FrameResult(gesture, dominant_gesture(gesture), transform, fired)
        return self.last_result
