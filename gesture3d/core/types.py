"""
Gesture3D Types.
Central definition of Data Contracts to prevent circular imports.
"""
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Dict, Optional

from gesture3d.config import CONFIG, MODEL_PROFILES

# --- GEOMETRY TYPES ---
@dataclass(frozen=True)
class Point2D:
    x: float
    y: float

    @classmethod
    def zero(cls) -> "Point2D":
        return cls(0.0, 0.0)

    def __add__(self, other: "Point2D") -> "Point2D":
        return Point2D(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point2D") -> "Point2D":
        return Point2D(self.x - other.x, self.y - other.y)

# --- GESTURE TYPES ---
class Gesture(Enum):
    """Display names, listed in precedence order (see `dominant_gesture`)."""
    ZOOM_IN = "ZOOM IN"
    ZOOM_OUT = "ZOOM OUT"
    PEACE = "POSITION"
    OPEN_HAND = "ROTATE"
    FIST = "FREEZE"
    RESET = "RESET"
    NONE = "NONE"

@dataclass(frozen=True)
class GestureState:
    """
    Classifier output for a single frame.

    The six flags are evaluated independently, so more than one of them may
    be set on a borderline hand. Consumers that need a single label go
    through `dominant_gesture`.
    """
    is_zoom_in: bool = False
    is_zoom_out: bool = False
    is_open_hand: bool = False
    is_fist: bool = False
    is_peace: bool = False
    is_reset: bool = False
    palm_position: Optional[Point2D] = None
    rotation_delta: Point2D = field(default_factory=Point2D.zero)
    position_delta: Point2D = field(default_factory=Point2D.zero)

    @classmethod
    def idle(cls) -> "GestureState":
        """The 'no hand' frame: every flag off, no palm, zero deltas."""
        return cls()

    @property
    def any_release(self) -> bool:
        """True when a gesture that lifts a freeze is active."""
        return (self.is_open_hand or self.is_zoom_in or self.is_zoom_out
                or self.is_peace or self.is_reset)

    def flags(self) -> Dict[Gesture, bool]:
        return {
            Gesture.ZOOM_IN: self.is_zoom_in,
            Gesture.ZOOM_OUT: self.is_zoom_out,
            Gesture.PEACE: self.is_peace,
            Gesture.OPEN_HAND: self.is_open_hand,
            Gesture.FIST: self.is_fist,
            Gesture.RESET: self.is_reset,
        }

# --- INTERACTION TYPES ---
class InteractionMode(Enum):
    ACTIVE = auto()
    FROZEN = auto()  # Targets locked until a release gesture

@dataclass(frozen=True)
class InteractionConfig:
    """
    Per-object tuning. `scale_min > scale_max` is a caller error and is
    not checked.
    """
    scale_min: float = 0.3
    scale_max: float = 3.0
    position_clamp_x: float = 3.0
    position_clamp_y: float = 2.0
    rotation_smoothing: float = 0.15
    position_smoothing: float = 0.15
    scale_smoothing: float = 0.1
    zoom_step: float = 0.02
    rest_rotation: Point2D = field(default_factory=Point2D.zero)

    @classmethod
    def from_profile(cls, model: str) -> "InteractionConfig":
        """Builds the config for a catalogue model. Raises KeyError if unknown."""
        profile = {**CONFIG, **MODEL_PROFILES[model]}
        rest_x, rest_y = profile.get("REST_ROTATION", (0.0, 0.0))
        return cls(
            scale_min=profile["SCALE_MIN"],
            scale_max=profile["SCALE_MAX"],
            position_clamp_x=profile["POSITION_CLAMP_X"],
            position_clamp_y=profile["POSITION_CLAMP_Y"],
            rotation_smoothing=profile["ROTATION_SMOOTHING"],
            position_smoothing=profile["POSITION_SMOOTHING"],
            scale_smoothing=profile["SCALE_SMOOTHING"],
            zoom_step=profile["ZOOM_STEP"],
            rest_rotation=Point2D(rest_x, rest_y),
        )

@dataclass
class InteractionState:
    target_rotation: Point2D = field(default_factory=Point2D.zero)
    target_position: Point2D = field(default_factory=Point2D.zero)
    target_scale: float = 1.0
    current_rotation: Point2D = field(default_factory=Point2D.zero)
    current_position: Point2D = field(default_factory=Point2D.zero)
    current_scale: float = 1.0
    mode: InteractionMode = InteractionMode.ACTIVE

    @property
    def is_frozen(self) -> bool:
        return self.mode is InteractionMode.FROZEN

@dataclass(frozen=True)
class Transform:
    """Smoothed pose handed to the renderer."""
    rotation: Point2D
    position: Point2D
    scale: float
    frozen: bool

# --- FEEDBACK TYPES ---
class Cue(Enum):
    ZOOM = "zoom"
    ROTATE = "rotate"
    MOVE = "move"
    FREEZE = "freeze"
    RESET = "reset"
    SELECT = "select"
