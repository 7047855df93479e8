"""
Gesture3D Kinematics.
Small numeric primitives shared by the classifier and the interaction physics.
"""
import numpy as np

from gesture3d.core.types import Point2D

def lerp(a: float, b: float, t: float) -> float:
    """Linear Interpolation. t=0 -> a, t=1 -> b."""
    return a + (b - a) * t

def lerp_point(a: Point2D, b: Point2D, t: float) -> Point2D:
    return Point2D(lerp(a.x, b.x, t), lerp(a.y, b.y, t))

def clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))

def distance_2d(a: np.ndarray, b: np.ndarray) -> float:
    """
    Planar Euclidean distance between two landmark rows.
    Depth (z) is ignored: the detector's z is relative and far noisier than x/y.
    """
    return float(np.linalg.norm(a[:2] - b[:2]))
