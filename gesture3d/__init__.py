"""Gesture3D: bare-hand control of an on-screen 3D object."""

__version__ = "1.0.0"
