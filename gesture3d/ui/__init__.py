"""OpenCV overlays."""
