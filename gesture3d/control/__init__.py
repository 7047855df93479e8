"""Scene control and feedback (cues)."""
