"""Core data contracts, math and interaction state."""
