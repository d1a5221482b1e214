"""Game rules for a lane-based tower defense: state, enemies, waves, slots and HUD."""

__version__ = "0.1.0"