"""Module-level constants for badge generation."""
