"""Screen controllers and session services."""
