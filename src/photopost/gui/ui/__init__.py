"""User interface components."""
