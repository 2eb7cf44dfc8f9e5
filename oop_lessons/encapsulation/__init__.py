"""Encapsulation - state that can only change through the object's own methods."""
