"""SOLID principles, one example at a time."""
