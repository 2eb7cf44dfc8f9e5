"""Inheritance - a Car is a Vehicle and reuses its behaviour."""
