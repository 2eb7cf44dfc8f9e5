"""Concurrency - starting work in the background without waiting for it."""
