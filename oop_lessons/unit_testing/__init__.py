"""Unit testing - inject dependencies so tests can swap them."""
