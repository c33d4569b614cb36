"""Test configuration package: markers and environment defaults."""
