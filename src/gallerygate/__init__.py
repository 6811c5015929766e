"""Conflict-aware image upload gateway."""
