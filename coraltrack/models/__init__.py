"""Pydantic models for settings, UI state and tracked data."""
