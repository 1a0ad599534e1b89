"""Pydantic models for configuration and log events."""
