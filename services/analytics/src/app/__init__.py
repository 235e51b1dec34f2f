"""Wellness analytics service."""
