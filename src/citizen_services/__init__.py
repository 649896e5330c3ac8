"""Citizen services API."""
