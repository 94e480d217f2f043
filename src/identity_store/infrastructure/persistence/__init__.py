"""Persistence adapters for identity entities."""
