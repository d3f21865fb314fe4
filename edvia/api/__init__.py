"""Edvia HTTP API."""
