"""Backing-store connections."""
