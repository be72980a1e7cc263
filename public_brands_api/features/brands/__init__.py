"""Brands feature: resolution, fetch and transformation of brands."""
