"""Route handlers for the brands feature."""
