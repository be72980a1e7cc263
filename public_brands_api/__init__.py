"""Public Brands API."""
