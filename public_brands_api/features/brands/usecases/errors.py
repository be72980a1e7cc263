"""Custom exceptions for the get brand use case."""


class InvalidBrandIdError(ValueError):
    """Raised when a requested id is not a UUID."""

    def __init__(self, uuid: str):
        self.uuid: str = uuid
        super().__init__(f"uuid '{uuid}' is either missing or invalid")


class BrandLookupError(Exception):
    """Base class for failures while looking a brand up."""


class BackingStoreError(BrandLookupError):
    """Raised when the graph or the concepts API cannot be read."""


class DataIntegrityError(BrandLookupError):
    """Raised when an id expected to be unique matches several records."""

    def __init__(self, uuid: str, count: int):
        self.uuid: str = uuid
        self.count: int = count
        super().__init__(f"Multiple brands found with the same uuid: {uuid} ({count})")
