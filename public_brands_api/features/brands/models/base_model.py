"""Base model for raw concept records read from a backing store."""

from pydantic import BaseModel, ConfigDict


class ConceptBaseModel(BaseModel):
    """Base model for raw concept records.

    Records are immutable once translated from the backing store's shape.
    """

    model_config = ConfigDict(  # pyright: ignore[reportUnannotatedClassAttribute]
        from_attributes=True,
        frozen=True,
    )
