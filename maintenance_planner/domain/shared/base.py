"""Base classes for planning value objects."""

from pydantic import BaseModel, ConfigDict


class ValueObject(BaseModel):
    """Base class for value objects (immutable, defined by their values)."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)


class ReadModel(BaseModel):
    """Base class for derived projections handed to the presentation layer.

    Read models are recomputed on every input change and carry no identity
    across recomputations.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)
