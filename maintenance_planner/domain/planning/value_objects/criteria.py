"""Filter and sort criteria for the machine list."""

from pydantic import Field

from ...shared.base import ValueObject
from .enums import MachineStatusFilter, SortField, SortOrder

ALL_LOCATIONS = "all"


class FilterCriteria(ValueObject):
    """Machine filter: text search, active flag and exact location."""

    search: str = ""
    status: MachineStatusFilter = MachineStatusFilter.ALL
    location: str = Field(default=ALL_LOCATIONS)

    @classmethod
    def cleared(cls) -> "FilterCriteria":
        return cls()

    @property
    def search_term(self) -> str:
        """Case-folded term; surrounding whitespace is part of the term."""
        return self.search.casefold()

    @property
    def is_active(self) -> bool:
        return (
            bool(self.search_term)
            or self.status is not MachineStatusFilter.ALL
            or self.location != ALL_LOCATIONS
        )


class SortCriteria(ValueObject):
    """Machine sort: one field, ascending or descending."""

    field: SortField = SortField.SERIAL
    order: SortOrder = SortOrder.ASC

    @property
    def descending(self) -> bool:
        return self.order is SortOrder.DESC

    def toggled(self) -> "SortCriteria":
        return SortCriteria(field=self.field, order=self.order.toggled())
