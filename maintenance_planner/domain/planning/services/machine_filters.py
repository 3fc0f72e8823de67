"""
MachineFilterSortEngine Domain Service

Text/status/location filtering and single-field sorting of the machine
list. String comparison is locale-aware in the sense users expect from a
collating sort: accents and case are ignored at the first level and only
break ties afterwards.
"""

import unicodedata
from collections.abc import Iterable, Sequence

from ..value_objects.criteria import ALL_LOCATIONS, FilterCriteria, SortCriteria
from ..value_objects.enums import MachineStatusFilter, SortField
from ..value_objects.machine import Machine


def collation_key(value: str | None) -> tuple[str, str, str]:
    """
    Sort key approximating a locale collation.

    Compares base letters first (accent- and case-insensitive), then
    accents, then case. Missing values collate as the empty string.
    """
    text = value or ""
    folded = text.casefold()
    decomposed = unicodedata.normalize("NFKD", folded)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return (base, folded, text)


def _search_fields(machine: Machine) -> Iterable[str | None]:
    return (
        machine.serial,
        machine.alias,
        machine.model_name,
        machine.manufacturer,
        machine.location,
    )


def _sort_value(machine: Machine, field: SortField) -> str:
    if field is SortField.SERIAL:
        return machine.serial
    if field is SortField.ALIAS:
        return machine.alias or ""
    if field is SortField.MODEL:
        return machine.model_label
    if field is SortField.LOCATION:
        return machine.location or ""
    if field is SortField.STATUS:
        return "active" if machine.active else "inactive"
    raise ValueError(f"Unknown sort field: {field}")


class MachineFilterSortEngine:
    """Domain service for the machine list's search, filters and sort."""

    @staticmethod
    def matches(machine: Machine, filters: FilterCriteria) -> bool:
        """Check a machine against every filter (all must pass)."""
        term = filters.search_term
        if term and not any(
            value and term in value.casefold() for value in _search_fields(machine)
        ):
            return False

        if filters.status is MachineStatusFilter.ACTIVE and not machine.active:
            return False
        if filters.status is MachineStatusFilter.INACTIVE and machine.active:
            return False

        if filters.location != ALL_LOCATIONS and machine.location != filters.location:
            return False

        return True

    @staticmethod
    def sort(machines: Iterable[Machine], criteria: SortCriteria) -> list[Machine]:
        """
        Sort machines by one field.

        Python's sort is stable in both directions, so machines with equal
        keys keep their prior relative order.
        """
        return sorted(
            machines,
            key=lambda m: collation_key(_sort_value(m, criteria.field)),
            reverse=criteria.descending,
        )

    @staticmethod
    def filter_sort(
        machines: Sequence[Machine],
        filters: FilterCriteria | None = None,
        sort: SortCriteria | None = None,
    ) -> list[Machine]:
        """
        Filter then sort a machine snapshot.

        Args:
            machines: Machine snapshot
            filters: Filter criteria (defaults to no filtering)
            sort: Sort criteria (defaults to serial ascending)

        Returns:
            Matching machines in sort order; empty when nothing matches
        """
        filters = filters or FilterCriteria()
        sort = sort or SortCriteria()
        matching = [m for m in machines if MachineFilterSortEngine.matches(m, filters)]
        return MachineFilterSortEngine.sort(matching, sort)

    @staticmethod
    def available_locations(machines: Iterable[Machine]) -> list[str]:
        """Distinct non-empty locations, sorted, for the location filter."""
        return sorted({m.location for m in machines if m.location}, key=collation_key)


filter_sort_machines = MachineFilterSortEngine.filter_sort
available_locations = MachineFilterSortEngine.available_locations
