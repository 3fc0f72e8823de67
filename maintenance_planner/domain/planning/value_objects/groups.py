"""Machine group value object."""

from pydantic import Field

from ...shared.base import ValueObject
from .machine import Machine

ALL_MACHINES_LABEL = "All machines"
NO_LOCATION_LABEL = "No location"
NO_MODEL_LABEL = "No model"
NO_MANUFACTURER_LABEL = "No manufacturer"
ACTIVE_LABEL = "Active"
INACTIVE_LABEL = "Inactive"

# Keys for machines missing the grouped attribute; always ordered last
FALLBACK_LABELS = frozenset({NO_LOCATION_LABEL, NO_MODEL_LABEL, NO_MANUFACTURER_LABEL})


class MachineGroup(ValueObject):
    """A named partition of the machine list."""

    key: str
    machines: tuple[Machine, ...] = Field(default_factory=tuple)
    collapsed: bool = False

    @property
    def count(self) -> int:
        return len(self.machines)

    @property
    def is_fallback(self) -> bool:
        return self.key in FALLBACK_LABELS
