"""Machine snapshot value objects supplied by the data-access layer."""

from pydantic import Field, field_validator

from ...shared.base import ValueObject


class MachineModel(ValueObject):
    """Manufacturer/model reference of a machine."""

    id: int | None = None
    manufacturer: str | None = None
    name: str
    detail: str | None = None

    @property
    def label(self) -> str:
        """'Manufacturer Model', skipping a missing manufacturer."""
        return " ".join(part for part in (self.manufacturer, self.name) if part)


class Machine(ValueObject):
    """Immutable machine snapshot. The planning engine never mutates it."""

    id: int
    serial: str = Field(min_length=1, description="Unique serial number")
    alias: str | None = None
    location: str | None = None
    model: MachineModel | None = None
    active: bool = True

    @field_validator("serial")
    @classmethod
    def serial_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Serial cannot be blank")
        return v

    @property
    def manufacturer(self) -> str | None:
        return self.model.manufacturer if self.model else None

    @property
    def model_name(self) -> str | None:
        return self.model.name if self.model else None

    @property
    def model_label(self) -> str:
        """Model sort/group label; empty when the machine has no model."""
        return self.model.label if self.model else ""

    @property
    def display_name(self) -> str:
        if self.alias:
            return f"{self.serial} ({self.alias})"
        return self.serial

    def __str__(self) -> str:
        return self.display_name
