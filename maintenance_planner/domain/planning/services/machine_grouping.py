"""
MachineGroupingEngine Domain Service

Partitions the (filtered) machine list into named groups and flattens
them back into the visible row list according to an explicit set of
collapsed group keys.
"""

from collections.abc import Collection, Iterable, Sequence

from ..value_objects.enums import GroupingMode
from ..value_objects.groups import (
    ACTIVE_LABEL,
    ALL_MACHINES_LABEL,
    INACTIVE_LABEL,
    NO_LOCATION_LABEL,
    NO_MANUFACTURER_LABEL,
    NO_MODEL_LABEL,
    MachineGroup,
)
from ..value_objects.machine import Machine
from .machine_filters import collation_key


def group_key(machine: Machine, mode: GroupingMode) -> str:
    """Derive the group label of one machine."""
    if mode is GroupingMode.NONE:
        return ALL_MACHINES_LABEL
    if mode is GroupingMode.LOCATION:
        return machine.location or NO_LOCATION_LABEL
    if mode is GroupingMode.MODEL:
        return machine.model_label or NO_MODEL_LABEL
    if mode is GroupingMode.MANUFACTURER:
        return machine.manufacturer or NO_MANUFACTURER_LABEL
    if mode is GroupingMode.STATUS:
        return ACTIVE_LABEL if machine.active else INACTIVE_LABEL
    raise ValueError(f"Unknown grouping mode: {mode}")


class MachineGroupingEngine:
    """Domain service for machine grouping and collapse state."""

    @staticmethod
    def group(
        machines: Sequence[Machine],
        mode: GroupingMode = GroupingMode.NONE,
        collapsed_keys: Collection[str] = (),
    ) -> list[MachineGroup]:
        """
        Group machines by the chosen key.

        Args:
            machines: Machines to group (typically already filtered and sorted)
            mode: Grouping key
            collapsed_keys: Keys of groups the user has collapsed

        Returns:
            Groups ordered alphabetically with fallback ("No ...") groups
            last; machines within a group ordered by serial. With
            ``GroupingMode.NONE`` a single group keeps the input order.
        """
        if mode is GroupingMode.NONE:
            return [
                MachineGroup(
                    key=ALL_MACHINES_LABEL,
                    machines=tuple(machines),
                    collapsed=ALL_MACHINES_LABEL in collapsed_keys,
                )
            ]

        buckets: dict[str, list[Machine]] = {}
        for machine in machines:
            buckets.setdefault(group_key(machine, mode), []).append(machine)

        groups = [
            MachineGroup(
                key=key,
                machines=tuple(sorted(members, key=lambda m: collation_key(m.serial))),
                collapsed=key in collapsed_keys,
            )
            for key, members in buckets.items()
        ]
        groups.sort(key=lambda g: (g.is_fallback, collation_key(g.key)))
        return groups

    @staticmethod
    def visible_machines(
        groups: Iterable[MachineGroup], collapsed_keys: Collection[str] = ()
    ) -> list[Machine]:
        """Concatenate the machines of every non-collapsed group, in group order."""
        visible: list[Machine] = []
        for group in groups:
            if group.key in collapsed_keys:
                continue
            visible.extend(group.machines)
        return visible

    @staticmethod
    def toggle_group(collapsed_keys: Collection[str], key: str) -> frozenset[str]:
        """Collapse an expanded group or expand a collapsed one."""
        keys = set(collapsed_keys)
        if key in keys:
            keys.remove(key)
        else:
            keys.add(key)
        return frozenset(keys)

    @staticmethod
    def collapse_all(groups: Iterable[MachineGroup]) -> frozenset[str]:
        return frozenset(group.key for group in groups)

    @staticmethod
    def expand_all() -> frozenset[str]:
        return frozenset()


group_machines = MachineGroupingEngine.group
visible_machines = MachineGroupingEngine.visible_machines
toggle_group = MachineGroupingEngine.toggle_group
collapse_all = MachineGroupingEngine.collapse_all
expand_all = MachineGroupingEngine.expand_all
