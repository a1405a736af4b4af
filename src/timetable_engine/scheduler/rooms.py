"""Greedy room allocation over the current assignment set."""

from collections.abc import Iterable

from ..constants import TARGET_UTILIZATION
from ..models import Assignment, Room, TimeSlot
from ..utils import id_sort_key, room_sort_key


class RoomAllocator:
    """Picks rooms for a requested slot and student count.

    The allocator is stateless: every call receives the room list and the
    committed assignments. Rooms are always considered in ascending capacity
    order, ties broken by natural id order (R2 before R10), so results are
    deterministic regardless of the input order.

    Strategy for allocate:
    1. Discard rooms smaller than the required capacity
    2. Discard rooms with an overlapping assignment at the slot
    3. Take the smallest remaining room (least wasted seats)
    """

    def is_room_available(
        self, room: Room, slot: TimeSlot, existing: Iterable[Assignment]
    ) -> bool:
        """Check that no assignment uses the room at an overlapping time."""
        for assignment in existing:
            if assignment.room.id == room.id and assignment.time_slot.overlaps(slot):
                return False
        return True

    def allocate(
        self,
        required_capacity: int,
        slot: TimeSlot,
        rooms: list[Room],
        existing: list[Assignment],
    ) -> Room | None:
        """Smallest free room with at least the required capacity.

        Args:
            required_capacity: Number of seats needed
            slot: Requested time slot
            rooms: Candidate rooms
            existing: Committed assignments

        Returns:
            Chosen room, or None if no room fits
        """
        for room in sorted(rooms, key=room_sort_key):
            if room.capacity < required_capacity:
                continue
            if self.is_room_available(room, slot, existing):
                return room
        return None

    def allocate_with_type(
        self,
        required_capacity: int,
        preferred_type: str,
        slot: TimeSlot,
        rooms: list[Room],
        existing: list[Assignment],
    ) -> Room | None:
        """Like allocate, but try rooms of the preferred type first.

        Falls back to any room type when no room of the preferred type
        (case-insensitive) is free and large enough.
        """
        wanted = preferred_type.strip().lower()
        preferred = [r for r in rooms if r.room_type.lower() == wanted]
        room = self.allocate(required_capacity, slot, preferred, existing)
        if room is not None:
            return room
        return self.allocate(required_capacity, slot, rooms, existing)

    def available(
        self, slot: TimeSlot, rooms: list[Room], existing: list[Assignment]
    ) -> list[Room]:
        """Rooms free at the slot, ascending by capacity then id."""
        free = [r for r in rooms if self.is_room_available(r, slot, existing)]
        return sorted(free, key=room_sort_key)

    def utilization(self, students: int, room: Room | None) -> float:
        """Students as a percentage of room capacity (0.0 for empty rooms)."""
        if room is None or room.capacity == 0:
            return 0.0
        return students * 100.0 / room.capacity

    def find_optimal(
        self,
        required_capacity: int,
        slot: TimeSlot,
        rooms: list[Room],
        existing: list[Assignment],
        target: float = TARGET_UTILIZATION,
    ) -> Room | None:
        """Free room whose utilization is closest to the target.

        Ties are broken by smaller capacity, then by id.
        """
        candidates = [
            r for r in self.available(slot, rooms, existing) if r.capacity >= required_capacity
        ]
        if not candidates:
            return None

        return min(
            candidates,
            key=lambda r: (
                abs(self.utilization(required_capacity, r) - target),
                r.capacity,
                id_sort_key(r.id),
            ),
        )
