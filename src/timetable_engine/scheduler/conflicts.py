"""Conflict index: an AVL tree of assignments keyed by (day, start time)."""

from collections.abc import Iterator

from ..models import Assignment
from ..normalization import days_equal
from .models import Conflict, InsertResult


def check_conflict(candidate: Assignment, existing: Assignment) -> Conflict | None:
    """Apply the conflict rule between a candidate and a committed assignment.

    Two assignments conflict when they are on the same day (case-insensitive),
    share a room or a professor, and their half-open intervals overlap:
    ``start1 < end2 and start2 < end1``. Back-to-back slots do not conflict.

    Args:
        candidate: Assignment being scheduled
        existing: Assignment already in the index

    Returns:
        Conflict describing the collision, or None
    """
    if candidate.id and candidate.id == existing.id:
        return None

    if not days_equal(candidate.time_slot.day, existing.time_slot.day):
        return None

    shares_room = candidate.room.id == existing.room.id
    shares_professor = candidate.professor.id == existing.professor.id
    if not shares_room and not shares_professor:
        return None

    if not candidate.time_slot.overlaps(existing.time_slot):
        return None

    return Conflict(
        existing=existing,
        shares_room=shares_room,
        shares_professor=shares_professor,
    )


class _Node:
    __slots__ = ("assignment", "key", "left", "right", "height")

    def __init__(self, assignment: Assignment) -> None:
        self.assignment = assignment
        self.key = assignment.key
        self.left: _Node | None = None
        self.right: _Node | None = None
        self.height = 1


def _height(node: _Node | None) -> int:
    return node.height if node else 0


def _balance(node: _Node | None) -> int:
    return _height(node.left) - _height(node.right) if node else 0


def _update(node: _Node) -> None:
    node.height = 1 + max(_height(node.left), _height(node.right))


def _rotate_right(y: _Node) -> _Node:
    x = y.left
    y.left = x.right
    x.right = y
    _update(y)
    _update(x)
    return x


def _rotate_left(x: _Node) -> _Node:
    y = x.right
    x.right = y.left
    y.left = x
    _update(x)
    _update(y)
    return y


def _rebalance(node: _Node) -> _Node:
    _update(node)
    balance = _balance(node)

    if balance > 1:
        # LR case turns into LL
        if _balance(node.left) < 0:
            node.left = _rotate_left(node.left)
        return _rotate_right(node)

    if balance < -1:
        # RL case turns into RR
        if _balance(node.right) > 0:
            node.right = _rotate_right(node.right)
        return _rotate_left(node)

    return node


class ConflictIndex:
    """Self-balancing ordered index of committed assignments.

    Nodes hold references to the same Assignment objects the entity store
    keeps, so there is no duplicated state. Equal keys are retained and
    inserted to the right, which keeps in-order traversal stable in
    insertion order for identical (day, start) pairs.

    Keys use the case-folded day, so "mon" and "MON" share a key range just
    as check_conflict treats them as the same day.

    Insertion is check-then-insert: a rejected candidate never touches the
    tree.
    """

    def __init__(self) -> None:
        self._root: _Node | None = None
        self._size = 0

    @property
    def height(self) -> int:
        """Height of the tree (0 when empty)."""
        return _height(self._root)

    def find_conflicts(self, candidate: Assignment) -> list[Conflict]:
        """Collect every committed assignment that conflicts with a candidate.

        Only keys in [(day, ""), (day, candidate end)) can overlap the
        candidate, so the walk visits that key range and skips the rest of
        the tree.
        """
        day = candidate.time_slot.day.lower()
        low = (day, "")
        high = (day, candidate.time_slot.end_time)

        conflicts: list[Conflict] = []
        for existing in self._range(low, high):
            conflict = check_conflict(candidate, existing)
            if conflict is not None:
                conflicts.append(conflict)
        return conflicts

    def insert(self, candidate: Assignment) -> InsertResult:
        """Insert a candidate unless it conflicts with a committed assignment.

        Args:
            candidate: Assignment to insert

        Returns:
            InsertResult; when not ok the index is unchanged
        """
        conflicts = self.find_conflicts(candidate)
        if conflicts:
            return InsertResult(conflicts=conflicts)

        self._root = self._insert(self._root, candidate)
        self._size += 1
        return InsertResult()

    def _insert(self, node: _Node | None, assignment: Assignment) -> _Node:
        if node is None:
            return _Node(assignment)

        if assignment.key < node.key:
            node.left = self._insert(node.left, assignment)
        else:
            node.right = self._insert(node.right, assignment)

        return _rebalance(node)

    def remove(self, assignment: Assignment) -> bool:
        """Remove an assignment by identity.

        Returns:
            True if the assignment was in the index
        """
        self._root, removed = self._remove(self._root, assignment.key, assignment.id)
        if removed:
            self._size -= 1
        return removed

    def _remove(
        self, node: _Node | None, key: tuple[str, str], assignment_id: str
    ) -> tuple[_Node | None, bool]:
        if node is None:
            return None, False

        if node.key == key and node.assignment.id == assignment_id:
            if node.left is None:
                return node.right, True
            if node.right is None:
                return node.left, True
            node.right, successor = self._remove_min(node.right)
            node.assignment = successor.assignment
            node.key = successor.key
            return _rebalance(node), True

        removed = False
        # Rotations can leave equal keys on either side of a node
        if key <= node.key:
            node.left, removed = self._remove(node.left, key, assignment_id)
        if not removed and key >= node.key:
            node.right, removed = self._remove(node.right, key, assignment_id)

        if not removed:
            return node, False
        return _rebalance(node), True

    def _remove_min(self, node: _Node) -> tuple[_Node | None, _Node]:
        if node.left is None:
            return node.right, node
        node.left, minimum = self._remove_min(node.left)
        return _rebalance(node), minimum

    def _range(self, low: tuple[str, str], high: tuple[str, str]) -> Iterator[Assignment]:
        """In-order assignments with low <= key < high."""
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            if node is not None:
                if low <= node.key:
                    stack.append(node)
                    node = node.left
                else:
                    node = node.right
                continue

            node = stack.pop()
            if node.key >= high:
                return
            yield node.assignment
            node = node.right

    def list_all(self) -> list[Assignment]:
        """All assignments in (day, start time) order."""
        return list(iter(self))

    def find_by_day(self, day: str) -> list[Assignment]:
        """Assignments on a day (case-insensitive), in start time order."""
        return [a for a in self if days_equal(a.time_slot.day, day)]

    def __iter__(self) -> Iterator[Assignment]:
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.assignment
            node = node.right

    def __len__(self) -> int:
        return self._size
