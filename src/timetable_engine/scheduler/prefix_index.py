"""Prefix tree for auto-completion of course and room strings."""

from dataclasses import dataclass, field

from ..normalization import normalize_search_term


@dataclass
class _Node:
    children: dict[str, "_Node"] = field(default_factory=dict)
    terminal: bool = False


class PrefixIndex:
    """Character-keyed prefix tree over upper-cased strings.

    Stores strings only, never the entities they came from. Inserting a
    string that is already present is a no-op, so each distinct string is
    held once. Queries are case-insensitive; results come back upper-cased
    and sorted lexicographically.
    """

    def __init__(self) -> None:
        self._root = _Node()
        self._size = 0

    def _find_node(self, term: str) -> _Node | None:
        node = self._root
        for char in term:
            node = node.children.get(char)
            if node is None:
                return None
        return node

    def insert(self, word: str) -> None:
        """Insert a string. Empty strings are ignored."""
        term = normalize_search_term(word)
        if not term:
            return

        node = self._root
        for char in term:
            node = node.children.setdefault(char, _Node())

        if not node.terminal:
            node.terminal = True
            self._size += 1

    def exists(self, word: str) -> bool:
        """Exact-match lookup."""
        term = normalize_search_term(word)
        if not term:
            return False
        node = self._find_node(term)
        return node is not None and node.terminal

    def has_prefix(self, prefix: str) -> bool:
        """Check whether any stored string starts with the prefix."""
        term = normalize_search_term(prefix)
        if not term:
            return False
        # Pruning on delete guarantees every reachable node leads to a terminal
        return self._find_node(term) is not None

    def enumerate(self, prefix: str) -> list[str]:
        """All stored strings starting with the prefix, sorted.

        Args:
            prefix: Case-insensitive prefix; empty prefixes match nothing

        Returns:
            Sorted list of upper-cased matches
        """
        term = normalize_search_term(prefix)
        if not term:
            return []

        node = self._find_node(term)
        if node is None:
            return []

        results: list[str] = []
        stack = [(node, term)]
        while stack:
            current, word = stack.pop()
            if current.terminal:
                results.append(word)
            for char, child in current.children.items():
                stack.append((child, word + char))
        return sorted(results)

    def delete(self, word: str) -> bool:
        """Remove a string and prune branches it leaves empty.

        Returns:
            True if the string was present
        """
        term = normalize_search_term(word)
        if not term:
            return False

        path: list[tuple[_Node, str]] = []
        node = self._root
        for char in term:
            child = node.children.get(char)
            if child is None:
                return False
            path.append((node, char))
            node = child

        if not node.terminal:
            return False

        node.terminal = False
        self._size -= 1

        # Walk back up, dropping nodes with no terminal and no children
        for parent, char in reversed(path):
            child = parent.children[char]
            if child.terminal or child.children:
                break
            del parent.children[char]
        return True

    def auto_complete(self, prefix: str) -> list[str]:
        """Alias of enumerate used by the query surface."""
        return self.enumerate(prefix)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.exists(word)

    def __len__(self) -> int:
        return self._size
