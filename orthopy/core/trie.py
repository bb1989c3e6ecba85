"""Prefix tree over lowercase ASCII letters."""

from collections.abc import Iterator

ALPHABET_SIZE = 26
_FIRST = ord("a")


def _slot(char: str) -> int:
    """Map a letter to its child slot, -1 when outside 'a'..'z'."""
    index = ord(char) - _FIRST
    if 0 <= index < ALPHABET_SIZE:
        return index
    return -1


class TrieNode:
    """A node with one child slot per letter and an end-of-word marker."""

    __slots__ = ("children", "terminal")

    def __init__(self) -> None:
        self.children: list[TrieNode | None] = [None] * ALPHABET_SIZE
        self.terminal = False


class Trie:
    """Dense 26-way trie used as the dictionary's word store."""

    def __init__(self) -> None:
        self.root = TrieNode()
        self._size = 0

    def insert(self, word: str) -> None:
        """Insert a lowercase word, creating any missing nodes along its path.

        Raises:
            ValueError: If the word contains a character outside 'a'..'z'
        """
        node = self.root
        for char in word:
            index = _slot(char)
            if index < 0:
                raise ValueError(f"cannot insert {word!r}: {char!r} is not in a-z")
            child = node.children[index]
            if child is None:
                child = TrieNode()
                node.children[index] = child
            node = child
        if not node.terminal:
            node.terminal = True
            self._size += 1

    def search(self, word: str) -> bool:
        """Return True iff the word was inserted. Never raises on odd characters."""
        node = self.root
        for char in word:
            index = _slot(char)
            if index < 0:
                return False
            child = node.children[index]
            if child is None:
                return False
            node = child
        return node.terminal

    def enumerate(self) -> list[str]:
        """Return every stored word in lexicographic order.

        Depth-first with an explicit stack; children are pushed z->a so they
        pop a->z. Recomputed on each call.
        """
        words: list[str] = []
        stack: list[tuple[TrieNode, str]] = [(self.root, "")]
        while stack:
            node, prefix = stack.pop()
            if node.terminal:
                words.append(prefix)
            for index in range(ALPHABET_SIZE - 1, -1, -1):
                child = node.children[index]
                if child is not None:
                    stack.append((child, prefix + chr(_FIRST + index)))
        return words

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.search(word)

    def __iter__(self) -> Iterator[str]:
        return iter(self.enumerate())

    def __len__(self) -> int:
        return self._size
