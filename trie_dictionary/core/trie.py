# trie.py
# Prefix tree (trie) dictionary.
# Supports insert / exact search / delete with pruning, prefix auto-suggest,
# full enumeration and edit-distance spelling suggestions.
# Output order is always lexicographic: children are walked in sorted order.

from __future__ import annotations

import logging
from typing import Dict, Iterator, List, Optional, Tuple

from rich.console import Console

from trie_dictionary.core.display import render_structure
from trie_dictionary.core.distance import within_distance

logger = logging.getLogger(__name__)

DEFAULT_MAX_DISTANCE = 2


def _require_str(value: object, name: str = "word") -> None:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be str, got {type(value).__name__}")


class TrieNode:
    """
    A single node in the Trie.
    character: the char on the edge leading here ("" for the root)
    children: char -> TrieNode
    is_terminal: True if the path from the root to here is a stored word
    """

    __slots__ = ("character", "children", "is_terminal")

    def __init__(self, character: str = "") -> None:
        self.character = character
        self.children: Dict[str, TrieNode] = {}
        self.is_terminal = False

    def has_child(self, ch: str) -> bool:
        return ch in self.children

    def __repr__(self) -> str:
        return (
            f"TrieNode({self.character!r}, terminal={self.is_terminal}, "
            f"children={sorted(self.children)})"
        )


class Trie:
    """
    Trie dictionary. Public API:
      - insert(word) -> bool              False if the word was already stored
      - search(word) -> bool              exact lookup
      - delete(word) -> bool              False if the word was not stored
      - auto_suggest(prefix) -> [words]   every stored word starting with prefix
      - get_all_words() -> [words]
      - iter_words(prefix="")             lazy version of the above
      - get_spelling_suggestions(word, max_distance=2) -> [words]
      - print_structure(console=None)
    """

    def __init__(self) -> None:
        self._root = TrieNode()
        self._count = 0

    @property
    def root(self) -> TrieNode:
        return self._root

    # insertion -----------------------------------------------------
    def insert(self, word: str) -> bool:
        """
        Insert a word, creating nodes for characters not yet on the path.
        Returns False (and changes nothing) when the word is already stored.
        The empty string marks the root itself as terminal.
        """
        _require_str(word)
        node = self._root
        for ch in word:
            child = node.children.get(ch)
            if child is None:
                child = TrieNode(ch)
                node.children[ch] = child
            node = child

        if node.is_terminal:
            return False
        node.is_terminal = True
        self._count += 1
        logger.debug("inserted %r (%d words)", word, self._count)
        return True

    # lookup --------------------------------------------------------
    def _walk(self, s: str) -> Optional[TrieNode]:
        """Follow s from the root; None as soon as a character is missing."""
        node = self._root
        for ch in s:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def search(self, word: str) -> bool:
        """True only if `word` was inserted as a complete word (not merely a prefix)."""
        _require_str(word)
        node = self._walk(word)
        return node is not None and node.is_terminal

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.search(word)

    def __len__(self) -> int:
        return self._count

    # deletion ------------------------------------------------------
    def delete(self, word: str) -> bool:
        """
        Remove a word. Returns True iff it was stored.
        Nodes left neither terminal nor with children are pruned bottom-up;
        a node that still ends another (shorter) word is kept.
        """
        _require_str(word)
        # (parent, char) pairs from the root down, so pruning can walk back up
        path: List[Tuple[TrieNode, str]] = []
        node = self._root
        for ch in word:
            child = node.children.get(ch)
            if child is None:
                return False
            path.append((node, ch))
            node = child

        if not node.is_terminal:
            return False
        node.is_terminal = False
        self._count -= 1

        pruned = 0
        while path and not node.children and not node.is_terminal:
            parent, ch = path.pop()
            del parent.children[ch]
            node = parent
            pruned += 1
        logger.debug("deleted %r (%d words, %d nodes pruned)", word, self._count, pruned)
        return True

    # traversal/collection ------------------------------------------
    def _collect(self, node: TrieNode, path: List[str]) -> Iterator[str]:
        """
        Pre-order DFS: emit the current path if terminal, then descend into sorted children.
        Iterative (stack of child iterators), so depth is not tied to the recursion limit.
        """
        path = list(path)
        if node.is_terminal:
            yield "".join(path)
        stack = [iter(sorted(node.children.items()))]
        while stack:
            step = next(stack[-1], None)
            if step is None:
                stack.pop()
                if stack:
                    path.pop()
                continue
            ch, child = step
            path.append(ch)
            if child.is_terminal:
                yield "".join(path)
            stack.append(iter(sorted(child.children.items())))

    def iter_words(self, prefix: str = "") -> Iterator[str]:
        """Lazily yield stored words starting with `prefix`, lexicographically."""
        _require_str(prefix, "prefix")
        node = self._walk(prefix)
        if node is None:
            return iter(())
        return self._collect(node, list(prefix))

    def __iter__(self) -> Iterator[str]:
        return self.iter_words()

    def get_all_words(self) -> List[str]:
        """Every stored word, in lexicographic order."""
        return list(self.iter_words())

    def auto_suggest(self, prefix: str) -> List[str]:
        """
        All stored words starting with `prefix` (including prefix itself when stored).
        Unknown prefixes give [].
        """
        return list(self.iter_words(prefix))

    # fuzzy suggestions ---------------------------------------------
    def get_spelling_suggestions(
        self, word: str, max_distance: int = DEFAULT_MAX_DISTANCE
    ) -> List[str]:
        """
        Stored words within `max_distance` edits of `word`.
        Only words sharing word's first letter are considered; an empty word or
        a first letter with no branch gives []. Results keep traversal order.
        """
        _require_str(word)
        if isinstance(max_distance, bool) or not isinstance(max_distance, int):
            raise TypeError("max_distance must be int")
        if max_distance < 0:
            raise ValueError("max_distance must be >= 0")
        if not word:
            return []

        first = word[0]
        branch = self._root.children.get(first)
        if branch is None:
            return []

        return [w for w in self._collect(branch, [first]) if within_distance(word, w, max_distance)]

    # convenience/debugging -----------------------------------------
    def structure(self, mark_terminal: bool = False) -> str:
        """Text rendering of every node (see display.render_structure)."""
        return render_structure(self._root, mark_terminal=mark_terminal)

    def print_structure(self, console: Optional[Console] = None) -> None:
        """Print the tree rendering; through `console` when given, else stdout."""
        text = self.structure()
        if console is None:
            print(text)
        else:
            console.print(text, highlight=False, markup=False)
