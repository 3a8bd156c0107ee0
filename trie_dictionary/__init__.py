"""
trie_dictionary

In-memory prefix-tree dictionary with auto-suggest and edit-distance
spelling suggestions, plus a rich shell and a textual app to drive it.
"""

from trie_dictionary.core import Trie, TrieNode, levenshtein

__all__ = ["Trie", "TrieNode", "levenshtein"]

__version__ = "0.1.0"
