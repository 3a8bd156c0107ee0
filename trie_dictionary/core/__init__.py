"""
trie_dictionary.core

The data structure side of the dictionary.
Contains:
 - TrieNode / Trie (insert, search, delete, auto-suggest, spelling suggestions)
 - Levenshtein edit distance (levenshtein, within_distance)
 - debug renderings of the tree (render_structure, build_rich_tree)
"""

from .trie import Trie, TrieNode, DEFAULT_MAX_DISTANCE
from .distance import levenshtein, within_distance, distance_table
from .display import render_structure, build_rich_tree

__all__ = [
    "Trie",
    "TrieNode",
    "DEFAULT_MAX_DISTANCE",
    "levenshtein",
    "within_distance",
    "distance_table",
    "render_structure",
    "build_rich_tree",
]
