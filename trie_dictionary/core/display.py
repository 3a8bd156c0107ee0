# display.py
# Debug renderings of the trie structure.
#  - render_structure(): plain text with box-drawing branches
#  - build_rich_tree(): same shape as a rich Tree for the console UIs
# Children are always visited in sorted character order.

from __future__ import annotations

from typing import TYPE_CHECKING, List, Tuple

from rich.text import Text
from rich.tree import Tree

if TYPE_CHECKING:
    from trie_dictionary.core.trie import TrieNode

ROOT_LABEL = "root"
TERMINAL_MARK = " *"


def _push_children(
    stack: List[Tuple["TrieNode", str, bool]], node: "TrieNode", indent: str
) -> None:
    # reversed so the smallest character is popped first
    keys = sorted(node.children)
    last = len(keys) - 1
    for i in range(last, -1, -1):
        stack.append((node.children[keys[i]], indent, i == last))


def render_structure(root: "TrieNode", mark_terminal: bool = False) -> str:
    """
    Render every node under `root` as an indented tree:

        root
         ├─a
         │ └─t
         └─b
           └─e

    With mark_terminal=True, nodes ending a stored word get a trailing " *".
    """
    lines = [ROOT_LABEL]
    stack: List[Tuple["TrieNode", str, bool]] = []
    _push_children(stack, root, " ")
    while stack:
        node, indent, is_last = stack.pop()
        branch = "└─" if is_last else "├─"
        label = node.character + (TERMINAL_MARK if mark_terminal and node.is_terminal else "")
        lines.append(f"{indent}{branch}{label}")
        _push_children(stack, node, indent + ("  " if is_last else "│ "))
    return "\n".join(lines)


def build_rich_tree(root: "TrieNode") -> Tree:
    """Build a rich Tree mirroring the trie; terminal nodes are highlighted."""
    tree = Tree(Text(ROOT_LABEL, style="bold magenta"))
    # explicit stack of (trie node, rich branch) so deep words don't hit recursion limits
    stack = [(root, tree)]
    while stack:
        node, branch = stack.pop()
        for ch in sorted(node.children):
            child = node.children[ch]
            style = "bold green" if child.is_terminal else "cyan"
            sub = branch.add(Text(ch, style=style))
            stack.append((child, sub))
    return tree
