# tests/test_display.py
from rich.console import Console

from trie_dictionary.core.display import build_rich_tree, render_structure
from trie_dictionary.core.trie import Trie


def _trie(*words):
    t = Trie()
    for w in words:
        t.insert(w)
    return t


def test_empty_trie_renders_root_only():
    assert render_structure(Trie().root) == "root"


def test_render_branches_sorted():
    t = _trie("be", "at", "ax")
    assert t.structure() == "\n".join([
        "root",
        " ├─a",
        " │ ├─t",
        " │ └─x",
        " └─b",
        "   └─e",
    ])


def test_render_marks_terminals():
    t = _trie("a", "ab")
    assert t.structure(mark_terminal=True) == "\n".join([
        "root",
        " └─a *",
        "   └─b *",
    ])


def test_print_structure_stdout(capsys):
    _trie("hi").print_structure()
    out = capsys.readouterr().out
    assert out.splitlines() == ["root", " └─h", "   └─i"]


def test_print_structure_console():
    console = Console(record=True, width=80)
    _trie("ok").print_structure(console=console)
    text = console.export_text()
    assert "└─o" in text and "└─k" in text


def test_rich_tree_shape():
    t = _trie("ba", "ab", "ac")
    tree = build_rich_tree(t.root)
    labels = [str(child.label) for child in tree.children]
    assert labels == ["a", "b"]
    assert [str(c.label) for c in tree.children[0].children] == ["b", "c"]


def test_deep_word_renders():
    t = _trie("z" * 1500)
    lines = t.structure(mark_terminal=True).splitlines()
    assert len(lines) == 1501
    assert lines[1] == " └─z"
    assert lines[2] == "   └─z"
    assert lines[-1].endswith("└─z *")
    assert lines[-1] == " " + "  " * 1499 + "└─z *"
    tree = build_rich_tree(t.root)
    assert str(tree.children[0].label) == "z"
