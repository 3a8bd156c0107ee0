# tui_app.py - Trie Dictionary TUI Application
# -------------------------------------------------------
# Text based terminal UI over a Trie.
# Features:
#  - Live prefix suggestions as you type
#  - Spelling suggestions (edit distance) for the same input
#  - Enter adds the typed word, ctrl+d deletes it, ctrl+t accepts the top suggestion
#  - Latency readout and word count in the status bar
# -------------------------------------------------------

from __future__ import annotations
import time
from typing import List, Optional

from rich.markup import escape
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container, Horizontal
from textual.reactive import reactive
from textual.widgets import Footer, Header, Input, Static

from trie_dictionary.core.trie import Trie
from trie_dictionary.utils.config_manager import Config
from trie_dictionary.utils.logger_utils import Log


class WordPanel(Static):
    """
    Titled list of words.
    Shows up to `limit` entries with index numbers, or a dim placeholder.
    """
    def update_words(self, title: str, words: List[str], limit: int, color: str = "cyan"):
        if not words:
            self.update(f"[b]{title}[/b]\n[dim]No suggestions[/dim]")
            return
        lines = [f"[b]{title}[/b]"]
        for i, word in enumerate(words[:limit], 1):
            lines.append(f"[b]{i}[/b] • [{color}]{escape(word)}[/{color}]")
        if len(words) > limit:
            lines.append(f"[dim]... {len(words) - limit} more[/dim]")
        self.update("\n".join(lines))


class StatusBar(Static):
    """Bottom readout: lookup latency, word count and the last action."""
    def set_status(self, seconds: float, count: int, note: str = ""):
        ms = seconds * 1000
        tail = f"  {note}" if note else ""
        self.update(f"[dim]Latency:[/dim] {ms:.2f}ms  [dim]Words:[/dim] {count}{tail}")


# Main Application -----------------------------------------------------------------
class TrieApp(App):
    """
    The Textual app.
    Input events run auto_suggest + get_spelling_suggestions on the trie,
    results land in reactive state, watchers repaint the panels.
    """
    CSS = """
    #panels { height: 1fr; }
    #suggest, #spell { width: 1fr; padding: 0 1; border: round $accent; }
    #status { height: 1; }
    """

    # keyboard shortcuts for user
    BINDINGS = [
        Binding("ctrl+t", "accept_top", "Accept top suggestion", priority=True),
        Binding("ctrl+d", "delete_word", "Delete word", priority=True),
    ]

    # reactive values that refresh widgets when changed
    suggestions = reactive(list, init=False)  # prefix matches for the input
    spelling = reactive(list, init=False)     # edit distance matches for the input
    latency = reactive(0.0, init=False)       # time spent on the last lookup

    def __init__(self, trie: Optional[Trie] = None, cfg: Optional[Config] = None, log: Optional[Log] = None):
        super().__init__()
        self.trie = trie if trie is not None else Trie()
        self.cfg = cfg if cfg is not None else Config()
        self.app_log = log or Log.from_config(self.cfg)
        self.note = ""

    # UI --------------------------------------------------------------------
    def compose(self) -> ComposeResult:
        yield Header()
        with Container(id="left"):
            yield Input(placeholder="Type a word…", id="word_input")
        with Horizontal(id="panels"):
            yield WordPanel(id="suggest")
            yield WordPanel(id="spell")
        yield StatusBar(id="status")
        yield Footer()

    def on_mount(self):
        self.title = "Trie Dictionary"
        self.query_one(Input).focus()
        self._refresh_panels()
        self._refresh_status()

    # Lookups ---------------------------------------------------------------------------
    def lookup(self, fragment: str) -> None:
        """Recompute both suggestion lists for `fragment`."""
        fragment = fragment.strip()
        if not fragment:
            self.suggestions = []
            self.spelling = []
            return
        start = time.perf_counter()
        prefix_hits = self.trie.auto_suggest(fragment)
        fuzzy_hits = self.trie.get_spelling_suggestions(fragment, self.cfg.get("max_distance"))
        self.latency = time.perf_counter() - start
        self.suggestions = prefix_hits
        self.spelling = fuzzy_hits

    def on_input_changed(self, event: Input.Changed) -> None:
        self.lookup(event.value)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        """Enter = add the typed word."""
        word = event.value.strip()
        if not word:
            return
        if self.trie.insert(word):
            self.note = f"[green]Added {escape(word)}[/green]"
            self.app_log.info(f"added {word!r}")
        else:
            self.note = f"[yellow]{escape(word)} already present[/yellow]"
        self.lookup(word)
        self._refresh_status()

    # Reactive state (watcher functions) ---------------------------------------
    def watch_suggestions(self, suggestions):
        self._refresh_panels()

    def watch_spelling(self, spelling):
        self._refresh_panels()

    def watch_latency(self, latency):
        self._refresh_status()

    def _refresh_panels(self):
        limit = self.cfg.get("max_suggestions")
        self.query_one("#suggest", WordPanel).update_words("Starts with", self.suggestions, limit)
        self.query_one("#spell", WordPanel).update_words("Did you mean", self.spelling, limit, color="yellow")

    def _refresh_status(self):
        self.query_one(StatusBar).set_status(self.latency, len(self.trie), self.note)

    # Actions ----------------------------------------------------------------------
    def action_accept_top(self):
        """Replace the input with the first prefix suggestion."""
        if not self.suggestions:
            return
        input_widget = self.query_one(Input)
        input_widget.value = self.suggestions[0]
        input_widget.cursor_position = len(input_widget.value)

    def action_delete_word(self):
        """Remove the typed word from the trie."""
        word = self.query_one(Input).value.strip()
        if not word:
            return
        if self.trie.delete(word):
            self.note = f"[green]Deleted {escape(word)}[/green]"
            self.app_log.info(f"deleted {word!r}")
        else:
            self.note = f"[red]{escape(word)} not present[/red]"
        self.lookup(word)
        self._refresh_status()


if __name__ == "__main__":
    TrieApp().run()
