"""
cli.py - interactive shell for the trie dictionary
Features:
- Slash commands for every dictionary operation (add, find, delete, suggest, spell)
- Plain text input adds each token as a word
- Tree view of the trie with rich
- Per-command latency tracking (/stats) and JSON backed settings (/config)
- `--tui` launches the textual app instead
"""

import argparse
import shlex
import sys
from typing import Iterable, List, Optional

# ui styling with Rich
from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table
from rich.text import Text

from trie_dictionary.core.display import build_rich_tree
from trie_dictionary.core.trie import Trie
from trie_dictionary.utils.timing import timed
from trie_dictionary.utils.config_manager import Config
from trie_dictionary.utils.logger_utils import Log
from trie_dictionary.utils.metrics_tracker import Metrics

BANNER = "Trie Dictionary"

HELP_ROWS = [
    ("/add <w...>", "insert words"),
    ("/find <w>", "exact lookup"),
    ("/del <w...>", "delete words"),
    ("/suggest <prefix>", "words starting with prefix"),
    ("/spell <w>", "spelling suggestions"),
    ("/words", "list every word"),
    ("/tree", "show the trie structure"),
    ("/stats", "word count and command latencies"),
    ("/config [key val]", "show or change settings"),
    ("/help", "this table"),
    ("/quit", "leave"),
]


class CLI:
    """Command-line shell wrapping a Trie, with timing metrics and config."""

    def __init__(
        self,
        trie: Optional[Trie] = None,
        cfg: Optional[Config] = None,
        console: Optional[Console] = None,
        log: Optional[Log] = None,
    ):
        self.trie = trie if trie is not None else Trie()
        self.cfg = cfg if cfg is not None else Config()
        self.console = console or Console()
        self.log = log or Log.from_config(self.cfg)
        self.metrics = Metrics()
        self.running = True

    def run(self):
        """Main loop: read a line, dispatch it, until /quit or EOF."""
        self.console.rule(f"[bold magenta]{BANNER}[/bold magenta]")
        self.console.print("[cyan]Type words to add them, or /help for commands.[/cyan]")
        self.log.info("shell started")
        while self.running:
            try:
                line = Prompt.ask("[green]>>[/green]", default="", console=self.console)
            except (EOFError, KeyboardInterrupt):
                self._exit()
                break
            self.handle_line(line)

    def handle_line(self, line: str) -> None:
        line = line.strip()
        if not line:
            return
        if line.startswith("/"):
            self._handle_command(line)
        else:
            self._add(line.split())

    # COMMAND HANDLING -----------------------------------------------------------
    def _handle_command(self, line: str):
        try:
            parts = shlex.split(line)
        except ValueError as e:
            self.console.print(f"[red]Bad input:[/red] {e}")
            return
        cmd, args = parts[0].lower(), parts[1:]

        if cmd in ("/q", "/quit", "/exit"):
            self._exit()
        elif cmd == "/help":
            self._show_help()
        elif cmd == "/add" and args:
            self._add(args)
        elif cmd == "/find" and len(args) == 1:
            self._find(args[0])
        elif cmd == "/del" and args:
            self._delete(args)
        elif cmd == "/suggest":
            # bare /suggest lists everything (empty prefix)
            self._suggest(args[0] if args else "")
        elif cmd == "/spell" and len(args) == 1:
            self._spell(args[0])
        elif cmd == "/words":
            self._show_words("All words", self._timed("words", self.trie.get_all_words))
        elif cmd == "/tree":
            self.console.print(build_rich_tree(self.trie.root))
        elif cmd == "/stats":
            self._show_stats()
        elif cmd == "/config":
            self._config(args)
        else:
            self.console.print(f"[red]Unknown command:[/red] {escape(line)}  [dim](try /help)[/dim]")

    def _timed(self, key: str, fn, *args):
        out, _ = timed(self.metrics, f"{key}_time")(fn)(*args)
        return out

    # DICTIONARY OPERATIONS ---------------------------------------------------------
    def _add(self, words: Iterable[str]):
        for w in words:
            if self._timed("insert", self.trie.insert, w):
                self.console.print(f"[green]Added:[/green] {escape(w)}")
                self.log.info(f"added {w!r}")
            else:
                self.console.print(f"[yellow]Already present:[/yellow] {escape(w)}")

    def _find(self, word: str):
        if self._timed("search", self.trie.search, word):
            self.console.print(f"[green]Found:[/green] {escape(word)}")
        else:
            self.console.print(f"[red]Not found:[/red] {escape(word)}")

    def _delete(self, words: Iterable[str]):
        for w in words:
            if self._timed("delete", self.trie.delete, w):
                self.console.print(f"[green]Deleted:[/green] {escape(w)}")
                self.log.info(f"deleted {w!r}")
            else:
                self.console.print(f"[red]Not present:[/red] {escape(w)}")

    def _suggest(self, prefix: str):
        out = self._timed("suggest", self.trie.auto_suggest, prefix)
        self._show_words(f"Suggestions for '{escape(prefix)}'", out)

    def _spell(self, word: str):
        max_distance = self.cfg.get("max_distance")
        out = self._timed("spell", self.trie.get_spelling_suggestions, word, max_distance)
        self._show_words(f"Spelling suggestions for '{escape(word)}' (<= {max_distance} edits)", out)

    # DISPLAY -------------------------------------------------------------------------------
    def _show_words(self, title: str, words: List[str]):
        if not words:
            self.console.print("[dim](no words)[/dim]")
            return
        limit = self.cfg.get("max_suggestions")
        # wide enough that the title stays on one line
        table = Table(
            title=title, box=box.SIMPLE, show_edge=False,
            min_width=Text.from_markup(title).cell_len,
        )
        table.add_column("#", justify="right", style="cyan")
        table.add_column("Word", style="bold")
        for i, w in enumerate(words[:limit], 1):
            table.add_row(str(i), Text(w))
        self.console.print(table)
        if len(words) > limit:
            self.console.print(f"[dim]... {len(words) - limit} more[/dim]")

    def _show_help(self):
        table = Table(title="Commands", box=box.MINIMAL)
        table.add_column("Command", style="cyan")
        table.add_column("Does")
        for row in HELP_ROWS:
            table.add_row(*row)
        self.console.print(table)

    def _show_stats(self):
        t = Table(title="Stats", box=box.MINIMAL)
        t.add_column("Metric", style="cyan")
        t.add_column("Calls", justify="right")
        t.add_column("Avg ms", justify="right", style="magenta")
        t.add_row("words stored", str(len(self.trie)), "")
        for key, n, avg in self.metrics.rows():
            t.add_row(key, str(n), f"{avg * 1000:.3f}")
        self.console.print(t)

    def _config(self, args: List[str]):
        if not args:
            body = "\n".join(f"{k:16} = {v}" for k, v in self.cfg.show())
            self.console.print(Panel(body, title="Config", border_style="cyan"))
            return
        if len(args) != 2:
            self.console.print("[red]usage:[/red] /config <key> <value>")
            return
        key, val = args
        try:
            self.cfg.set(key, val)
        except KeyError:
            self.console.print(f"[red]No such option:[/red] {escape(key)}")
            return
        except ValueError as e:
            self.console.print(f"[red]Bad value:[/red] {escape(str(e))}")
            return
        self.console.print(f"[green]{key}[/green] = {self.cfg.get(key)}")
        self.log.info(f"config {key} set to {self.cfg.get(key)!r}")

    # EXIT ------------------------------------------------------------------------
    def _exit(self):
        self.console.rule("[red]Exiting[/red]")
        self.log.info(f"shell closed with {len(self.trie)} words")
        self.running = False


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="trie-dictionary", description=BANNER)
    parser.add_argument("--config", default="config.json", help="path of the JSON config file")
    parser.add_argument("--words", nargs="*", default=[], help="words to start with")
    parser.add_argument("--tui", action="store_true", help="run the textual app instead of the shell")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    cfg = Config(args.config)
    log = Log.from_config(cfg)
    trie = Trie()
    with log.time_block("seed words"):
        added = sum(trie.insert(w) for w in args.words)
    if args.words:
        log.info(f"seeded {added} of {len(args.words)} words")

    if args.tui:
        from trie_dictionary.tui_app import TrieApp

        TrieApp(trie=trie, cfg=cfg, log=log).run()
    else:
        CLI(trie=trie, cfg=cfg, log=log).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
