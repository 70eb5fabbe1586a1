"""
cli.py - command line interface for the braille autocorrect engine
Features:
- Type braille cells as key chords ("d dq wkq"), get ranked corrections back
- One-shot mode for scripting: braille-autocorrect "dk d wqk"
- JSON config, latency stats, tiny benchmark
- Uses Rich for tables and formatting
- --tui starts the live keyboard UI instead
"""

import argparse
import json
import logging
import random
import sys
import time
from typing import List, Optional

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table

from braille_autocorrect.autocorrector import BrailleAutocorrect
from braille_autocorrect.core.patterns import KEY_TO_DOT, keys_to_pattern
from braille_autocorrect.core.ranker import Suggestion
from braille_autocorrect.input.grouper import SPACE
from braille_autocorrect.utils.config_manager import Config
from braille_autocorrect.utils.logger_utils import configure_logging
from braille_autocorrect.utils.metrics_tracker import Metrics

logger = logging.getLogger(__name__)

SPACE_TOKEN = "_"

HELP = """\
Type key chords separated by spaces, one chord per braille cell (e.g. [bold]dk d wqk[/bold]).
Keys: D W Q K O P = dots 1-6. Use _ for a space.
Commands: /help /keys /word <w> /config [key val] /stats /bench /quit"""


def parse_groups(line: str) -> List:
    """Split a line into chord groups; '_' becomes a space marker."""
    groups = []
    for tok in line.split():
        groups.append(SPACE if tok == SPACE_TOKEN else tuple(sorted(set(tok.lower()))))
    return groups


class CLI:
    """Interactive loop + command handling around a BrailleAutocorrect engine."""

    def __init__(self, engine: BrailleAutocorrect, cfg: Config, metrics: Metrics, console: Optional[Console] = None):
        self.engine = engine
        self.cfg = cfg
        self.metrics = metrics
        self.console = console or Console()
        self.running = True

    def run(self):
        """Prompt for chords until /quit or EOF."""
        self.console.rule("[bold magenta]Braille Autocorrect[/bold magenta]")
        self.console.print(HELP)

        while self.running:
            try:
                line = Prompt.ask("[green]cells[/green]", default="", console=self.console).strip()
            except (EOFError, KeyboardInterrupt):
                self.running = False
                break
            if not line:
                continue
            if line.startswith("/"):
                self.handle_command(line)
            else:
                self.process_input(line)
        self.console.print("bye.")

    # input -------------------------------------------------------------------
    def process_input(self, line: str) -> List[Suggestion]:
        groups = parse_groups(line)
        bad = [g for g in groups if g != SPACE and not set(g) <= set(KEY_TO_DOT)]
        if bad:
            self.console.print(f"[yellow]ignoring non-dot keys in:[/yellow] {' '.join(''.join(g) for g in bad)}")

        suggestions = self.engine.suggest_keys(groups)
        if not suggestions:
            self.console.print("[dim](no suggestions)[/dim]")
        else:
            self.display_suggestions(suggestions)
        return suggestions

    def display_suggestions(self, suggestions: List[Suggestion]):
        table = Table(title="Suggestions", box=box.SIMPLE, show_edge=False)
        table.add_column("#", justify="right", style="cyan")
        table.add_column("Word", style="bold")
        table.add_column("Cost", justify="right", style="magenta")

        for i, (word, cost) in enumerate(suggestions, 1):
            # 0 = exact, below one insertion = close, anything else is a guess
            style = "green" if cost == 0 else "cyan" if cost < self.engine.trie.deletion_cost else "yellow"
            table.add_row(str(i), f"[{style}]{word}[/{style}]", str(cost))
        self.console.print(table)

    # commands ------------------------------------------------------------------
    def handle_command(self, line: str):
        parts = line.split()
        cmd, args = parts[0].lower(), parts[1:]

        if cmd in ("/q", "/quit", "/exit"):
            self.running = False
        elif cmd == "/help":
            self.console.print(HELP)
        elif cmd == "/keys":
            self.show_keys()
        elif cmd == "/word" and args:
            self.show_word(args[0])
        elif cmd == "/config":
            self.config_command(args)
        elif cmd == "/stats":
            self.show_stats()
        elif cmd == "/bench":
            self.bench()
        else:
            self.console.print(f"[red]Unknown command:[/red] {line}")

    def show_keys(self):
        table = Table(title="Braille Key Mapping", box=box.MINIMAL)
        table.add_column("Key")
        table.add_column("Dot", justify="right")
        for key, dot in KEY_TO_DOT.items():
            table.add_row(key.upper(), str(dot + 1))
        self.console.print(table)

    def show_word(self, word: str):
        try:
            chords = self.engine.codec.word_to_chords(word.lower())
        except ValueError as e:
            self.console.print(f"[red]{e}[/red]")
            return
        table = Table(title=word, box=box.SIMPLE)
        table.add_column("Letter")
        table.add_column("Keys")
        table.add_column("Pattern")
        for ch, chord in zip(word.lower(), chords):
            table.add_row(ch, "".join(chord), keys_to_pattern(chord))
        self.console.print(table)

    def config_command(self, args: List[str]):
        if not args:
            self.console.print(Panel(json.dumps(self.cfg.data, indent=2), title="Config", border_style="cyan"))
            return
        if len(args) != 2:
            self.console.print("usage: /config [key val]")
            return
        try:
            self.cfg.set(args[0], args[1])
        except (KeyError, ValueError) as e:
            self.console.print(f"[red]config error:[/red] {e}")
            return
        # search-time settings apply right away, the rest on next start
        if args[0] == "max_suggestions":
            self.engine.max_suggestions = self.cfg.get("max_suggestions")
        elif args[0] == "max_cost":
            self.engine.max_cost = self.cfg.get("max_cost")
        else:
            self.console.print("[dim]takes effect on restart[/dim]")
        self.console.print(f"{args[0]} = {self.cfg.get(args[0])}")

    def show_stats(self):
        table = Table(title="Stats", box=box.SIMPLE)
        table.add_column("Metric")
        table.add_column("Value", justify="right")
        for k, v in self.engine.stats().items():
            table.add_row(k, str(v))
        for k, (n, avg) in self.metrics.summary().items():
            table.add_row(f"{k} (avg of {n})", f"{avg * 1000:.3f} ms")
        self.console.print(table)

    def bench(self, runs: int = 100):
        """Time random queries built from the dictionary's own words."""
        codec = self.engine.codec
        words = [w for w in self.engine.trie.words() if all(ch in codec for ch in w)]
        if not words:
            self.console.print("[dim](empty dictionary)[/dim]")
            return
        t0 = time.perf_counter()
        for _ in range(runs):
            w = random.choice(words)
            self.engine.suggest(codec.encode_word(w[: random.randint(1, len(w))]))
        dt = time.perf_counter() - t0
        self.console.print(f"bench: {dt / runs * 1000:.3f} ms avg per search over {len(words)} words")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="braille-autocorrect", description="Braille chord autocorrect")
    p.add_argument("keys", nargs="?", help='one-shot query, e.g. "dk d wqk" (_ = space)')
    p.add_argument("--config", default=None, help="JSON config file (created if missing)")
    p.add_argument("--dict", dest="dictionary", default=None, help="word list, one word per line")
    p.add_argument("--max-suggestions", type=int, default=None)
    p.add_argument("--max-cost", type=int, default=None, help="drop matches above this cost")
    p.add_argument("--log-level", default="WARNING")
    p.add_argument("--log-file", default=None)
    p.add_argument("--tui", action="store_true", help="start the live keyboard UI")
    return p


def main(argv: Optional[List[str]] = None, console: Optional[Console] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level, args.log_file)
    console = console or Console()

    cfg = Config(args.config)
    # command line overrides are not written back to the config file
    if args.dictionary:
        cfg.data["dictionary"] = args.dictionary
    if args.max_suggestions is not None:
        cfg.data["max_suggestions"] = args.max_suggestions
    if args.max_cost is not None:
        cfg.data["max_cost"] = args.max_cost
    logger.debug("effective config: %s", cfg.data)

    metrics = Metrics()
    try:
        engine = BrailleAutocorrect.from_config(cfg, metrics=metrics)
    except (OSError, UnicodeDecodeError) as e:
        console.print(f"[red]could not load dictionary:[/red] {e}")
        return 2

    if args.tui:
        from braille_autocorrect.tui_app import BrailleApp

        BrailleApp(engine).run()
        return 0

    cli = CLI(engine, cfg, metrics, console=console)
    if args.keys:
        cli.process_input(args.keys)
        return 0
    cli.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
