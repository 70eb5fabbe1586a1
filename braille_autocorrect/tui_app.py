# tui_app.py - Braille Autocorrect TUI
# -------------------------------------------------------
# Live six-key braille typing in the terminal:
#  - D W Q K O P are dots 1-6; keys pressed together form one cell
#  - a cell is committed once no new dot key arrives for the debounce window
#  - Backspace drops the pending chord or the last cell, Space adds a space
#  - suggestions refresh after every change, 1-5 accepts one
# -------------------------------------------------------

from __future__ import annotations

from typing import List, Optional

from textual import events
from textual.app import App, ComposeResult
from textual.containers import Horizontal, Vertical
from textual.timer import Timer
from textual.widgets import DataTable, Footer, Header, Static

from braille_autocorrect.autocorrector import BrailleAutocorrect
from braille_autocorrect.core.patterns import KEY_TO_DOT
from braille_autocorrect.core.ranker import Suggestion
from braille_autocorrect.input.grouper import SPACE


class InputView(Static):
    """Committed cells plus the chord still being pressed."""

    def show(self, groups, pending) -> None:
        cells = ["␣" if g == SPACE else "".join(g) for g in groups]
        text = " ".join(f"[b]{c}[/b]" for c in cells)
        if pending:
            text += f" [reverse]{''.join(pending)}[/reverse]"
        self.update(text or "[dim]start typing with D W Q K O P[/dim]")


class SuggestionPanel(Static):
    """Up to 5 suggestions with their 1-5 shortcuts and costs."""

    def show(self, suggestions: List[Suggestion], close: int = 3) -> None:
        if not suggestions:
            self.update("[dim]No suggestions[/dim]")
            return
        lines = []
        for i, (word, cost) in enumerate(suggestions[:5], 1):
            color = "green" if cost == 0 else "cyan" if cost < close else "yellow"
            lines.append(f"[b]{i}[/b] • [{color}]{word}[/{color}]  [dim]{cost}[/dim]")
        self.update("\n".join(lines))


class BrailleApp(App):
    CSS = """
    #left { width: 2fr; }
    #right { width: 1fr; }
    InputView { height: 3; border: round $accent; padding: 0 1; }
    SuggestionPanel { border: round $secondary; padding: 0 1; }
    """
    TITLE = "Braille Auto-Correct"
    BINDINGS = [("escape", "clear", "Clear"), ("ctrl+q", "quit", "Quit")]

    def __init__(self, engine: BrailleAutocorrect) -> None:
        super().__init__()
        self.engine = engine
        self.suggestions: List[Suggestion] = []
        self._debounce_timer: Optional[Timer] = None

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal():
            with Vertical(id="left"):
                yield InputView(id="input")
                yield SuggestionPanel(id="suggestions")
            with Vertical(id="right"):
                # display only; keys must reach the app, not the table
                keymap = DataTable(id="keymap")
                keymap.can_focus = False
                yield keymap
        yield Footer()

    def on_mount(self) -> None:
        table = self.query_one("#keymap", DataTable)
        table.add_columns("Key", "Dot")
        for key, dot in KEY_TO_DOT.items():
            table.add_row(key.upper(), str(dot + 1))
        self.refresh_view()

    # keys -----------------------------------------------------------
    def on_key(self, event: events.Key) -> None:
        grouper = self.engine.grouper
        key = event.key.lower()

        if key in KEY_TO_DOT:
            if grouper.press(key):
                self._restart_timer()
        elif key == "backspace":
            grouper.backspace()
        elif key == "space":
            grouper.space()
        elif key.isdigit() and 1 <= int(key) <= len(self.suggestions):
            self.engine.accept(self.suggestions[int(key) - 1].word)
        else:
            return
        event.stop()
        self.refresh_view()

    def _restart_timer(self) -> None:
        if self._debounce_timer is not None:
            self._debounce_timer.stop()
        self._debounce_timer = self.set_timer(self.engine.grouper.debounce, self._commit_chord)

    def _commit_chord(self) -> None:
        self._debounce_timer = None
        if self.engine.grouper.flush():
            self.refresh_view()

    def action_clear(self) -> None:
        self.engine.grouper.clear()
        self.refresh_view()

    # view -----------------------------------------------------------
    def refresh_view(self) -> None:
        grouper = self.engine.grouper
        self.query_one("#input", InputView).show(grouper.groups, grouper.pending)
        self.suggestions = self.engine.suggest_current()
        self.query_one("#suggestions", SuggestionPanel).show(self.suggestions, self.engine.trie.deletion_cost)
