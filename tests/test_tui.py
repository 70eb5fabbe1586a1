# tests/test_tui.py
# drives BrailleApp headlessly through textual's pilot

import asyncio

from braille_autocorrect.autocorrector import BrailleAutocorrect
from braille_autocorrect.core.patterns import DEFAULT_CODEC
from braille_autocorrect.input.grouper import SPACE
from braille_autocorrect.tui_app import BrailleApp


def run_app(script, debounce=0.3):
    """Run `script(app, pilot)` inside a headless app and return the app."""
    engine = BrailleAutocorrect(words=["cat", "car", "dog"], debounce=debounce)
    app = BrailleApp(engine)

    async def _drive():
        async with app.run_test() as pilot:
            await script(app, pilot)

    asyncio.run(_drive())
    return app


def test_chord_commits_after_debounce_and_accept_with_digit():
    seen = {}

    async def script(app, pilot):
        grouper = app.engine.grouper
        await pilot.press("d", "k")
        seen["pending"] = grouper.pending
        seen["groups_before"] = grouper.groups
        await pilot.pause(0.8)
        seen["groups_after"] = grouper.groups
        seen["suggestions"] = [s.word for s in app.suggestions]
        await pilot.press("1")
        seen["accepted"] = grouper.groups
        seen["top"] = app.suggestions[0]

    run_app(script)
    assert seen["pending"] == ("d", "k")
    assert seen["groups_before"] == []
    assert seen["groups_after"] == [("d", "k")]
    assert seen["suggestions"][:2] == ["cat", "car"]
    assert seen["accepted"] == DEFAULT_CODEC.word_to_chords("cat")
    assert seen["top"] == ("cat", 0)


def test_space_backspace_and_escape():
    seen = {}

    async def script(app, pilot):
        grouper = app.engine.grouper
        await pilot.press("d")
        await pilot.pause(0.4)
        await pilot.press("space")
        seen["with_space"] = grouper.groups
        await pilot.press("backspace")
        seen["after_backspace"] = grouper.groups
        await pilot.press("escape")
        seen["after_escape"] = grouper.groups
        seen["suggestions"] = list(app.suggestions)

    run_app(script, debounce=0.1)
    assert seen["with_space"] == [("d",), SPACE]
    assert seen["after_backspace"] == [("d",)]
    assert seen["after_escape"] == []
    assert seen["suggestions"] == []


def test_digit_without_suggestions_is_ignored():
    seen = {}

    async def script(app, pilot):
        await pilot.press("3")
        seen["groups"] = app.engine.grouper.groups

    run_app(script)
    assert seen["groups"] == []
