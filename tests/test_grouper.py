# tests/test_grouper.py
# debounced chord grouping; time is passed in explicitly so nothing sleeps

from braille_autocorrect.core.patterns import DEFAULT_CODEC, encode_word
from braille_autocorrect.input.grouper import SPACE, KeyGrouper


def test_keys_within_window_form_one_chord():
    g = KeyGrouper(debounce=0.2)
    assert g.press("k", now=0.0)
    assert g.press("d", now=0.1)
    assert not g.poll(now=0.25)  # window restarted at 0.1
    assert g.poll(now=0.31)
    assert g.groups == [("d", "k")]
    assert g.patterns() == encode_word("c")


def test_repeat_and_non_dot_keys_ignored():
    g = KeyGrouper()
    assert g.press("D", now=0.0)
    assert not g.press("d", now=0.01)
    assert not g.press("x", now=0.02)
    assert g.pending == ("d",)
    g.flush()
    assert g.groups == [("d",)]


def test_poll_without_pending_is_noop():
    g = KeyGrouper()
    assert not g.poll(now=10.0)
    assert not g.flush()


def test_injected_clock():
    t = [0.0]
    g = KeyGrouper(debounce=0.2, clock=lambda: t[0])
    g.press("d")
    t[0] = 0.1
    assert not g.poll()
    t[0] = 0.5
    assert g.poll()
    assert len(g) == 1


def test_backspace_drops_pending_then_groups():
    g = KeyGrouper()
    g.press("d", now=0.0)
    g.flush()
    g.press("k", now=1.0)
    g.backspace()
    assert g.pending == ()
    assert g.groups == [("d",)]
    g.backspace()
    assert g.groups == []
    g.backspace()  # nothing left, no error
    assert g.groups == []


def test_space_commits_pending_first_and_is_not_a_pattern():
    g = KeyGrouper()
    g.press("d", now=0.0)
    g.space()
    g.press("d", now=1.0)
    g.press("w", now=1.0)
    g.flush()
    assert g.groups == [("d",), SPACE, ("d", "w")]
    assert g.patterns() == encode_word("ab")


def test_set_word_and_clear():
    g = KeyGrouper()
    g.press("o", now=0.0)
    g.set_word("cat", DEFAULT_CODEC)
    assert g.pending == ()
    assert g.patterns() == encode_word("cat")
    g.clear()
    assert g.groups == []
    assert g.patterns() == []
