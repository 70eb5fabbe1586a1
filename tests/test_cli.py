# tests/test_cli.py
# CLI smoke checks; rich output captured through a string-backed Console

import io

import pytest
from rich.console import Console

from braille_autocorrect.autocorrector import BrailleAutocorrect
from braille_autocorrect.cli import CLI, main, parse_groups
from braille_autocorrect.input.grouper import SPACE
from braille_autocorrect.utils.config_manager import Config
from braille_autocorrect.utils.metrics_tracker import Metrics


def make_console():
    return Console(file=io.StringIO(), width=120)


@pytest.fixture
def cli():
    engine = BrailleAutocorrect(words=["cat", "car", "dog"])
    return CLI(engine, Config(), Metrics(), console=make_console())


def output(cli_or_console):
    console = getattr(cli_or_console, "console", cli_or_console)
    return console.file.getvalue()


def test_parse_groups():
    assert parse_groups("kd _ D") == [("d", "k"), SPACE, ("d",)]
    assert parse_groups("   ") == []


def test_process_input(cli):
    out = cli.process_input("dk d wqko")
    assert out[0] == ("cat", 0)
    assert "cat" in output(cli)


def test_process_input_no_match():
    engine = BrailleAutocorrect(words=["cat"], max_cost=0)
    c = CLI(engine, Config(), Metrics(), console=make_console())
    assert c.process_input("p p p") == []
    assert "no suggestions" in output(c)


def test_commands(cli):
    cli.handle_command("/keys")
    cli.handle_command("/word cat")
    cli.handle_command("/stats")
    cli.handle_command("/bench")
    cli.handle_command("/bogus")
    text = output(cli)
    assert "011110" in text
    assert "Unknown command" in text
    assert "ms avg per search" in text
    cli.handle_command("/quit")
    assert cli.running is False


def test_config_command_updates_engine(cli):
    cli.handle_command("/config max_suggestions 1")
    assert cli.engine.max_suggestions == 1
    assert len(cli.process_input("dk d")) == 1
    cli.handle_command("/config nope 1")
    assert "config error" in output(cli)


def test_main_one_shot(tmp_path):
    words = tmp_path / "words.txt"
    words.write_text("cat\ndog\n", encoding="utf8")
    console = make_console()
    assert main(["--dict", str(words), "dk d wqko"], console=console) == 0
    assert "cat" in output(console)


def test_main_missing_dictionary(tmp_path):
    console = make_console()
    assert main(["--dict", str(tmp_path / "missing.txt"), "d"], console=console) == 2
    assert "could not load dictionary" in output(console)


def test_main_undecodable_dictionary(tmp_path):
    words = tmp_path / "words.txt"
    words.write_bytes(b"cat\n\xff\xfe\n")
    console = make_console()
    assert main(["--dict", str(words), "d"], console=console) == 2
    assert "could not load dictionary" in output(console)


def test_config_command_rejects_clearing_required_key(cli):
    cli.handle_command("/config max_suggestions none")
    assert "config error" in output(cli)
    assert cli.engine.max_suggestions == 5
    assert cli.process_input("dk d wqko")[0] == ("cat", 0)
