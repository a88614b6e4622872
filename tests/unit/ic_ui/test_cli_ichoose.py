"""ichoose command tests."""

import pytest
from typer.testing import CliRunner

from ic_common.errors import TerminalIOError
from ic_ui.cli import ichoose
from ic_ui.tui.system.headless import HeadlessChooser
from ic_ui.tui.system.models import Entry, KeyAction, KeyEvent

pytestmark = pytest.mark.unit_ui

runner = CliRunner()

STDIN = "a @ Alpha\nb @ Beta\n\n  plain  \nc @ Gamma @ Delta\n"


def _use_chooser(monkeypatch: pytest.MonkeyPatch, chooser) -> None:
    monkeypatch.setattr(ichoose.ctx_store, "_chooser", chooser)


def test_parse_entries_splits_on_first_separator() -> None:
    assert ichoose.parse_entries(STDIN) == [
        Entry(key="a", name="Alpha"),
        Entry(key="b", name="Beta"),
        Entry(key="plain", name="plain"),
        Entry(key="c", name="Gamma @ Delta"),
    ]


def test_prints_selected_key(monkeypatch: pytest.MonkeyPatch) -> None:
    chooser = HeadlessChooser(scripts=[[*KeyEvent.typed("bet"), KeyEvent(KeyAction.CONFIRM)]])
    _use_chooser(monkeypatch, chooser)

    result = runner.invoke(ichoose.app, ["--title", "Pick one", "--text", "help"], input=STDIN)

    assert result.exit_code == 0
    assert result.stdout == "b\n"
    options = chooser.recorded_sessions[0].options
    assert options.title == " Pick one "
    assert options.text == "help"
    assert options.multi_select is False


def test_multi_prints_one_key_per_line(monkeypatch: pytest.MonkeyPatch) -> None:
    chooser = HeadlessChooser(
        scripts=[[KeyEvent(KeyAction.TOGGLE_ALL), KeyEvent(KeyAction.CONFIRM)]]
    )
    _use_chooser(monkeypatch, chooser)

    result = runner.invoke(ichoose.app, ["--multi"], input=STDIN)

    assert result.exit_code == 0
    assert result.stdout.splitlines() == ["a", "b", "c", "plain"]
    assert chooser.recorded_sessions[0].options.title == " ichoose "


def test_cancel_exits_with_code_one(monkeypatch: pytest.MonkeyPatch) -> None:
    _use_chooser(monkeypatch, HeadlessChooser(scripts=[[KeyEvent(KeyAction.CANCEL)]]))

    result = runner.invoke(ichoose.app, [], input=STDIN)

    assert result.exit_code == 1
    assert result.stdout == ""


def test_terminal_failure_is_reported(monkeypatch: pytest.MonkeyPatch) -> None:
    class BrokenChooser:
        def choose(self, items, options=None):
            raise TerminalIOError("Terminal I/O failed during selection")

    _use_chooser(monkeypatch, BrokenChooser())

    result = runner.invoke(ichoose.app, [], input=STDIN)

    assert result.exit_code == 1
    assert "Terminal I/O failed" in result.output
