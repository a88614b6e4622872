import pytest

from ic_ui.tui.system.headless import HeadlessChooser
from ic_ui.tui.system.models import Entry, KeyAction, KeyEvent, SessionOptions

pytestmark = pytest.mark.unit_ui

ITEMS = [Entry(key="a", name="Alpha"), Entry(key="b", name="Beta")]


def test_headless_chooser_replays_scripts_in_order() -> None:
    chooser = HeadlessChooser(
        scripts=[
            [*KeyEvent.typed("bet"), KeyEvent(KeyAction.CONFIRM)],
            [KeyEvent(KeyAction.MOVE_DOWN)],
        ]
    )

    assert chooser.choose(ITEMS) == ["b"]
    assert chooser.choose(ITEMS) == ["b"]
    assert chooser.choose(ITEMS) == []
    assert [rec.result for rec in chooser.recorded_sessions] == [["b"], ["b"], []]


def test_headless_chooser_records_options() -> None:
    chooser = HeadlessChooser(scripts=[[KeyEvent(KeyAction.CANCEL)]])
    options = SessionOptions(title=" t ", multi_select=True)

    chooser.choose(ITEMS, options)

    assert chooser.recorded_sessions[0].options is options
    assert chooser.recorded_sessions[0].items == ITEMS
