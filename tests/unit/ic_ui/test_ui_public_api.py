import pytest

import ic_ui
from ic_ui import api
from ic_ui.tui.system.headless import HeadlessChooser
from ic_ui.tui.system.models import Entry, KeyAction, KeyEvent

pytestmark = pytest.mark.unit_ui


def test_public_api_exports() -> None:
    for name in api.__all__:
        assert hasattr(api, name)
    assert ic_ui.choose is api.choose


def test_choose_builds_options_for_the_terminal(monkeypatch: pytest.MonkeyPatch) -> None:
    chooser = HeadlessChooser(scripts=[[KeyEvent(KeyAction.MOVE_DOWN), KeyEvent(KeyAction.CONFIRM)]])
    monkeypatch.setattr(api, "TerminalChooser", lambda: chooser)
    items = [Entry(key=1, name="one"), Entry(key=2, name="two")]

    result = api.choose(items, title=" pick ", text="help", default_list=items[::-1])

    assert result == [1]
    options = chooser.recorded_sessions[0].options
    assert options.title == " pick "
    assert options.text == "help"
    assert options.default_list == items[::-1]
