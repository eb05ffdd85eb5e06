import types

import pytest

tk = pytest.importorskip("tkinter")

import config
from gui import CalculatorGUI


@pytest.fixture
def gui():
    try:
        root = tk.Tk()
    except tk.TclError:
        pytest.skip("no display available")
    root.withdraw()
    app = CalculatorGUI(root)
    yield app
    root.destroy()


def key_event(char, keysym):
    return types.SimpleNamespace(char=char, keysym=keysym)


def test_buttons_drive_the_engine(gui):
    for token in ["7", "*", "6", "="]:
        gui.buttons[token].invoke()
    assert gui.display.cget("text") == "42"


def test_keyboard_events(gui):
    for char, keysym in [("9", "9"), ("/", "slash"), ("", "KP_3"), ("\r", "Return")]:
        gui.on_key_press(key_event(char, keysym))
    assert gui.display.cget("text") == "3"
    gui.on_key_press(key_event("\x1b", "Escape"))
    assert gui.display.cget("text") == "0"


def test_error_uses_error_colour(gui):
    for token in ["1", "/", "0", "="]:
        gui.press(token)
    assert gui.display.cget("text") == config.ERROR_MARKER
    assert gui.display.cget("fg") == gui.T["error_fg"]


def test_theme_toggle_keeps_display(gui):
    gui.press("5")
    gui.toggle_dark_mode()
    assert gui.T is config.NEU_DARK
    assert gui.display.cget("text") == "5"
