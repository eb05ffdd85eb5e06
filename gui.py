"""
GUI for NeoCalc
Tkinter keypad that drives the calculator engine
"""
import tkinter as tk

import config
import keymap
from calculator import Calculator
from history_manager import HistoryManager
from logging_config import get_logger

logger = get_logger("gui")

# (token, row, column, rowspan, columnspan)
KEYPAD = [
    ("Delete", 0, 0, 1, 1), ("Backspace", 0, 1, 1, 1), ("/", 0, 2, 1, 1), ("*", 0, 3, 1, 1),
    ("7", 1, 0, 1, 1), ("8", 1, 1, 1, 1), ("9", 1, 2, 1, 1), ("-", 1, 3, 1, 1),
    ("4", 2, 0, 1, 1), ("5", 2, 1, 1, 1), ("6", 2, 2, 1, 1), ("+", 2, 3, 1, 1),
    ("1", 3, 0, 1, 1), ("2", 3, 1, 1, 1), ("3", 3, 2, 1, 1), ("=", 3, 3, 2, 1),
    ("0", 4, 0, 1, 2), (".", 4, 2, 1, 1),
]

LABELS = {
    "Delete": "C",
    "Backspace": "⌫",
    "*": "×",
    "/": "÷",
}


class CalculatorGUI:
    def __init__(self, root, calculator=None, dark_mode=False):
        self.root = root
        self.root.title(config.APP_NAME)
        self.root.geometry(f"{config.WINDOW_WIDTH}x{config.WINDOW_HEIGHT}")

        self.calculator = calculator or Calculator(history=HistoryManager())
        self.dark_mode = dark_mode
        self.T = config.get_theme(self.dark_mode)
        self.buttons = {}

        self.create_widgets()
        self.root.bind('<Key>', self.on_key_press)
        self.root.bind('<F2>', lambda e: self.toggle_dark_mode())

    # ── Theme helpers ──────────────────────────────────────────────────────────
    def apply_theme(self):
        """Refresh T, then destroy+rebuild all widgets."""
        self.T = config.get_theme(self.dark_mode)
        for w in self.root.winfo_children():
            w.destroy()
        self.create_widgets()

    def toggle_dark_mode(self):
        self.dark_mode = not self.dark_mode
        self.apply_theme()

    def _neu_btn(self, parent, text, command=None, kind="normal", **kw):
        """Create a neumorphic styled flat button."""
        T = self.T
        if kind == "equals":
            bg, fg, abg = T["equals_bg"], T["equals_fg"], T["bg_dark"]
        elif kind == "operator":
            bg, fg, abg = T["btn_bg"], T["operator_fg"], T["bg_dark"]
        elif kind == "danger":
            bg, fg, abg = T["danger"], "#FFFFFF", T["bg_dark"]
        else:
            bg, fg, abg = T["btn_bg"], T["btn_fg"], T["bg_dark"]
        return tk.Button(
            parent, text=text, command=command,
            font=kw.pop("font", config.BUTTON_FONT),
            bg=bg, fg=fg,
            activebackground=abg, activeforeground=fg,
            relief=tk.FLAT, bd=0, cursor="hand2",
            highlightthickness=1,
            highlightbackground=T["shadow_dark"],
            highlightcolor=T["shadow_lite"],
            **kw
        )

    @staticmethod
    def _button_kind(token):
        if token == keymap.EQUALS:
            return "equals"
        if token == keymap.DELETE:
            return "danger"
        if token in keymap.ARITHMETIC_OPERATORS or token == keymap.BACKSPACE:
            return "operator"
        return "normal"

    def create_widgets(self):
        T = self.T
        self.root.configure(bg=T["bg"])

        self.display = tk.Label(
            self.root, text=self.calculator.display, anchor="e",
            font=config.DISPLAY_FONT, bg=T["display_bg"], fg=T["display_fg"],
            padx=12, pady=18,
        )
        self.display.pack(side=tk.TOP, fill=tk.X, padx=8, pady=(8, 4))

        keypad = tk.Frame(self.root, bg=T["bg"])
        keypad.pack(side=tk.TOP, fill=tk.BOTH, expand=True, padx=8, pady=(4, 8))
        for column in range(4):
            keypad.grid_columnconfigure(column, weight=1, uniform="key")
        for row in range(5):
            keypad.grid_rowconfigure(row, weight=1, uniform="key")

        self.buttons = {}
        for token, row, column, rowspan, columnspan in KEYPAD:
            button = self._neu_btn(
                keypad, LABELS.get(token, token),
                command=lambda t=token: self.press(t),
                kind=self._button_kind(token),
            )
            button.grid(row=row, column=column, rowspan=rowspan, columnspan=columnspan,
                        sticky="nsew", padx=2, pady=2)
            self.buttons[token] = button

        self.update_display(self.calculator.display)

    def update_display(self, text):
        fg = self.T["error_fg"] if text == config.ERROR_MARKER else self.T["display_fg"]
        self.display.config(text=text, fg=fg)

    def press(self, token):
        """Send a token to the engine and show what it returns"""
        self.update_display(self.calculator.process_token(token))
        button = self.buttons.get(keymap.normalize_token(token))
        if button is not None:
            self._flash(button)

    def _flash(self, button):
        # Brief pressed look, same as the web widget's .active class
        button.config(relief=tk.SUNKEN)
        self.root.after(90, lambda: button.config(relief=tk.FLAT) if button.winfo_exists() else None)

    def on_key_press(self, event):
        """Handle keyboard input"""
        token = keymap.token_from_tk_event(event.char, event.keysym)
        if token is None:
            return
        self.press(token)
