"""
NeoCalc Configuration Settings
"""
import os

# Application Settings
APP_NAME = "NeoCalc"
VERSION = "1.0.0"

# Display limits (the screen renders 8 characters without reformatting)
DISPLAY_MAX_LENGTH = 8
DECIMAL_MAX_LENGTH = 7
ERROR_MARKER = "Syntax Error!!"

# Result formatting thresholds
SCIENTIFIC_UPPER = 99999999
SCIENTIFIC_LOWER = 1e-5
FIXED_POINT_UPPER = 0.1
SCIENTIFIC_DIGITS = 2
GENERAL_PRECISION = 7
MANTISSA_PRECISION = 3

# Window Settings
WINDOW_WIDTH = 320
WINDOW_HEIGHT = 460
DARK_MODE = os.environ.get("NEOCALC_DARK_MODE") == "1"
DISPLAY_FONT = ("Consolas", 32, "bold")   # LCD/segmented-style font
BUTTON_FONT = ("Segoe UI", 16)

# ── Neumorphic Palettes ────────────────────────────────────────────────────────

NEU_LIGHT = {
    "bg":           "#DDE6ED",
    "bg_dark":      "#C8D4DF",
    "shadow_dark":  "#B2BFC8",
    "shadow_lite":  "#FFFFFF",
    "display_bg":   "#C8D4DF",
    "display_fg":   "#1A2332",
    "error_fg":     "#B03A2E",
    "btn_bg":       "#DDE6ED",
    "btn_fg":       "#2B3A4A",
    "operator_fg":  "#1E7A56",
    "equals_bg":    "#2E8B57",
    "equals_fg":    "#FFFFFF",
    "danger":       "#B03A2E",
}

NEU_DARK = {
    "bg":           "#1E2530",
    "bg_dark":      "#161C26",
    "shadow_dark":  "#10161E",
    "shadow_lite":  "#283040",
    "display_bg":   "#161C26",
    "display_fg":   "#9ADDB0",   # soft green glow – LCD green-on-dark
    "error_fg":     "#E55A4E",
    "btn_bg":       "#1E2530",
    "btn_fg":       "#BDD0E0",
    "operator_fg":  "#4DB888",
    "equals_bg":    "#2D8A58",
    "equals_fg":    "#FFFFFF",
    "danger":       "#E55A4E",
}


def get_theme(dark: bool) -> dict:
    """Return the active neumorphic colour palette."""
    return NEU_DARK if dark else NEU_LIGHT


# History Settings (in memory only, per session)
MAX_HISTORY_ITEMS = 100

# Sessions kept alive by the web server before the oldest is evicted
MAX_SESSIONS = 256
SESSION_COOKIE = "neocalc_session"
SESSION_HEADER = "X-Session-Id"

# Web Portal settings
WEB_HOST = os.environ.get("NEOCALC_HOST", "0.0.0.0")
WEB_PORT = int(os.environ.get("NEOCALC_PORT", "8888"))
WEB_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "web")

# Logging
LOG_LEVEL = os.environ.get("NEOCALC_LOG_LEVEL", "INFO").upper()
LOG_FILE = os.environ.get("NEOCALC_LOG_FILE")
