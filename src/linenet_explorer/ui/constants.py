"""Centralized UI constants for the line-detector explorer.

This file only stores values (numbers, colors, labels).
Keeping these in one place makes the UI easier to tune later because
you do not need to search through the full application for each value.
"""

# The paint grid is drawn as a square canvas split into 2x2 cells.
GRID_CANVAS_SIZE = 240
GRID_MARGIN = 10

# Network panel default size; it grows with the window.
NETWORK_CANVAS_WIDTH = 900
NETWORK_CANVAS_HEIGHT = 460
NETWORK_MIN_WIDTH = 760
NETWORK_MIN_HEIGHT = 420

# Main window sizing defaults.
WINDOW_SIZE = "1320x760"
WINDOW_MIN_SIZE = (1120, 680)

# Core color palette used by the app.
COLOR_BG = "#f3f7fb"
COLOR_CARD = "#ffffff"
COLOR_INK = "#0f172a"
COLOR_SUB = "#475569"
COLOR_EDGE = "#cbd5e1"

# Colors used by the status banner at the bottom.
COLOR_STATUS_INFO_BG = "#e0f2fe"
COLOR_STATUS_INFO_FG = "#0c4a6e"
COLOR_STATUS_WARN_BG = "#fff7ed"
COLOR_STATUS_WARN_FG = "#9a3412"

# Neutral button colors (normal, hover, pressed).
COLOR_NEUTRAL_BTN = "#e5e7eb"
COLOR_NEUTRAL_BTN_HOVER = "#d1d5db"
COLOR_NEUTRAL_BTN_PRESS = "#c7ccd4"

# Paint grid colors.
COLOR_CELL_EMPTY = "#f8fafc"
COLOR_CELL_FILLED = "#1e293b"
COLOR_CELL_OUTLINE = "#94a3b8"

# Per-layer accent colors. "Partial" highlights blend these halfway to white.
COLOR_INPUT = "#2563eb"
COLOR_HIDDEN = "#d97706"
COLOR_OUTPUT = "#16a34a"
COLOR_IDLE_NODE = "#e2e8f0"
COLOR_IDLE_LINE = "#cbd5e1"
PARTIAL_INTENSITY = 0.45

# Node and connector geometry inside the network panel.
NODE_RADIUS = 26
LINE_WIDTH_IDLE = 1
LINE_WIDTH_ACTIVE = 3
# Weight labels alternate between 20% and 80% along each connection so
# labels of crossing lines do not pile up in the middle.
EDGE_LABEL_NEAR = 0.2
EDGE_LABEL_FAR = 0.8

# Main action button texts by phase.
BUTTON_TEXT_READY = "Ready"
BUTTON_TEXT_CALCULATE = "Calculate"
BUTTON_TEXT_COMPLETE = "Complete"
PREDICTION_PLACEHOLDER = "?"

# Status banner messages.
STATUS_READY = "Paint a line on the grid, then press Calculate."
STATUS_ARMED = "Pattern ready. Press Calculate to compute the hidden layer."
STATUS_HIDDEN = "Hidden layer computed. Press Calculate again for the output layer."
STATUS_COMPLETED = "Prediction: {label}. Change the pattern or clear to try again."
STATUS_CLEARED = "Grid cleared."
