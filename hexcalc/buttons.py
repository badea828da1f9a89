"""
Calculator buttons and their presentation attributes.

The engine only ever sees the button's text; colors and grid order are
looked up here by the window.
"""

from enum import Enum


class CalculatorButton(Enum):
    ONE = "1"
    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    ZERO = "0"
    CLEAR = "AC"
    HEX = "HEX"
    HEX_A = "A"
    HEX_B = "B"
    HEX_C = "C"
    HEX_D = "D"
    HEX_E = "E"
    HEX_F = "F"

    @property
    def label(self) -> str:
        return self.value


HEX_LETTER_BUTTONS = (
    CalculatorButton.HEX_A, CalculatorButton.HEX_B, CalculatorButton.HEX_C,
    CalculatorButton.HEX_D, CalculatorButton.HEX_E, CalculatorButton.HEX_F,
)

# Digits in keypad order (top row first)
_KEYPAD = (
    CalculatorButton.SEVEN, CalculatorButton.EIGHT, CalculatorButton.NINE,
    CalculatorButton.FOUR, CalculatorButton.FIVE, CalculatorButton.SIX,
    CalculatorButton.THREE, CalculatorButton.TWO, CalculatorButton.ONE,
    CalculatorButton.ZERO,
)

GRAY = "#8e8e93"
BLUE = "#0a84ff"
ORANGE = "#ff9f0a"

BUTTON_COLORS = {button: ORANGE for button in CalculatorButton}
BUTTON_COLORS[CalculatorButton.CLEAR] = GRAY
BUTTON_COLORS[CalculatorButton.HEX] = GRAY
for _letter in HEX_LETTER_BUTTONS:
    BUTTON_COLORS[_letter] = BLUE

GRID_COLUMNS = 4


def grid_buttons(hex_mode):
    """Buttons shown in the grid, row by row. A-F only appear in hex mode."""
    buttons = [CalculatorButton.HEX, CalculatorButton.CLEAR]
    if hex_mode:
        buttons.extend(HEX_LETTER_BUTTONS)
    buttons.extend(_KEYPAD)
    return buttons


def grid_positions(hex_mode):
    """(button, row, col) triples for a GRID_COLUMNS wide layout"""
    return [
        (button, index // GRID_COLUMNS, index % GRID_COLUMNS)
        for index, button in enumerate(grid_buttons(hex_mode))
    ]


def dispatch(engine, button):
    """Forward a button press to the engine."""
    if button is CalculatorButton.CLEAR:
        engine.clear()
    elif button is CalculatorButton.HEX:
        engine.toggle_base()
    else:
        engine.digit(button.value)
