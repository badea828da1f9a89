"""
Value engine for the hex calculator.

Owns the display string and the current base mode, and applies the three
input events (digit, clear, base toggle) to them. Nothing here knows about
Qt, colors or button layout.
"""

from dataclasses import dataclass

UINT64_MAX = 2 ** 64 - 1

DEC_DIGITS = "0123456789"
HEX_DIGITS = "0123456789ABCDEF"
HEX_LETTERS = "ABCDEF"


def parse_uint64(text, base):
    """Parse an unsigned 64-bit integer, returning None on any failure.

    Unlike int(), this refuses signs, whitespace, underscores and 0x prefixes.
    """
    if not text:
        return None

    alphabet = HEX_DIGITS + HEX_DIGITS.lower() if base == 16 else DEC_DIGITS
    if any(ch not in alphabet for ch in text):
        return None

    value = int(text, base)
    if value > UINT64_MAX:
        return None
    return value


def decimal_to_hex(text):
    """'255' -> 'FF', or None if the text is not a 64-bit decimal."""
    value = parse_uint64(text, 10)
    if value is None:
        return None
    return hex(value)[2:].upper()


def hex_to_decimal(text):
    """'FF' -> '255', or None if the text is not a 64-bit hex number."""
    value = parse_uint64(text, 16)
    if value is None:
        return None
    return str(value)


@dataclass
class CalculatorState:
    display_text: str = "0"
    hex_mode: bool = False


class ValueEngine:
    """Display/mode state machine driven by button presses"""

    def __init__(self, state=None):
        if state is None:
            state = CalculatorState()
        else:
            alphabet = HEX_DIGITS if state.hex_mode else DEC_DIGITS
            if not state.display_text or any(ch not in alphabet for ch in state.display_text):
                raise ValueError(
                    f"Invalid display text {state.display_text!r} for "
                    f"{'hex' if state.hex_mode else 'decimal'} mode"
                )
            state = CalculatorState(state.display_text, state.hex_mode)
        self._state = state

    def digit(self, d):
        """Enter one digit. Letters are dropped outside hex mode."""
        if len(d) != 1 or d not in HEX_DIGITS:
            return
        if d in HEX_LETTERS and not self._state.hex_mode:
            return

        if self._state.display_text == "0":
            self._state.display_text = d
        else:
            self._state.display_text += d

    def clear(self):
        self._state.display_text = "0"

    def toggle_base(self):
        """Convert the display to the other base, then flip the mode.

        A value that does not fit in 64 bits becomes "0"; the mode flips
        either way.
        """
        if self._state.hex_mode:
            converted = hex_to_decimal(self._state.display_text)
        else:
            converted = decimal_to_hex(self._state.display_text)

        self._state.display_text = converted if converted is not None else "0"
        self._state.hex_mode = not self._state.hex_mode

    def current_display(self) -> str:
        return self._state.display_text

    def current_mode(self) -> bool:
        return self._state.hex_mode
