"""HexCalc - a decimal/hex calculator with a HEX toggle."""

__version__ = "1.0.0"

from hexcalc.engine import CalculatorState, ValueEngine, UINT64_MAX
from hexcalc.buttons import CalculatorButton, dispatch, grid_buttons
