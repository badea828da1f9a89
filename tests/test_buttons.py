from hexcalc.buttons import (
    BLUE,
    BUTTON_COLORS,
    GRAY,
    GRID_COLUMNS,
    HEX_LETTER_BUTTONS,
    ORANGE,
    CalculatorButton,
    dispatch,
    grid_buttons,
    grid_positions,
)
from hexcalc.engine import ValueEngine


def labels(buttons):
    return [b.label for b in buttons]


def test_decimal_grid_has_no_letters():
    assert labels(grid_buttons(False)) == ["HEX", "AC", "7", "8", "9", "4", "5", "6", "3", "2", "1", "0"]


def test_hex_grid_adds_letters_after_controls():
    assert labels(grid_buttons(True)) == [
        "HEX", "AC", "A", "B", "C", "D", "E", "F",
        "7", "8", "9", "4", "5", "6", "3", "2", "1", "0",
    ]


def test_grid_positions_wrap_at_column_count():
    positions = grid_positions(True)
    assert positions[0] == (CalculatorButton.HEX, 0, 0)
    assert positions[GRID_COLUMNS] == (CalculatorButton.HEX_C, 1, 0)
    assert positions[-1] == (CalculatorButton.ZERO, 4, 1)
    assert all(col < GRID_COLUMNS for _, _, col in positions)


def test_every_button_has_a_color():
    assert set(BUTTON_COLORS) == set(CalculatorButton)
    assert BUTTON_COLORS[CalculatorButton.CLEAR] == GRAY
    assert BUTTON_COLORS[CalculatorButton.HEX] == GRAY
    assert BUTTON_COLORS[CalculatorButton.HEX_E] == BLUE
    assert BUTTON_COLORS[CalculatorButton.SEVEN] == ORANGE


def test_hex_letter_buttons():
    assert labels(HEX_LETTER_BUTTONS) == list("ABCDEF")


def test_dispatch_drives_engine():
    engine = ValueEngine()
    for button in (CalculatorButton.TWO, CalculatorButton.FIVE, CalculatorButton.FIVE):
        dispatch(engine, button)
    dispatch(engine, CalculatorButton.HEX)
    assert (engine.current_display(), engine.current_mode()) == ("FF", True)

    dispatch(engine, CalculatorButton.CLEAR)
    dispatch(engine, CalculatorButton.HEX_B)
    assert (engine.current_display(), engine.current_mode()) == ("B", True)

    dispatch(engine, CalculatorButton.HEX)
    assert (engine.current_display(), engine.current_mode()) == ("11", False)


def test_dispatch_letter_in_decimal_mode_is_noop():
    engine = ValueEngine()
    dispatch(engine, CalculatorButton.ONE)
    dispatch(engine, CalculatorButton.HEX_A)
    assert engine.current_display() == "1"
