"""
HexCalc window - a single-screen decimal/hex calculator.

The window is a thin shell around ValueEngine: every button press is
forwarded to the engine and the display is re-rendered from its state.
"""

import sys
import ctypes
import logging
from PyQt6.QtWidgets import (
    QApplication, QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
    QGridLayout, QPushButton, QLabel, QDialog, QDialogButtonBox,
    QComboBox, QFontDialog, QFrame, QMessageBox, QSizePolicy
)
from PyQt6.QtCore import Qt
from PyQt6.QtGui import QFont, QFontMetrics, QAction
import qdarktheme

from hexcalc import __version__
from hexcalc.buttons import BUTTON_COLORS, CalculatorButton, dispatch, grid_positions
from hexcalc.config import MAX_FONT_SIZE, MIN_FONT_SIZE, THEMES, load_config, save_config
from hexcalc.engine import ValueEngine
from hexcalc.logging_config import level_from_name, setup_logging

logger = logging.getLogger(__name__)

APP_NAME = "HexCalc"
APP_USER_MODEL_ID = "hexcalc.hexcalc"

# Smallest display font, as a fraction of the configured size
MIN_SCALE_FACTOR = 0.3


def fit_font(text, font, available_width, min_scale=MIN_SCALE_FACTOR):
    """Return a copy of font shrunk until text fits in available_width.

    Never goes below min_scale of the original point size.
    """
    fitted = QFont(font)
    base_size = font.pointSize()
    if base_size <= 0:
        return fitted
    min_size = max(1, int(base_size * min_scale))

    size = base_size
    while size > min_size:
        fitted.setPointSize(size)
        if QFontMetrics(fitted).horizontalAdvance(text) <= available_width:
            break
        size -= 1

    fitted.setPointSize(size)
    return fitted


class SettingsDialog(QDialog):
    """Settings dialog for theme and display font"""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setWindowTitle("Settings")
        self.setModal(True)
        self.resize(275, 120)

        layout = QVBoxLayout()

        theme_layout = QHBoxLayout()
        theme_layout.addWidget(QLabel("Theme:"))
        self.theme_combo = QComboBox()
        self.theme_combo.addItems(THEMES)
        self.theme_combo.setCurrentText(parent.config.get("theme", "dark"))
        theme_layout.addWidget(self.theme_combo)
        theme_layout.addStretch()
        layout.addLayout(theme_layout)

        font_layout = QHBoxLayout()
        font_label = QLabel("Display Font:")
        self.font_button = QPushButton("Choose Font...")
        self.font_button.clicked.connect(self.choose_font)
        font_layout.addWidget(font_label)
        font_layout.addWidget(self.font_button)
        font_layout.addStretch()
        layout.addLayout(font_layout)

        layout.addStretch()

        button_box = QDialogButtonBox(
            QDialogButtonBox.StandardButton.Ok |
            QDialogButtonBox.StandardButton.Cancel
        )
        button_box.accepted.connect(self.accept)
        button_box.rejected.connect(self.reject)
        layout.addWidget(button_box)

        self.setLayout(layout)
        self.selected_font = None

    def choose_font(self):
        """Open font dialog"""
        current_font = self.parent().base_font
        font, ok = QFontDialog.getFont(current_font, self)
        if ok:
            self.selected_font = font


class CalculatorWindow(QMainWindow):
    """Main calculator window"""

    def __init__(self, config=None, config_path=None):
        super().__init__()

        self.config = config if config is not None else load_config(config_path)
        self.config_path = config_path

        self.engine = ValueEngine()
        self.buttons = {}
        self._grid_mode = None

        self.base_font = QFont("Helvetica", self.config["display_font_size"])
        self.base_font.setBold(True)
        font_str = self.config.get("display_font")
        if font_str:
            font = QFont()
            if font.fromString(font_str):
                font.setPointSize(self.config["display_font_size"])
                self.base_font = font
            else:
                logger.warning("Could not parse display font %r", font_str)

        self.init_ui()

    def init_ui(self):
        """Initialize the user interface"""
        self.setWindowTitle(APP_NAME)

        central = QWidget()
        self.setCentralWidget(central)
        main_layout = QVBoxLayout()
        main_layout.setSpacing(12)

        # Display area
        display_frame = QFrame()
        display_frame.setFrameStyle(QFrame.Shape.StyledPanel | QFrame.Shadow.Sunken)
        display_layout = QVBoxLayout()
        display_layout.setContentsMargins(8, 8, 8, 8)

        self.mode_label = QLabel("DEC")
        mode_font = QFont()
        mode_font.setBold(True)
        mode_font.setPointSize(9)
        self.mode_label.setFont(mode_font)
        self.mode_label.setStyleSheet("color: #0a84ff;")
        display_layout.addWidget(self.mode_label)

        self.display = QLabel("0")
        self.display.setAlignment(Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignVCenter)
        self.display.setFont(self.base_font)
        self.display.setMinimumHeight(80)
        self.display.setSizePolicy(QSizePolicy.Policy.Ignored, QSizePolicy.Policy.Preferred)
        display_layout.addWidget(self.display)

        display_frame.setLayout(display_layout)
        main_layout.addWidget(display_frame)
        main_layout.addStretch()

        # Every button is created once; the grid only places the ones for the current mode
        self.button_layout = QGridLayout()
        self.button_layout.setSpacing(12)
        for button in CalculatorButton:
            btn = QPushButton(button.label, central)
            btn.setMinimumSize(64, 56)
            btn.setStyleSheet(f"""
                QPushButton {{
                    background-color: {BUTTON_COLORS[button]};
                    color: white;
                    border: none;
                    border-radius: 12px;
                    font-size: 18pt;
                    font-weight: 600;
                }}
                QPushButton:pressed {{
                    background-color: #636366;
                }}
            """)
            btn.clicked.connect(lambda checked, b=button: self.button_pressed(b))
            self.buttons[button] = btn

        main_layout.addLayout(self.button_layout)
        central.setLayout(main_layout)

        # Menu bar
        menubar = self.menuBar()

        edit_menu = menubar.addMenu("&Edit")

        copy_action = QAction("&Copy", self)
        copy_action.setShortcut("Ctrl+C")
        copy_action.triggered.connect(self.copy_to_clipboard)
        edit_menu.addAction(copy_action)

        edit_menu.addSeparator()

        settings_action = QAction("&Settings...", self)
        settings_action.triggered.connect(self.show_settings)
        edit_menu.addAction(settings_action)

        help_menu = menubar.addMenu("&Help")

        about_action = QAction("&About", self)
        about_action.triggered.connect(self.show_about)
        help_menu.addAction(about_action)

        self.setMinimumSize(340, 520)
        self.resize(360, 600)

        self.refresh()

    def button_pressed(self, button):
        """Forward a button press to the engine and re-render"""
        was_hex = self.engine.current_mode()
        before = self.engine.current_display()

        dispatch(self.engine, button)

        if button is CalculatorButton.HEX:
            logger.debug(
                "Toggled %s %s -> %s %s",
                "HEX" if was_hex else "DEC", before,
                "HEX" if self.engine.current_mode() else "DEC", self.engine.current_display(),
            )
        else:
            logger.debug("Pressed %s, display %s", button.label, self.engine.current_display())

        self.refresh()

    def refresh(self):
        """Re-render everything from the engine state"""
        hex_mode = self.engine.current_mode()
        if hex_mode != self._grid_mode:
            self.rebuild_grid(hex_mode)
        self.mode_label.setText("HEX" if hex_mode else "DEC")
        self.update_display()

    def rebuild_grid(self, hex_mode):
        """Lay out the buttons for the given mode; A-F are hidden in decimal mode"""
        for btn in self.buttons.values():
            self.button_layout.removeWidget(btn)
            btn.hide()

        for button, row, col in grid_positions(hex_mode):
            btn = self.buttons[button]
            self.button_layout.addWidget(btn, row, col)
            btn.show()

        self._grid_mode = hex_mode

    def update_display(self):
        text = self.engine.current_display()
        self.display.setText(text)
        margins = self.display.contentsMargins()
        available = self.display.width() - margins.left() - margins.right()
        if available > 0:
            self.display.setFont(fit_font(text, self.base_font, available))

    def resizeEvent(self, event):
        super().resizeEvent(event)
        self.update_display()

    def copy_to_clipboard(self):
        """Copy the displayed value"""
        clipboard = QApplication.clipboard()
        clipboard.setText(self.engine.current_display())

    def show_settings(self):
        """Show settings dialog"""
        dialog = SettingsDialog(self)
        if dialog.exec() == QDialog.DialogCode.Accepted:
            theme = dialog.theme_combo.currentText()
            if theme != self.config["theme"]:
                self.config["theme"] = theme
                qdarktheme.setup_theme(theme)

            if dialog.selected_font:
                self.set_display_font(dialog.selected_font)

            self.update_display()

    def set_display_font(self, font):
        """Use font for the display, clamped to the sizes the config accepts"""
        font = QFont(font)
        if font.pointSize() > 0:
            size = min(max(font.pointSize(), MIN_FONT_SIZE), MAX_FONT_SIZE)
            font.setPointSize(size)
            self.config["display_font_size"] = size
        self.base_font = font
        self.config["display_font"] = font.toString()
        self.update_display()

    def show_about(self):
        QMessageBox.about(
            self,
            f"About {APP_NAME}",
            f"<h3>{APP_NAME} {__version__}</h3>"
            "<p>Decimal entry with a HEX toggle. Values are unsigned 64-bit; "
            "anything larger converts to 0.</p>",
        )

    def closeEvent(self, event):
        """Handle window close"""
        save_config(self.config, self.config_path)
        event.accept()


def main():
    config = load_config()
    setup_logging(level_from_name(config["log_level"]))

    if sys.platform == "win32":
        ctypes.windll.shell32.SetCurrentProcessExplicitAppUserModelID(APP_USER_MODEL_ID)

    app = QApplication(sys.argv)
    qdarktheme.setup_theme(config["theme"])

    calculator = CalculatorWindow(config=config)
    calculator.show()

    return app.exec()
