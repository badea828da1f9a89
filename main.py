#!/usr/bin/env python3
"""
HexCalc - decimal entry with a HEX toggle.
Launcher for running from a source checkout or a PyInstaller build.
"""

import sys

from hexcalc.app import main


if __name__ == "__main__":
    sys.exit(main())
