"""
Run with: python -m hexcalc
"""
import sys

from hexcalc.app import main

if __name__ == "__main__":
    sys.exit(main())
