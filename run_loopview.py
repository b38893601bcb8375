#!/usr/bin/env python3
"""
loopview launcher script.

Run this from the project root to start the infinite list demo.
"""

import sys

if __name__ == '__main__':
    from loopview.run_gui import run_gui, suppress_warnings
    suppress_warnings()
    sys.exit(run_gui())
