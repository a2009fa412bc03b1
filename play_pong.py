#!/usr/bin/env python3
"""
Main script to launch Ping Pong with PyGame graphical interface
"""

import sys

from ping_pong.gui.game_app import main

if __name__ == "__main__":
    print("=== PING PONG ===")
    print("Two players, one keyboard. F2 shows FPS, ESC quits.")
    print()

    sys.exit(main())
