#!/usr/bin/env python3
"""
run.py - Main entry point for Connect Four

Examples:
    python run.py play
    python run.py play --rows 5 --cols 5
    python run.py test --position 0,0,0,0,0,0,0,...
    python run.py benchmark --iterations 500 --seed 1
    python run.py --debug-level debug play
"""

import sys

from connectfour.interfaces.cli import main

if __name__ == "__main__":
    sys.exit(main())
