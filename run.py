#!/usr/bin/env python3
"""Convenience runner for the locomotion timeline CLI.

Usage:
    python run.py track.csv [--split-at ISO] [--json]
"""
import logging
import sys

from locomotion_timeline.main import main

if __name__ == "__main__":
    if not logging.getLogger().hasHandlers():
        logging.basicConfig(level=logging.INFO, format="[%(asctime)s] %(levelname)s %(name)s: %(message)s")
    sys.exit(main())
