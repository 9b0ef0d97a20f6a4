#!/usr/bin/env python3
"""
Entry point for the Problem Coach CLI.
"""
import sys
import os

# Ensure src is in path so we can import 'coach' even if not installed via pip yet (for dev convenience)
sys.path.insert(0, os.path.join(os.path.dirname(__file__), 'src'))

from coach.main import run_cli

if __name__ == "__main__":
    sys.exit(run_cli())
