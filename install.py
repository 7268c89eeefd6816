#!/usr/bin/env python3
"""
Run pkgwright straight from a source checkout.

Usage (from the project root):
  python install.py
  PKGWRIGHT_VARIANT=electron python install.py
"""

import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent
sys.path.insert(0, str(PROJECT_ROOT))

from pkgwright.main import main

if __name__ == "__main__":
    sys.exit(main())
