"""
Root conftest.py - puts the project root on sys.path.

Loaded by pytest before test collection, so ``import colorstops`` resolves to
this checkout even when the package has not been installed.
"""
import sys
import os

# Get the project root (where this conftest.py lives)
PROJECT_ROOT = os.path.dirname(os.path.abspath(__file__))

if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)
