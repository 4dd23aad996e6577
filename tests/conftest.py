"""Pytest configuration: make the colmat package importable from a checkout."""

import sys
import os

repo_dir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, repo_dir)
