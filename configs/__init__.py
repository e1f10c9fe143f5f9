"""Bundled scenario presets."""

from pathlib import Path

DIR = Path(__file__).parent
