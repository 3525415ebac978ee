"""Packaged evaluation rubric and verdict style table."""

from pathlib import Path

RESOURCE_DIR = Path(__file__).parent
RUBRIC_FILE = RESOURCE_DIR / "rubric.txt"
VERDICT_STYLES_FILE = RESOURCE_DIR / "verdict_styles.json"
