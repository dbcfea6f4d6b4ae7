"""Bundled parish data: the church structure and default CMS documents."""

from pathlib import Path

DATA_DIR = Path(__file__).parent
