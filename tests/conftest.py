"""Shared test configuration."""

import sys
from pathlib import Path

# Make the flat packages importable without installation
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))
