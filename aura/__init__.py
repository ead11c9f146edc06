"""Aura - voice control layer for the Aura assistant chat widget.

Components:
    voice/: Command detection, routing, and control handlers
    logging_config.py: structlog setup
    cli.py: `aura` command line entry point
"""

from pathlib import Path

__version__ = "0.1.0"

# Path constants
PROJECT_ROOT = Path(__file__).parent.parent
ARGS_DIR = PROJECT_ROOT / "args"

__all__ = [
    "ARGS_DIR",
    "PROJECT_ROOT",
    "__version__",
]
