"""
run_layout.py - CLI Entry Point

Forwards execution to the CLI defined in `src/gallery_layout/cli.py` so
the tool can be run from a source checkout without installing it.

Usage:
    python run_layout.py --images photos.json --width 1200 [options]

For help on available options, run:
    python run_layout.py --help
"""
import sys
# Source code in src/ subdirectory
from pathlib import Path
sys.path.insert(0, str(Path(__file__).resolve().parent / "src"))

import gallery_layout.cli as gl_cli

if __name__ == "__main__":
    sys.exit(gl_cli.main())
