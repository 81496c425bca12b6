"""
Main entry point for running the package directly.

This allows running the snapshot viewer with:
    python show_snapshot.py <file>
    python -m pod_inventory <file>
"""

import sys
from pathlib import Path

# Add parent directory to Python path
# This ensures imports work when running from a source checkout
parent_dir = Path(__file__).parent.parent
if str(parent_dir) not in sys.path:
    sys.path.insert(0, str(parent_dir))

from show_snapshot import run

if __name__ == "__main__":
    run()
