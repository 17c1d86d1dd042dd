#!/usr/bin/env python3
"""
Bank System Entry Point

Starts the interactive console bank in the current directory.
"""

import sys
from pathlib import Path

# Add the project root to Python path
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))

from bank_system.__main__ import main


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\nShutting down Bank System...")
        sys.exit(0)
