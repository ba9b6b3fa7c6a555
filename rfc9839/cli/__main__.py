"""
RFC 9839 CLI entry point.

Usage:
    python -m rfc9839.cli check U+FFFE
    python -m rfc9839.cli explain 0x85
    python -m rfc9839.cli ranges xml-characters
"""

import sys
from .main import main

if __name__ == "__main__":
    sys.exit(main())
