"""
Run the interactive people search.

Usage:
    python search_people.py --data people.txt

Each line of the data file is one person (for example "Alice Smith alice@example.com").
Omit --data to type the people at the console instead.
"""

import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).resolve().parent))

from people_search.search_cli import main


if __name__ == "__main__":
    sys.exit(main())
