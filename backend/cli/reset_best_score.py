#!/usr/bin/env python3
"""
Show or clear the stored best score.

Usage:
    python backend/cli/reset_best_score.py            # prompt, then clear
    python backend/cli/reset_best_score.py --confirm  # clear without prompting
    python backend/cli/reset_best_score.py --dry-run  # only show the stored value
"""

import os
import sys
import argparse

# Add parent directory to path to import database modules
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from dotenv import load_dotenv

from database import get_database_path
from data_access import load_best_score, clear_best_score


def reset_best_score(confirm: bool = False, dry_run: bool = False) -> bool:
    """
    Clear the stored best score.

    Args:
        confirm: If True, skip confirmation prompt
        dry_run: If True, only report what would be cleared

    Returns:
        True if a stored score was removed, False otherwise
    """
    current = load_best_score()
    print(f"Database path: {get_database_path()}")
    print(f"Stored best score: {current}")

    if dry_run:
        print("Dry run: nothing changed")
        return False

    if not confirm:
        response = input("\nType 'RESET' to clear the best score: ")
        if response != 'RESET':
            print("Reset cancelled")
            return False

    removed = clear_best_score()
    print("Best score cleared" if removed else "No best score was stored")
    return removed


def main():
    parser = argparse.ArgumentParser(
        description="Clear the stored Fluffy Snake best score",
        epilog="The database file is SNAKE_DB_PATH if set, otherwise backend/fluffy_snake.db.",
    )
    parser.add_argument("--confirm", action="store_true", help="Skip the confirmation prompt")
    parser.add_argument("--dry-run", action="store_true", help="Only show the stored value")
    args = parser.parse_args()

    load_dotenv()
    reset_best_score(confirm=args.confirm, dry_run=args.dry_run)


if __name__ == "__main__":
    main()
