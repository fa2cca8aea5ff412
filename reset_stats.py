"""
Reset all study tracker stats by clearing the stored session log.
This will delete all session history and reset stats to 0.
"""

from BackEnd.core.paths import db_path
from BackEnd.services.session_store import SessionStore

def reset_all_stats(confirm=input):
    """Empty the stored collection after confirmation. Returns True if cleared."""
    if not db_path().exists():
        print("No database found. Stats are already at 0.")
        return False

    store = SessionStore()
    print(f"Found {len(store)} study sessions in: {db_path()}")
    if not len(store):
        print("Nothing to reset.")
        return False

    answer = confirm("Are you sure you want to reset all stats? This cannot be undone. (yes/no): ")
    if answer.lower() not in ['yes', 'y']:
        print("Reset cancelled.")
        return False

    if not store.clear():
        print("✗ Error clearing sessions, see the log for details.")
        return False
    print("✓ All stats have been reset to 0")
    return True

if __name__ == "__main__":
    print("=" * 50)
    print("Study Tracker - Reset All Stats")
    print("=" * 50)
    reset_all_stats()
    print("\nPress Enter to exit...")
    input()
