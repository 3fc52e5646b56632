"""
Daybook console entry point.
Run this file to manage your calendar from the terminal.
Events live in memory for the lifetime of the process.
"""

import sys
from pathlib import Path
from typing import Callable, Dict, List

# Add project root to Python path
PROJECT_ROOT = Path(__file__).parent
sys.path.insert(0, str(PROJECT_ROOT))

from daybook.core.config_manager import Config
from daybook.core.controller import EventController, ROW_HEADERS, Row
from daybook.utils.logger import setup_logger

logger = setup_logger(__name__)

MENU = """
1) Add event        2) Remove event     3) Update event
4) List events      5) Search events    6) Sort events
7) History          8) Summary          q) Quit
"""


def print_rows(rows: List[Row]) -> None:
    """Print table rows in aligned columns."""
    if not rows:
        print("(no events)")
        return
    widths = [max(len(str(cell)) for cell in column) for column in zip(ROW_HEADERS, *rows)]
    for row in [ROW_HEADERS] + rows:
        print("  ".join(str(cell).ljust(width) for cell, width in zip(row, widths)))


def add(controller: EventController) -> None:
    result = controller.add_event(
        title=input("Title: "),
        location=input("Location: "),
        description=input("Description: "),
        date_text=input("Date (MM/DD/YYYY): "),
        start_text=input("Start time (HH:MM): "),
        end_text=input("End time (HH:MM): "),
        priority=input(f"Priority (High/Medium/Low) [{Config.default_priority().value}]: ").strip() or None,
    )
    print(result)


def remove(controller: EventController) -> None:
    print(controller.remove_event(input("Start time of event (MM/DD/YYYY HH:MM): ")))


def update(controller: EventController) -> None:
    key = input("Start time of event (MM/DD/YYYY HH:MM): ")
    event = controller.store.find_by_start_time(key)
    if event is None:
        print("Event not found.")
        return
    print(event)
    print("Press Enter to keep the current value.")
    result = controller.update_event(
        key,
        title=input("New title: "),
        location=input("New location: "),
        description=input("New description: "),
        priority=input("New priority: "),
        new_start_text=input("New start time (MM/DD/YYYY HH:MM): "),
        new_end_text=input("New end time (MM/DD/YYYY HH:MM): "),
    )
    print(result)


def search(controller: EventController) -> None:
    attribute = input(f"Filter by ({'/'.join(Config.FILTER_ATTRIBUTES)}): ")
    print_rows(controller.search(attribute, input("Value: ")))


def sort(controller: EventController) -> None:
    print_rows(controller.sorted_rows(input(f"Sort by ({'/'.join(Config.SORT_ATTRIBUTES)}): ")))


def summary(controller: EventController) -> None:
    result = controller.summary(
        input("From (MM/DD/YYYY): "),
        input("To (MM/DD/YYYY): "),
    )
    print(result)


def main() -> int:
    """
    Main execution function.
    
    Returns:
        Exit code (0 for success, 1 for failure)
    """
    if not Config.validate():
        logger.error("Configuration validation failed")
        return 1
    
    controller = EventController()
    actions: Dict[str, Callable[[EventController], None]] = {
        '1': add,
        '2': remove,
        '3': update,
        '4': lambda c: print_rows(c.event_rows()),
        '5': search,
        '6': sort,
        '7': lambda c: print(c.history_text() or "(no past events)"),
        '8': summary,
    }
    
    logger.info("Starting Daybook")
    try:
        while True:
            print(MENU)
            choice = input("> ").strip().lower()
            if choice in ('q', 'quit', 'exit'):
                return 0
            action = actions.get(choice)
            if action is None:
                print("Unknown option.")
                continue
            action(controller)
    
    except (KeyboardInterrupt, EOFError):
        logger.warning("Daybook interrupted by user")
        return 0
    
    except Exception as e:
        logger.error("Unexpected fatal error", exc_info=True)
        logger.error(f"Error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
