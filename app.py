"""
Main entry point for the demo application
Shows the profile name, updates it through a composed lens,
then renders the final store.
"""
import argparse
import logging

from rich.console import Console
from rich.table import Table

from fieldlens import lens_path, replay, set_
from appstate import Store, initial_store, store_user_profile_name

NEW_USER_NAME = "new user name"

STORE_ROWS = (
    "user.id",
    "user.profile.name",
    "user.profile.age",
    "user.profile.country",
)

def store_table(store: Store) -> Table:
    """
    Rich table with one row per leaf field of the store.
    """
    table = Table(row_styles=['', 'bold on grey85'])
    table.add_column("field")
    table.add_column("value")
    for dotted in STORE_ROWS:
        table.add_row(dotted, str(lens_path(Store, dotted).get(store)))
    return table

def _configure_logger(name: str, level: int) -> None:
    logger = logging.getLogger(name)
    logger.setLevel(level)
    if not any(isinstance(handler, logging.StreamHandler) for handler in logger.handlers):
        handler = logging.StreamHandler()
        handler.setLevel(level)
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
    logger.propagate = False

def run_demo(console: Console, name: str = NEW_USER_NAME) -> Store:
    """
    Dispatch the name update against the initial store, showing the
    name before and after, and return the final store.
    """
    before, after = replay(initial_store(),
                           [set_(store_user_profile_name, name)])
    console.print(f"Name: {store_user_profile_name.get(before)}")
    console.print(f"Updated name: {store_user_profile_name.get(after)}")
    return after

def main(argv: list[str] | None = None) -> None:
    """
    Parse arguments, run the update and render the final store.
    """
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--name", default=NEW_USER_NAME,
                        help="name to write into the profile")
    parser.add_argument("--verbose", action="store_true",
                        help="enable debug logging")
    args = parser.parse_args(argv)
    _configure_logger("fieldlens",
                      logging.DEBUG if args.verbose else logging.WARNING)
    console = Console()
    console.print(store_table(run_demo(console, args.name)))

if __name__ == "__main__":
    main()
