"""
Map user selectors onto policy instances.

Selectors are either the menu numbers of the interactive prompt (1-3) or
policy names/aliases. Unrecognized selectors fall back to FCFS ordering and
first-fit placement instead of failing.
"""
from .ordering import ArrivalOrder, SmallestFootprintFirst, ShortestDurationFirst
from .placement import FirstFit, BestFit, WorstFit

ORDERING_MENU = {
    1: ArrivalOrder,
    2: SmallestFootprintFirst,
    3: ShortestDurationFirst,
}

PLACEMENT_MENU = {
    1: FirstFit,
    2: BestFit,
    3: WorstFit,
}

ORDERING_ALIASES = {
    "fcfs": 1, "arrival": 1, "arrival-order": 1,
    "sjf": 2, "smallest": 2, "smallest-job-first": 2, "smallest-footprint-first": 2,
    "sdf": 3, "shortest": 3, "short-duration-first": 3, "shortest-duration-first": 3,
}

PLACEMENT_ALIASES = {
    "first": 1, "first-fit": 1, "ff": 1,
    "best": 2, "best-fit": 2, "bf": 2,
    "worst": 3, "worst-fit": 3, "wf": 3,
}

DEFAULT_CHOICE = 1


def _menu_number(choice, aliases):
    """Return the menu number for a selector, or None if it is not recognized."""
    if isinstance(choice, int) and not isinstance(choice, bool):
        return choice
    text = str(choice).strip().lower().replace("_", "-").replace(" ", "-")
    if text.isdigit():
        return int(text)
    return aliases.get(text)


def is_known_ordering(choice):
    return _menu_number(choice, ORDERING_ALIASES) in ORDERING_MENU


def is_known_placement(choice):
    return _menu_number(choice, PLACEMENT_ALIASES) in PLACEMENT_MENU


def create_ordering_policy(choice):
    """Create an ordering policy; unknown selectors give ArrivalOrder (FCFS)."""
    number = _menu_number(choice, ORDERING_ALIASES)
    return ORDERING_MENU.get(number, ORDERING_MENU[DEFAULT_CHOICE])()


def create_placement_policy(choice):
    """Create a placement policy; unknown selectors give FirstFit."""
    number = _menu_number(choice, PLACEMENT_ALIASES)
    return PLACEMENT_MENU.get(number, PLACEMENT_MENU[DEFAULT_CHOICE])()
