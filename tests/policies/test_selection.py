"""
Tests for mapping menu choices and names onto policies.
"""
import pytest
from policies.selection import (
    create_ordering_policy,
    create_placement_policy,
    is_known_ordering,
    is_known_placement,
)
from policies.ordering import ArrivalOrder, SmallestFootprintFirst, ShortestDurationFirst
from policies.placement import FirstFit, BestFit, WorstFit


@pytest.mark.parametrize("choice,expected", [
    (1, ArrivalOrder), (2, SmallestFootprintFirst), (3, ShortestDurationFirst),
    ("2", SmallestFootprintFirst), ("sjf", SmallestFootprintFirst),
    ("Short Duration First", ShortestDurationFirst), ("FCFS", ArrivalOrder),
])
def test_ordering_choices(choice, expected):
    assert isinstance(create_ordering_policy(choice), expected)
    assert is_known_ordering(choice)


@pytest.mark.parametrize("choice,expected", [
    (1, FirstFit), (2, BestFit), (3, WorstFit),
    ("3", WorstFit), ("best_fit", BestFit), ("First Fit", FirstFit),
])
def test_placement_choices(choice, expected):
    assert isinstance(create_placement_policy(choice), expected)
    assert is_known_placement(choice)


@pytest.mark.parametrize("choice", [0, 4, -1, "9", "lifo", "", None])
def test_unknown_choices_fall_back_to_defaults(choice):
    assert isinstance(create_ordering_policy(choice), ArrivalOrder)
    assert isinstance(create_placement_policy(choice), FirstFit)
    assert not is_known_ordering(choice)
    assert not is_known_placement(choice)
