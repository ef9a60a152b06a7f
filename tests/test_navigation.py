"""
Tests for NavigationState: stepping, boundaries, random jumps.
"""

from __future__ import annotations

import random

import pytest

from pokedex.domains.navigation import NavigationState


def test_initial_state() -> None:
    nav = NavigationState(151)
    assert nav.current_id == 1
    assert nav.min_id == 1
    assert nav.max_id == 151


@pytest.mark.parametrize("start", [2, 50, 150])
def test_backward_then_forward_restores_id(start: int) -> None:
    nav = NavigationState(151, current_id=start)
    assert nav.step_backward() == start - 1
    assert nav.step_forward() == start
    assert nav.current_id == start


@pytest.mark.parametrize("start", [1, 75, 150])
def test_forward_then_backward_restores_id(start: int) -> None:
    nav = NavigationState(151, current_id=start)
    nav.step_forward()
    nav.step_backward()
    assert nav.current_id == start


def test_step_backward_at_min_is_noop() -> None:
    nav = NavigationState(151)
    assert nav.step_backward() is None
    assert nav.current_id == 1


def test_step_forward_at_max_is_noop() -> None:
    nav = NavigationState(151, current_id=151)
    assert nav.step_forward() is None
    assert nav.current_id == 151


def test_single_element_range() -> None:
    nav = NavigationState(1)
    assert nav.step_backward() is None
    assert nav.step_forward() is None
    assert nav.jump_random() == 1


def test_jump_random_stays_in_range_and_reaches_all() -> None:
    nav = NavigationState(10, rng=random.Random(1234))
    seen = set()
    for _ in range(2000):
        new_id = nav.jump_random()
        assert 1 <= new_id <= 10
        assert nav.current_id == new_id
        seen.add(new_id)
    assert seen == set(range(1, 11))


def test_jump_random_uses_injected_rng() -> None:
    a = NavigationState(151, rng=random.Random(7))
    b = NavigationState(151, rng=random.Random(7))
    assert [a.jump_random() for _ in range(5)] == [b.jump_random() for _ in range(5)]


def test_invalid_construction() -> None:
    with pytest.raises(ValueError):
        NavigationState(0)
    with pytest.raises(ValueError):
        NavigationState(151, current_id=152)
    with pytest.raises(ValueError):
        NavigationState(151, current_id=0)
