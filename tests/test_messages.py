"""
Tests for MessageSelector and bracket validation.
"""

from __future__ import annotations

import random

import pytest
from pydantic import ValidationError

from engine.messages import DEFAULT_BRACKETS, MessageSelector
from shared.schemas import MessageBracket


@pytest.fixture
def selector() -> MessageSelector:
    return MessageSelector()


def test_negative_count_selects_past_bracket(selector: MessageSelector) -> None:
    bracket = selector.bracket_for(-5)
    assert bracket is not None
    assert bracket.upper == -1
    assert selector.select(-5, random.Random(0)) in bracket.messages


@pytest.mark.parametrize("days, lower", [(0, 0), (1, 0), (7, 2), (8, 8), (100, 31), (365, 101), (10_000, 366)])
def test_bracket_lookup(selector: MessageSelector, days: int, lower: int) -> None:
    assert selector.bracket_for(days).lower == lower


def test_selection_reproducible_with_seed(selector: MessageSelector) -> None:
    picks_a = [selector.select(20, random.Random(42)) for _ in range(3)]
    picks_b = [selector.select(20, random.Random(42)) for _ in range(3)]
    assert picks_a == picks_b


def test_selection_covers_pool(selector: MessageSelector) -> None:
    rng = random.Random(1)
    pool = set(selector.bracket_for(50).messages)
    seen = {selector.select(50, rng) for _ in range(200)}
    assert seen == pool


def test_default_when_no_bracket_matches(selector: MessageSelector) -> None:
    selector.brackets = selector.brackets[1:]
    assert selector.select(-5, random.Random(0)) == "🎁"


def test_default_brackets_partition() -> None:
    # Construction validates the table
    assert MessageSelector(DEFAULT_BRACKETS).brackets[0].lower is None


def test_gap_rejected() -> None:
    with pytest.raises(ValueError, match="contiguous"):
        MessageSelector([
            MessageBracket(upper=0, messages=("a",)),
            MessageBracket(lower=2, messages=("b",)),
        ])


def test_overlap_rejected() -> None:
    with pytest.raises(ValueError):
        MessageSelector([
            MessageBracket(upper=5, messages=("a",)),
            MessageBracket(lower=3, messages=("b",)),
        ])


def test_bounded_ends_rejected() -> None:
    with pytest.raises(ValueError):
        MessageSelector([MessageBracket(lower=0, messages=("a",))])
    with pytest.raises(ValueError):
        MessageSelector([MessageBracket(upper=0, messages=("a",))])


def test_empty_pool_rejected() -> None:
    with pytest.raises(ValidationError):
        MessageBracket(lower=0, upper=1, messages=())


def test_unordered_input_is_sorted() -> None:
    selector = MessageSelector([
        MessageBracket(lower=1, messages=("future",)),
        MessageBracket(upper=0, messages=("past",)),
    ])
    assert selector.select(0) == "past"
    assert selector.select(1) == "future"
