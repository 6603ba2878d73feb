"""
engine/messages.py
━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
Contextual message for a calendar-day count.
━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
Brackets must cover every integer exactly once; negative counts mean the
target date has already passed.
"""
from __future__ import annotations

import logging
import random
from typing import List, Optional, Sequence

from config.settings import settings
from shared.schemas import MessageBracket

logger = logging.getLogger(__name__)


DEFAULT_BRACKETS: List[MessageBracket] = [
    MessageBracket(upper=-1, messages=(
        "That day has come and gone 🎉",
        "Already behind you. Time for the next goal!",
        "Done and dusted ✅",
    )),
    MessageBracket(lower=0, upper=1, messages=(
        "It's D-Day! 🎊",
        "Today is the day!",
    )),
    MessageBracket(lower=2, upper=7, messages=(
        "Less than a week to go 🔥",
        "Pack your bags, almost there!",
        "Count it on one hand.",
    )),
    MessageBracket(lower=8, upper=30, messages=(
        "Within a month. Hang in there 💪",
        "The finish line is in sight.",
        "A few more weekends and you're done.",
    )),
    MessageBracket(lower=31, upper=100, messages=(
        "Double digits! 🙌",
        "Steady does it.",
        "Under a hundred days left.",
    )),
    MessageBracket(lower=101, upper=365, messages=(
        "Less than a year left 📅",
        "One season at a time.",
        "You're past the hardest part.",
    )),
    MessageBracket(lower=366, messages=(
        "A long road ahead. One day at a time 🌱",
        "Plenty of time. Make the most of it.",
        "Start strong!",
    )),
]


def _check_partition(brackets: Sequence[MessageBracket]) -> List[MessageBracket]:
    """Sort brackets and verify they tile the integer line with no gaps or overlaps."""
    if not brackets:
        raise ValueError("at least one message bracket is required")

    ordered = sorted(
        brackets, key=lambda b: float("-inf") if b.lower is None else b.lower
    )
    if ordered[0].lower is not None:
        raise ValueError(f"brackets do not cover counts below {ordered[0].lower}")
    if ordered[-1].upper is not None:
        raise ValueError(f"brackets do not cover counts above {ordered[-1].upper}")

    for prev, nxt in zip(ordered, ordered[1:]):
        if prev.upper is None or nxt.lower is None:
            raise ValueError("only the first and last brackets may be unbounded")
        if nxt.lower != prev.upper + 1:
            raise ValueError(
                f"brackets must be contiguous: {prev.upper} is followed by {nxt.lower}"
            )
    return ordered


class MessageSelector:
    """Picks a message uniformly at random from the bracket holding the count."""

    def __init__(
        self,
        brackets: Optional[Sequence[MessageBracket]] = None,
        default_message: Optional[str] = None,
    ):
        self.brackets = _check_partition(DEFAULT_BRACKETS if brackets is None else brackets)
        self.default_message = default_message or settings.neutral_message

    def bracket_for(self, calendar_days: int) -> Optional[MessageBracket]:
        for bracket in self.brackets:
            if bracket.contains(calendar_days):
                return bracket
        return None

    def select(self, calendar_days: int, rng: Optional[random.Random] = None) -> str:
        bracket = self.bracket_for(calendar_days)
        if bracket is None:
            logger.warning("No message bracket for %d days", calendar_days)
            return self.default_message
        rng = rng or random.Random()
        return rng.choice(bracket.messages)
