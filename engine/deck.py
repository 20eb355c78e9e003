from __future__ import annotations

import random
from typing import Optional, Sequence

from engine.cards import Card
from engine.constants import CARDS_IN_DECK, DIFFICULTY_TO_SUITS, RANKS, SHUFFLE_PASSES, Suit


def suits_for_difficulty(difficulty: int) -> tuple[Suit, ...]:
    try:
        return DIFFICULTY_TO_SUITS[difficulty]
    except KeyError:
        raise ValueError(f"unsupported difficulty: {difficulty!r}") from None


def create_deck(difficulty: int) -> tuple[Card, ...]:
    """
    Build the 104 face-down cards for a game.

    Fewer suits means more copies of each: 8 per rank with one suit, 4 with
    two suits, 2 with all four.
    """
    suits = suits_for_difficulty(difficulty)
    copies = CARDS_IN_DECK // (len(suits) * len(RANKS))
    cards = []
    for _ in range(copies):
        for suit in suits:
            for rank in RANKS:
                cards.append(Card(suit=suit, rank=rank, face_up=False))
    return tuple(cards)


def shuffle_deck(deck: Sequence[Card], rng: Optional[random.Random] = None) -> tuple[Card, ...]:
    """Fisher-Yates over a copy, repeated SHUFFLE_PASSES times."""
    pick_rng = rng if rng is not None else random
    shuffled = list(deck)
    for _ in range(SHUFFLE_PASSES):
        for i in range(len(shuffled) - 1, 0, -1):
            j = pick_rng.randint(0, i)
            shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return tuple(shuffled)
