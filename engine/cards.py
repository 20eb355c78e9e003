from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional

from engine.constants import INITIAL_DEALS, RANK_ORDER, SUIT_SYMBOLS, Difficulty, Rank, Suit


@dataclass(frozen=True, slots=True)
class Card:
    suit: Suit
    rank: Rank
    face_up: bool = False

    @property
    def order(self) -> int:
        return RANK_ORDER[self.rank]

    def flipped_up(self) -> Card:
        if self.face_up:
            return self
        return replace(self, face_up=True)

    def turned_down(self) -> Card:
        if not self.face_up:
            return self
        return replace(self, face_up=False)

    def suitable_as_base_for(self, upper: Card) -> bool:
        return self.order == upper.order + 1

    def suitable_as_sequence_for(self, upper: Card) -> bool:
        return self.suit == upper.suit and self.suitable_as_base_for(upper)

    def __str__(self):
        if not self.face_up:
            return "---"
        return self.rank + SUIT_SYMBOLS[self.suit]


@dataclass(frozen=True, slots=True)
class Column:
    """A tableau pile; ``cards[0]`` is the bottom, ``cards[-1]`` the top."""

    id: str
    cards: tuple[Card, ...] = ()

    @property
    def top(self) -> Optional[Card]:
        if not self.cards:
            return None
        return self.cards[-1]

    def is_empty(self) -> bool:
        return len(self.cards) == 0

    def __len__(self):
        return len(self.cards)


@dataclass(frozen=True, slots=True)
class Game:
    """One immutable snapshot of the table."""

    difficulty: Difficulty = 4
    moves: int = 0
    deals_remaining: int = INITIAL_DEALS
    foundations_completed: int = 0
    columns: tuple[Column, ...] = ()
    stock: tuple[Card, ...] = ()

    def find_column(self, column_id: str) -> Optional[Column]:
        for column in self.columns:
            if column.id == column_id:
                return column
        return None

    def has_empty_column(self) -> bool:
        return any(column.is_empty() for column in self.columns)

    def replace_column(self, column: Column) -> Game:
        columns = tuple(column if c.id == column.id else c for c in self.columns)
        return replace(self, columns=columns)

    def card_count(self) -> int:
        return sum(len(column) for column in self.columns) + len(self.stock)


@dataclass(frozen=True, slots=True)
class GameState:
    game: Game = Game()
    # Prior snapshots for undo, most recent last.
    history: tuple[Game, ...] = ()
    is_won: bool = False
    game_started: bool = False


def column_id_for(index: int) -> str:
    return f"col-{index}"
