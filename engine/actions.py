from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Optional, Union

from engine.constants import Difficulty, Suit


@dataclass(frozen=True, slots=True)
class NewGame:
    kind: ClassVar[str] = "NEW_GAME"

    difficulty: Difficulty = 4
    # A fixed seed makes the shuffle reproducible.
    seed: Optional[int] = None


@dataclass(frozen=True, slots=True)
class MoveCards:
    kind: ClassVar[str] = "MOVE_CARDS"

    from_column_id: str
    card_index: int
    to_column_id: str


@dataclass(frozen=True, slots=True)
class Deal:
    kind: ClassVar[str] = "DEAL"


@dataclass(frozen=True, slots=True)
class Undo:
    kind: ClassVar[str] = "UNDO"


@dataclass(frozen=True, slots=True)
class FlipCard:
    kind: ClassVar[str] = "FLIP_CARD"

    column_id: str


@dataclass(frozen=True, slots=True)
class CompleteSuit:
    kind: ClassVar[str] = "COMPLETE_SUIT"

    column_id: str
    suit: Suit


GameAction = Union[NewGame, MoveCards, Deal, Undo, FlipCard, CompleteSuit]
