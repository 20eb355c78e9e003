from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class CardView:
    suit: str
    rank: str
    face_up: bool
    label: str


@dataclass(frozen=True)
class ColumnView:
    id: str
    cards: tuple[CardView, ...]


@dataclass(frozen=True)
class GameStats:
    moves: int
    suits_completed: int


@dataclass(frozen=True)
class HintView:
    from_column_id: str
    card_index: int
    to_column_id: str


@dataclass(frozen=True)
class BoardViewModel:
    difficulty: int
    stats: GameStats
    stock_count: int
    deals_remaining: int
    can_deal: bool
    can_undo: bool
    is_won: bool
    game_started: bool
    columns: tuple[ColumnView, ...]
    hint: Optional[HintView] = None
