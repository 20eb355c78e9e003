from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from engine.cards import Column, Game
from engine.moves import can_move_same_sequence, is_valid_move


@dataclass(frozen=True, slots=True)
class Hint:
    """A suggested move; recomputed on demand, never stored."""

    from_column_id: str
    card_index: int
    to_column_id: str


@dataclass(frozen=True, slots=True)
class ScoredMove:
    from_column_id: str
    card_index: int
    to_column_id: str
    score: int

    def to_hint(self) -> Hint:
        return Hint(
            from_column_id=self.from_column_id,
            card_index=self.card_index,
            to_column_id=self.to_column_id,
        )


def find_movable_sequence_starts(column: Column) -> tuple[int, ...]:
    """Return every index from which the rest of the column can be picked up."""
    return tuple(i for i in range(len(column.cards)) if can_move_same_sequence(column, i))


def _would_reveal_card(column: Column, card_index: int) -> bool:
    if card_index == 0:
        return False
    return not column.cards[card_index - 1].face_up


def _is_same_suit_build(column: Column, card_index: int, target: Column) -> bool:
    if target.top is None:
        return False
    return column.cards[card_index].suit == target.top.suit


def _is_king_to_empty(column: Column, card_index: int, target: Column) -> bool:
    return column.cards[card_index].rank == "K" and target.is_empty()


def score_move(column: Column, card_index: int, target: Column) -> int:
    """
    Higher is better; 0 means the move is not worth suggesting.

    Precedence: same-suit build that reveals > same-suit build > reveal >
    king into an empty column > any build > anything into an empty column.
    """
    # Relocating a whole column into an empty one changes nothing.
    if card_index == 0 and target.is_empty():
        return 0

    sequence_length = len(column.cards) - card_index
    same_suit = _is_same_suit_build(column, card_index, target)
    reveals = _would_reveal_card(column, card_index)
    king_to_empty = _is_king_to_empty(column, card_index, target)

    if same_suit and reveals:
        return 100 + sequence_length
    if same_suit:
        return 50 + sequence_length
    if reveals:
        return 30 + sequence_length
    # A revealing king move already scored above, so this only sees the
    # non-revealing ones.
    if king_to_empty and card_index > 0:
        return 25
    if not target.is_empty():
        return 10 + sequence_length
    return 5


def find_all_valid_moves(game: Game) -> list[ScoredMove]:
    """Legal moves with a positive score, in column/cut/target order."""
    moves: list[ScoredMove] = []
    for column in game.columns:
        if column.is_empty():
            continue
        for card_index in find_movable_sequence_starts(column):
            moving = column.cards[card_index]
            for target in game.columns:
                if target.id == column.id:
                    continue
                if not is_valid_move(moving, target):
                    continue
                score = score_move(column, card_index, target)
                if score > 0:
                    moves.append(
                        ScoredMove(
                            from_column_id=column.id,
                            card_index=card_index,
                            to_column_id=target.id,
                            score=score,
                        )
                    )
    return moves


def get_hint(game: Game) -> Optional[Hint]:
    moves = find_all_valid_moves(game)
    if not moves:
        return None
    # max() keeps the first of equal scores.
    best = max(moves, key=lambda m: m.score)
    return best.to_hint()


def has_valid_moves(game: Game) -> bool:
    return len(find_all_valid_moves(game)) > 0
