from __future__ import annotations

from dataclasses import replace
from typing import Optional

from loguru import logger

from engine.cards import Column, Game
from engine.constants import COMPLETE_SUIT_LENGTH, COMPLETE_SUIT_RANKS, FOUNDATIONS_TO_WIN, Suit
from engine.errors import INVALID_COLUMN, NO_COMPLETED_SUIT, RuleError


def detect_completed_suit(column: Column) -> Optional[Suit]:
    """Return the suit of a face-up K..A run sitting on top of ``column``, else None."""
    if len(column.cards) < COMPLETE_SUIT_LENGTH:
        return None
    run = column.cards[-COMPLETE_SUIT_LENGTH:]
    suit = run[0].suit
    for card, rank in zip(run, COMPLETE_SUIT_RANKS):
        if card.rank != rank or card.suit != suit or not card.face_up:
            return None
    return suit


def remove_completed_suit(game: Game, column_id: str) -> Game:
    column = game.find_column(column_id)
    if column is None:
        raise RuleError(INVALID_COLUMN, column_id)
    suit = detect_completed_suit(column)
    if suit is None:
        raise RuleError(NO_COMPLETED_SUIT, column_id)

    logger.debug("Completed {} run removed from {}", suit, column_id)
    stripped = replace(column, cards=column.cards[:-COMPLETE_SUIT_LENGTH])
    return replace(
        game.replace_column(stripped),
        foundations_completed=game.foundations_completed + 1,
    )


def is_win_condition(game: Game) -> bool:
    # Leftover stock does not matter once every run is home.
    return game.foundations_completed == FOUNDATIONS_TO_WIN
