from __future__ import annotations

from dataclasses import replace

from engine.cards import Card, Column, Game
from engine.errors import CANNOT_MOVE_SEQUENCE, INVALID_COLUMN, INVALID_MOVE, RuleError


def is_valid_move(card: Card, target_column: Column) -> bool:
    """Any card may go on an empty column or on a card exactly one rank higher."""
    top = target_column.top
    if top is None:
        return True
    return top.suitable_as_base_for(card)


def can_move_same_sequence(column: Column, from_index: int) -> bool:
    """
    Whether ``column.cards[from_index:]`` can be picked up as one unit: every
    card face-up, one suit, each exactly one rank below the card beneath it.
    """
    cards = column.cards
    if from_index < 0 or from_index >= len(cards):
        return False
    base = cards[from_index]
    if not base.face_up:
        return False
    for i in range(from_index + 1, len(cards)):
        upper = cards[i]
        if not upper.face_up or not base.suitable_as_sequence_for(upper):
            return False
        base = upper
    return True


def move_cards(game: Game, from_column_id: str, card_index: int, to_column_id: str) -> Game:
    src = game.find_column(from_column_id)
    dest = game.find_column(to_column_id)
    if src is None or dest is None:
        raise RuleError(INVALID_COLUMN, f"{from_column_id} -> {to_column_id}")
    if not can_move_same_sequence(src, card_index):
        raise RuleError(CANNOT_MOVE_SEQUENCE, f"{from_column_id}:{card_index}")

    moving = src.cards[card_index:]
    if not is_valid_move(moving[0], dest):
        raise RuleError(INVALID_MOVE, f"{moving[0]} onto {dest.top}")

    columns = []
    for column in game.columns:
        if column.id == from_column_id:
            column = replace(column, cards=column.cards[:card_index])
        elif column.id == to_column_id:
            column = replace(column, cards=column.cards + moving)
        columns.append(column)
    return replace(game, columns=tuple(columns), moves=game.moves + 1)


def flip_top_card(game: Game, column_id: str) -> Game:
    """Turn the top card face-up; the same ``game`` comes back when there is nothing to flip."""
    column = game.find_column(column_id)
    if column is None or column.top is None:
        return game
    if column.top.face_up:
        return game
    cards = column.cards[:-1] + (column.top.flipped_up(),)
    return game.replace_column(replace(column, cards=cards))
