from __future__ import annotations

from dataclasses import replace
from typing import Sequence

from loguru import logger

from engine.cards import Card, Column, Game, column_id_for
from engine.constants import CARDS_PER_DEAL, INITIAL_COLUMN_SIZES, INITIAL_DEALT
from engine.errors import EMPTY_COLUMN_DEAL, NOT_ENOUGH_STOCK, RuleError


def deal_initial_cards(deck: Sequence[Card]) -> tuple[tuple[Column, ...], tuple[Card, ...]]:
    """
    Opening deal: 54 cards to the tableau, the rest to the stock.

    Cards are taken in deck order, filling column 0 first. Only the last card
    dealt to each column is face-up; the stock is always face-down.
    """
    if len(deck) < INITIAL_DEALT:
        raise ValueError(f"deck needs at least {INITIAL_DEALT} cards, got {len(deck)}")

    columns = []
    pos = 0
    for idx, size in enumerate(INITIAL_COLUMN_SIZES):
        cards = []
        for i in range(size):
            card = deck[pos]
            pos += 1
            cards.append(card.flipped_up() if i == size - 1 else card.turned_down())
        columns.append(Column(id=column_id_for(idx), cards=tuple(cards)))

    stock = tuple(card.turned_down() for card in deck[pos:])
    return tuple(columns), stock


def deal_from_stock(game: Game) -> Game:
    """Deal one face-up card from the stock onto every column."""
    if len(game.stock) < CARDS_PER_DEAL:
        raise RuleError(NOT_ENOUGH_STOCK, f"{len(game.stock)} left")
    if game.has_empty_column():
        raise RuleError(EMPTY_COLUMN_DEAL)

    dealt = game.stock[:CARDS_PER_DEAL]
    columns = tuple(
        replace(column, cards=column.cards + (card.flipped_up(),))
        for column, card in zip(game.columns, dealt)
    )
    # Columns beyond CARDS_PER_DEAL receive nothing.
    columns += game.columns[len(columns):]

    logger.debug("Dealt {} cards, {} deals remaining", len(dealt), game.deals_remaining - 1)
    return replace(
        game,
        columns=columns,
        stock=game.stock[CARDS_PER_DEAL:],
        deals_remaining=game.deals_remaining - 1,
    )
