from __future__ import annotations

import random
from dataclasses import replace
from typing import Optional

from loguru import logger

from engine.actions import CompleteSuit, Deal, FlipCard, GameAction, MoveCards, NewGame, Undo
from engine.cards import Game, GameState
from engine.completion import detect_completed_suit, is_win_condition, remove_completed_suit
from engine.constants import CARDS_PER_DEAL, DIFFICULTY_ORDER, INITIAL_DEALS
from engine.deal import deal_from_stock, deal_initial_cards
from engine.deck import create_deck, shuffle_deck
from engine.moves import can_move_same_sequence, flip_top_card, is_valid_move, move_cards

INITIAL_GAME_STATE = GameState(
    game=Game(
        difficulty=4,
        moves=0,
        deals_remaining=INITIAL_DEALS,
        foundations_completed=0,
        columns=(),
        stock=(),
    ),
    history=(),
    is_won=False,
    game_started=False,
)


def create_new_game(difficulty: int, rng: Optional[random.Random] = None) -> Game:
    deck = shuffle_deck(create_deck(difficulty), rng)
    columns, stock = deal_initial_cards(deck)
    return Game(
        difficulty=difficulty,
        moves=0,
        deals_remaining=INITIAL_DEALS,
        foundations_completed=0,
        columns=columns,
        stock=stock,
    )


def reduce(state: GameState, action: GameAction, rng: Optional[random.Random] = None) -> GameState:
    """
    Apply ``action`` to ``state`` and return the next state.

    Inapplicable actions return ``state`` itself, so callers can detect a
    no-op with ``is``. Nothing raises out of here for a bad action.
    """
    if isinstance(action, NewGame):
        return _new_game(state, action, rng)
    if isinstance(action, MoveCards):
        return _move_cards(state, action)
    if isinstance(action, Deal):
        return _deal(state)
    if isinstance(action, Undo):
        return _undo(state)
    if isinstance(action, FlipCard):
        return _flip_card(state, action)
    if isinstance(action, CompleteSuit):
        return _complete_suit(state, action)
    logger.debug("Ignoring unknown action {!r}", action)
    return state


game_reducer = reduce


def _new_game(state: GameState, action: NewGame, rng: Optional[random.Random]) -> GameState:
    if action.difficulty not in DIFFICULTY_ORDER:
        logger.debug("New game ignored, unsupported difficulty {!r}", action.difficulty)
        return state
    if action.seed is not None:
        rng = random.Random(action.seed)
    logger.debug("New game: difficulty={} seed={}", action.difficulty, action.seed)
    return GameState(
        game=create_new_game(action.difficulty, rng),
        history=(),
        is_won=False,
        game_started=True,
    )


def _move_cards(state: GameState, action: MoveCards) -> GameState:
    game = state.game
    src = game.find_column(action.from_column_id)
    dest = game.find_column(action.to_column_id)
    if src is None or dest is None:
        logger.debug("Move ignored, unknown column in {}", action)
        return state
    if not can_move_same_sequence(src, action.card_index):
        logger.debug("Move ignored, {}:{} is not a movable sequence", src.id, action.card_index)
        return state
    if not is_valid_move(src.cards[action.card_index], dest):
        logger.debug("Move ignored, {} cannot go onto {}", src.cards[action.card_index], dest.id)
        return state

    new_game = move_cards(game, action.from_column_id, action.card_index, action.to_column_id)
    new_game = flip_top_card(new_game, action.from_column_id)
    new_game = _clear_completed(new_game, action.to_column_id)
    return _advance(state, new_game)


def _deal(state: GameState) -> GameState:
    game = state.game
    if game.has_empty_column() or game.deals_remaining <= 0 or len(game.stock) < CARDS_PER_DEAL:
        logger.debug(
            "Deal ignored: empty_column={} deals_remaining={} stock={}",
            game.has_empty_column(),
            game.deals_remaining,
            len(game.stock),
        )
        return state

    new_game = deal_from_stock(game)
    # Any column may complete a run once it receives its card.
    for column in new_game.columns:
        new_game = _clear_completed(new_game, column.id)
    return _advance(state, new_game)


def _undo(state: GameState) -> GameState:
    if not state.history:
        return state
    return replace(state, game=state.history[-1], history=state.history[:-1], is_won=False)


def _flip_card(state: GameState, action: FlipCard) -> GameState:
    new_game = flip_top_card(state.game, action.column_id)
    if new_game is state.game:
        return state
    return replace(state, game=new_game)


def _complete_suit(state: GameState, action: CompleteSuit) -> GameState:
    column = state.game.find_column(action.column_id)
    if column is None or detect_completed_suit(column) is None:
        logger.debug("Complete suit ignored, nothing to remove in {}", action.column_id)
        return state

    new_game = remove_completed_suit(state.game, action.column_id)
    new_game = flip_top_card(new_game, action.column_id)
    return _advance(state, new_game)


def _clear_completed(game: Game, column_id: str) -> Game:
    column = game.find_column(column_id)
    if column is None or detect_completed_suit(column) is None:
        return game
    game = remove_completed_suit(game, column_id)
    return flip_top_card(game, column_id)


def _advance(state: GameState, new_game: Game) -> GameState:
    """Record the current game for undo and move on to ``new_game``."""
    is_won = is_win_condition(new_game)
    if is_won:
        logger.debug("Game won after {} moves", new_game.moves)
    return replace(
        state,
        game=new_game,
        history=state.history + (state.game,),
        is_won=is_won,
    )
