from typing import Optional

from engine.cards import Card, Game, GameState
from presentation.view_model import BoardViewModel, CardView, ColumnView, GameStats, HintView
from solver.hints import get_hint


def can_deal(game: Game) -> bool:
    return game.deals_remaining > 0 and not game.has_empty_column()


def can_undo(state: GameState) -> bool:
    return len(state.history) > 0


class GameStateAdapter:
    """Bridges engine state to a renderer-friendly model."""

    @staticmethod
    def card_view(card: Card) -> CardView:
        return CardView(suit=card.suit, rank=card.rank, face_up=card.face_up, label=str(card))

    @staticmethod
    def snapshot(state: GameState, with_hint: bool = False) -> BoardViewModel:
        game = state.game
        columns = tuple(
            ColumnView(id=column.id, cards=tuple(GameStateAdapter.card_view(c) for c in column.cards))
            for column in game.columns
        )
        return BoardViewModel(
            difficulty=game.difficulty,
            stats=GameStats(moves=game.moves, suits_completed=game.foundations_completed),
            stock_count=len(game.stock),
            deals_remaining=game.deals_remaining,
            can_deal=can_deal(game),
            can_undo=can_undo(state),
            is_won=state.is_won,
            game_started=state.game_started,
            columns=columns,
            hint=GameStateAdapter.hint_view(game) if with_hint else None,
        )

    @staticmethod
    def hint_view(game: Game) -> Optional[HintView]:
        hint = get_hint(game)
        if hint is None:
            return None
        return HintView(
            from_column_id=hint.from_column_id,
            card_index=hint.card_index,
            to_column_id=hint.to_column_id,
        )
