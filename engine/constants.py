from typing import Literal

Suit = Literal["spades", "hearts", "diamonds", "clubs"]
Rank = Literal["A", "2", "3", "4", "5", "6", "7", "8", "9", "10", "J", "Q", "K"]
Difficulty = Literal[1, 2, 4]

SUITS: tuple[Suit, ...] = ("spades", "hearts", "diamonds", "clubs")
RANKS: tuple[Rank, ...] = ("A", "2", "3", "4", "5", "6", "7", "8", "9", "10", "J", "Q", "K")
RANK_ORDER: dict[Rank, int] = {rank: i + 1 for i, rank in enumerate(RANKS)}
SUIT_SYMBOLS: dict[Suit, str] = {"spades": "♠", "hearts": "♥", "diamonds": "♦", "clubs": "♣"}

DIFFICULTY_TO_SUITS: dict[int, tuple[Suit, ...]] = {
    1: ("spades",),
    2: ("spades", "hearts"),
    4: SUITS,
}
DIFFICULTY_ORDER = (1, 2, 4)

NUM_COLUMNS = 10
CARDS_IN_DECK = 104  # 2 decks
COMPLETE_SUIT_LENGTH = 13
INITIAL_DEALS = 5
CARDS_PER_DEAL = 10
FOUNDATIONS_TO_WIN = CARDS_IN_DECK // COMPLETE_SUIT_LENGTH
SHUFFLE_PASSES = 3

# Columns 0-3 get one extra card in the opening deal.
INITIAL_COLUMN_SIZES = (6, 6, 6, 6, 5, 5, 5, 5, 5, 5)
INITIAL_DEALT = sum(INITIAL_COLUMN_SIZES)

# Bottom to top.
COMPLETE_SUIT_RANKS: tuple[Rank, ...] = tuple(reversed(RANKS))
