# src/common/cards.py

import sys
from dataclasses import dataclass
from typing import Any, List, Optional, TextIO

from .constants import (
    MIN_RANK, MAX_RANK, RANKS,
    SUITS, VALID_SUITS,
    DEFAULT_RANK, DEFAULT_SUIT,
    FACE_NAMES, CARD_BORDER,
)
from .logging_utils import get_logger, log_card_event

_log = get_logger("cards")


# -------------------------
# Errors
# -------------------------
class CardError(ValueError):
    """Raised when a card is built from invalid data."""
    pass


def _require(condition: bool, msg: str) -> None:
    if not condition:
        _log.warning(f"CardError: {msg}")
        raise CardError(msg)


def is_valid_rank(rank: Any) -> bool:
    # bool is an int subclass, but True is not the Ace
    if isinstance(rank, bool) or not isinstance(rank, int):
        return False
    return MIN_RANK <= rank <= MAX_RANK


def is_valid_suit(suit: Any) -> bool:
    return isinstance(suit, str) and suit in VALID_SUITS


# -------------------------
# Card
# -------------------------
@dataclass
class Card:
    """
    One playing card from a standard 52-card deck.

    rank is the numeric value 1..13 (1 = Ace, 11/12/13 = J/Q/K), not the
    text printed on the card; see get_print_rank(). suit is one of the four
    suit symbols in constants.SUITS.

    Construction with bad data, or assigning a bad rank/suit attribute,
    raises CardError. The setters never raise: they return False and leave
    the card as it was.
    """
    rank: int = DEFAULT_RANK
    suit: str = DEFAULT_SUIT

    def __setattr__(self, name: str, value: Any) -> None:
        # covers __init__ as well as plain attribute assignment
        if name == "rank":
            _require(is_valid_rank(value), f"Invalid rank: {value!r} (must be {MIN_RANK}..{MAX_RANK})")
        elif name == "suit":
            _require(is_valid_suit(value), f"Invalid suit: {value!r} (must be one of {''.join(SUITS)})")
        super().__setattr__(name, value)

    @classmethod
    def copy_of(cls, other: Optional["Card"]) -> "Card":
        """Independent copy of another card. No shallow sharing."""
        _require(other is not None, "Argument is None")
        _require(isinstance(other, Card), f"Cannot copy {type(other).__name__} as a Card")
        return cls(other.rank, other.suit)

    # --- mutators ---

    def set_rank(self, rank: int) -> bool:
        if not is_valid_rank(rank):
            log_card_event(_log, "set_rank", self, False, attempted=rank)
            return False
        self.rank = rank
        log_card_event(_log, "set_rank", self, True)
        return True

    def set_suit(self, suit: str) -> bool:
        if not is_valid_suit(suit):
            log_card_event(_log, "set_suit", self, False, attempted=suit)
            return False
        self.suit = suit
        log_card_event(_log, "set_suit", self, True)
        return True

    def set_all(self, rank: int, suit: str) -> bool:
        """All-or-nothing: if either part is invalid, nothing changes."""
        if not (is_valid_rank(rank) and is_valid_suit(suit)):
            log_card_event(_log, "set_all", self, False, attempted=(rank, suit))
            return False
        self.rank = rank
        self.suit = suit
        log_card_event(_log, "set_all", self, True)
        return True

    # --- accessors ---

    def get_rank(self) -> int:
        return self.rank

    def get_suit(self) -> str:
        return self.suit

    def get_print_rank(self) -> str:
        """Rank as seen on the card: A, 2..10, J, Q, K."""
        return FACE_NAMES.get(self.rank, str(self.rank))

    def get_print_card(self) -> str:
        """
        5-line ASCII art, lines joined by newlines, no trailing newline.
        One-column ranks get an extra pad so every line is 8 columns wide.
        """
        r = self.get_print_rank()
        pad = " " if len(r) == 1 else ""
        suit_line = f"| {self.suit}  {self.suit} |"
        return "\n".join([
            CARD_BORDER,
            suit_line,
            f"|  {r} {pad} |",
            suit_line,
            CARD_BORDER,
        ])

    def to_string(self) -> str:
        return f"{self.get_print_rank()}{self.suit}"

    def __str__(self) -> str:
        return self.to_string()

    def equals(self, other: Any) -> bool:
        """Exact rank and suit match. Anything that isn't a Card (None included) is unequal."""
        return isinstance(other, Card) and self == other

    def print_card(self, out: Optional[TextIO] = None) -> None:
        if out is None:
            out = sys.stdout
        out.write(self.get_print_card())


def build_deck() -> List[Card]:
    """Ordered 52-card deck: suit-major (H, D, C, S), rank-minor (A..K). No shuffle."""
    return [Card(r, s) for s in SUITS for r in RANKS]
