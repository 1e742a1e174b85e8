# src/common/constants.py

# Suit symbols
HEART = "♥"
DIAMOND = "♦"
CLUB = "♣"
SPADE = "♠"

# Deck enumeration order
SUITS = [HEART, DIAMOND, CLUB, SPADE]
VALID_SUITS = set(SUITS)

# Ranks: 1 = Ace, 11..13 = Jack/Queen/King
MIN_RANK = 1
MAX_RANK = 13
RANKS = list(range(MIN_RANK, MAX_RANK + 1))

RANK_ACE = 1
FACE_NAMES = {RANK_ACE: "A", 11: "J", 12: "Q", 13: "K"}

# Default card: A♥
DEFAULT_RANK = RANK_ACE
DEFAULT_SUIT = HEART

DECK_SIZE = len(SUITS) * len(RANKS)  # 52

# ASCII art
CARD_BORDER = "-" * 8
CARD_SEPARATOR = "\n\n"

# Driver exit codes
EXIT_OK = 0
EXIT_INVALID_CARD = 1
