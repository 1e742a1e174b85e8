# src/deck/main.py
import sys
from typing import Iterable, Optional, TextIO

from src.common.logging_utils import setup_logging, get_logger
from src.common.constants import CARD_SEPARATOR, DECK_SIZE, EXIT_OK, EXIT_INVALID_CARD
from src.common.cards import Card, CardError, build_deck


log = get_logger("deck.main")


def print_deck(deck: Iterable[Card], out: Optional[TextIO] = None) -> None:
    """Write every card's ASCII art, in order, each followed by a blank line."""
    if out is None:
        out = sys.stdout
    for card in deck:
        card.print_card(out)
        out.write(CARD_SEPARATOR)


def main() -> int:
    setup_logging()

    try:
        deck = build_deck()
    except CardError as e:
        print(f"ERROR : {e}")
        log.error(f"Deck generation failed: {e}")
        return EXIT_INVALID_CARD

    log.info(f"Built deck of {len(deck)}/{DECK_SIZE} cards")
    print_deck(deck)
    sys.stdout.flush()
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
