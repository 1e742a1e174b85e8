import io

import src.deck.main as deck_main
from src.common.cards import Card, CardError, build_deck
from src.common.constants import *
from src.deck.main import main, print_deck


def test_deck_has_52_unique_cards():
    deck = build_deck()
    assert len(deck) == DECK_SIZE == 52
    assert len({(c.rank, c.suit) for c in deck}) == 52


def test_deck_order_is_suit_major_rank_minor():
    deck = build_deck()
    expected = [(r, s) for s in (HEART, DIAMOND, CLUB, SPADE) for r in range(1, 14)]
    assert [(c.get_rank(), c.get_suit()) for c in deck] == expected
    assert str(deck[0]) == "A♥"
    assert str(deck[12]) == "K♥"
    assert str(deck[13]) == "A♦"
    assert str(deck[-1]) == "K♠"


def test_deck_cards_are_independent():
    deck = build_deck()
    deck[0].set_rank(5)
    assert deck[13].get_rank() == 1
    assert build_deck()[0].get_rank() == 1


def test_print_deck_separates_cards_with_blank_line():
    cards = [Card(1, HEART), Card(10, SPADE)]
    out = io.StringIO()
    print_deck(cards, out)
    assert out.getvalue() == (
        cards[0].get_print_card() + "\n\n" + cards[1].get_print_card() + "\n\n"
    )


def test_main_prints_whole_deck(capsys):
    assert main() == EXIT_OK
    out = capsys.readouterr().out
    blocks = out.split("\n\n")
    assert blocks[-1] == ""
    assert len(blocks) - 1 == 52
    assert blocks[0] == Card(1, HEART).get_print_card()
    assert blocks[51] == Card(13, SPADE).get_print_card()


def test_main_reports_invalid_card_and_exits_nonzero(monkeypatch, capsys):
    def broken_deck():
        return [Card(0, HEART)]

    monkeypatch.setattr(deck_main, "build_deck", broken_deck)
    assert main() == EXIT_INVALID_CARD
    out = capsys.readouterr().out
    assert out.startswith("ERROR : Invalid rank")
