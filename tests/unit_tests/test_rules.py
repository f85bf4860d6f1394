import pytest

from klondike.common import Card, Pile, PileKind, Suit
from klondike.rules import can_place_on_foundation, can_place_on_tableau


def _pile(kind, *cards):
    return Pile(kind, list(cards))


def test_foundation_accepts_only_ace_when_empty() -> None:
    foundation = _pile(PileKind.FOUNDATION)
    assert can_place_on_foundation(foundation, Card(Suit.SPADES, 1))
    assert not can_place_on_foundation(foundation, Card(Suit.SPADES, 2))


@pytest.mark.parametrize(
    "card, expected",
    [
        (Card(Suit.HEARTS, 6), True),
        (Card(Suit.HEARTS, 7), False),
        (Card(Suit.HEARTS, 5), False),
        (Card(Suit.SPADES, 6), False),
        (Card(Suit.DIAMONDS, 6), False),
    ],
)
def test_foundation_builds_up_in_suit(card: Card, expected: bool) -> None:
    foundation = _pile(PileKind.FOUNDATION, Card(Suit.HEARTS, 5, True))
    assert can_place_on_foundation(foundation, card) is expected


def test_empty_tableau_accepts_only_king() -> None:
    tableau = _pile(PileKind.TABLEAU)
    assert can_place_on_tableau(tableau, Card(Suit.CLUBS, 13))
    assert not can_place_on_tableau(tableau, Card(Suit.CLUBS, 12))


@pytest.mark.parametrize(
    "card, expected",
    [
        (Card(Suit.SPADES, 8), True),
        (Card(Suit.CLUBS, 8), True),
        (Card(Suit.DIAMONDS, 8), False),
        (Card(Suit.HEARTS, 8), False),
        (Card(Suit.SPADES, 7), False),
        (Card(Suit.SPADES, 10), False),
    ],
)
def test_tableau_builds_down_alternating_colors(card: Card, expected: bool) -> None:
    tableau = _pile(PileKind.TABLEAU, Card(Suit.HEARTS, 9, True))
    assert can_place_on_tableau(tableau, card) is expected


def test_tableau_rejects_face_down_top() -> None:
    tableau = _pile(PileKind.TABLEAU, Card(Suit.HEARTS, 9, False))
    assert not can_place_on_tableau(tableau, Card(Suit.SPADES, 8))
