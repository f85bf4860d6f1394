# rules.py - placement predicates for foundations and tableau columns
from klondike.common import ACE, KING, Card, Pile


def can_place_on_foundation(foundation: Pile, card: Card) -> bool:
    top = foundation.top()
    if top is None:
        return card.rank == ACE
    return (card.suit == top.suit) and (card.rank == top.rank + 1)


def can_place_on_tableau(pile: Pile, card: Card) -> bool:
    top = pile.top()
    if top is None:
        return card.rank == KING
    if not top.face_up:
        return False
    return (top.is_red() != card.is_red()) and (card.rank == top.rank - 1)
