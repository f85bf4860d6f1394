# state.py - the full Klondike table: stock, waste, foundations, tableau, score
from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import List, Optional

from klondike.common import DECK_SIZE, Card, Pile, PileKind, RANKS, Suit, make_deck

FOUNDATION_COUNT = 4
TABLEAU_COUNT = 7


def _piles(kind: PileKind, count: int) -> List[Pile]:
    return [Pile(kind) for _ in range(count)]


@dataclass
class GameState:
    """One complete snapshot of a deal.

    Every card of the deck lives in exactly one pile. A copy shares no pile
    or card objects with its source, so snapshots can be restored as-is.
    """

    stock: Pile = field(default_factory=lambda: Pile(PileKind.STOCK))
    waste: Pile = field(default_factory=lambda: Pile(PileKind.WASTE))
    foundations: List[Pile] = field(default_factory=lambda: _piles(PileKind.FOUNDATION, FOUNDATION_COUNT))
    tableau: List[Pile] = field(default_factory=lambda: _piles(PileKind.TABLEAU, TABLEAU_COUNT))
    score: int = 0
    win_state: bool = False

    @classmethod
    def deal(cls, rng: Optional[random.Random] = None) -> "GameState":
        state = cls()
        deck = make_deck(rng=rng, shuffle=True)

        for col, pile in enumerate(state.tableau):
            for r in range(col + 1):
                c = deck.pop()
                c.face_up = (r == col)
                pile.cards.append(c)

        # Remaining cards go to stock, face down
        while deck:
            c = deck.pop()
            c.face_up = False
            state.stock.cards.append(c)
        return state

    def copy(self) -> "GameState":
        return GameState(
            stock=self.stock.copy(),
            waste=self.waste.copy(),
            foundations=[f.copy() for f in self.foundations],
            tableau=[t.copy() for t in self.tableau],
            score=self.score,
            win_state=self.win_state,
        )

    def all_piles(self) -> List[Pile]:
        return [self.stock, self.waste, *self.foundations, *self.tableau]

    def all_cards(self) -> List[Card]:
        return [c for p in self.all_piles() for c in p.cards]

    def foundation_count(self) -> int:
        return sum(len(f) for f in self.foundations)

    def has_full_deck(self) -> bool:
        ids = [(c.suit, c.rank) for c in self.all_cards()]
        return len(ids) == DECK_SIZE and set(ids) == {(s, r) for s in Suit for r in RANKS}

    def owns(self, pile: Pile) -> bool:
        return any(p is pile for p in self.all_piles())
