
# common.py - cards, piles and deck construction shared by the engine
import random
from enum import Enum, IntEnum
from typing import List, Optional


class Suit(IntEnum):
    CLUBS = 0
    DIAMONDS = 1
    HEARTS = 2
    SPADES = 3


class PileKind(Enum):
    STOCK = "stock"
    WASTE = "waste"
    FOUNDATION = "foundation"
    TABLEAU = "tableau"


ACE = 1
KING = 13
RANKS = range(ACE, KING + 1)
DECK_SIZE = len(Suit) * len(RANKS)

SUIT_GLYPHS = {Suit.CLUBS: "♣", Suit.DIAMONDS: "♦", Suit.HEARTS: "♥", Suit.SPADES: "♠"}
RANK_TO_TEXT = {1: "A", 11: "J", 12: "Q", 13: "K"}
for _r in range(2, 11):
    RANK_TO_TEXT[_r] = str(_r)


def is_red(suit):
    return suit in (Suit.HEARTS, Suit.DIAMONDS)


# ---------- Cards & Piles ----------
class Card:
    __slots__ = ("_suit", "_rank", "face_up")

    def __init__(self, suit, rank, face_up=False):
        if rank not in RANKS:
            raise ValueError(f"Card rank must be between {ACE} and {KING}, got {rank!r}")
        self._suit = Suit(suit)
        self._rank = rank
        self.face_up = face_up

    @property
    def suit(self) -> Suit:
        return self._suit

    @property
    def rank(self) -> int:
        return self._rank

    def is_red(self) -> bool:
        return is_red(self._suit)

    def copy(self) -> "Card":
        return Card(self._suit, self._rank, self.face_up)

    def __eq__(self, other):
        if not isinstance(other, Card):
            return NotImplemented
        return (self._suit, self._rank, self.face_up) == (other._suit, other._rank, other.face_up)

    def __hash__(self):
        return hash((self._suit, self._rank))

    def __repr__(self):
        return f"{RANK_TO_TEXT[self._rank]}{SUIT_GLYPHS[self._suit]}{'↑' if self.face_up else '↓'}"


class Pile:
    """Ordered cards, bottom first; ``cards[-1]`` is the playable top."""

    __slots__ = ("_kind", "cards")

    def __init__(self, kind: PileKind, cards: Optional[List[Card]] = None):
        self._kind = PileKind(kind)
        self.cards = list(cards) if cards else []

    @property
    def kind(self) -> PileKind:
        return self._kind

    def top(self) -> Optional[Card]:
        return self.cards[-1] if self.cards else None

    def is_empty(self) -> bool:
        return not self.cards

    def copy(self) -> "Pile":
        return Pile(self._kind, [c.copy() for c in self.cards])

    def __len__(self):
        return len(self.cards)

    def __eq__(self, other):
        if not isinstance(other, Pile):
            return NotImplemented
        return self._kind == other._kind and self.cards == other.cards

    __hash__ = None

    def __repr__(self):
        return f"Pile({self._kind.value}, {self.cards!r})"


def make_deck(rng: Optional[random.Random] = None, shuffle=True) -> List[Card]:
    d = [Card(suit, rank, False) for suit in Suit for rank in RANKS]
    if shuffle:
        (rng or random).shuffle(d)
    return d
