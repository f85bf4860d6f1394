# engine.py - Klondike game engine: draw/recycle, moves, scoring, undo and auto-finish
from __future__ import annotations

import logging
import random
from enum import IntEnum
from typing import List, Optional, Union

from klondike import rules
from klondike.common import DECK_SIZE, Pile, PileKind
from klondike.state import GameState

logger = logging.getLogger(__name__)

# Scoring (standard Klondike)
SCORE_TO_FOUNDATION = 10
SCORE_WASTE_TO_TABLEAU = 5
SCORE_FOUNDATION_TO_TABLEAU = -15
SCORE_FLIP = 5
SCORE_RECYCLE = -100


class DrawCount(IntEnum):
    ONE = 1
    THREE = 3


class GameEngine:
    """Owns the live :class:`GameState` and every rule that mutates it.

    Commands return ``False`` (or do nothing) for illegal requests instead of
    raising. Each successful mutating command pushes a deep copy of the prior
    state onto the undo stack first, so ``undo_last`` restores it exactly.

    ``undo_last``, ``restart`` and ``new_game`` swap in a new state object;
    callers must re-read piles from :attr:`state` afterwards. Piles from an
    older state are rejected.
    """

    def __init__(self, draw_count: Union[DrawCount, int] = DrawCount.THREE, seed: Optional[int] = None):
        self._draw_count = DrawCount(draw_count)
        self._state: GameState = GameState()
        self._opening: GameState = GameState()
        self._undo_stack: List[GameState] = []
        self.new_game(seed=seed)

    @classmethod
    def from_settings(cls, seed: Optional[int] = None) -> "GameEngine":
        from klondike.settings import load_settings

        return cls(draw_count=load_settings()["draw_count"], seed=seed)

    # ---------- Queries ----------
    @property
    def state(self) -> GameState:
        return self._state

    @property
    def score(self) -> int:
        return self._state.score

    @property
    def draw_count(self) -> DrawCount:
        return self._draw_count

    @property
    def undo_depth(self) -> int:
        return len(self._undo_stack)

    def is_win(self) -> bool:
        return self._state.win_state

    # ---------- Game lifecycle ----------
    def new_game(self, seed: Optional[int] = None):
        rng = random.Random(seed) if seed is not None else None
        self._state = GameState.deal(rng)
        self._opening = self._state.copy()
        self._undo_stack.clear()
        logger.debug("Dealt new game (seed=%s, draw_count=%d)", seed, self._draw_count)

    def restart(self):
        """Return to the opening layout of the current deal."""
        self._state = self._opening.copy()
        self._undo_stack.clear()
        logger.debug("Restarted current deal")

    def set_draw_count(self, draw_count: Union[DrawCount, int]):
        # Raises ValueError for anything other than 1 or 3
        self._draw_count = DrawCount(draw_count)

    # ---------- Stock ----------
    def draw_from_stock(self) -> bool:
        if self.is_win():
            return False
        stock = self._state.stock
        waste = self._state.waste
        if stock.cards:
            self._push_undo()
            n = min(self._draw_count, len(stock.cards))
            for _ in range(n):
                c = stock.cards.pop()
                c.face_up = True
                waste.cards.append(c)
            logger.debug("Drew %d card(s) from stock, %d left", n, len(stock.cards))
            return True
        if waste.cards:
            self._push_undo()
            while waste.cards:
                c = waste.cards.pop()
                c.face_up = False
                stock.cards.append(c)
            self._add_score(SCORE_RECYCLE)
            logger.debug("Recycled waste into stock (%d cards)", len(stock.cards))
            return True
        return False

    # ---------- Tableau flips ----------
    def flip_top_if_needed(self, pile: Pile, index: int) -> bool:
        if self.is_win() or not self._owns(pile):
            return False
        if pile.kind != PileKind.TABLEAU:
            return False
        if not pile.cards or index != len(pile.cards) - 1:
            return False
        card = pile.cards[index]
        if card.face_up:
            return False
        self._push_undo()
        card.face_up = True
        self._add_score(SCORE_FLIP)
        logger.debug("Flipped %r", card)
        return True

    def reveal_top_after_move(self, pile: Pile) -> bool:
        """Turn up a tableau top exposed by a move; rides on that move's snapshot."""
        if self.is_win() or not self._owns(pile):
            return False
        if pile.kind != PileKind.TABLEAU:
            return False
        top = pile.top()
        if top is None or top.face_up:
            return False
        top.face_up = True
        self._add_score(SCORE_FLIP)
        logger.debug("Revealed %r", top)
        return True

    # ---------- Moves ----------
    def try_move(self, src: Pile, start_index: int, dest: Pile) -> bool:
        if self.is_win() or not self._owns(src) or not self._owns(dest) or src is dest:
            return False
        if start_index < 0 or start_index >= len(src.cards):
            return False
        moving = src.cards[start_index:]

        if dest.kind == PileKind.FOUNDATION:
            ok = len(moving) == 1 and rules.can_place_on_foundation(dest, moving[0])
        elif dest.kind == PileKind.TABLEAU:
            ok = rules.can_place_on_tableau(dest, moving[0])
        else:
            ok = False
        if not ok:
            logger.debug("Rejected move of %r from %s to %s", moving, src.kind.value, dest.kind.value)
            return False

        self._push_undo()
        del src.cards[start_index:]
        dest.cards.extend(moving)
        self._apply_move_score(src.kind, dest.kind)
        self._check_win()
        logger.debug("Moved %r from %s to %s", moving, src.kind.value, dest.kind.value)
        return True

    def move_and_reveal(self, src: Pile, start_index: int, dest: Pile) -> bool:
        """Move a run and turn up whatever tableau card it leaves exposed."""
        if not self.try_move(src, start_index, dest):
            return False
        if src.kind == PileKind.TABLEAU:
            self.reveal_top_after_move(src)
        return True

    # ---------- Undo ----------
    def undo_last(self) -> bool:
        if not self._undo_stack:
            return False
        self._state = self._undo_stack.pop()
        logger.debug("Undo, %d snapshot(s) left", len(self._undo_stack))
        return True

    # ---------- Auto finish helpers ----------
    def can_auto_finish(self) -> bool:
        """Eligible when stock and waste are empty and all tableau cards are face-up."""
        s = self._state
        if s.stock.cards or s.waste.cards:
            return False
        return all(c.face_up for p in s.tableau for c in p.cards)

    def auto_finish_step(self) -> bool:
        """Move one tableau top onto a foundation if any fits."""
        if not self.can_auto_finish():
            return False
        s = self._state
        for t in s.tableau:
            c = t.top()
            if c is None:
                continue
            for f in s.foundations:
                if rules.can_place_on_foundation(f, c):
                    return self.try_move(t, len(t.cards) - 1, f)
        return False

    def auto_finish(self) -> int:
        moves = 0
        while self.auto_finish_step():
            moves += 1
        return moves

    # ---------- Internals ----------
    def _owns(self, pile: Optional[Pile]) -> bool:
        return pile is not None and self._state.owns(pile)

    def _push_undo(self):
        self._undo_stack.append(self._state.copy())

    def _add_score(self, delta: int):
        self._state.score = max(0, self._state.score + delta)

    def _apply_move_score(self, src: PileKind, dest: PileKind):
        if dest == PileKind.FOUNDATION:
            self._add_score(SCORE_TO_FOUNDATION)
        elif src == PileKind.WASTE and dest == PileKind.TABLEAU:
            self._add_score(SCORE_WASTE_TO_TABLEAU)
        elif src == PileKind.FOUNDATION and dest == PileKind.TABLEAU:
            self._add_score(SCORE_FOUNDATION_TO_TABLEAU)

    def _check_win(self):
        self._state.win_state = self._state.foundation_count() == DECK_SIZE
