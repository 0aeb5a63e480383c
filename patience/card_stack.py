"""Piles of cards that share a base position and move together."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import Callable, Optional

from patience.animation import Animation
from patience.cards import CARD_HEIGHT, CARD_WIDTH, Card
from patience.geom import Pos

CARD_INTERPILE_SPACING = 20

_log = logging.getLogger(__name__)


@dataclass(eq=False)
class CardStack:
    """An ordered pile of cards, bottom first.

    A spread stack fans its cards downward by ``CARD_INTERPILE_SPACING``;
    a closed stack keeps every card on its base position.
    """

    cards: list[Card] = field(default_factory=list)
    base_pos: Pos = Pos(0.0, 0.0)
    is_spread: bool = False

    def __post_init__(self) -> None:
        self._reposition()

    def __len__(self) -> int:
        return len(self.cards)

    def top_card(self) -> Optional[Card]:
        """Return the last card of the stack, or None when it is empty."""
        return self.cards[-1] if self.cards else None

    def translate_to(self, pos: Pos) -> None:
        """Move the stack so its base sits at ``pos``."""
        self.base_pos = pos
        self._reposition()

    def translate_by(self, delta: Pos) -> None:
        """Move the stack by ``delta``."""
        self.base_pos = self.base_pos + delta
        self._reposition()

    def set_spread(self, spread: bool) -> None:
        self.is_spread = spread
        self._reposition()

    def set_all_shown(self, shown: bool) -> None:
        for card in self.cards:
            card.is_shown = shown

    def append_stack(self, other: Optional[CardStack]) -> None:
        """Put all cards of ``other`` on top of this stack."""
        if other is None or not other.cards:
            return
        self.cards.extend(other.cards)
        self._reposition()

    def append_card(self, card: Optional[Card]) -> None:
        if card is None:
            return
        self.cards.append(card)
        self._reposition()

    def reverse(self) -> None:
        self.cards.reverse()
        self._reposition()

    def shuffle(self, rng: Optional[random.Random] = None) -> None:
        """Shuffle the cards in place using ``rng`` (the global generator by default)."""
        (rng or random).shuffle(self.cards)
        self._reposition()

    def next_card_pos(self) -> Pos:
        """Return where a card placed on top of this stack would go."""
        top = self.top_card()
        if top is None or not self.is_spread:
            return self.base_pos
        return top.pos.translate(0, CARD_INTERPILE_SPACING)

    def create_animation_to(self, target: Pos, on_finish: Callable[[], None]) -> Animation:
        """Return an animation that glides this stack to ``target``."""
        _log.info("Creating animation from %s to %s", self.base_pos, target)
        return Animation(
            starting_pos=self.base_pos,
            target_pos=target,
            current_pos=lambda: self.base_pos,
            move_by=self.translate_by,
            on_finish=on_finish,
        )

    def split_at_index(self, index: int) -> CardStack:
        """Remove the cards from ``index`` upward and return them as a new stack.

        Raises IndexError when ``index`` does not name a card.
        """
        if not 0 <= index < len(self.cards):
            raise IndexError(f"invalid index for splitting stack: {index}")
        tail = self.cards[index:]
        base = tail[0].pos
        del self.cards[index:]
        return CardStack(cards=tail, base_pos=base, is_spread=self.is_spread)

    def split_at_pos(self, pos: Pos) -> Optional[CardStack]:
        """Split off the uppermost card under ``pos`` and everything above it.

        Returns None when no card lies under ``pos``.
        """
        for i, card in enumerate(self.cards):
            if not card.contains(pos):
                continue
            following = self.cards[i + 1] if i + 1 < len(self.cards) else None
            if following is None or not following.contains(pos):
                return self.split_at_index(i)
        return None

    def base_contains(self, pos: Pos) -> bool:
        """True when ``pos`` lies on the card-sized area at the stack's base."""
        return (
            self.base_pos.x <= pos.x <= self.base_pos.x + CARD_WIDTH
            and self.base_pos.y <= pos.y <= self.base_pos.y + CARD_HEIGHT
        )

    def _reposition(self) -> None:
        for i, card in enumerate(self.cards):
            if self.is_spread:
                card.pos = self.base_pos.translate(0, i * CARD_INTERPILE_SPACING)
            else:
                card.pos = self.base_pos