"""The solitaire table: piles, dealing, and drag-and-drop rules."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import Optional

from patience.animation import Animation
from patience.card_stack import CardStack
from patience.cards import CARD_HEIGHT, CARD_WIDTH, Rank, full_deck
from patience.geom import Pos

CARD_SPACING = 10
WORKING_STACK_COUNT = 7
SUIT_PILE_COUNT = 4

POS_DRAW_PILE = Pos(float(CARD_SPACING), float(CARD_SPACING))
POS_OVERTURNED_PILE = POS_DRAW_PILE.translate(CARD_WIDTH + CARD_SPACING, 0)

_log = logging.getLogger(__name__)


@dataclass(eq=False)
class Board:
    """All piles on the table plus the stack currently being dragged."""

    suit_piles: list[CardStack]
    working_stacks: list[CardStack]
    draw_pile: CardStack
    overturned_pile: CardStack
    held_stack: Optional[CardStack] = None
    held_reset_stack: Optional[CardStack] = None
    held_offset: Pos = Pos(0, 0)
    cursor_pos: Pos = Pos(0, 0)
    running_animation: Optional[Animation] = field(default=None, repr=False)

    def update(self) -> None:
        """Advance the running animation, or make the held stack follow the cursor."""
        if self.running_animation is not None:
            animation = self.running_animation
            animation.update()
            if animation.is_finished():
                animation.finish()
                self.running_animation = None
        elif self.held_stack is not None:
            self.held_stack.translate_to((self.cursor_pos + self.held_offset).to_float())

    def set_cursor_pos(self, pos: Pos) -> None:
        self.cursor_pos = pos

    def mouse_down(self) -> None:
        """Try to pick up cards under the cursor."""
        if self.running_animation is not None:
            _log.info("Ignoring mouse down event, animation is running.")
            return

        cursor = self.cursor_pos.to_float()

        for stack in self.working_stacks:
            picked = stack.split_at_pos(cursor)
            if picked is None:
                continue
            if not picked.cards[0].is_shown:
                _log.info("Cannot pick up a stack whose bottom card is not shown.")
                stack.append_stack(picked)
            else:
                _log.info("Sub-stack picked up")
                self._hold(picked, stack)
            return

        for stack in self.suit_piles:
            picked = stack.split_at_pos(cursor)
            if picked is not None:
                _log.info("Card grabbed from suit pile: %s", picked.cards[0])
                self._hold(picked, stack)
                return

        if self.draw_pile.base_contains(cursor):
            if self.draw_pile.top_card() is not None:
                picked = self.draw_pile.split_at_pos(cursor)
                if picked is not None:
                    _log.info("Card grabbed from draw pile")
                    picked.cards[0].is_shown = True
                    self._hold(picked, self.overturned_pile)
                    return
            elif self.overturned_pile.cards:
                self.overturned_pile.reverse()
                replenish = self.overturned_pile.split_at_index(0)
                self.draw_pile.append_stack(replenish)
                self.draw_pile.set_all_shown(False)

        top = self.overturned_pile.top_card()
        if top is not None and top.contains(cursor):
            picked = self.overturned_pile.split_at_pos(cursor)
            if picked is not None:
                _log.info("Card grabbed from overturned pile")
                self._hold(picked, self.overturned_pile)
                return

        _log.info("No card grabbed.")

    def mouse_up(self) -> None:
        """Drop the held stack on a legal pile under the cursor, or send it back."""
        if self.running_animation is not None:
            _log.info("Ignoring mouse up event, animation is running.")
            return
        held = self.held_stack
        if held is None:
            _log.info("No card held, ignoring mouse up event.")
            return

        cursor = self.cursor_pos.to_float()
        bottom = held.cards[0]

        for stack in self.working_stacks:
            top = stack.top_card()
            if top is None:
                fits = bottom.rank is Rank.KING and stack.base_contains(cursor)
            else:
                fits = (
                    top.suit.is_opposite_color(bottom.suit)
                    and bottom.rank.is_one_less_than(top.rank)
                    and top.contains(cursor)
                )
            if fits:
                _log.info("Card dropped onto working stack")
                self._drop_onto(stack)
                return

        if len(held.cards) == 1:
            for stack in self.suit_piles:
                top = stack.top_card()
                if top is None:
                    fits = bottom.rank is Rank.ACE and stack.base_contains(cursor)
                else:
                    fits = (
                        bottom.suit is top.suit
                        and bottom.rank.is_one_more_than(top.rank)
                        and top.contains(cursor)
                    )
                if fits:
                    _log.info("Card dropped onto suit pile")
                    self._drop_onto(stack)
                    return
        else:
            _log.info("Held stack has more than one card, cannot go onto a suit pile")

        _log.info("No stack found to drop onto, returning held stack.")
        assert self.held_reset_stack is not None
        self._animate_held_to(self.held_reset_stack)

    def stacks_in_draw_order(self) -> list[CardStack]:
        """Return every visible stack, back to front, the held stack last."""
        stacks = [*self.working_stacks, self.draw_pile, self.overturned_pile, *self.suit_piles]
        if self.held_stack is not None:
            stacks.append(self.held_stack)
        return stacks

    def _hold(self, stack: CardStack, origin: CardStack) -> None:
        self.held_stack = stack
        self.held_reset_stack = origin
        self.held_offset = stack.base_pos.to_int() - self.cursor_pos

    def _drop_onto(self, target: CardStack) -> None:
        if self.held_reset_stack is not None:
            revealed = self.held_reset_stack.top_card()
            if revealed is not None:
                revealed.is_shown = True
        self._animate_held_to(target)

    def _animate_held_to(self, target: CardStack) -> None:
        assert self.held_stack is not None

        def land() -> None:
            target.append_stack(self.held_stack)
            self.held_stack = None
            self.held_reset_stack = None

        self.running_animation = self.held_stack.create_animation_to(target.next_card_pos(), land)


def new_board(rng: Optional[random.Random] = None) -> Board:
    """Shuffle a fresh deck and deal a new game."""
    deck = CardStack(cards=full_deck(), base_pos=POS_DRAW_PILE, is_spread=False)
    deck.shuffle(rng)

    working_stacks = []
    for i in range(WORKING_STACK_COUNT):
        base = POS_DRAW_PILE.translate(
            float(i * (CARD_SPACING + CARD_WIDTH)), float(CARD_HEIGHT + CARD_SPACING)
        )
        stack = CardStack(is_spread=True, base_pos=base)
        for _ in range(i + 1):
            card = deck.split_at_index(len(deck.cards) - 1).cards[0]
            card.is_shown = False
            stack.append_card(card)
        stack.cards[-1].is_shown = True
        stack.translate_to(base)
        working_stacks.append(stack)

    draw_pile = deck
    draw_pile.translate_to(POS_DRAW_PILE)
    draw_pile.set_spread(False)
    draw_pile.set_all_shown(False)

    suit_piles = [
        CardStack(
            is_spread=False,
            base_pos=POS_OVERTURNED_PILE.translate(
                float((2 + i) * (CARD_WIDTH + CARD_SPACING)), 0
            ),
        )
        for i in range(SUIT_PILE_COUNT)
    ]

    return Board(
        suit_piles=suit_piles,
        working_stacks=working_stacks,
        draw_pile=draw_pile,
        overturned_pile=CardStack(is_spread=False, base_pos=POS_OVERTURNED_PILE),
    )