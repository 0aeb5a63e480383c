import random

import pytest

from patience.card_stack import CARD_INTERPILE_SPACING, CardStack
from patience.cards import CARD_HEIGHT, CARD_WIDTH, Card, Rank, Suit, full_deck
from patience.geom import Pos


def _cards(*ranks, suit=Suit.CLUB):
    return [Card(rank, suit) for rank in ranks]


def test_top_card_of_empty_stack_is_none():
    assert CardStack().top_card() is None


def test_top_card_is_last_card():
    cards = _cards(Rank.ACE, Rank.TWO)
    assert CardStack(cards=cards).top_card() is cards[1]


def test_spread_stack_fans_cards_downward():
    stack = CardStack(base_pos=Pos(0.0, 0.0), is_spread=True)
    for card in _cards(Rank.ACE, Rank.TWO, Rank.THREE):
        stack.append_card(card)
    assert [c.pos for c in stack.cards] == [
        Pos(0.0, 0.0),
        Pos(0.0, float(CARD_INTERPILE_SPACING)),
        Pos(0.0, float(2 * CARD_INTERPILE_SPACING)),
    ]


def test_closed_stack_keeps_cards_on_base():
    base = Pos(7.0, 9.0)
    stack = CardStack(cards=_cards(Rank.ACE, Rank.TWO), base_pos=base)
    assert all(c.pos == base for c in stack.cards)


def test_set_spread_repositions():
    stack = CardStack(cards=_cards(Rank.ACE, Rank.TWO), base_pos=Pos(0.0, 0.0))
    stack.set_spread(True)
    assert stack.cards[1].pos == Pos(0.0, float(CARD_INTERPILE_SPACING))
    stack.set_spread(False)
    assert stack.cards[1].pos == Pos(0.0, 0.0)


def test_translate_to_and_by_move_cards():
    stack = CardStack(cards=_cards(Rank.ACE), base_pos=Pos(0.0, 0.0))
    stack.translate_to(Pos(5.0, 6.0))
    assert stack.cards[0].pos == Pos(5.0, 6.0)
    stack.translate_by(Pos(1.0, -1.0))
    assert stack.base_pos == Pos(6.0, 5.0)
    assert stack.cards[0].pos == Pos(6.0, 5.0)


def test_set_all_shown():
    stack = CardStack(cards=_cards(Rank.ACE, Rank.TWO))
    stack.set_all_shown(False)
    assert not any(c.is_shown for c in stack.cards)
    stack.set_all_shown(True)
    assert all(c.is_shown for c in stack.cards)


def test_append_stack_adds_on_top_and_ignores_empty():
    a = _cards(Rank.ACE)
    b = _cards(Rank.TWO, Rank.THREE)
    stack = CardStack(cards=list(a), base_pos=Pos(1.0, 1.0))
    stack.append_stack(None)
    stack.append_stack(CardStack())
    assert stack.cards == a
    stack.append_stack(CardStack(cards=list(b), base_pos=Pos(99.0, 99.0)))
    assert stack.cards == a + b
    assert all(c.pos == Pos(1.0, 1.0) for c in stack.cards)


def test_append_card_none_is_ignored():
    stack = CardStack()
    stack.append_card(None)
    assert stack.cards == []


def test_reverse():
    cards = _cards(Rank.ACE, Rank.TWO, Rank.THREE)
    stack = CardStack(cards=list(cards))
    stack.reverse()
    assert stack.cards == cards[::-1]


def test_shuffle_is_a_permutation_and_seeded():
    first = CardStack(cards=full_deck())
    second = CardStack(cards=full_deck())
    first.shuffle(random.Random(3))
    second.shuffle(random.Random(3))
    assert [str(c) for c in first.cards] == [str(c) for c in second.cards]
    assert sorted(str(c) for c in first.cards) == sorted(str(c) for c in full_deck())


def test_next_card_pos():
    base = Pos(0.0, 0.0)
    assert CardStack(base_pos=base, is_spread=True).next_card_pos() == base
    spread = CardStack(cards=_cards(Rank.ACE, Rank.TWO), base_pos=base, is_spread=True)
    assert spread.next_card_pos() == spread.cards[1].pos.translate(0, CARD_INTERPILE_SPACING)
    closed = CardStack(cards=_cards(Rank.ACE, Rank.TWO), base_pos=base)
    assert closed.next_card_pos() == base


def test_split_at_index_returns_tail():
    cards = _cards(Rank.ACE, Rank.TWO, Rank.THREE)
    stack = CardStack(cards=list(cards), base_pos=Pos(0.0, 0.0), is_spread=True)
    tail = stack.split_at_index(1)
    assert tail.cards == cards[1:]
    assert stack.cards == cards[:1]
    assert tail.base_pos == cards[1].pos
    assert tail.is_spread


@pytest.mark.parametrize("index", [-1, 3])
def test_split_at_invalid_index_raises(index):
    stack = CardStack(cards=_cards(Rank.ACE, Rank.TWO, Rank.THREE))
    with pytest.raises(IndexError):
        stack.split_at_index(index)
    assert len(stack) == 3


def test_split_at_pos_picks_uppermost_card_under_point():
    cards = _cards(Rank.ACE, Rank.TWO, Rank.THREE)
    stack = CardStack(cards=list(cards), base_pos=Pos(0.0, 0.0), is_spread=True)
    # Point on the first card only, above where the second begins.
    tail = stack.split_at_pos(Pos(5.0, 5.0))
    assert tail.cards == cards
    assert stack.cards == []


def test_split_at_pos_takes_top_when_overlapping():
    cards = _cards(Rank.ACE, Rank.TWO, Rank.THREE)
    stack = CardStack(cards=list(cards), base_pos=Pos(0.0, 0.0), is_spread=True)
    tail = stack.split_at_pos(cards[2].pos.translate(5, 5))
    assert tail.cards == cards[2:]
    assert stack.cards == cards[:2]


def test_split_at_pos_outside_returns_none():
    stack = CardStack(cards=_cards(Rank.ACE), base_pos=Pos(0.0, 0.0))
    assert stack.split_at_pos(Pos(-1.0, -1.0)) is None
    assert len(stack) == 1


def test_base_contains_includes_edges():
    stack = CardStack(base_pos=Pos(0.0, 0.0))
    assert stack.base_contains(Pos(0.0, 0.0))
    assert stack.base_contains(Pos(float(CARD_WIDTH), float(CARD_HEIGHT)))
    assert not stack.base_contains(Pos(CARD_WIDTH + 0.5, 0.0))
    assert not stack.base_contains(Pos(0.0, -0.5))


def test_animation_moves_stack_to_target():
    stack = CardStack(cards=_cards(Rank.ACE), base_pos=Pos(0.0, 0.0))
    target = Pos(100.0, 50.0)
    finished = []
    animation = stack.create_animation_to(target, lambda: finished.append(True))
    for _ in range(1000):
        if animation.is_finished():
            break
        animation.update()
    assert stack.base_pos.almost_eq(target, 0.01)
    assert stack.cards[0].pos == stack.base_pos
    animation.finish()
    assert finished == [True]