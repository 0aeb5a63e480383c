"""Loading card artwork and drawing cards, stacks and the board with pygame."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Union

import pygame

from patience.board import Board
from patience.card_stack import CardStack
from patience.cards import CARD_HEIGHT, CARD_WIDTH, NUMBER_SIZE, SUIT_SIZE, Card, Rank, Suit
from patience.geom import Pos

BOARD_COLOR = (0, 75, 0, 255)
PLACEHOLDER_COLOR = (0, 150, 0, 255)
RED = (255, 0, 0)
BLACK = (0, 0, 0)
TEXT_COLOR = (255, 255, 255)

CARD_DIMS = Pos(CARD_WIDTH, CARD_HEIGHT)
TEXT_SCALE = 4.0
SYMBOL_SHRINK = 4

FONT_FILE = "unifont-16.0.04.otf"
CARD_BACK_FILE = "card_back.png"
CARD_BLANK_FILE = "card_blank.png"

SUIT_IMAGE_FILES = {
    Suit.HEART: "suit_heart.png",
    Suit.DIAMOND: "suit_diamond.png",
    Suit.CLUB: "suit_club.png",
    Suit.SPADE: "suit_spade.png",
}

RANK_IMAGE_FILES = {
    Rank.ACE: "num_1-ace.png",
    Rank.TWO: "num_2.png",
    Rank.THREE: "num_3.png",
    Rank.FOUR: "num_4.png",
    Rank.FIVE: "num_5.png",
    Rank.SIX: "num_6.png",
    Rank.SEVEN: "num_7.png",
    Rank.EIGHT: "num_8.png",
    Rank.NINE: "num_9.png",
}

TEXT_RANKS = (Rank.TEN, Rank.JACK, Rank.QUEEN, Rank.KING)

PathLike = Union[str, Path]


def load_image(path: PathLike) -> pygame.Surface:
    """Decode the image file at ``path``; raise FileNotFoundError if it is missing."""
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"image not found: {path}")
    return pygame.image.load(str(path))


def scale_image(image: pygame.Surface, dims: Pos) -> pygame.Surface:
    """Return ``image`` stretched to exactly ``dims`` pixels."""
    return pygame.transform.scale(image, (int(dims.x), int(dims.y)))


def make_placeholder() -> pygame.Surface:
    """Return the card-sized surface marking an empty stack."""
    surface = pygame.Surface((CARD_WIDTH, CARD_HEIGHT), pygame.SRCALPHA)
    surface.fill(PLACEHOLDER_COLOR)
    return surface


def _tinted(image: pygame.Surface, color: tuple[int, int, int]) -> pygame.Surface:
    tinted = image.copy()
    tinted.fill((*color, 255), special_flags=pygame.BLEND_RGBA_MULT)
    return tinted


def _shrunk(image: pygame.Surface) -> pygame.Surface:
    width, height = image.get_size()
    return scale_image(image, Pos(width // SYMBOL_SHRINK, height // SYMBOL_SHRINK))


@dataclass
class Assets:
    """Images used to draw cards, with card faces composed on first use."""

    card_back: pygame.Surface
    card_blank: pygame.Surface
    suit_images: dict[Suit, pygame.Surface]
    rank_images: dict[Rank, pygame.Surface]
    placeholder: pygame.Surface = field(default_factory=make_placeholder)
    _faces: dict[tuple[Rank, Suit], pygame.Surface] = field(
        default_factory=dict, init=False, repr=False
    )

    def card_face(self, card: Card) -> pygame.Surface:
        """Return the face image for ``card``; raise KeyError if artwork is missing."""
        key = (card.rank, card.suit)
        face = self._faces.get(key)
        if face is None:
            face = self._compose_face(card.rank, card.suit)
            self._faces[key] = face
        return face

    def _compose_face(self, rank: Rank, suit: Suit) -> pygame.Surface:
        if rank not in self.rank_images:
            raise KeyError(f"no image found for rank {rank.symbol()}")
        if suit not in self.suit_images:
            raise KeyError(f"no image found for suit {suit.value}")

        color = RED if suit.is_red() else BLACK
        face = self.card_blank.copy()

        suit_image = _tinted(_shrunk(self.suit_images[suit]), color)
        face.blit(
            suit_image,
            (
                CARD_WIDTH / 2.0 - suit_image.get_width() / 2.0,
                CARD_HEIGHT / 2.0 - SUIT_SIZE / 2.0,
            ),
        )

        rank_image = _tinted(_shrunk(self.rank_images[rank]), color)
        face.blit(rank_image, (0, 0))
        flipped = pygame.transform.rotate(rank_image, 180)
        face.blit(
            flipped,
            (CARD_WIDTH - flipped.get_width(), CARD_HEIGHT - flipped.get_height()),
        )
        return face


def _text_rank_image(font: pygame.font.Font, rank: Rank) -> pygame.Surface:
    image = pygame.Surface((CARD_WIDTH, CARD_HEIGHT), pygame.SRCALPHA)
    image.blit(font.render(rank.symbol(), True, TEXT_COLOR), (0, 0))
    return image


def load_assets(directory: PathLike = "assets") -> Assets:
    """Load the font and card images from ``directory``.

    Raises FileNotFoundError when any of the files is missing.
    """
    directory = Path(directory)

    font_path = directory / FONT_FILE
    if not font_path.is_file():
        raise FileNotFoundError(f"font not found: {font_path}")
    if not pygame.font.get_init():
        pygame.font.init()
    font = pygame.font.Font(str(font_path), int(NUMBER_SIZE * TEXT_SCALE))

    card_back = scale_image(load_image(directory / CARD_BACK_FILE), CARD_DIMS)
    card_blank = scale_image(load_image(directory / CARD_BLANK_FILE), CARD_DIMS)

    suit_images = {}
    for suit, name in SUIT_IMAGE_FILES.items():
        try:
            suit_images[suit] = load_image(directory / name)
        except FileNotFoundError as exc:
            raise FileNotFoundError(f"failed to load suit image for {suit.value}: {exc}") from exc

    rank_images = {}
    for rank, name in RANK_IMAGE_FILES.items():
        try:
            image = load_image(directory / name)
        except FileNotFoundError as exc:
            raise FileNotFoundError(
                f"failed to load rank image for {rank.symbol()}: {exc}"
            ) from exc
        rank_images[rank] = scale_image(image, CARD_DIMS)
    for rank in TEXT_RANKS:
        rank_images[rank] = _text_rank_image(font, rank)

    return Assets(
        card_back=card_back,
        card_blank=card_blank,
        suit_images=suit_images,
        rank_images=rank_images,
    )


def draw_card(surface: pygame.Surface, card: Card, assets: Assets) -> None:
    """Draw ``card`` at its position, face up or face down."""
    image = assets.card_face(card) if card.is_shown else assets.card_back
    surface.blit(image, card.pos.as_tuple())


def draw_stack(surface: pygame.Surface, stack: CardStack, assets: Assets) -> None:
    """Draw a stack: every card when spread, else the top card; a placeholder when empty."""
    if stack.is_spread:
        for card in stack.cards:
            draw_card(surface, card, assets)
    else:
        top = stack.top_card()
        if top is not None:
            draw_card(surface, top, assets)
    if not stack.cards:
        surface.blit(assets.placeholder, stack.base_pos.as_tuple())


def draw_board(surface: pygame.Surface, board: Board, assets: Assets) -> None:
    """Paint the table background and every stack on the board."""
    surface.fill(BOARD_COLOR)
    for stack in board.stacks_in_draw_order():
        draw_stack(surface, stack, assets)