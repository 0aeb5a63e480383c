"""The windowed solitaire game: event handling and the main loop."""

from __future__ import annotations

import argparse
import logging
import random
from pathlib import Path
from typing import Optional, Sequence

import pygame

from patience.board import Board, new_board
from patience.geom import Pos
from patience.render import Assets, draw_board, load_assets

WINDOW_TITLE = "Solitaire"
WINDOW_SIZE = Pos(1000, 800)
FRAMES_PER_SECOND = 60
LEFT_BUTTON = 1


class SolitaireApp:
    """Connects a board to a pygame window and its input events."""

    def __init__(
        self,
        board: Optional[Board] = None,
        assets: Optional[Assets] = None,
        *,
        assets_dir: Path = Path("assets"),
        window_size: Pos = WINDOW_SIZE,
    ) -> None:
        self.board = board if board is not None else new_board()
        self.assets = assets
        self.assets_dir = Path(assets_dir)
        self.window_size = window_size
        self.running = True

    def handle_event(self, event: pygame.event.Event) -> None:
        """Feed one pygame event to the board."""
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == pygame.MOUSEMOTION:
            self.board.set_cursor_pos(Pos(*event.pos))
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == LEFT_BUTTON:
            self.board.set_cursor_pos(Pos(*event.pos))
            self.board.mouse_down()
        elif event.type == pygame.MOUSEBUTTONUP and event.button == LEFT_BUTTON:
            self.board.set_cursor_pos(Pos(*event.pos))
            self.board.mouse_up()

    def step(self) -> None:
        """Advance the non-interactive game logic by one frame."""
        self.board.update()

    def run(self) -> None:
        """Open the window and play until it is closed."""
        pygame.init()
        try:
            pygame.display.set_caption(WINDOW_TITLE)
            screen = pygame.display.set_mode(self.window_size.as_tuple())
            if self.assets is None:
                self.assets = load_assets(self.assets_dir)
            clock = pygame.time.Clock()
            self.running = True
            while self.running:
                self.step()
                for event in pygame.event.get():
                    self.handle_event(event)
                draw_board(screen, self.board, self.assets)
                pygame.display.flip()
                clock.tick(FRAMES_PER_SECOND)
        finally:
            pygame.quit()


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="patience", description="Play klondike solitaire.")
    parser.add_argument("--assets", type=Path, default=Path("assets"), help="artwork directory")
    parser.add_argument("--seed", type=int, default=None, help="seed for the shuffle")
    parser.add_argument("--verbose", action="store_true", help="log game events")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start the game; return the process exit status."""
    args = _parse_args(argv)
    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING)
    board = new_board(random.Random(args.seed))
    SolitaireApp(board, assets_dir=args.assets).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())