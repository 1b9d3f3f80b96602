import logging
import sys

import pygame

from tetris_config import CONFIG
from tetris_events import EventBus, EVENT_RENDER, EVENT_GAME_OVER, EVENT_ROWS_CLEARED
from tetris_game import GameLoopScheduler, new_game
from tetris_input import KEY_TO_COMMAND
from tetris_layout import compute_dims
from tetris_render import BoardRenderer

TICK_EVENT = pygame.USEREVENT + 1


def setup_logging(verbose: bool):
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level,
                        format="%(asctime)s | %(levelname)-7s | %(message)s",
                        datefmt="%H:%M:%S")


def recreate_window(dims, flags=pygame.DOUBLEBUF):
    try:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags, vsync=1)
    except TypeError:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags)


def main():
    setup_logging(CONFIG["VERBOSE"])
    pygame.init()
    pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN, TICK_EVENT])

    dims = compute_dims()
    screen = recreate_window(dims)
    pygame.display.set_caption("Tetris")
    big_font = pygame.font.SysFont(None, 42)
    render = BoardRenderer(dims, big_font)

    bus = EventBus()
    state = new_game()
    scheduler = GameLoopScheduler(state, bus)

    def on_render(sender, squares, mode):
        render.draw(screen, squares, mode)
        pygame.display.flip()

    bus.subscribe(EVENT_RENDER, on_render)
    bus.subscribe(EVENT_ROWS_CLEARED, lambda s, rows: logging.debug("rows %s released", rows))
    bus.subscribe(EVENT_GAME_OVER, lambda s: logging.info("You lose!"))

    # ticks and key presses share this loop, so input never lands mid-tick
    pygame.time.set_timer(TICK_EVENT, CONFIG["TICK_MS"])
    logging.info("game started: %dx%d board, tick %d ms",
                 CONFIG["BOARD_WIDTH"], CONFIG["BOARD_HEIGHT"], CONFIG["TICK_MS"])

    while True:
        e = pygame.event.wait()
        if e.type == pygame.QUIT:
            pygame.quit(); sys.exit()
        if e.type == TICK_EVENT:
            if not scheduler.tick():
                pygame.time.set_timer(TICK_EVENT, 0)
        elif e.type == pygame.KEYDOWN:
            cmd = KEY_TO_COMMAND.get(e.key)
            if cmd is not None:
                scheduler.handle(cmd)


if __name__ == '__main__':
    main()
