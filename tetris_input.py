"""Keyboard to game command mapping"""
from enum import Enum
from typing import Dict

import pygame


class Command(Enum):
    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    ROTATE_CW = "rotate_cw"
    TOGGLE_PAUSE = "toggle_pause"


KEY_TO_COMMAND: Dict[int, Command] = {
    pygame.K_LEFT: Command.MOVE_LEFT,
    pygame.K_RIGHT: Command.MOVE_RIGHT,
    pygame.K_UP: Command.ROTATE_CW,
    pygame.K_p: Command.TOGGLE_PAUSE,
}
