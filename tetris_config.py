
CONFIG = {
    "BOARD_WIDTH": 10,
    "BOARD_HEIGHT": 22,
    "HIDDEN_ROWS": 2,
    "TICK_MS": 100,
    "CELL_SIZE": 32,
    "SEED": None,
    "VERBOSE": False,
}
