from typing import List, Optional

from .board import Snapshot

CELL_WIDTH = 5

COLORS = {
    2: '\033[97m',    # white
    4: '\033[90m',    # bright black
    8: '\033[36m',    # cyan
    16: '\033[31m',   # red
    32: '\033[32m',   # green
    64: '\033[33m',   # yellow
    128: '\033[35m',  # magenta
    256: '\033[34m',  # blue
    512: '\033[91m',  # bright red
    1024: '\033[92m', # bright green
    2048: '\033[95m', # bright magenta
    4096: '\033[93m', # bright yellow
}
RESET = '\033[0m'
BOLD = '\033[1m'


def get_color_for_tile(value):
    return COLORS.get(value, '\033[93m')  # fallback: bright yellow


def format_tile(value: Optional[int]) -> str:
    if not value:
        return " " * CELL_WIDTH
    color = get_color_for_tile(value)
    return f"{color}{BOLD}{value:^{CELL_WIDTH}}{RESET}"


def draw_table(snapshot: Snapshot) -> List[str]:
    """Box-drawn, fixed-width table for a board snapshot, one string per line."""
    n = len(snapshot)
    bar = "─" * CELL_WIDTH
    lines = ["┌" + "┬".join([bar] * n) + "┐"]
    for i, row in enumerate(snapshot):
        lines.append("│" + "│".join(format_tile(v) for v in row) + "│")
        if i < n - 1:
            lines.append("├" + "┼".join([bar] * n) + "┤")
    lines.append("└" + "┴".join([bar] * n) + "┘")
    return lines
