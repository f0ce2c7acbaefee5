#!/usr/bin/env python3
"""
2048 Game - Command Line Interface
Play 2048 using arrow keys or WASD, 'r' to restart, 'q' to quit
"""

import argparse
import os
import random
import select
import sys
import termios
import time
import tty
from typing import Callable, Optional

from .board import SIZE
from .display import BOLD, RESET, draw_table
from .game import Command, Game

# Seconds to wait for a key before handing control back to the loop
POLL_TIMEOUT = 0.05
# Key signals closer together than this are dropped
DEBOUNCE_SECONDS = 0.25
# Escape sequences arrive in one burst, so the tail is read with a short wait
ESCAPE_TIMEOUT = 0.01

RED = '\033[91m'
GREEN = '\033[92m'
YELLOW = '\033[93m'
BLUE = '\033[94m'
CLEAR = '\033[2J\033[H'

KEY_COMMANDS = {
    '\x1b[A': Command.SLIDE_UP,
    '\x1b[B': Command.SLIDE_DOWN,
    '\x1b[C': Command.SLIDE_RIGHT,
    '\x1b[D': Command.SLIDE_LEFT,
    'w': Command.SLIDE_UP,
    'a': Command.SLIDE_LEFT,
    's': Command.SLIDE_DOWN,
    'd': Command.SLIDE_RIGHT,
    'r': Command.RESTART,
    'q': Command.QUIT,
}


def write_lines(out, lines):
    # raw mode does not translate \n, so return the carriage explicitly
    out.write("".join(line + "\r\n" for line in lines))


def render(game: Game, out=None):
    out = out or sys.stdout
    out.write(CLEAR)
    write_lines(out, [
        f"{BOLD}2048 Game{RESET}",
        f"Score: {GREEN}{game.score}{RESET} | Moves: {BLUE}{game.move_count}{RESET}",
        "Use arrow keys or WASD to move, 'r' to restart, 'q' to quit",
        "",
    ])
    write_lines(out, draw_table(game.snapshot()))
    out.flush()


def parse_key(seq: str) -> Optional[Command]:
    if seq.startswith('\x1b'):
        return KEY_COMMANDS.get(seq)
    return KEY_COMMANDS.get(seq.lower())


class KeyReader:
    """
    Reads single key presses from a terminal in raw mode.

    poll() waits at most POLL_TIMEOUT for a key and turns it into a Command.
    Key signals arriving within DEBOUNCE_SECONDS of the previous one are
    dropped, so holding a key does not flood the game with moves.
    """

    def __init__(self, stream=None, clock: Callable[[], float] = time.monotonic):
        self.stream = stream or sys.stdin
        self.clock = clock
        self.last_keypress_time: Optional[float] = None
        self._old_settings = None

    def __enter__(self):
        fd = self.stream.fileno()
        self._old_settings = termios.tcgetattr(fd)
        tty.setraw(fd)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self._old_settings is not None:
            termios.tcsetattr(self.stream.fileno(), termios.TCSADRAIN, self._old_settings)
            self._old_settings = None

    def _read_char(self, timeout: float) -> Optional[str]:
        ready, _, _ = select.select([self.stream], [], [], timeout)
        if not ready:
            return None
        data = os.read(self.stream.fileno(), 1)
        if not data:
            raise EOFError("stdin closed")
        return data.decode(errors='replace')

    def _read_key(self, timeout: float) -> Optional[str]:
        ch = self._read_char(timeout)
        if ch != '\x1b':
            return ch
        seq = ch
        for _ in range(2):
            nxt = self._read_char(ESCAPE_TIMEOUT)
            if nxt is None:
                break
            seq += nxt
        return seq

    def poll(self, timeout: float = POLL_TIMEOUT) -> Optional[Command]:
        seq = self._read_key(timeout)
        if seq is None:
            return None

        now = self.clock()
        if self.last_keypress_time is not None and now - self.last_keypress_time < DEBOUNCE_SECONDS:
            return None
        self.last_keypress_time = now
        return parse_key(seq)


def wait_for_quit(reader: KeyReader):
    while reader.poll() is not Command.QUIT:
        pass


def run(game: Game, reader: KeyReader, out=None) -> int:
    """Drive one session until quit or game over; returns the final score."""
    out = out or sys.stdout
    game.start()
    render(game, out)

    while True:
        command = reader.poll()
        if command is None:
            continue
        if not game.handle(command):
            break
        render(game, out)

    out.write(CLEAR)
    write_lines(out, [
        f"Your final score: {game.score}",
        "Press Q to quit",
    ])
    out.flush()
    wait_for_quit(reader)
    return game.score


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Play 2048 in the terminal")
    parser.add_argument("--size", type=int, default=SIZE, help="Board width and height")
    parser.add_argument("--seed", type=int, default=None, help="Seed for tile spawning")
    args = parser.parse_args(argv)
    if args.size < 2:
        parser.error("--size must be at least 2")
    return args


def main(argv=None) -> int:
    args = parse_args(argv)
    rng = random.Random(args.seed) if args.seed is not None else None
    game = Game(args.size, rng=rng)

    try:
        with KeyReader() as reader:
            run(game, reader)
    except KeyboardInterrupt:
        sys.stdout.write(f"\n\n{YELLOW}Game interrupted. Thanks for playing!{RESET}\n")
        sys.stdout.flush()
    except Exception as e:
        sys.stdout.write(f"\n{RED}Error: {e}{RESET}\n")
        sys.stdout.write("Make sure you're running this in a terminal that supports arrow keys.\n")
        sys.stdout.flush()
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
