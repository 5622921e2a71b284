"""Mastermind in the terminal: guess four colours out of eight."""

from __future__ import annotations

import random
import sys
from collections import Counter
from dataclasses import dataclass, field
from typing import Sequence

__all__ = ["Mastermind", "make_secret", "score_guess", "play", "main"]

PLACES = 4
COLORS = 8
_ROWS = (13, 15, 17, 19)


def make_secret(allow_repeats: bool, rng: random.Random | None = None) -> tuple[int, ...]:
    """Pick four colours from 1 to 8, all different unless repeats are allowed."""
    rng = rng if rng is not None else random.Random()
    if allow_repeats:
        return tuple(rng.randint(1, COLORS) for _ in range(PLACES))
    return tuple(rng.sample(range(1, COLORS + 1), PLACES))


def score_guess(secret: Sequence[int], guess: Sequence[int]) -> tuple[int, int]:
    """Return (right colours in right places, right colours in wrong places)."""
    pairs = list(zip(secret, guess))
    rights = sum(1 for want, got in pairs if want == got)
    left_secret = Counter(want for want, got in pairs if want != got)
    left_guess = Counter(got for want, got in pairs if want != got)
    halfrights = sum((left_secret & left_guess).values())
    return rights, halfrights


@dataclass
class Mastermind:
    """The state of one game."""

    secret: tuple[int, ...]
    max_tries: int
    guess: list[int] = field(default_factory=lambda: [0] * PLACES)
    guesses_made: int = 0
    won: bool = False

    def __post_init__(self) -> None:
        self.secret = tuple(self.secret)
        if len(self.secret) != PLACES:
            raise ValueError("the secret must have four colours")
        if self.max_tries <= 0:
            raise ValueError("at least one try is needed")

    @property
    def tries_left(self) -> int:
        return self.max_tries - self.guesses_made

    @property
    def lost(self) -> bool:
        return not self.won and self.tries_left <= 0

    def set_place(self, place: int, color: int) -> None:
        """Put ``color`` (1-8) at ``place`` (1-4) of the current guess."""
        if not 1 <= place <= PLACES:
            raise ValueError(f"place must be between 1 and {PLACES}")
        if not 1 <= color <= COLORS:
            raise ValueError(f"color must be between 1 and {COLORS}")
        self.guess[place - 1] = color

    def is_complete(self) -> bool:
        """True when every place of the current guess holds a colour."""
        return all(self.guess)

    def submit(self) -> tuple[int, int]:
        """Score the current guess, start a fresh one and return the score."""
        if self.won or self.lost:
            raise ValueError("the game is over")
        if not self.is_complete():
            raise ValueError("the guess is not complete")
        score = score_guess(self.secret, self.guess)
        self.guesses_made += 1
        self.guess = [0] * PLACES
        if score[0] == PLACES:
            self.won = True
        return score


class _ScreenError(RuntimeError):
    pass


def _put(win, y: int, x: int, text: str, attr: int = 0) -> None:
    import curses

    try:
        win.addstr(y, x, text, attr)
    except curses.error:
        pass


def _read_text(win, y: int, x: int) -> str:
    import curses

    win.move(y, x)
    win.clrtoeol()
    curses.echo()
    try:
        raw = win.getstr(y, x, 20)
    finally:
        curses.noecho()
    return raw.decode(errors="replace").strip()


def _ask_number(win, label: str, low: int, high: int) -> int:
    while True:
        _put(win, 0, 0, label)
        _put(win, 1, 0, "? ")
        words = _read_text(win, 1, 2).split()
        try:
            value = int(words[0])
        except (IndexError, ValueError):
            continue
        if low <= value <= high:
            return value


def play(stdscr, game: Mastermind) -> bool:
    """Run the game on a curses screen; True when the secret was guessed."""
    import curses

    height, width = stdscr.getmaxyx()
    if height < 22:
        raise _ScreenError("Terminal too small")
    if game.max_tries > width // 3 - 3:
        raise _ScreenError("You have too many tries to be on the screen.")

    attrs = [0] * (COLORS + 1)
    if curses.has_colors():
        curses.start_color()
        pairs = [
            (curses.COLOR_WHITE, curses.COLOR_RED),
            (curses.COLOR_WHITE, curses.COLOR_GREEN),
            (curses.COLOR_WHITE, curses.COLOR_BLUE),
            (curses.COLOR_WHITE, curses.COLOR_BLACK),
            (curses.COLOR_WHITE, curses.COLOR_MAGENTA),
            (curses.COLOR_BLACK, curses.COLOR_WHITE),
            (curses.COLOR_WHITE, curses.COLOR_CYAN),
            (curses.COLOR_WHITE, curses.COLOR_YELLOW),
        ]
        for number, (fg, bg) in enumerate(pairs, start=1):
            curses.init_pair(number, fg, bg)
            attrs[number] = curses.color_pair(number)

    _put(stdscr, 5, 0, "Colors: 1: Red, 2: Green, 3: Blue, 4: Black")
    _put(stdscr, 6, 0, "Colors: 5: Magenta, 6: White, 7: Cyan, 8: Yellow")
    _put(stdscr, 8, 0, "Right colors on right places:")
    _put(stdscr, 10, 0, "Right colors on wrong places:")
    for number, row in enumerate(_ROWS, start=1):
        _put(stdscr, row, 0, f"{number}:")

    def show_tries() -> None:
        _put(stdscr, 0, width // 2 - 10, f"Tries left: {game.tries_left} ")

    show_tries()
    while True:
        column = 3 + 3 * game.guesses_made
        place = _ask_number(stdscr, "Place:", 1, PLACES)
        color = _ask_number(stdscr, "Color:", 1, COLORS)
        _put(stdscr, _ROWS[place - 1], column, str(color), attrs[color])
        game.set_place(place, color)
        if not game.is_complete():
            continue

        question_row = _ROWS[-1] + 2
        _put(stdscr, question_row, 4, "Is that a guess? (y/n) ")
        stdscr.refresh()
        answer = _read_text(stdscr, question_row, 27)
        stdscr.move(question_row, 4)
        stdscr.clrtoeol()
        if answer.split()[:1] != ["y"]:
            continue

        rights, halfrights = game.submit()
        if game.won:
            return True
        _put(stdscr, 9, column, str(rights))
        _put(stdscr, 11, column, str(halfrights))
        show_tries()
        if game.lost:
            for row, value in zip(_ROWS, game.secret):
                _put(stdscr, row, 0, str(value), attrs[value])
            _put(stdscr, height - 2, 0, "Wrong, and you are out of tries..")
            _put(stdscr, height - 1, 0, "Press enter to end program")
            stdscr.refresh()
            stdscr.getch()
            return False


def _read_word() -> str:
    for line in sys.stdin:
        words = line.split()
        if words:
            return words[0]
    return ""


def main(argv: list[str] | None = None) -> int:
    """Ask how to set up the game, then play it in the terminal."""
    import curses

    sys.stdout.write("Can two places be the same color? (y/n) ")
    sys.stdout.flush()
    combination = make_secret(_read_word() != "n")

    sys.stdout.write("How many tries would you like? ")
    sys.stdout.flush()
    try:
        max_tries = int(_read_word())
    except ValueError:
        max_tries = 0
    sys.stdout.write("\n")
    if max_tries <= 0:
        sys.stdout.write("Ok, fine.\n")
        return 1

    sys.stdout.write(
        "\nI have come up with a color combination. Press enter to start the game.\n"
    )
    sys.stdout.flush()
    sys.stdin.readline()

    game = Mastermind(combination, max_tries)
    try:
        won = curses.wrapper(play, game)
    except _ScreenError as err:
        sys.stdout.write(f"{err}\n")
        return 1
    if not won:
        return 1
    sys.stdout.write("CONGRATULATIONS!\n")
    sys.stdout.write("You guessed the right combination!\n")
    sys.stdout.write(f"You used {game.guesses_made} tries\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())