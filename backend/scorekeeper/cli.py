"""Interactive console menu for keeping score of one bowling game."""

from __future__ import annotations

import argparse
import logging
from typing import Callable, List, Optional

from .config import FRAMES_PER_GAME, LOG_LEVEL, PINS_PER_FRAME
from .exceptions import DomainException, IncompleteGame, InvalidPins, RosterFull
from .render import render_progress, render_rolls, render_summary
from .services.session import GameSession
from .services.validation import validate_frame, validate_pins
from .utils.sentry import init_sentry

logger = logging.getLogger(__name__)

MENU = """Menu:
1. Add Player
2. Enter Scores
3. Display Game Progress
4. Display Game Summary
0. Exit"""


class ScoreKeeperShell:
    """Menu loop that reads rolls from the bowlers and feeds the session.

    ``input_fn`` and ``output_fn`` default to the console and can be
    swapped for scripted callables.
    """

    def __init__(
        self,
        session: Optional[GameSession] = None,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
    ) -> None:
        self.session = session or GameSession()
        self._in = input_fn
        self._out = output_fn

    def _emit(self, block: str) -> None:
        # output_fn adds its own newline
        self._out(block[:-1] if block.endswith("\n") else block)

    def run(self) -> int:
        while True:
            self._out(MENU)
            try:
                option = self._in("Choose an option: ").strip()
            except EOFError:
                option = "0"

            try:
                if option == "1":
                    self.add_player()
                elif option == "2":
                    self.enter_scores()
                elif option == "3":
                    self.show_progress()
                elif option == "4":
                    self.show_summary()
                elif option == "0":
                    self._out("Exiting the program.")
                    return 0
                else:
                    self._out("Invalid option. Please try again.")
            except EOFError:
                self._out("Exiting the program.")
                return 0
            except DomainException as exc:
                problem = exc.to_problem()
                self._out(f"{problem.title}: {problem.detail}")

    def add_player(self) -> None:
        name = self._in("Enter player name: ").strip()
        if not name:
            self._out("Player name must not be empty.")
            return
        try:
            self.session.add_player(name)
        except RosterFull as exc:
            self._out(exc.detail)
            return
        self._out("Player added.")

    def enter_scores(self) -> None:
        players = self.session.players
        if not players:
            self._out("No players added yet. Please add players first.")
            return
        if self.session.is_complete:
            self._out("All players have finished ten frames; the game is over.")
            return
        for frame in range(1, FRAMES_PER_GAME + 1):
            for seat in range(len(players)):
                self.bowl_frame(frame, seat)
                if len(players) > 1:
                    upcoming = players[self.next_seat(seat)]
                    self._out(f"Next player: {upcoming.name}")
                self.show_progress()

    def next_seat(self, seat: int) -> int:
        return (seat + 1) % len(self.session.players)

    def bowl_frame(self, frame: int, seat: int) -> List[int]:
        """Collect one frame for the player at ``seat`` and record it.

        The last frame also collects the bonus rolls a strike or spare
        earns. Nothing is recorded until the whole frame is valid.
        """
        player = self.session.players[seat]
        self._out(f"Enter scores for {player.name}, Frame {frame}")
        last = frame == FRAMES_PER_GAME

        first = self._ask("  Roll 1: ")
        rolls = [first]
        if first == PINS_PER_FRAME:
            if last:
                bonus = self._ask("  Bonus roll 1: ")
                rolls.append(bonus)
                rolls.append(self._ask("  Bonus roll 2: ", after=bonus))
        else:
            second = self._ask("  Roll 2: ", after=first)
            rolls.append(second)
            if last and first + second == PINS_PER_FRAME:
                rolls.append(self._ask("  Bonus roll: "))

        for pins in rolls:
            self.session.submit_roll(pins, seat=seat)
        return rolls

    def _ask(self, prompt: str, after: Optional[int] = None) -> int:
        # ``after`` is the previous roll of the same rack, if pins are still standing
        while True:
            raw = self._in(prompt)
            try:
                pins = validate_pins(raw)
                if after is not None and after != PINS_PER_FRAME:
                    validate_frame(after, pins)
            except InvalidPins as exc:
                self._out(f"Invalid input. {exc.detail}")
                continue
            return pins

    def show_progress(self) -> None:
        self._emit(render_progress(self.session.progress_snapshot()))

    def show_summary(self) -> None:
        try:
            summary = self.session.summary()
        except IncompleteGame as exc:
            rows = render_rolls(self.session.progress_snapshot())
            self._emit("\n".join(["Game Summary", *rows, ""]) + "\n")
            self._out(f"Scores are not final yet: {exc.detail}")
            return
        self._emit(render_summary(summary))


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Keep score of a ten-pin bowling game for up to five players."
    )
    parser.add_argument(
        "--log-level",
        default=LOG_LEVEL,
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level name (defaults to SCOREKEEPER_LOG_LEVEL or WARNING).",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    init_sentry()

    try:
        return ScoreKeeperShell().run()
    except KeyboardInterrupt:
        return 130
    except Exception as exc:
        logger.error("Unhandled exception", exc_info=(type(exc), exc, exc.__traceback__))
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
