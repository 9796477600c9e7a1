# ABOUTME: Scripted InteractionPort that plays from a fixed list of answers
# ABOUTME: Records every render and announcement for automated play and tests

from typing import Any, Iterable, List, Optional, Sequence, Tuple

from game_interface.core.errors import PresentationError
from .interaction_port import InteractionPort


class ScriptedInteractionPort(InteractionPort):
    """Feeds pre-recorded guesses and replay decisions to the game."""

    def __init__(self, guesses: Iterable[str], replays: Iterable[bool] = ()):
        self._guesses = iter(guesses)
        self._replays = iter(replays)
        self.events: List[Tuple[str, Any]] = []
        self.renders: List[Tuple[str, int]] = []

    def elicit_guess(self) -> str:
        try:
            letter = next(self._guesses)
        except StopIteration:
            raise PresentationError("Scripted guesses exhausted") from None
        self.events.append(("guess", letter))
        return letter

    def render(
        self,
        revealed: str,
        guesses_remaining: int,
        letters_guessed: Sequence[str] = (),
    ) -> None:
        self.renders.append((revealed, guesses_remaining))
        self.events.append(("render", (revealed, guesses_remaining)))

    def announce_new_round(self, word_length: int) -> None:
        self.events.append(("new_round", word_length))

    def announce_win(self) -> None:
        self.events.append(("win", None))

    def announce_loss(self, solution_word: Optional[str]) -> None:
        self.events.append(("loss", solution_word))

    def announce_error(self, message: str) -> None:
        self.events.append(("error", message))

    def announce_session_summary(self, history) -> None:
        self.events.append(("summary", history.rounds_played))

    def elicit_replay(self) -> bool:
        # Out of scripted answers means the participant stops
        choice = next(self._replays, False)
        self.events.append(("replay", choice))
        return choice

    def event_names(self) -> List[str]:
        return [name for name, _ in self.events]
