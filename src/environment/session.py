import logging
import random
from datetime import datetime
from typing import List, Dict, Optional, Callable, Tuple
from pydantic import BaseModel, Field, ConfigDict, PrivateAttr

from .ledger import ClaimLedger
from .models import ClaimEvent, ClaimResult, GameConfig, SessionState, SessionSummary
from .rival import Rival
from .scheduler import Scheduler, TimerHandle
from ..puzzle.generator import generate
from ..puzzle.grid import in_bounds
from ..puzzle.models import Cell, Placement, Puzzle
from ..puzzle.selection import Selection, resolve, selected_word


_log = logging.getLogger(__name__)


class Session(BaseModel):
    """
    State machine for one human-versus-rival word-search game.

    Drives the puzzle, the claim ledger, the human's selection and the rival's
    periodic timer. Every timer the session arms is cancelled on the way out
    of the state that armed it, so a superseded game never sees a late callback.

    States:
        setup: No grid yet
        playing: Pointer input accepted, rival ticking
        resolving_human_claim: Short hold after a human claim, input ignored
        resolving_rival_claim: Short hold after a rival claim, input ignored
        completed: Every word claimed, summary emitted

    Attributes:
        config: Game configuration with the difficulty table
        scheduler: Timer scheduler driving the rival and the holds
        rng: Random generator shared by grid generation and the rival
        on_claim: Optional callback called after every successful claim
        on_summary: Optional callback called once when the game completes
        state: Current state
        difficulty: Label of the current difficulty
        puzzle: The generated puzzle
        ledger: Claims made in this game
        selection: The human's in-progress drag
        rival: The rival's claiming policy
        rival_highlight: Cells of the rival's latest claim, during its hold
        summary: Final tally, once completed
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    config: GameConfig = Field(default_factory=GameConfig)
    scheduler: Scheduler = Field(default_factory=Scheduler)
    rng: Optional[random.Random] = None
    on_claim: Optional[Callable[[ClaimEvent], None]] = None
    on_summary: Optional[Callable[[SessionSummary], None]] = None

    state: SessionState = "setup"
    difficulty: Optional[str] = None
    puzzle: Optional[Puzzle] = None
    ledger: ClaimLedger = Field(default_factory=ClaimLedger)
    selection: Selection = Field(default_factory=Selection)
    rival: Optional[Rival] = None
    rival_highlight: List[Cell] = Field(default_factory=list)
    summary: Optional[SessionSummary] = None
    started_at: Optional[datetime] = None

    _rival_timer: Optional[TimerHandle] = PrivateAttr(default=None)
    _hold_timer: Optional[TimerHandle] = PrivateAttr(default=None)
    _start_time: float = PrivateAttr(default=0.0)
    _end_time: Optional[float] = PrivateAttr(default=None)

    def model_post_init(self, __context) -> None:
        """Initialize the random generator after model creation."""
        if self.rng is None:
            self.rng = random.Random(self.config.seed)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def start_session(self, difficulty: str, puzzle: Optional[Puzzle] = None) -> Puzzle:
        """
        Start a new game at the given difficulty.

        Generates a fresh puzzle and resets the ledger, selection and scores.
        Any game already in progress is abandoned and its timers cancelled.

        Args:
            difficulty: Label from the configured difficulty table
            puzzle: Optional pre-built puzzle to replay instead of generating one

        Returns:
            The puzzle being played

        Raises:
            ValueError: If the difficulty is not configured
        """
        settings = self.config.difficulty(difficulty)
        self._cancel_timers()

        if puzzle is None:
            puzzle = generate(settings.grid_size, settings.words, rng=self.rng)

        self.difficulty = difficulty
        self.puzzle = puzzle
        self.ledger = ClaimLedger.from_placements(puzzle.placements)
        self.selection.clear()
        self.rival = Rival.create(settings, rng=self.rng)
        self.rival_highlight = []
        self.summary = None
        self.started_at = datetime.now()
        self._start_time = self.scheduler.time()
        self._end_time = None

        _log.debug(
            "started %s game: %d words placed, %d dropped",
            difficulty, len(puzzle.placements), len(puzzle.dropped)
        )

        if self.ledger.is_complete:
            # Nothing survived placement
            self._complete()
        else:
            self._enter_playing()

        return puzzle

    def new_game(self) -> None:
        """Abandon the current game and return to setup."""
        self._cancel_timers()
        self.state = "setup"
        self.puzzle = None
        self.ledger = ClaimLedger()
        self.selection.clear()
        self.rival = None
        self.rival_highlight = []
        self.summary = None
        self.started_at = None
        self._end_time = None

    def close(self) -> None:
        """Tear down: cancel every pending timer. A game in progress goes back to setup."""
        self._cancel_timers()
        self.selection.clear()
        self.rival_highlight = []
        if self.state != "completed":
            self.state = "setup"

    # ------------------------------------------------------------------
    # Pointer input
    # ------------------------------------------------------------------

    def _accepts(self, cell: Cell) -> bool:
        return (
            self.state == "playing"
            and self.puzzle is not None
            and in_bounds(cell, self.puzzle.size)
        )

    def pointer_down(self, cell: Cell) -> bool:
        """Start a drag at a cell. Returns False if input is not accepted."""
        if not self._accepts(cell):
            return False
        self.selection.begin(cell)
        return True

    def pointer_enter(self, cell: Cell) -> bool:
        """
        Extend the drag to a hovered cell.

        Non-straight hovers leave the previous selection in place.
        Returns True if the selection changed.
        """
        if not self._accepts(cell):
            return False
        return self.selection.extend(cell)

    def pointer_leave(self) -> None:
        """The pointer left the grid: drop the in-progress drag."""
        self.selection.clear()

    def pointer_up(self) -> Optional[ClaimResult]:
        """
        Finish the drag and try to claim the selected word for the human.

        Returns:
            The successful ClaimResult, or None if nothing was claimed
        """
        cells = list(self.selection.cells)
        self.selection.clear()

        if self.state != "playing" or len(cells) < 2:
            return None

        placement = resolve(cells, self.ledger.placements)
        if placement is None:
            _log.debug("no word at %s", selected_word(self.puzzle.grid, cells))
            return None

        result = self.ledger.claim(placement.word, "human", timestamp=self.scheduler.time())
        if not result.success:
            return None

        _log.debug("human claimed %s", placement.word)
        self._notify_claim(result.event)
        self._begin_hold("resolving_human_claim", self.config.human_hold_seconds)
        return result

    # ------------------------------------------------------------------
    # Timers and transitions
    # ------------------------------------------------------------------

    def _enter_playing(self) -> None:
        self.state = "playing"
        self.rival_highlight = []
        self._rival_timer = self.scheduler.call_every(self.rival.interval, self._rival_tick)

    def _rival_tick(self) -> None:
        if self.state != "playing":
            return

        result = self.rival.take_turn(self.ledger, timestamp=self.scheduler.time())
        if result is not None and result.success:
            _log.debug("rival claimed %s", result.word)
            self._notify_claim(result.event)
            self._begin_hold("resolving_rival_claim", self.config.rival_hold_seconds, result.event.cells)
        elif self.ledger.is_complete:
            self._complete()

    def _begin_hold(self, state: SessionState, seconds: float, highlight: Optional[List[Cell]] = None) -> None:
        self._cancel_rival_timer()
        self.state = state
        self.rival_highlight = list(highlight or [])
        self._hold_timer = self.scheduler.call_later(seconds, self._end_hold)

    def _end_hold(self) -> None:
        self._hold_timer = None
        self.rival_highlight = []
        if self.ledger.is_complete:
            self._complete()
        else:
            self._enter_playing()

    def _complete(self) -> None:
        if self.state == "completed":
            return

        self._cancel_timers()
        self.state = "completed"
        self._end_time = self.scheduler.time()

        player_score = self.ledger.scores.get("human", 0)
        rival_score = self.ledger.scores.get("rival", 0)
        if player_score > rival_score:
            winner = "human"
        elif rival_score > player_score:
            winner = "rival"
        else:
            winner = None

        self.summary = SessionSummary(
            player_score=player_score,
            rival_score=rival_score,
            difficulty=self.difficulty or "",
            timestamp=datetime.now().isoformat(),
            duration_seconds=self.elapsed_seconds,
            winner=winner,
        )
        _log.info(
            "%s game complete: you %d, rival %d",
            self.difficulty, player_score, rival_score
        )

        if self.on_summary:
            self.on_summary(self.summary)

    def _notify_claim(self, event: Optional[ClaimEvent]) -> None:
        if self.on_claim and event is not None:
            self.on_claim(event)

    def _cancel_rival_timer(self) -> None:
        if self._rival_timer is not None:
            self._rival_timer.cancel()
            self._rival_timer = None

    def _cancel_timers(self) -> None:
        self._cancel_rival_timer()
        if self._hold_timer is not None:
            self._hold_timer.cancel()
            self._hold_timer = None

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def grid(self) -> Tuple[str, ...]:
        return self.puzzle.grid if self.puzzle else ()

    @property
    def placements(self) -> List[Placement]:
        return self.ledger.placements

    @property
    def scores(self) -> Dict[str, int]:
        return dict(self.ledger.scores)

    @property
    def is_complete(self) -> bool:
        return self.state == "completed"

    @property
    def elapsed_seconds(self) -> float:
        """Time since the game started, frozen once it completes."""
        if self.puzzle is None:
            return 0.0
        end = self._end_time if self._end_time is not None else self.scheduler.time()
        return end - self._start_time

    def get_state(self) -> Dict:
        """
        Get the current session state.

        Returns:
            Dictionary containing session state
        """
        return {
            "state": self.state,
            "difficulty": self.difficulty,
            "scores": self.scores,
            "words_remaining": len(self.ledger.unclaimed()),
            "started_at": self.started_at.isoformat() if self.started_at else None,
            "elapsed_seconds": self.elapsed_seconds,
            "ledger": self.ledger.get_state(),
        }
