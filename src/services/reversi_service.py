"""Orchestration of one game session: the caller (UI/API layer) on one side, the Game, the storage and the automated player on the other."""

import logging
import random
import threading
from functools import partial
from typing import Callable, Optional

from src.api.models import (
    ChangePlayerModeRequest,
    GameResponse,
    MoveResponse,
    PlaceDiskRequest,
    PositionResponse,
)
from src.core.config import Settings
from src.core.exceptions import CorruptDataError, GameStateError, StorageError
from src.core.shared_types import Color, PlayerMode, Status
from src.db.repository import GameStateStore
from src.reversi import codec
from src.reversi.computer import choose_move
from src.reversi.disk import SIDES, Disk
from src.reversi.disk import PlayerMode as DomainPlayerMode
from src.reversi.events import Event
from src.reversi.game import AppliedMove, Game, Phase
from src.reversi.position import Position
from src.services.scheduling import Canceller, Scheduler, ThreadingScheduler

logger = logging.getLogger(__name__)

EventListener = Callable[[Event], None]

# TURN_RESOLUTION never leaves the lock: `_play` places and hands over the turn together
PHASE_TO_STATUS: dict[Phase, Status] = {
    Phase.AWAITING_MOVE: Status.AWAITING_MOVE,
    Phase.AWAITING_PASS: Status.AWAITING_PASS,
    Phase.GAME_OVER: Status.GAME_OVER,
}


class ReversiService:
    """
    Owns the Game of a session.
    ----

    * every call runs under one lock, so a placement and the following turn change are seen together
    * events of each transition are passed to the listener in order
    * when the active player is automated, its move is scheduled after `automated_move_delay` seconds
    * with `autosave`, the snapshot is written to the store after every transition
    """

    def __init__(
        self,
        store: GameStateStore,
        settings: Optional[Settings] = None,
        scheduler: Optional[Scheduler] = None,
        listener: Optional[EventListener] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.store = store
        self.settings = settings or Settings()
        self.scheduler = scheduler or ThreadingScheduler()
        self.listener = listener
        self.rng = rng or random.Random()
        self.game: Optional[Game] = None
        self._pending_move: Optional[Canceller] = None
        self._schedule_id = 0
        self._lock = threading.RLock()

    # -- Caller facing operations ---
    def start_game(self) -> GameResponse:
        """Resume the saved game (or start a fresh one if there is none / it cannot be read)."""
        with self._lock:
            if self.game is None:
                self.game = self._load_or_new_game()
            self.game.start()
            self._after_transition()
            return self._create_game_response()

    def place_disk(self, request: PlaceDiskRequest) -> MoveResponse:
        """
        Manual move by the active player.
        ---

        The turn is handed over right away, so callers never see a half-finished turn.
        """
        with self._lock:
            game = self._require_game()
            if game.is_automated_turn():
                raise GameStateError(
                    "The active player is automated. Switch it to manual to place a disk."
                )
            applied = self._play(Position(request.x, request.y))
            return self._create_move_response(applied)

    def change_player_mode(self, request: ChangePlayerModeRequest) -> GameResponse:
        with self._lock:
            game = self._require_game()
            disk = Disk[request.color.name]
            mode = DomainPlayerMode[request.mode.name]
            game.change_player_mode(disk, mode)

            # a pending automated move of this player must not happen anymore
            if mode == DomainPlayerMode.MANUAL and game.active_color == disk:
                self._cancel_automated_move()

            self._after_transition()
            return self._create_game_response()

    def request_next_turn(self) -> GameResponse:
        """Acknowledge a pass (or hand over the turn after a placement made directly on the Game)."""
        with self._lock:
            game = self._require_game()
            game.request_next_turn()
            self._after_transition()
            return self._create_game_response()

    def reset_game(self) -> GameResponse:
        with self._lock:
            game = self._require_game()
            self._cancel_automated_move()
            game.reset()
            self._after_transition()
            return self._create_game_response()

    def save_game(self) -> None:
        with self._lock:
            game = self._require_game()
            self.store.save_game(codec.encode(game.state))

    def load_game(self) -> GameResponse:
        """Replace the current game by the saved one. Errors are raised, not replaced by a fresh game."""
        with self._lock:
            state = codec.decode(self.store.load_game())
            self._cancel_automated_move()
            self.game = Game.from_state(state)
            self.game.start()
            self._after_transition()
            return self._create_game_response()

    def get_game_state(self) -> GameResponse:
        with self._lock:
            self._require_game()
            return self._create_game_response()

    def close(self) -> None:
        """End of the session: nothing may happen on the board anymore."""
        with self._lock:
            self._cancel_automated_move()

    # -- Automated player ---
    def _schedule_automated_move(self) -> None:
        """At most one pending automated move. A new one replaces the old one."""
        self._cancel_automated_move()
        self._schedule_id += 1
        self._pending_move = self.scheduler.call_later(
            self.settings.automated_move_delay,
            partial(self._play_automated_move, self._schedule_id),
        )

    def _cancel_automated_move(self) -> None:
        if self._pending_move is not None:
            self._pending_move.cancel()
            self._pending_move = None

    def _play_automated_move(self, schedule_id: int) -> None:
        """Callback of the scheduler. Runs on the timer thread with the ThreadingScheduler."""
        with self._lock:
            # cancelled (or replaced) while waiting for the lock
            if self._pending_move is None or schedule_id != self._schedule_id:
                return
            self._pending_move = None

            game = self._require_game()
            if not game.is_automated_turn():
                return

            # for the typechecker: an automated turn always has an active color
            disk = game.active_color
            assert disk is not None
            position = choose_move(disk, game.board, self.rng)
            assert position is not None, "the Game passes before an automated player runs out of moves"

            logger.info("Automated %s player places at (%d, %d)", disk.name, position.x, position.y)
            self._play(position)

    # -- Internal helpers --
    def _play(self, position: Position) -> AppliedMove:
        game = self._require_game()
        applied = game.place_disk(position)
        game.request_next_turn()
        self._after_transition()
        return applied

    def _after_transition(self) -> None:
        game = self._require_game()
        for event in game.drain_events():
            logger.debug("event: %s", type(event).__name__)
            if self.listener is not None:
                self.listener(event)

        if game.is_automated_turn():
            if self._pending_move is None:
                self._schedule_automated_move()
        else:
            self._cancel_automated_move()

        if self.settings.autosave:
            self._autosave(game)

    def _autosave(self, game: Game) -> None:
        """The transition already happened. A failed save is logged, the next one writes the full snapshot again."""
        try:
            self.store.save_game(codec.encode(game.state))
        except StorageError:
            logger.exception("Autosave failed")

    def _load_or_new_game(self) -> Game:
        """A missing or broken save is not fatal: start over."""
        try:
            state = codec.decode(self.store.load_game())
        except (StorageError, CorruptDataError) as error:
            logger.warning("Starting a new game, could not load the saved one: %s", error)
            return Game.new_game()
        return Game.from_state(state)

    def _require_game(self) -> Game:
        if self.game is None:
            raise GameStateError("No game in progress. Call start_game first.")
        return self.game

    def _create_game_response(self) -> GameResponse:
        """Convert the Game into a GameResponse"""
        game = self._require_game()
        state = game.state
        rows = codec.encode(state).splitlines()[1:]
        winner = game.winner
        return GameResponse(
            board=rows,
            active_color=_to_color(state.active_color),
            players={
                Color[disk.name]: PlayerMode[state.player(disk).mode.name]
                for disk in SIDES
            },
            status=PHASE_TO_STATUS[game.phase],
            winner=_to_color(winner),
            disk_counts={Color[disk.name]: game.board.count_disks(disk) for disk in SIDES},
        )

    def _create_move_response(self, applied: AppliedMove) -> MoveResponse:
        return MoveResponse(
            color=_to_color(applied.disk),
            position=PositionResponse(x=applied.position.x, y=applied.position.y),
            flipped=[PositionResponse(x=p.x, y=p.y) for p in applied.flipped],
            game=self._create_game_response(),
        )


def _to_color(disk: Optional[Disk]) -> Optional[Color]:
    return Color[disk.name] if disk is not None else None
