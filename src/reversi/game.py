"""
The Game class is the entrypoint into the domain layer for the service layer.
It owns the one authoritative GameState of a session and orchestrates a turn:
place a disk --> resolve the turn (next player / pass / game over).

Each transition records events (src/reversi/events.py) which the caller drains afterwards.
"""

import logging
from copy import deepcopy
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional, Self

from src.core.exceptions import GameStateError, IllegalMoveError
from src.reversi.board import Board
from src.reversi.disk import SIDES, Disk, PlayerMode
from src.reversi.events import (
    DiskSet,
    Event,
    Finished,
    Passed,
    Reset,
    Started,
    TurnChanged,
)
from src.reversi.position import Position
from src.reversi.rules import flipped_coordinates, has_valid_move

logger = logging.getLogger(__name__)


class Phase(Enum):
    AWAITING_MOVE = auto()
    # a disk was placed, waiting for the caller to hand over the turn
    TURN_RESOLUTION = auto()
    # the active color has no legal move, waiting for the caller to acknowledge the pass
    AWAITING_PASS = auto()
    GAME_OVER = auto()


@dataclass
class PlayerSlot:
    disk: Disk
    mode: PlayerMode = PlayerMode.MANUAL


@dataclass
class GameState:
    """
    Everything that gets saved: the board, both player slots (Dark first) and whose turn it is.
    active_color is None once the game is over.
    """

    board: Board
    players: list[PlayerSlot]
    active_color: Optional[Disk]

    @classmethod
    def initial(cls) -> Self:
        return cls(
            board=Board.initial(),
            players=[PlayerSlot(disk) for disk in SIDES],
            active_color=Disk.DARK,
        )

    def player(self, disk: Disk) -> PlayerSlot:
        return self.players[disk.index]


@dataclass(frozen=True)
class AppliedMove:
    """What happened on the board, so the caller can animate it"""

    disk: Disk
    position: Position
    flipped: tuple[Position, ...]


@dataclass
class Game:
    # --- DOMAIN LAYER API CALLED BY SERVICE---

    state: GameState
    phase: Phase
    events: list[Event] = field(default_factory=list, compare=False, repr=False)

    @classmethod
    def new_game(cls) -> Self:
        """Fresh board, Dark to move, both players manual"""
        return cls(GameState.initial(), Phase.AWAITING_MOVE)

    @classmethod
    def from_state(cls, state: GameState) -> Self:
        """
        Resume from a (loaded) snapshot.
        ---

        The phase is not saved, so it is worked out from the board:
        * no active color --> the game is over
        * active color can move --> waiting for its move
        * only the opponent can move --> the active color has to pass
        * nobody can move --> the game is over (the active color gets cleared)
        """
        game = cls(deepcopy(state), Phase.AWAITING_MOVE)
        active = game.state.active_color
        board = game.state.board
        if active is None:
            game.phase = Phase.GAME_OVER
        elif has_valid_move(active, board):
            game.phase = Phase.AWAITING_MOVE
        elif has_valid_move(active.flipped, board):
            game.phase = Phase.AWAITING_PASS
        else:
            game.state.active_color = None
            game.phase = Phase.GAME_OVER
        return game

    @property
    def board(self) -> Board:
        return self.state.board

    @property
    def active_color(self) -> Optional[Disk]:
        return self.state.active_color

    @property
    def winner(self) -> Optional[Disk]:
        """Only meaningful once the game is over. None on a tie (and while still playing)."""
        if self.phase != Phase.GAME_OVER:
            return None
        return self.board.side_with_more_disks()

    def snapshot(self) -> GameState:
        """Independent copy of the current state (for saving or for handing to other layers)"""
        return deepcopy(self.state)

    def is_automated_turn(self) -> bool:
        """True if the active player is automated and it is waiting for its move"""
        active = self.state.active_color
        if self.phase != Phase.AWAITING_MOVE or active is None:
            return False
        return self.state.player(active).mode == PlayerMode.AUTOMATED

    def drain_events(self) -> list[Event]:
        """Hand over the events recorded since the last call"""
        events, self.events = self.events, []
        return events

    def start(self) -> GameState:
        """
        Announce the current state to the caller.
        If the loaded game is waiting for a pass or already finished, that is announced as well.
        """
        self._emit(Started(self.snapshot()))
        if self.phase == Phase.AWAITING_PASS:
            assert self.state.active_color is not None
            self._emit(Passed(self.state.active_color))
        elif self.phase == Phase.GAME_OVER:
            self._emit(Finished(self.winner))
        return self.state

    def place_disk(self, position: Position) -> AppliedMove:
        """
        Attempt to place a disk for the active color
        -----

        1. the game must be waiting for a move
        2. the placement must flip at least one disk (otherwise IllegalMoveError, nothing changes)
        3. set the disk and flip the enclosed ones

        The turn is NOT handed over here. Call request_next_turn afterwards.
        """
        if self.phase != Phase.AWAITING_MOVE:
            raise GameStateError(f"Cannot place a disk now. phase: {self.phase.name}")

        # for the typechecker: AWAITING_MOVE always has an active color
        disk = self.state.active_color
        assert disk is not None

        flipped = flipped_coordinates(disk, position, self.board)
        if not flipped:
            raise IllegalMoveError(
                f"{disk.name.lower()} cannot place a disk at ({position.x}, {position.y})"
            )

        self.board.set_disks(disk, [position, *flipped])
        self._change_phase(Phase.TURN_RESOLUTION)

        applied = AppliedMove(disk, position, tuple(flipped))
        logger.debug(
            "%s placed at (%d, %d), flipped %d", disk.name, position.x, position.y, len(flipped)
        )
        self._emit(DiskSet(disk, position, applied.flipped, self.board.copy()))
        return applied

    def request_next_turn(self) -> Phase:
        """
        Hand over the turn (after a placement, or as acknowledgment of a pass)
        ----

        Switch the active color, then:
        * new color has a move --> it is their turn
        * only the previous color has a move --> new color passes (one Passed event, the caller acknowledges it by calling this again)
        * nobody has a move --> game over, the side with more disks wins
        """
        if self.phase not in (Phase.TURN_RESOLUTION, Phase.AWAITING_PASS):
            raise GameStateError(
                f"Cannot hand over the turn now. phase: {self.phase.name}"
            )

        # for the typechecker
        previous = self.state.active_color
        assert previous is not None

        current = previous.flipped
        self.state.active_color = current

        if has_valid_move(current, self.board):
            self._change_phase(Phase.AWAITING_MOVE)
            self._emit(TurnChanged(current))
        elif has_valid_move(previous, self.board):
            self._change_phase(Phase.AWAITING_PASS)
            self._emit(Passed(current))
        else:
            self._finish()
        return self.phase

    def change_player_mode(self, disk: Disk, mode: PlayerMode) -> None:
        """Allowed at any time. Does not change whose turn it is."""
        self.state.player(disk).mode = mode
        logger.debug("%s player is now %s", disk.name, mode.name)

    def reset(self) -> GameState:
        """Throw away the current game and start over. Nothing gets saved here."""
        self.state = GameState.initial()
        self._change_phase(Phase.AWAITING_MOVE)
        self._emit(Reset(self.snapshot()))
        return self.state

    # -- PRIVATE HELPERS ---
    def _finish(self) -> None:
        self.state.active_color = None
        self._change_phase(Phase.GAME_OVER)
        winner = self.winner
        logger.info("Game over. winner: %s", winner.name if winner else "tie")
        self._emit(Finished(winner))

    def _change_phase(self, new_phase: Phase) -> None:
        self.phase = new_phase

    def _emit(self, event: Event) -> None:
        self.events.append(event)
