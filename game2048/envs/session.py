"""Game session: owns the board and the scores, and drives the turns of the 2048 game."""

import logging
from enum import Enum

from numpy import count_nonzero, int64, ndarray, zeros

from game2048.addons.config import GameConfig
from game2048.core import Key, MoveEvent, Side, is_over, key_to_side, parse_key, tilt
from game2048.core import can_move as board_can_move
from game2048.utils.base import Display, InputSource
from game2048.utils.tiles import TILE_SPAWN_PROBS

# ##>: Module logger.
_logger = logging.getLogger(__name__)


class Phase(Enum):
    """Where a session stands."""

    IDLE = 'idle'
    PLAYING = 'playing'
    GAME_OVER = 'game over'
    TERMINATED = 'terminated'


class GameSession:
    """
    A run of 2048 games.

    The session holds the authoritative board, the score of the current game, the best final score of the
    run and the number of tiles. Keys and random tiles come from an ``InputSource``; every change of the
    board is reported to a ``Display``.

    Parameters
    ----------
    display : Display
        Surface showing the board.
    source : InputSource
        Provider of keys and random tiles.
    config : GameConfig, optional
        Board size and winning score (default is a 4 x 4 board won at 2048).
    """

    def __init__(self, display: Display, source: InputSource, config: GameConfig | None = None):
        self.config = config or GameConfig()
        self._display = display
        self._source = source
        self._board: ndarray = zeros((self.config.size, self.config.size), dtype=int64)

        self.score = 0
        self.max_score = 0
        self.count = 0
        self.moves = 0
        self.phase = Phase.IDLE

    @property
    def board(self) -> ndarray:
        """
        Get a copy of the current board.

        Returns
        -------
        ndarray
            The board, ``board[r, c]`` is the tile at row r and column c, 0 when the cell is empty.
        """
        return self._board.copy()

    def load(self, board: ndarray, score: int = 0) -> None:
        """
        Replace the board and the score of the current game.

        Parameters
        ----------
        board : ndarray
            New board, of the configured size.
        score : int, optional
            Score of the current game (default is 0).
        """
        if board.shape != self._board.shape:
            raise ValueError(f'Expected a board of shape {self._board.shape}, got {board.shape}.')
        self._board = board.astype(int64, copy=True)
        self.count = int(count_nonzero(self._board))
        self.score = score

    def clear(self) -> None:
        """Reset the score for the current game to 0 and clear the board."""
        self.score = 0
        self.count = 0
        self.moves = 0
        self._board[:] = 0
        self._display.clear()
        self._display.set_score(self.score, self.max_score)

    def can_move(self) -> bool:
        """Return True iff two adjacent cells hold the same value."""
        return board_can_move(self._board)

    def game_over(self) -> bool:
        """Return True iff the current game is over."""
        return is_over(self._board, self.count, self.score, self.config.winning)

    def set_random_piece(self) -> None:
        """
        Add a tile to a random empty cell. Has no effect if the board is full or the game is over.

        Notes
        -----
        Candidates are requested until one targets an empty cell, so a scripted feed is consumed exactly
        as the game asks for it.
        """
        if self.count == self.config.squares or self.game_over():
            return

        while True:
            value, row, col = self._source.get_random_tile()
            _logger.info('%d %d %d', value, row, col)
            if not (0 <= row < self.config.size and 0 <= col < self.config.size):
                raise ValueError(f'Random tile outside of the board: ({row}, {col}).')
            if value not in TILE_SPAWN_PROBS:
                raise ValueError(f'Random tile value must be 2 or 4, got {value}.')
            if self._board[row, col] == 0:
                break
            _logger.debug('Cell (%d, %d) is occupied, asking for another tile.', row, col)

        self._board[row, col] = value
        self.count += 1
        self._display.add_tile(value, row, col)

    def tilt(self, side: Side) -> bool:
        """
        Tilt the board toward ``side``.

        Parameters
        ----------
        side : Side
            Side the tiles move toward.

        Returns
        -------
        bool
            True iff the tilt changed the board. Nothing is updated otherwise.
        """
        result = tilt(self._board, side)
        if not result.changed:
            return False

        # ##: Replay the tilt on the display.
        for event in result.events:
            if isinstance(event, MoveEvent):
                self._display.move_tile(event.value, *event.source, *event.destination)
            else:
                self._display.merge_tile(event.value, event.merged, *event.source, *event.destination)

        self._board = result.board
        self.score += result.score
        self.count -= result.merges
        if result.merges:
            self._display.set_score(self.score, self.max_score)
        return True

    def handle_key(self, key: Key) -> bool:
        """
        Apply a command.

        Parameters
        ----------
        key : Key
            The command.

        Returns
        -------
        bool
            True when the command ends the wait for a move: an effective tilt, a new game or quit.
        """
        if key is Key.QUIT:
            self.phase = Phase.TERMINATED
            return True
        if key is Key.NEW_GAME:
            self.clear()
            self.phase = Phase.PLAYING
            return True
        if self.game_over():
            return False
        if self.tilt(key_to_side(key)):
            self.moves += 1
            return True
        _logger.debug('Move %s does not change the board.', key.value)
        return False

    def _finish(self) -> None:
        self.max_score = max(self.score, self.max_score)
        self._display.set_score(self.score, self.max_score)
        self._display.end_game()
        self.phase = Phase.GAME_OVER

    def _next_command(self) -> Key:
        while True:
            text = self._source.read_key()
            _logger.info('%s', text)
            key = parse_key(text)
            if key is not None and self.handle_key(key):
                return key

    def play(self) -> bool:
        """
        Play one game, updating the best score.

        Returns
        -------
        bool
            True iff play should continue with another game, False to stop.
        """
        self.clear()
        self.phase = Phase.PLAYING
        self.set_random_piece()
        self._display.set_score(self.score, self.max_score)

        while True:
            self.set_random_piece()
            self._display.display_moves()

            if self.phase is Phase.PLAYING and self.game_over():
                self._finish()

            key = self._next_command()
            if key is Key.NEW_GAME:
                return True
            if key is Key.QUIT:
                return False
            self._display.display_moves()

    def run(self) -> None:
        """Play games until the player quits."""
        while self.play():
            _logger.debug('New game, best score so far: %d', self.max_score)
