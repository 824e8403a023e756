from enum import IntEnum
from typing import List, Optional

BOARD_SIZE = 5
CENTER = (2, 2)


class Cell(IntEnum):
    EMPTY = 0
    PIECE_1 = 1
    PIECE_2 = 2
    KING_1 = 3
    KING_2 = 4

    @property
    def owner(self) -> Optional[int]:
        if self in (Cell.PIECE_1, Cell.KING_1):
            return 1
        if self in (Cell.PIECE_2, Cell.KING_2):
            return 2
        return None

    @property
    def is_king(self) -> bool:
        return self in (Cell.KING_1, Cell.KING_2)


class Board:
    """A 5x5 grid of cells, row 0 at the top and column 0 (A) on the left."""

    size = BOARD_SIZE

    def __init__(self):
        self.cells: List[List[Cell]] = [[Cell.EMPTY] * self.size for _ in range(self.size)]

    @classmethod
    def initial(cls) -> 'Board':
        """Player 1 fills row 0 and player 2 fills row 4, kings in the middle column."""
        board = cls()
        middle = cls.size // 2
        for c in range(cls.size):
            board.cells[0][c] = Cell.KING_1 if c == middle else Cell.PIECE_1
            board.cells[cls.size - 1][c] = Cell.KING_2 if c == middle else Cell.PIECE_2
        return board

    @classmethod
    def from_rows(cls, rows) -> 'Board':
        if len(rows) != cls.size or any(len(row) != cls.size for row in rows):
            raise ValueError(f'board must be {cls.size}x{cls.size}')
        board = cls()
        board.cells = [[Cell(v) for v in row] for row in rows]
        return board

    def is_inside(self, r: int, c: int) -> bool:
        return 0 <= r < self.size and 0 <= c < self.size

    def get(self, r: int, c: int) -> Cell:
        return self.cells[r][c]

    def set(self, r: int, c: int, cell: Cell) -> None:
        self.cells[r][c] = Cell(cell)

    def is_empty(self, r: int, c: int) -> bool:
        return self.cells[r][c] == Cell.EMPTY

    def to_list(self) -> List[List[int]]:
        return [[int(cell) for cell in row] for row in self.cells]


class GameSession:
    """One game: a board, whose turn it is, and the winner once decided."""

    def __init__(self, board: Optional[Board] = None, current_player: int = 1,
                 winner: Optional[int] = None):
        self.board = board if board is not None else Board.initial()
        self.current_player = current_player
        self.winner = winner

    @property
    def is_over(self) -> bool:
        return self.winner is not None

    def to_dict(self):
        return {
            'board': self.board.to_list(),
            'currentPlayer': self.current_player,
            'winner': self.winner,
        }
