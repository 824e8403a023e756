from typing import List, Tuple

from kings_valley.models import CENTER, Board, Cell, GameSession
from .errors import IllegalMove, MoveError

Position = Tuple[int, int]

# up, down, left, right, up-left, up-right, down-left, down-right
DIRECTIONS = (
    (-1, 0), (1, 0), (0, -1), (0, 1),
    (-1, -1), (-1, 1), (1, -1), (1, 1),
)


def _slide(board: Board, r: int, c: int, dr: int, dc: int):
    nr, nc = r, c
    while board.is_inside(nr + dr, nc + dc) and board.is_empty(nr + dr, nc + dc):
        nr, nc = nr + dr, nc + dc
    if (nr, nc) == (r, c):
        return None
    return nr, nc


def legal_destinations(board: Board, r: int, c: int) -> List[Position]:
    """Cells the piece at (r, c) can reach, one per open direction.

    A piece slides until the next cell is occupied or off the board; it
    cannot stop early, so each direction yields at most one destination.
    """
    moves = []
    for dr, dc in DIRECTIONS:
        dest = _slide(board, r, c, dr, dc)
        if dest is not None:
            moves.append(dest)
    return moves


def apply_move(session: GameSession, from_r: int, from_c: int, to_r: int, to_c: int) -> bool:
    """Move a piece for the player whose turn it is.

    Raises IllegalMove without touching the session when any check fails.
    A king reaching the center wins the game and the turn does not pass.
    """
    board = session.board
    if not board.is_inside(from_r, from_c) or not board.is_inside(to_r, to_c):
        raise IllegalMove(MoveError.OUT_OF_BOUNDS)
    if session.is_over:
        raise IllegalMove(MoveError.GAME_ALREADY_OVER)
    piece = board.get(from_r, from_c)
    if piece.owner != session.current_player:
        raise IllegalMove(MoveError.NOT_YOUR_PIECE)
    if (to_r, to_c) not in legal_destinations(board, from_r, from_c):
        raise IllegalMove(MoveError.ILLEGAL_DESTINATION)

    board.set(to_r, to_c, piece)
    board.set(from_r, from_c, Cell.EMPTY)

    if piece.is_king and (to_r, to_c) == CENTER:
        session.winner = session.current_player
    else:
        session.current_player = 2 if session.current_player == 1 else 1
    return True
