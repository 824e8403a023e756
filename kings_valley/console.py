import click
from typing import Optional, Tuple

from kings_valley.models import Board, Cell, GameSession
from kings_valley.services.games.errors import IllegalMove
from kings_valley.services.games.rules import apply_move

COLUMNS = 'ABCDE'
ROWS = '12345'

_SYMBOLS = {
    Cell.EMPTY: '.  ',
    Cell.PIECE_1: '1  ',
    Cell.PIECE_2: '2  ',
    Cell.KING_1: 'K1 ',
    Cell.KING_2: 'K2 ',
}


def render_board(board: Board) -> str:
    lines = ['  ' + '  '.join(COLUMNS)]
    for r in range(board.size):
        lines.append(f"{r + 1} " + ''.join(_SYMBOLS[board.get(r, c)] for c in range(board.size)))
    return '\n'.join(lines)


def parse_position(text: str) -> Optional[Tuple[int, int]]:
    """Parse algebraic notation like 'C3' into (row, col); None if off the board."""
    if not text or len(text) != 2:
        return None
    col = COLUMNS.find(text[0].upper())
    row = ROWS.find(text[1])
    if col < 0 or row < 0:
        return None
    return row, col


@click.command('play')
def play():
    """Play King's Valley for two players sharing this terminal."""
    game = GameSession()
    click.echo("Welcome to King's Valley!")
    click.echo("Move pieces by typing moves like 'A1 C3' (from-to).")

    while True:
        click.echo(f"\nPlayer {game.current_player}'s turn.")
        click.echo('\nBoard:')
        click.echo(render_board(game.board))
        parts = click.prompt('Enter move (e.g. A1 C3)', prompt_suffix=': ').split()
        if len(parts) != 2:
            click.echo('Invalid input format. Use: <from> <to> (e.g. A1 C3)')
            continue
        src = parse_position(parts[0])
        dst = parse_position(parts[1])
        if src is None or dst is None:
            click.echo('Invalid board positions.')
            continue
        player = game.current_player
        try:
            apply_move(game, src[0], src[1], dst[0], dst[1])
        except IllegalMove as exc:
            click.echo(str(exc))
            continue
        if game.winner is not None:
            click.echo(f"\nPlayer {player} wins by moving King to King's Valley!")
            click.echo(render_board(game.board))
            return