from click.testing import CliRunner

from kings_valley.console import parse_position, play, render_board
from kings_valley.models import Board


def test_parse_position():
    assert parse_position('A1') == (0, 0)
    assert parse_position('c3') == (2, 2)
    assert parse_position('E5') == (4, 4)
    for bad in ('F1', 'A6', 'A0', 'A', 'A10', '', '1A'):
        assert parse_position(bad) is None


def test_render_initial_board():
    assert render_board(Board.initial()).splitlines() == [
        '  A  B  C  D  E',
        '1 1  1  K1 1  1  ',
        '2 .  .  .  .  .  ',
        '3 .  .  .  .  .  ',
        '4 .  .  .  .  .  ',
        '5 2  2  K2 2  2  ',
    ]


def test_play_reports_errors_and_reprompts():
    moves = [
        'A1',        # wrong token count
        'F1 A2',     # off the board
        'A5 A2',     # player 2 piece on player 1's turn
        'A1 A2',     # not the farthest cell
    ]
    result = CliRunner().invoke(play, input='\n'.join(moves) + '\n')
    # Input runs out before anyone wins
    assert result.exit_code != 0
    assert 'Invalid input format' in result.output
    assert 'Invalid board positions.' in result.output
    assert 'Invalid move: not your piece' in result.output
    assert 'Invalid move: destination not valid' in result.output
    assert "Player 2's turn." not in result.output


def test_play_until_king_reaches_valley():
    moves = [
        'C1 A3',  # P1 king slides down-left
        'A1 A2',  # rejected: P2 cannot move P1 pieces
        'E5 E2',  # P2 piece up the E file, stopped by E1
        'A1 A2',  # P1 piece stopped by the king on A3
        'B5 D3',  # P2 piece up-right, stopped by E2
        'A3 C3',  # P1 king slides right, stopped by D3
    ]
    result = CliRunner().invoke(play, input='\n'.join(moves) + '\n')
    assert result.exit_code == 0
    assert 'Invalid move: not your piece' in result.output
    assert "Player 1 wins by moving King to King's Valley!" in result.output
    final_board = result.output.split("King's Valley!")[-1]
    assert '3 .  .  K1 2  .  ' in final_board
