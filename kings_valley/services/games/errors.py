from enum import Enum


class MoveError(str, Enum):
    OUT_OF_BOUNDS = 'out_of_bounds'
    GAME_ALREADY_OVER = 'game_already_over'
    NOT_YOUR_PIECE = 'not_your_piece'
    ILLEGAL_DESTINATION = 'illegal_destination'
    NOT_A_PARTICIPANT = 'not_a_participant'

    @property
    def message(self) -> str:
        return _MESSAGES[self]


_MESSAGES = {
    MoveError.OUT_OF_BOUNDS: 'Invalid move: outside board',
    MoveError.GAME_ALREADY_OVER: 'Invalid move: the game is already over',
    MoveError.NOT_YOUR_PIECE: 'Invalid move: not your piece',
    MoveError.ILLEGAL_DESTINATION: 'Invalid move: destination not valid',
    MoveError.NOT_A_PARTICIPANT: 'Invalid move: not a participant in this room',
}


class KingsValleyError(Exception):
    pass


class IllegalMove(KingsValleyError):
    def __init__(self, reason: MoveError):
        super().__init__(reason.message)
        self.reason = reason


class RoomFull(KingsValleyError):
    def __init__(self, room_key: str):
        super().__init__(f'room {room_key!r} already has two players')
        self.room_key = room_key
