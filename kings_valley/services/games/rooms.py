import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple

from kings_valley.models import GameSession
from .errors import IllegalMove, MoveError, RoomFull
from .rules import apply_move

logger = logging.getLogger(__name__)

MAX_PARTICIPANTS = 2


@dataclass
class Room:
    """A named two-seat container for one game session.

    Seats are handed out in join order (first joiner plays as player 1) and
    stay fixed while the participant is connected.
    """

    key: str
    session: GameSession = field(default_factory=GameSession)
    # player number -> participant id
    seats: Dict[int, str] = field(default_factory=dict)
    # Set once both seats have been filled; a room never goes back to waiting
    started: bool = False

    @property
    def participants(self) -> List[str]:
        return [self.seats[n] for n in sorted(self.seats)]

    @property
    def is_full(self) -> bool:
        return len(self.seats) >= MAX_PARTICIPANTS

    @property
    def is_empty(self) -> bool:
        return not self.seats

    @property
    def status(self) -> str:
        if self.session.is_over:
            return 'finished'
        if self.started:
            return 'active'
        if self.is_empty:
            return 'empty'
        return 'waiting'

    def player_number(self, participant_id: str) -> Optional[int]:
        for number, seated in self.seats.items():
            if seated == participant_id:
                return number
        return None

    def seat(self, participant_id: str) -> int:
        number = min(n for n in range(1, MAX_PARTICIPANTS + 1) if n not in self.seats)
        self.seats[number] = participant_id
        if self.is_full:
            self.started = True
        return number

    def unseat(self, participant_id: str) -> bool:
        number = self.player_number(participant_id)
        if number is None:
            return False
        del self.seats[number]
        return True

    def to_dict(self):
        return {
            'room': self.key,
            'status': self.status,
            'players': len(self.seats),
            'game': self.session.to_dict(),
        }


class RoomRegistry:
    """Owns every room in the process, keyed by the caller-supplied room key."""

    def __init__(self):
        self._rooms: Dict[str, Room] = {}

    def __len__(self) -> int:
        return len(self._rooms)

    def __contains__(self, room_key: str) -> bool:
        return room_key in self._rooms

    def get(self, room_key: str) -> Optional[Room]:
        return self._rooms.get(room_key)

    def join(self, room_key: str, participant_id: str) -> Tuple[int, GameSession]:
        """Seat a participant, creating the room on first use.

        Returns the assigned player number and the room's session. Raises
        RoomFull when both seats are taken by other participants.
        """
        room = self._rooms.get(room_key)
        if room is None:
            room = Room(key=room_key)
            self._rooms[room_key] = room
            logger.info(f"[room-create] room={room_key}")

        seated = room.player_number(participant_id)
        if seated is not None:
            return seated, room.session
        if room.is_full:
            raise RoomFull(room_key)

        player = room.seat(participant_id)
        logger.info(f"[join] room={room_key} participant={participant_id} player={player}")
        return player, room.session

    def submit_move(self, room_key: str, participant_id: str,
                    src: Sequence[int], dst: Sequence[int]) -> bool:
        """Apply a move on behalf of a seated participant.

        Rejections leave the room untouched and are reported only as False.
        """
        room = self._rooms.get(room_key)
        player = room.player_number(participant_id) if room else None
        if player is None:
            logger.debug(f"[move-reject] room={room_key} participant={participant_id} reason={MoveError.NOT_A_PARTICIPANT.value}")
            return False
        session = room.session
        if session.is_over:
            logger.debug(f"[move-reject] room={room_key} reason={MoveError.GAME_ALREADY_OVER.value}")
            return False
        if player != session.current_player:
            logger.debug(f"[move-reject] room={room_key} player={player} reason={MoveError.NOT_YOUR_PIECE.value}")
            return False
        try:
            apply_move(session, src[0], src[1], dst[0], dst[1])
        except IllegalMove as exc:
            logger.debug(f"[move-reject] room={room_key} player={player} reason={exc.reason.value}")
            return False
        if session.is_over:
            logger.info(f"[winner] room={room_key} player={session.winner}")
        return True

    def leave(self, room_key: str, participant_id: str) -> None:
        room = self._rooms.get(room_key)
        if room is None:
            return
        if room.unseat(participant_id):
            logger.info(f"[leave] room={room_key} participant={participant_id}")
        if room.is_empty:
            del self._rooms[room_key]
            logger.info(f"[room-delete] room={room_key}")
