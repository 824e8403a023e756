from flask import current_app, request
from flask_socketio import emit, join_room, leave_room
from typing import Dict

from kings_valley import socketio
from kings_valley.services.games.errors import RoomFull
from kings_valley.services.games.rooms import RoomRegistry


def _room_channel(room_key: str) -> str:
    return f"room:{room_key}"


def _parse_cell(value):
    if not isinstance(value, (list, tuple)) or len(value) != 2:
        return None
    if not all(isinstance(v, int) and not isinstance(v, bool) for v in value):
        return None
    return value[0], value[1]


class SessionGateway:
    """Socket.IO boundary between connections and the room registry.

    Each socket id is a participant. Failures never produce error events:
    a full room gets a targeted 'full' notice, every rejected move is silent.
    """

    def __init__(self, registry: RoomRegistry):
        self.registry = registry
        # socket id -> room key the connection is seated in
        self._sid_to_room: Dict[str, str] = {}

    def on_join(self, room_key):
        if not isinstance(room_key, str) or not room_key:
            current_app.logger.debug(f"[join-ignored] sid={request.sid} payload={room_key!r}")
            return
        sid = request.sid
        try:
            player, session = self.registry.join(room_key, sid)
        except RoomFull:
            current_app.logger.info(f"[full] room={room_key} sid={sid}")
            emit('full')
            return

        # Give up the old seat only once the new one is secured
        previous = self._sid_to_room.get(sid)
        if previous is not None and previous != room_key:
            self._leave(sid, previous)

        self._sid_to_room[sid] = room_key
        join_room(_room_channel(room_key))
        emit('init', {'player': player, 'game': session.to_dict(), 'room': room_key})
        emit('update', session.to_dict(), to=_room_channel(room_key))

    def on_move(self, data):
        sid = request.sid
        room_key = self._sid_to_room.get(sid)
        if room_key is None or not isinstance(data, dict):
            return
        src = _parse_cell(data.get('from'))
        dst = _parse_cell(data.get('to'))
        if src is None or dst is None:
            current_app.logger.debug(f"[move-ignored] room={room_key} sid={sid} payload={data!r}")
            return
        if self.registry.submit_move(room_key, sid, src, dst):
            room = self.registry.get(room_key)
            current_app.logger.info(f"[move] room={room_key} sid={sid} from={list(src)} to={list(dst)}")
            emit('update', room.session.to_dict(), to=_room_channel(room_key))

    def on_disconnect(self, reason=None):
        sid = request.sid
        room_key = self._sid_to_room.get(sid)
        if room_key is not None:
            self._leave(sid, room_key)

    def _leave(self, sid: str, room_key: str) -> None:
        self.registry.leave(room_key, sid)
        self._sid_to_room.pop(sid, None)
        leave_room(_room_channel(room_key))
        current_app.logger.info(f"[leave] room={room_key} sid={sid}")


def register_socketio_handlers(registry: RoomRegistry, namespace: str = '/') -> SessionGateway:
    """Bind a gateway for the given registry to the Socket.IO events."""
    gateway = SessionGateway(registry)
    socketio.on_event('join', gateway.on_join, namespace=namespace)
    socketio.on_event('move', gateway.on_move, namespace=namespace)
    socketio.on_event('disconnect', gateway.on_disconnect, namespace=namespace)
    return gateway
