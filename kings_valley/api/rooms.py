from flask import Blueprint, jsonify

from kings_valley import get_registry

rooms = Blueprint('rooms', __name__)


@rooms.route('/<string:room_key>', methods=['GET'])
def get_room_state(room_key):
    """
    Returns the seat count, status and game snapshot of a live room.
    """
    room = get_registry().get(room_key)
    if room is None:
        return jsonify({'error': 'Room not found'}), 404
    return jsonify(room.to_dict()), 200
