import os

from flask import Blueprint, current_app, jsonify, send_from_directory

main = Blueprint('main', __name__)


def _static_dir():
    # Relative paths are taken from the directory the server was started in
    return os.path.abspath(current_app.config['STATIC_DIR'])


@main.route('/')
def index():
    static_dir = _static_dir()
    if os.path.isfile(os.path.join(static_dir, 'index.html')):
        return send_from_directory(static_dir, 'index.html')
    return jsonify({'message': "Welcome to the King's Valley game server!"})


@main.route('/<path:filename>')
def client_asset(filename):
    return send_from_directory(_static_dir(), filename)
