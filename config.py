import os


def _split_origins(raw):
    return [o.strip() for o in raw.split(',') if o.strip()]


class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'you-will-never-guess'
    # Browser origins allowed to open a Socket.IO connection
    CORS_ALLOWED_ORIGINS = _split_origins(os.environ.get(
        'CORS_ALLOWED_ORIGINS',
        'http://localhost:3000,http://127.0.0.1:3000',
    ))
    SOCKETIO_NAMESPACE = os.environ.get('SOCKETIO_NAMESPACE', '/')
    # Directory holding the browser client (index.html and assets)
    STATIC_DIR = os.environ.get('STATIC_DIR', 'public')
    HOST = os.environ.get('HOST', '0.0.0.0')
    PORT = int(os.environ.get('PORT', '3000'))
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
