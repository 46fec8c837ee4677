"""
Web server exposing the shared screen as a JSON API with live Socket.IO updates.
"""

import logging
from threading import Lock
from typing import Optional, Dict, Any

from flask import Flask, jsonify, request
from flask_socketio import SocketIO, emit

from .event_emitter import EventEmitter
from ..core import WerewolfError, InvalidPlayerCount
from ..config.game_config import GameConfig, default_config
from ..game import WerewolfGame


logger = logging.getLogger(__name__)


class GameServer:
    """Web server driving one WerewolfGame for a single shared screen."""

    def __init__(self, config: Optional[GameConfig] = None, game: Optional[WerewolfGame] = None):
        self.config = config or default_config
        self.port = self.config.port
        self.host = self.config.host

        self.app = Flask(__name__)
        self.socketio = SocketIO(self.app, cors_allowed_origins="*", async_mode='threading')
        self.event_emitter = game.event_emitter if game else EventEmitter()
        self.game = game or WerewolfGame(self.config, event_emitter=self.event_emitter)
        # Requests are applied one at a time, like taps on the shared screen
        self._lock = Lock()
        self.clients_connected = 0

        # Register event emitter listener
        self.event_emitter.register_listener(self._broadcast_event)

        # Setup routes
        self._setup_routes()

        # Setup socketio handlers
        self._setup_socketio()

    def _setup_routes(self):
        """Setup Flask routes."""
        app = self.app

        @app.errorhandler(WerewolfError)
        def handle_game_error(error: WerewolfError):
            return jsonify({"error": error.kind, "message": error.message}), 400

        @app.route('/')
        @app.route('/api/state')
        def get_state():
            with self._lock:
                if self.game.game_state is None:
                    return jsonify({"error": "no_game", "message": "No game is running"}), 404
                return jsonify(self.game.snapshot())

        @app.route('/api/roles')
        def role_preview():
            player_count = self._int_arg(request.args.get('players'), self.config.player_count)
            return jsonify(WerewolfGame.role_preview(player_count))

        @app.route('/api/game', methods=['POST'])
        def new_game():
            payload = self._payload()
            player_count = self._int_arg(payload.get('player_count'), self.config.player_count)
            with self._lock:
                self.game.new_game(player_count)
                return jsonify(self.game.snapshot()), 201

        @app.route('/api/play-again', methods=['POST'])
        def play_again():
            payload = self._payload()
            player_count = payload.get('player_count')
            if player_count is not None:
                player_count = self._int_arg(player_count, self.config.player_count)
            with self._lock:
                self.game.play_again(player_count)
                return jsonify(self.game.snapshot()), 201

        @app.route('/api/players/<int:player_index>/role')
        def role_card(player_index: int):
            with self._lock:
                return jsonify(self.game.role_card(player_index))

        @app.route('/api/select', methods=['POST'])
        def select_target():
            target = self._payload().get('target')
            with self._lock:
                self.game.select_target(target)
                return jsonify(self.game.snapshot())

        @app.route('/api/confirm', methods=['POST'])
        def confirm():
            with self._lock:
                result = self.game.confirm()
                return self._result_response(result)

        @app.route('/api/skip', methods=['POST'])
        def skip():
            with self._lock:
                self.game.skip()
                return jsonify(self.game.snapshot())

        @app.route('/api/night-action', methods=['POST'])
        def night_action():
            payload = self._payload()
            with self._lock:
                result = self.game.submit_night_action(payload.get('actor'), payload.get('target'))
                return self._result_response(result)

        @app.route('/api/vote', methods=['POST'])
        def vote():
            payload = self._payload()
            with self._lock:
                result = self.game.vote(payload.get('voter'), payload.get('target'))
                return self._result_response(result)

    def _setup_socketio(self):
        """Setup SocketIO event handlers."""
        @self.socketio.on('connect')
        def handle_connect():
            self.clients_connected += 1
            logger.info("Client connected. Total clients: %d", self.clients_connected)

            # Send current game state if game is running
            with self._lock:
                snapshot = self.game.snapshot() if self.game.game_state is not None else None
            if snapshot is not None:
                emit('state_changed', {'game_state': snapshot})

        @self.socketio.on('disconnect')
        def handle_disconnect():
            self.clients_connected -= 1
            logger.info("Client disconnected. Total clients: %d", self.clients_connected)

    def _broadcast_event(self, event_type: str, data: Dict[str, Any]) -> None:
        """Broadcast an event to all connected clients."""
        if self.clients_connected > 0:
            self.socketio.emit(event_type, data)

    def _result_response(self, result):
        body = {
            "success": result.success,
            "incomplete": result.incomplete,
            "message": result.message,
            "game_state": self.game.snapshot(),
        }
        return jsonify(body)

    @staticmethod
    def _payload() -> Dict[str, Any]:
        return request.get_json(silent=True) or {}

    @staticmethod
    def _int_arg(value: Any, default: int) -> int:
        """Player count from a query string or JSON body; fractions are rejected, not truncated."""
        if value is None:
            return default
        if isinstance(value, bool):
            raise InvalidPlayerCount(value, f"Player count must be a whole number, got {value!r}")
        if isinstance(value, float):
            if not value.is_integer():
                raise InvalidPlayerCount(value, f"Player count must be a whole number, got {value!r}")
            return int(value)
        try:
            return int(value)
        except (TypeError, ValueError):
            raise InvalidPlayerCount(value, f"Player count must be a whole number, got {value!r}")

    def start(self) -> None:
        """Start the web server."""
        if self.game.game_state is None:
            self.game.new_game()
        print(f"\n{'='*60}")
        print(f"Starting web server on http://{self.host}:{self.port}")
        print(f"{'='*60}\n")
        self.socketio.run(self.app, host=self.host, port=self.port, debug=False, allow_unsafe_werkzeug=True)
