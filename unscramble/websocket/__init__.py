"""
WebSocket Package

Contains the Flask-SocketIO event handlers.
"""

from .handlers import register_websocket_handlers, broadcast_game_state_update

__all__ = ['register_websocket_handlers', 'broadcast_game_state_update']
