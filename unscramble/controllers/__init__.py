"""
Controllers Package

Contains the HTTP endpoint blueprints.
"""

from .game_controller import game_bp

__all__ = ['game_bp']
