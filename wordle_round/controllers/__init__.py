"""
Controllers Package

HTTP blueprints exposing the round's intents and snapshots.
"""

from .game_controller import game_bp

__all__ = ['game_bp']
