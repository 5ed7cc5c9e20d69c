"""
WebSocket Package

Socket.IO event handlers for live round updates.
"""

from .handlers import RoundBroadcasters, register_websocket_handlers

__all__ = ['RoundBroadcasters', 'register_websocket_handlers']
