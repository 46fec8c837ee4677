"""
Presentation adapters: event fan-out and the shared-screen web server.
"""

from .event_emitter import EventEmitter

__all__ = ['EventEmitter']
