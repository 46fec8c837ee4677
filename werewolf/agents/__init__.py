"""
Agent implementations for auto-played seats.
"""

from .base_agent import BaseAgent, AgentContext
from .dummy_agent import DummyAgent

__all__ = ['BaseAgent', 'AgentContext', 'DummyAgent']
