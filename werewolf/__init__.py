"""
Shared-screen Werewolf: role assignment, night/day sequencing, voting and win detection.
"""

__version__ = "0.1.0"
