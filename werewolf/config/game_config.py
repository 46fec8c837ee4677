"""
Game configuration and constants.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class GameConfig:
    """Configuration for game parameters."""

    # Game settings
    player_count: int = 8  # Valid range is 5-20, validated when a game starts
    random_seed: Optional[int] = None  # Random seed for reproducible role assignment and auto-play
    max_rounds: int = 50  # Auto-play stops after this many rounds without a winner

    # Narration
    log_level: str = "INFO"
    log_view_size: int = 10  # How many recent log entries the screen shows
    use_narration: bool = True  # Echo narration to the console

    # Web adapter
    host: str = "127.0.0.1"
    port: int = 5000


# Default configuration instance
default_config = GameConfig()
