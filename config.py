"""
Central configuration for the Tic-Tac-Toe engine.
Pydantic models give type-safe settings loaded from defaults, env vars or JSON.
"""
from __future__ import annotations

import json
import logging
import os
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, field_validator

PLAYER_KINDS = ("minimax", "random", "human")
TIEBREAK_MODES = ("left", "right", "random")

# Search depth per board size when no ply is configured.
DEFAULT_PLY_BY_SIZE = {1: 9, 2: 9, 3: 9, 4: 3}
LARGE_BOARD_PLY = 2


class GameSettings(BaseModel):
    """Board and seat settings."""

    board_size: int = Field(default=3, ge=1, le=7, description="Number of rows and columns")
    x_player: str = Field(default="human", description="Player type for X (moves first)")
    o_player: str = Field(default="minimax", description="Player type for O")

    @field_validator('x_player', 'o_player', mode='before')
    @classmethod
    def validate_player_kind(cls, v):
        v_lower = str(v).strip().lower()
        if v_lower not in PLAYER_KINDS:
            raise ValueError(f"player must be one of {list(PLAYER_KINDS)}")
        return v_lower


class EngineSettings(BaseModel):
    """Minimax engine settings."""

    ply: Optional[int] = Field(default=None, ge=0, description="Search depth in plies, None to size it to the board")
    tiebreak: str = Field(default="random", description="Tie-break mode: left, right or random")
    seed: Optional[int] = Field(default=None, description="Seed for random tie-breaks and random players")

    @field_validator('tiebreak', mode='before')
    @classmethod
    def validate_tiebreak(cls, v):
        v_lower = str(v).strip().lower()
        if v_lower not in TIEBREAK_MODES:
            raise ValueError(f"tiebreak must be one of {list(TIEBREAK_MODES)}")
        return v_lower


class LoggingSettings(BaseModel):
    """Logging configuration."""

    log_level: str = Field(default="WARNING", description="Logging level (DEBUG, INFO, WARNING, ERROR)")
    log_to_file: bool = Field(default=False, description="Write logs to file")
    log_file_path: str = Field(default="tictactoe.log", description="Log file path")

    @field_validator('log_level', mode='before')
    @classmethod
    def validate_log_level(cls, v):
        valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR']
        v_upper = v.upper() if isinstance(v, str) else str(v).upper()
        if v_upper not in valid_levels:
            raise ValueError(f"log_level must be one of {valid_levels}")
        return v_upper


class TicTacToeConfig(BaseModel):
    """Main configuration model."""

    game: GameSettings = Field(default_factory=GameSettings)
    engine: EngineSettings = Field(default_factory=EngineSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    version: str = Field(default="1.0.0", description="Configuration version")
    config_file: Optional[str] = Field(default=None, description="Path to config file")

    @classmethod
    def from_env(cls) -> 'TicTacToeConfig':
        """Create configuration from TICTACTOE_* environment variables."""
        seed = os.getenv('TICTACTOE_SEED')
        ply = os.getenv('TICTACTOE_PLY')
        return cls(
            game=GameSettings(
                board_size=int(os.getenv('TICTACTOE_SIZE', '3')),
                x_player=os.getenv('TICTACTOE_X', 'human'),
                o_player=os.getenv('TICTACTOE_O', 'minimax'),
            ),
            engine=EngineSettings(
                ply=int(ply) if ply else None,
                tiebreak=os.getenv('TICTACTOE_TIEBREAK', 'random'),
                seed=int(seed) if seed else None,
            ),
            logging=LoggingSettings(
                log_level=os.getenv('TICTACTOE_LOG_LEVEL', 'WARNING'),
                log_to_file=os.getenv('TICTACTOE_LOG_FILE', 'false').lower() == 'true',
            ),
        )

    def search_ply(self) -> int:
        """Search depth to use: the configured ply, or a default sized to the board."""
        if self.engine.ply is not None:
            return self.engine.ply
        return DEFAULT_PLY_BY_SIZE.get(self.game.board_size, LARGE_BOARD_PLY)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'game': self.game.model_dump(),
            'engine': self.engine.model_dump(),
            'logging': self.logging.model_dump(),
            'version': self.version,
            'config_file': self.config_file,
        }

    def save_to_file(self, filepath: str) -> None:
        """Save configuration to JSON file."""
        config_dict = self.to_dict()
        config_dict['config_file'] = filepath

        with open(filepath, 'w') as f:
            json.dump(config_dict, f, indent=2)

    @classmethod
    def load_from_file(cls, filepath: str) -> 'TicTacToeConfig':
        """Load configuration from JSON file."""
        with open(filepath, 'r') as f:
            data = json.load(f)

        return cls(
            game=GameSettings(**data.get('game', {})),
            engine=EngineSettings(**data.get('engine', {})),
            logging=LoggingSettings(**data.get('logging', {})),
            version=data.get('version', '1.0.0'),
            config_file=filepath,
        )

    def update_from_dict(self, updates: Dict[str, Any]) -> None:
        """Update configuration from a nested dictionary, re-validating each section."""
        for section, settings in updates.items():
            if hasattr(self, section) and isinstance(settings, dict):
                section_model = getattr(self, section)
                merged = {**section_model.model_dump(), **settings}
                setattr(self, section, type(section_model)(**merged))


# Global configuration instance
_config: Optional[TicTacToeConfig] = None


def get_config() -> TicTacToeConfig:
    """Get or create the global configuration instance."""
    global _config
    if _config is None:
        _config = TicTacToeConfig.from_env()
    return _config


def load_config_from_file(filepath: str) -> TicTacToeConfig:
    """Load configuration from file and update global instance."""
    global _config
    _config = TicTacToeConfig.load_from_file(filepath)
    return _config


def reset_config() -> None:
    """Reset the global configuration to defaults."""
    global _config
    _config = None


def get_logging_settings() -> LoggingSettings:
    return get_config().logging


def setup_logging(settings: Optional[LoggingSettings] = None) -> None:
    """Configure root logging once from the logging settings."""
    if getattr(setup_logging, "_configured", False):
        return
    settings = settings or get_logging_settings()
    level: int = getattr(logging, settings.log_level, logging.WARNING)
    kwargs: Dict[str, Any] = {}
    if settings.log_to_file:
        kwargs["filename"] = settings.log_file_path
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        **kwargs,
    )
    setup_logging._configured = True  # type: ignore[attr-defined]
