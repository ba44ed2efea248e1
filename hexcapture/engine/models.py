from __future__ import annotations

from enum import Enum
from typing import NewType

from pydantic import BaseModel, ConfigDict, Field

from hexcapture.config import settings

# --- Identifiers ---
PlayerId = NewType("PlayerId", str)

# --- Color ---
class Color(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    red: int
    green: int
    blue: int

    def __str__(self) -> str:
        return f"rgb({self.red},{self.green},{self.blue})"

# --- Player ---
class PlayerKind(str, Enum):
    HUMAN = "human"
    AI = "ai"

class Player(BaseModel):
    model_config = ConfigDict(frozen=True)

    player_id: PlayerId
    display_name: str
    seat_index: int
    color: Color
    kind: PlayerKind = PlayerKind.HUMAN
    bot_id: str | None = None

    @property
    def is_ai(self) -> bool:
        return self.kind == PlayerKind.AI

    # Identity is the player id; names and colours are display details
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Player):
            return NotImplemented
        return self.player_id == other.player_id

    def __hash__(self) -> int:
        return hash(self.player_id)

# --- Game config ---
class SpawnMode(str, Enum):
    FAIR = "fair"
    RANDOM = "random"

class GameConfig(BaseModel):
    num_humans: int = 1
    num_ai: int = 1
    radius: int = Field(default_factory=lambda: settings.default_radius)
    wall_density: float = Field(default_factory=lambda: settings.default_wall_density)
    spawn_mode: SpawnMode = Field(default_factory=lambda: SpawnMode(settings.default_spawn_mode))
    ai_strategy: str = Field(default_factory=lambda: settings.default_ai_strategy)
    random_seed: int | None = None

    @property
    def total_players(self) -> int:
        return self.num_humans + self.num_ai

# --- Event ---
class Event(BaseModel):
    event_type: str
    player_id: PlayerId | None = None
    turn_number: int = 0
    payload: dict = Field(default_factory=dict)

# --- Game state ---
class GameStatus(str, Enum):
    ACTIVE = "active"
    FINISHED = "finished"

class GameResult(BaseModel):
    winners: list[PlayerId]
    final_scores: dict[str, int]  # PlayerId -> owned tiles
    reason: str = "normal"
    turn_number: int = 0
