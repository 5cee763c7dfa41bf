from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Type

from othello.engine.players import HeuristicPlayer, Player, RandomPlayer


@dataclass(frozen=True)
class PlayerEntry:
    cls: Type[Player]
    description: str
    seeded: bool = False


PLAYER_REGISTRY: Dict[str, PlayerEntry] = {
    "heuristic": PlayerEntry(
        cls=HeuristicPlayer,
        description="Positional weights plus captures, minus opponent mobility.",
    ),
    "random": PlayerEntry(
        cls=RandomPlayer,
        description="Uniformly random legal move.",
        seeded=True,
    ),
}


def get_player_choices() -> Dict[str, Type[Player]]:
    """Return mapping of player key to class."""
    return {name: entry.cls for name, entry in PLAYER_REGISTRY.items()}


def build_player(name: str, rng_seed: int | None = None, **player_options: Any) -> Player:
    entry = PLAYER_REGISTRY.get(name)
    if not entry:
        raise ValueError(f"Unknown player '{name}'")

    kwargs: Dict[str, Any] = dict(player_options)
    if entry.seeded and rng_seed is not None:
        kwargs["rng_seed"] = rng_seed
    return entry.cls(**kwargs)
