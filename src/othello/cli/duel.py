from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Tuple

from othello.engine.board import Board, coord_to_str, opponent
from othello.engine.registry import build_player
from othello.engine.session import GameSession
from othello.engine.turns import GameOver, Outcome, ToMove

logger = logging.getLogger(__name__)

DRAW = "DRAW"


@dataclass
class PlayerSpec:
    key: str
    label: str
    rng_seed: int | None = None


@dataclass
class MatchResult:
    winner_side: str
    scores: Dict[str, int]
    moves: List[Tuple[str, str]]
    side_to_label: Dict[str, str]


class PlayerMatch:
    def __init__(self, dark_spec: PlayerSpec, light_spec: PlayerSpec, seed_offset: int = 0):
        self.specs = {Board.DARK: dark_spec, Board.LIGHT: light_spec}
        self.players = {
            side: build_player(
                spec.key,
                rng_seed=None if spec.rng_seed is None else spec.rng_seed + seed_offset,
            )
            for side, spec in self.specs.items()
        }

    def play(self) -> MatchResult:
        session = GameSession()
        move_log: List[Tuple[str, str]] = []

        while isinstance(session.state, ToMove):
            side = session.state.side
            move = self.players[side].choose_move(session.board, side)
            if move is None:
                raise RuntimeError(f"{self.specs[side].label} returned no move for a playable position")
            state = session.play(*move)
            move_log.append((side, coord_to_str(*move)))
            if isinstance(state, ToMove) and state.passed:
                move_log.append((state.passed, "PASS"))

        final = session.state
        assert isinstance(final, GameOver)
        scores = {Board.DARK: final.dark, Board.LIGHT: final.light}
        winner_side = self._determine_winner(final)
        logger.debug("Match finished %s after %d plies", final.outcome, len(move_log))
        side_to_label = {side: spec.label for side, spec in self.specs.items()}
        return MatchResult(winner_side=winner_side, scores=scores, moves=move_log, side_to_label=side_to_label)

    @staticmethod
    def _determine_winner(final: GameOver) -> str:
        if final.outcome == Outcome.DARK_WINS:
            return Board.DARK
        if final.outcome == Outcome.LIGHT_WINS:
            return Board.LIGHT
        return DRAW


class DuelStats:
    def __init__(self, player_labels: List[str]):
        self.player_labels = player_labels
        self.wins = {label: 0 for label in player_labels}
        self.draws = 0
        self.score_totals = {label: 0 for label in player_labels}
        self.score_diff_totals = {label: 0 for label in player_labels}
        self.games_played = {label: 0 for label in player_labels}
        self.total_games = 0
        self.total_moves = 0

    def record(self, result: MatchResult):
        self.total_games += 1
        self.total_moves += sum(1 for _, move in result.moves if move != "PASS")
        for side in (Board.DARK, Board.LIGHT):
            label = result.side_to_label[side]
            self.games_played[label] += 1
            self.score_totals[label] += result.scores[side]
            self.score_diff_totals[label] += result.scores[side] - result.scores[opponent(side)]

        if result.winner_side == DRAW:
            self.draws += 1
        else:
            winner_label = result.side_to_label[result.winner_side]
            self.wins[winner_label] += 1

    def summary(self) -> Dict[str, object]:
        averages = {}
        for label in self.player_labels:
            games = max(1, self.games_played[label])
            averages[label] = {
                "avg_score": self.score_totals[label] / games,
                "avg_margin": self.score_diff_totals[label] / games,
                "wins": self.wins[label],
                "games": self.games_played[label],
            }
        return {
            "total_games": self.total_games,
            "draws": self.draws,
            "average_moves": self.total_moves / self.total_games if self.total_games else 0.0,
            "players": averages,
        }


def run_duel_series(
    dark_spec: PlayerSpec,
    light_spec: PlayerSpec,
    games: int = 1,
    swap_colors: bool = True,
) -> Tuple[DuelStats, List[MatchResult]]:
    labels = list(dict.fromkeys([dark_spec.label, light_spec.label]))
    stats = DuelStats(labels)
    results: List[MatchResult] = []

    for game_index in range(games):
        if swap_colors and game_index % 2 == 1:
            current_dark, current_light = light_spec, dark_spec
        else:
            current_dark, current_light = dark_spec, light_spec

        match = PlayerMatch(current_dark, current_light, seed_offset=game_index)
        result = match.play()
        stats.record(result)
        results.append(result)

    return stats, results
