"""Typed events decoded from sender messages.

Every ``from_payload`` validates the whole payload before anything is
rendered, so a bad message can be dropped without touching any screen.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

from receiver.config.constants import DEFAULT_ANSWER_TIME_SECONDS, DEFAULT_TUTORIAL_ROUNDS
from receiver.core.errors import PayloadError

_MISSING = object()


class ScreenName(str, Enum):
    CONNECTING = "connecting"
    LOBBY = "lobby"
    TUTORIAL = "tutorial"
    LOADING = "loading"
    COUNTDOWN = "countdown"
    ANSWERING = "answering"
    VOTING_TRANSITION = "voting_transition"
    MATCHUP_VOTING = "matchup_voting"
    MATCHUP_RESULTS = "matchup_results"
    ROUND_RESULTS = "round_results"
    GAME_RESULTS = "game_results"
    END = "end"


def _field(data: dict, key: str, default=_MISSING):
    value = data.get(key)
    if value is None:
        if default is _MISSING:
            raise PayloadError(f"missing field {key!r}")
        return default
    return value


def _int(data: dict, key: str, default=_MISSING) -> int:
    value = _field(data, key, default)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise PayloadError(f"field {key!r} must be a number, got {value!r}")
    if isinstance(value, float) and not math.isfinite(value):
        raise PayloadError(f"field {key!r} must be finite, got {value!r}")
    return int(value)


def _str(data: dict, key: str, default=_MISSING) -> str:
    value = _field(data, key, default)
    if isinstance(value, (dict, list)):
        raise PayloadError(f"field {key!r} must be text, got {value!r}")
    return str(value)


def _bool(data: dict, key: str, default: bool = False) -> bool:
    return bool(_field(data, key, default))


def _list(data: dict, key: str, default=_MISSING) -> list:
    value = _field(data, key, default)
    if not isinstance(value, list):
        raise PayloadError(f"field {key!r} must be a list, got {value!r}")
    return value


def _optional_int(data: dict, key: str) -> int | None:
    if data.get(key) is None:
        return None
    return _int(data, key)


@dataclass(frozen=True, slots=True)
class Player:
    name: str
    icon_id: str
    total_score: int = 0
    rank: int = 1
    round_score: int | None = None
    is_host: bool = False
    peer_id: str | None = None

    @property
    def player_id(self) -> str:
        """Stable identity within one event: peer id, else name."""
        return self.peer_id or self.name

    @classmethod
    def from_payload(cls, data) -> "Player":
        if not isinstance(data, dict):
            raise PayloadError(f"player entry must be an object, got {data!r}")
        peer_id = data.get("peerId")
        return cls(
            name=_str(data, "name"),
            icon_id=_str(data, "iconId", ""),
            total_score=_int(data, "totalScore", 0),
            rank=_int(data, "rank", 1),
            round_score=_optional_int(data, "roundScore"),
            is_host=_bool(data, "isHost"),
            peer_id=str(peer_id) if peer_id else None,
        )


def _players(data: dict, key: str = "players") -> tuple[Player, ...]:
    return tuple(Player.from_payload(p) for p in _list(data, key))


def _icon_ids(data: dict, key: str) -> tuple[str, ...]:
    return tuple(str(icon_id) for icon_id in _list(data, key, []))


@dataclass(frozen=True, slots=True)
class LobbyEvent:
    game_name: str
    host_name: str
    players: tuple[Player, ...]
    max_players: int
    total_rounds: int

    @classmethod
    def from_payload(cls, data: dict) -> "LobbyEvent":
        return cls(
            game_name=_str(data, "gameName"),
            host_name=_str(data, "hostName"),
            players=_players(data),
            max_players=_int(data, "maxPlayers"),
            total_rounds=_int(data, "totalRounds"),
        )


@dataclass(frozen=True, slots=True)
class TutorialEvent:
    total_rounds: int
    answer_time_seconds: int
    teach_bonus: bool = True

    @classmethod
    def from_payload(cls, data: dict) -> "TutorialEvent":
        # 0 falls back to the default as well, like a missing field
        return cls(
            total_rounds=_int(data, "totalRounds", 0) or DEFAULT_TUTORIAL_ROUNDS,
            answer_time_seconds=_int(data, "answerTimeSeconds", 0) or DEFAULT_ANSWER_TIME_SECONDS,
            teach_bonus=_bool(data, "teachBonus", True),
        )


@dataclass(frozen=True, slots=True)
class LoadingRoundEvent:
    round_number: int

    @classmethod
    def from_payload(cls, data: dict) -> "LoadingRoundEvent":
        return cls(round_number=_int(data, "roundNumber"))


@dataclass(frozen=True, slots=True)
class CountdownEvent:
    round_number: int
    seconds_remaining: int
    total_rounds: int

    @classmethod
    def from_payload(cls, data: dict) -> "CountdownEvent":
        return cls(
            round_number=_int(data, "roundNumber"),
            seconds_remaining=_int(data, "secondsRemaining"),
            total_rounds=_int(data, "totalRounds"),
        )


@dataclass(frozen=True, slots=True)
class AnsweringEvent:
    round_number: int
    seconds_remaining: int
    answers_received: int
    total_players: int

    @classmethod
    def from_payload(cls, data: dict) -> "AnsweringEvent":
        return cls(
            round_number=_int(data, "roundNumber"),
            seconds_remaining=_int(data, "secondsRemaining"),
            answers_received=_int(data, "answersReceived"),
            total_players=_int(data, "totalPlayers"),
        )


@dataclass(frozen=True, slots=True)
class MatchupVotingEvent:
    prompt_text: str
    answer1: str
    answer2: str
    seconds_remaining: int
    votes_received: int
    eligible_voters: int
    matchup_number: int
    total_matchups: int

    @classmethod
    def from_payload(cls, data: dict) -> "MatchupVotingEvent":
        return cls(
            prompt_text=_str(data, "promptText"),
            answer1=_str(data, "answer1"),
            answer2=_str(data, "answer2"),
            seconds_remaining=_int(data, "secondsRemaining"),
            votes_received=_int(data, "votesReceived"),
            eligible_voters=_int(data, "eligibleVoters"),
            matchup_number=_int(data, "matchupNumber"),
            total_matchups=_int(data, "totalMatchups"),
        )


@dataclass(frozen=True, slots=True)
class MatchupSide:
    player_name: str
    answer: str
    votes: int
    voters: tuple[str, ...]
    gets_bonus: bool
    total_points: int | None = None

    @property
    def points(self) -> int:
        return self.votes if self.total_points is None else self.total_points

    @classmethod
    def from_payload(cls, data: dict, n: int) -> "MatchupSide":
        prefix = f"player{n}"
        return cls(
            player_name=_str(data, f"{prefix}Name"),
            answer=_str(data, f"answer{n}"),
            votes=_int(data, f"{prefix}Votes"),
            voters=_icon_ids(data, f"{prefix}Voters"),
            gets_bonus=_bool(data, f"{prefix}GetsBonus"),
            total_points=_optional_int(data, f"{prefix}TotalPoints"),
        )


@dataclass(frozen=True, slots=True)
class MatchupResultsEvent:
    prompt_text: str
    side1: MatchupSide
    side2: MatchupSide
    abstain_voters: tuple[str, ...]

    @classmethod
    def from_payload(cls, data: dict) -> "MatchupResultsEvent":
        return cls(
            prompt_text=_str(data, "promptText"),
            side1=MatchupSide.from_payload(data, 1),
            side2=MatchupSide.from_payload(data, 2),
            abstain_voters=_icon_ids(data, "abstainVoters"),
        )


@dataclass(frozen=True, slots=True)
class RoundResultsEvent:
    round_number: int
    players: tuple[Player, ...]

    @classmethod
    def from_payload(cls, data: dict) -> "RoundResultsEvent":
        players = _players(data)
        # Round scores are required here even though Player treats them as optional
        for player in players:
            if player.round_score is None:
                raise PayloadError(f"player {player.name!r} has no roundScore")
        return cls(round_number=_int(data, "roundNumber"), players=players)


@dataclass(frozen=True, slots=True)
class GameResultsEvent:
    players: tuple[Player, ...]

    @classmethod
    def from_payload(cls, data: dict) -> "GameResultsEvent":
        players = _players(data)
        # Badges depend on every player carrying a rank
        for entry in _list(data, "players"):
            _int(entry, "rank")
        return cls(players=players)
