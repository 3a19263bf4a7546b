"""Shard controller configurations and RPC payloads.

A Config assigns each of NSHARDS shards to a replica group id. Config 0
has no groups and every shard assigned to group 0, the invalid group.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, field

NSHARDS = 10
OK = "OK"


def _unassigned() -> list[int]:
    return [0] * NSHARDS


@dataclass
class Config:
    """A numbered assignment of shards to replica groups."""

    num: int = 0
    shards: list[int] = field(default_factory=_unassigned)
    groups: dict[int, list[str]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if len(self.shards) != NSHARDS:
            raise ValueError(f"a config must assign exactly {NSHARDS} shards")

    def copy(self) -> Config:
        """Return a deep copy."""
        return Config(self.num, list(self.shards), copy.deepcopy(self.groups))


@dataclass
class JoinArgs:
    servers: dict[int, list[str]] = field(default_factory=dict)


@dataclass
class JoinReply:
    wrong_leader: bool = False
    err: str = ""


@dataclass
class LeaveArgs:
    gids: list[int] = field(default_factory=list)


@dataclass
class LeaveReply:
    wrong_leader: bool = False
    err: str = ""


@dataclass
class MoveArgs:
    shard: int
    gid: int


@dataclass
class MoveReply:
    wrong_leader: bool = False
    err: str = ""


@dataclass
class QueryArgs:
    num: int = -1


@dataclass
class QueryReply:
    wrong_leader: bool = False
    err: str = ""
    config: Config = field(default_factory=Config)