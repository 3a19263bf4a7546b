"""Raft roles, log entries, apply messages and RPC payloads."""

from __future__ import annotations

import copy
import enum
from dataclasses import dataclass, field
from typing import Any


class State(enum.Enum):
    FOLLOWER = 0
    CANDIDATE = 1
    LEADER = 2


@dataclass
class LogEntry:
    term: int
    command: Any = None


@dataclass
class ApplyMsg:
    """A committed command or an installed snapshot handed to the service."""

    command_valid: bool = False
    command: Any = None
    command_index: int = 0
    snapshot_valid: bool = False
    snapshot: bytes = b""
    snapshot_term: int = 0
    snapshot_index: int = 0


@dataclass
class RequestVoteArgs:
    term: int
    candidate_id: int
    last_log_index: int
    last_log_term: int


@dataclass
class RequestVoteReply:
    term: int = 0
    vote_granted: bool = False


@dataclass
class AppendEntriesArgs:
    term: int
    leader_id: int
    prev_log_index: int
    prev_log_term: int
    leader_commit: int
    entries: list[LogEntry] = field(default_factory=list)


@dataclass
class AppendEntriesReply:
    term: int = 0
    success: bool = False
    match_index: int = 0


@dataclass
class InstallSnapshotArgs:
    term: int
    leader_id: int
    last_included_index: int
    last_included_term: int
    data: bytes = b""


@dataclass
class InstallSnapshotReply:
    term: int = 0


@dataclass
class Peer:
    """An in-process RPC endpoint that delivers calls to a target object.

    Arguments and replies are deep-copied, as if they had crossed a network.
    A call on a disabled endpoint, or one with no target, is lost and
    yields None.
    """

    target: Any = None
    enabled: bool = True

    def call(self, method: str, args: Any) -> Any:
        if not self.enabled or self.target is None:
            return None
        name = method.rpartition(".")[2]
        handler = getattr(self.target, name, None)
        if name.startswith("_") or not callable(handler):
            raise ValueError(f"unknown RPC method {method!r}")
        reply = handler(copy.deepcopy(args))
        return copy.deepcopy(reply)