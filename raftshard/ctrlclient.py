"""Client for the shard controller service."""

from __future__ import annotations

import time
from collections.abc import Iterable
from typing import Any

from .ctrlcommon import (
    Config,
    JoinArgs,
    LeaveArgs,
    MoveArgs,
    QueryArgs,
)
from .messages import Peer


class Clerk:
    """Sends controller requests, retrying every server until a leader answers."""

    retry_interval = 0.1

    def __init__(self, servers: Iterable[Peer]) -> None:
        self.servers = list(servers)

    def _call(self, method: str, args: Any) -> Any:
        while True:
            for server in self.servers:
                reply = server.call(method, args)
                if reply is not None and not reply.wrong_leader:
                    return reply
            time.sleep(self.retry_interval)

    def query(self, num: int) -> Config:
        """Fetch config number num, or the latest one if num is -1."""
        return self._call("ShardCtrler.query", QueryArgs(num)).config

    def join(self, servers: dict[int, list[str]]) -> None:
        """Add replica groups, given as gid -> server names."""
        self._call("ShardCtrler.join", JoinArgs(dict(servers)))

    def leave(self, gids: Iterable[int]) -> None:
        """Remove replica groups."""
        self._call("ShardCtrler.leave", LeaveArgs(list(gids)))

    def move(self, shard: int, gid: int) -> None:
        """Hand one shard to the given group."""
        self._call("ShardCtrler.move", MoveArgs(shard, gid))