"""Client of the sharded key/value service.

The client asks the shard controller which group owns a key's shard and
then talks to that group's servers.
"""

from __future__ import annotations

import time
from collections.abc import Callable, Iterable

from . import ctrlclient
from .ctrlcommon import NSHARDS, Config
from .kvcommon import APPEND, PUT, Err, GetArgs, PutAppendArgs
from .messages import Peer


def key2shard(key: str) -> int:
    """Return the shard a key belongs to: its first byte modulo NSHARDS."""
    data = key.encode("utf-8")
    shard = data[0] if data else 0
    return shard % NSHARDS


class Clerk:
    """Sends Get/Put/Append to the owning group, retrying forever."""

    retry_interval = 0.1

    def __init__(self, ctrlers: Iterable[Peer], make_end: Callable[[str], Peer]) -> None:
        self.ctrler = ctrlclient.Clerk(ctrlers)
        self.make_end = make_end
        self.config = Config()

    def _servers_for(self, key: str) -> list[str]:
        gid = self.config.shards[key2shard(key)]
        return self.config.groups.get(gid, [])

    def _refresh(self) -> None:
        time.sleep(self.retry_interval)
        self.config = self.ctrler.query(-1)

    def get(self, key: str) -> str:
        """Fetch the value for a key; "" if the key does not exist."""
        args = GetArgs(key)
        while True:
            for name in self._servers_for(key):
                reply = self.make_end(name).call("ShardKV.get", args)
                if reply is None:
                    continue
                if reply.err in (Err.OK, Err.ERR_NO_KEY):
                    return reply.value
                if reply.err == Err.ERR_WRONG_GROUP:
                    break
            self._refresh()

    def put_append(self, key: str, value: str, op: str) -> None:
        """Shared by put and append."""
        args = PutAppendArgs(key, value, op)
        while True:
            for name in self._servers_for(key):
                reply = self.make_end(name).call("ShardKV.put_append", args)
                if reply is None:
                    continue
                if reply.err == Err.OK:
                    return
                if reply.err == Err.ERR_WRONG_GROUP:
                    break
            self._refresh()

    def put(self, key: str, value: str) -> None:
        self.put_append(key, value, PUT)

    def append(self, key: str, value: str) -> None:
        self.put_append(key, value, APPEND)