# raftshard

Message types for the Raft consensus protocol, an in-process RPC endpoint,
and the client side of a sharded key/value service: a clerk for the shard
controller and a clerk for the key/value groups.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## What is inside

- `raftshard.messages`
  - `State`: the roles `FOLLOWER`, `CANDIDATE` and `LEADER`.
  - `LogEntry` (`term`, `command`) and `ApplyMsg`, which carries either a
    committed command (`command_valid`, `command`, `command_index`) or a
    snapshot (`snapshot_valid`, `snapshot`, `snapshot_term`,
    `snapshot_index`).
  - The RPC payloads `RequestVoteArgs` / `RequestVoteReply`,
    `AppendEntriesArgs` / `AppendEntriesReply` and
    `InstallSnapshotArgs` / `InstallSnapshotReply`.
  - `Peer`, an in-process endpoint. `Peer(target)` delivers
    `call("Service.method", args)` to `target.method(args)`; the text before
    the last dot is ignored. Arguments and replies are deep-copied, as if
    they had crossed a network. When the peer is disabled
    (`enabled=False`) or has no target, the call is lost and returns
    `None`. Asking for a method that does not exist, is not callable, or
    starts with an underscore raises `ValueError`.
- `raftshard.ctrlcommon`
  - `NSHARDS` (10) and `Config`: a config number `num`, a `shards` list
    mapping each shard to a group id, and `groups` mapping group ids to
    server names. A new `Config()` is config 0 with every shard on group 0
    and no groups; building one with a `shards` list of the wrong length
    raises `ValueError`. `copy()` returns a deep copy.
  - The controller payloads `JoinArgs`, `LeaveArgs`, `MoveArgs`,
    `QueryArgs` (default `num=-1`) and their replies, each with
    `wrong_leader` and `err`; `QueryReply` also carries a `config`.
- `raftshard.ctrlclient.Clerk(servers)` takes a list of `Peer` objects and
  offers `query(num)`, `join(servers)`, `leave(gids)` and `move(shard, gid)`.
  Each request is sent to the servers in turn as `ShardCtrler.query`,
  `ShardCtrler.join`, and so on; the first reply that arrives without
  `wrong_leader` is accepted. If none does, the clerk sleeps
  `retry_interval` seconds (0.1) and tries again, without limit.
- `raftshard.kvcommon`
  - `Err`, a string enum: `OK`, `ERR_NO_KEY`, `ERR_WRONG_GROUP`,
    `ERR_WRONG_LEADER`.
  - `PUT` and `APPEND`, and the payloads `PutAppendArgs` (an `op` other
    than `"Put"` or `"Append"` raises `ValueError`), `PutAppendReply`,
    `GetArgs` and `GetReply`.
- `raftshard.kvclient`
  - `key2shard(key)`: the first byte of the key's UTF-8 encoding modulo
    `NSHARDS`; the empty key is shard 0.
  - `Clerk(ctrlers, make_end)`: `ctrlers` are `Peer` objects for the
    controller, and `make_end(name)` turns a server name from a config into
    a `Peer`. `get(key)` returns the value, or `""` when the server answers
    `ERR_NO_KEY`; `put(key, value)` and `append(key, value)` go through
    `put_append(key, value, op)`. The clerk sends `ShardKV.get` or
    `ShardKV.put_append` to each server of the group that owns the key's
    shard. A lost call or `ERR_WRONG_LEADER` moves on to the next server,
    `ERR_WRONG_GROUP` gives up on that group; then it sleeps
    `retry_interval` seconds, fetches the latest config with `query(-1)`
    and retries, without limit. It starts with config 0, so its first
    request always begins by asking the controller.

## Example

```python
from raftshard.ctrlclient import Clerk
from raftshard.ctrlcommon import Config, JoinReply, QueryReply
from raftshard.kvclient import key2shard
from raftshard.messages import Peer


class Controller:
    def __init__(self):
        self.config = Config()

    def join(self, args):
        cfg = self.config.copy()
        cfg.num += 1
        cfg.groups.update(args.servers)
        gid = next(iter(cfg.groups))
        cfg.shards = [gid] * len(cfg.shards)
        self.config = cfg
        return JoinReply()

    def query(self, args):
        return QueryReply(config=self.config.copy())


clerk = Clerk([Peer(Controller())])
clerk.join({1: ["s1a", "s1b"]})
print(clerk.query(-1).shards)   # [1, 1, 1, 1, 1, 1, 1, 1, 1, 1]
print(key2shard("a"))           # 7
```

## What this package does not do

It has no Raft peer: nothing here elects leaders, replicates a log,
commits entries or sends `ApplyMsg` values; `raftshard.messages` only
defines the data such a peer exchanges. It has no persistent storage for
Raft state or snapshots. It has no shard-controller server and no
key/value server: the clerks need objects, reached through `Peer`, that
answer their requests, and there is no command to run.