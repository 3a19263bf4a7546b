from raftshard.ctrlclient import Clerk
from raftshard.ctrlcommon import (
    NSHARDS,
    OK,
    Config,
    JoinReply,
    LeaveReply,
    MoveReply,
    QueryReply,
)
from raftshard.messages import Peer


class FakeCtrler:
    def __init__(self, leader=True, refusals=0):
        self.leader = leader
        self.refusals = refusals
        self.configs = [Config()]
        self.calls = []

    def _wrong(self):
        if not self.leader:
            return True
        if self.refusals > 0:
            self.refusals -= 1
            return True
        return False

    def _next(self, groups, shards):
        cfg = Config(len(self.configs), shards, groups)
        self.configs.append(cfg)

    def query(self, args):
        self.calls.append(("query", args.num))
        if self._wrong():
            return QueryReply(wrong_leader=True)
        if args.num == -1 or args.num >= len(self.configs):
            cfg = self.configs[-1]
        else:
            cfg = self.configs[args.num]
        return QueryReply(err=OK, config=cfg.copy())

    def join(self, args):
        self.calls.append(("join", args.servers))
        if self._wrong():
            return JoinReply(wrong_leader=True)
        groups = {**self.configs[-1].groups, **args.servers}
        self._next(groups, [min(groups)] * NSHARDS)
        return JoinReply(err=OK)

    def leave(self, args):
        self.calls.append(("leave", args.gids))
        if self._wrong():
            return LeaveReply(wrong_leader=True)
        groups = {g: s for g, s in self.configs[-1].groups.items() if g not in args.gids}
        self._next(groups, [min(groups) if groups else 0] * NSHARDS)
        return LeaveReply(err=OK)

    def move(self, args):
        self.calls.append(("move", args.shard, args.gid))
        if self._wrong():
            return MoveReply(wrong_leader=True)
        last = self.configs[-1]
        shards = list(last.shards)
        shards[args.shard] = args.gid
        self._next(dict(last.groups), shards)
        return MoveReply(err=OK)


def make_clerk(*servers):
    clerk = Clerk([Peer(s) for s in servers])
    clerk.retry_interval = 0
    return clerk


def test_query_initial_config():
    clerk = make_clerk(FakeCtrler())
    cfg = clerk.query(-1)
    assert cfg == Config()


def test_join_then_query_returns_groups():
    ctrler = FakeCtrler()
    clerk = make_clerk(ctrler)
    clerk.join({1: ["x", "y", "z"]})
    cfg = clerk.query(-1)
    assert cfg.groups == {1: ["x", "y", "z"]}
    assert cfg.shards == [1] * NSHARDS
    assert ("join", {1: ["x", "y", "z"]}) in ctrler.calls


def test_historical_query():
    clerk = make_clerk(FakeCtrler())
    clerk.join({1: ["x"]})
    clerk.join({2: ["a"]})
    assert clerk.query(0) == Config()
    assert clerk.query(1).groups == {1: ["x"]}
    assert clerk.query(-1).num == 2


def test_leave_and_move_are_sent():
    ctrler = FakeCtrler()
    clerk = make_clerk(ctrler)
    clerk.join({503: ["3a"], 504: ["4a"]})
    clerk.move(7, 504)
    assert clerk.query(-1).shards[7] == 504
    clerk.leave([503, 504])
    assert clerk.query(-1).groups == {}
    assert ("move", 7, 504) in ctrler.calls
    assert ("leave", [503, 504]) in ctrler.calls


def test_skips_non_leader_servers():
    follower = FakeCtrler(leader=False)
    leader = FakeCtrler()
    clerk = make_clerk(follower, leader)
    clerk.join({1: ["x"]})
    assert len(leader.configs) == 2
    assert len(follower.configs) == 1


def test_skips_unreachable_servers():
    leader = FakeCtrler()
    clerk = Clerk([Peer(FakeCtrler(), enabled=False), Peer(leader)])
    clerk.retry_interval = 0
    clerk.join({4: ["q"]})
    assert leader.configs[-1].groups == {4: ["q"]}


def test_retries_until_leader_answers():
    ctrler = FakeCtrler(refusals=3)
    clerk = make_clerk(ctrler)
    cfg = clerk.query(-1)
    assert cfg.num == 0
    assert [c for c in ctrler.calls if c[0] == "query"] == [("query", -1)] * 4