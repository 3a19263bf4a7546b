"""Error codes and RPC payloads of the sharded key/value service."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class Err(str, enum.Enum):
    OK = "OK"
    ERR_NO_KEY = "ErrNoKey"
    ERR_WRONG_GROUP = "ErrWrongGroup"
    ERR_WRONG_LEADER = "ErrWrongLeader"


PUT = "Put"
APPEND = "Append"


@dataclass
class PutAppendArgs:
    key: str
    value: str
    op: str

    def __post_init__(self) -> None:
        if self.op not in (PUT, APPEND):
            raise ValueError(f"op must be {PUT!r} or {APPEND!r}, not {self.op!r}")


@dataclass
class PutAppendReply:
    err: Err


@dataclass
class GetArgs:
    key: str


@dataclass
class GetReply:
    err: Err
    value: str = ""