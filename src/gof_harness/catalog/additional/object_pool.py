"""
Object Pool.

Base: each request opens a fresh connection and throws it away.
Improved: a pool hands out released connections before opening new ones.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

SUMMARY = "Reuse expensive objects instead of creating and destroying them."


class Connection:
    def __init__(self, number: int):
        self.number = number

    def query(self, sql: str) -> str:
        return f"conn-{self.number}: {sql}"


class ConnectionPool:
    def __init__(self, size: int):
        self.size = size
        self.created = 0
        self._idle: list[Connection] = []
        self._busy = 0

    def acquire(self) -> Connection:
        if self._idle:
            conn = self._idle.pop()
        elif self.created < self.size:
            self.created += 1
            conn = Connection(self.created)
        else:
            raise RuntimeError("pool exhausted")
        self._busy += 1
        return conn

    def release(self, conn: Connection) -> None:
        self._busy -= 1
        self._idle.append(conn)

    @contextmanager
    def connection(self) -> Iterator[Connection]:
        conn = self.acquire()
        try:
            yield conn
        finally:
            self.release(conn)


QUERIES = ["select 1", "select 2", "select 3", "select 4"]


def base() -> Iterator[str]:
    opened = 0
    for sql in QUERIES:
        opened += 1
        yield Connection(opened).query(sql)
    yield f"connections opened: {opened}"


def improved() -> Iterator[str]:
    pool = ConnectionPool(size=2)
    for sql in QUERIES:
        with pool.connection() as conn:
            yield conn.query(sql)

    first = pool.acquire()
    second = pool.acquire()
    try:
        pool.acquire()
    except RuntimeError as e:
        yield f"third checkout: {e}"
    finally:
        pool.release(first)
        pool.release(second)
    yield f"connections opened: {pool.created}"
