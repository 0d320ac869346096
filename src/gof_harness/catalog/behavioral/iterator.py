"""
Iterator.

Base: callers reach into the playlist's internal list and index it
themselves.
Improved: the playlist exposes iteration protocols and callers never
see how songs are stored.
"""

from __future__ import annotations

from collections.abc import Iterator

SUMMARY = "Access the elements of an aggregate sequentially without exposing its representation."


class RawPlaylist:
    def __init__(self) -> None:
        self.songs: list[tuple[str, int]] = []


class Playlist:
    def __init__(self) -> None:
        self._songs: list[tuple[str, int]] = []

    def add(self, title: str, seconds: int) -> None:
        self._songs.append((title, seconds))

    def __iter__(self) -> Iterator[str]:
        for title, _ in self._songs:
            yield title

    def reversed(self) -> Iterator[str]:
        for title, _ in reversed(self._songs):
            yield title

    def shorter_than(self, seconds: int) -> Iterator[str]:
        return (title for title, length in self._songs if length < seconds)


SONGS = [("Intro", 90), ("Anthem", 240), ("Interlude", 60), ("Finale", 300)]


def base() -> Iterator[str]:
    playlist = RawPlaylist()
    playlist.songs.extend(SONGS)
    index = 0
    while index < len(playlist.songs):
        yield f"song: {playlist.songs[index][0]}"
        index += 1


def improved() -> Iterator[str]:
    playlist = Playlist()
    for title, seconds in SONGS:
        playlist.add(title, seconds)

    for title in playlist:
        yield f"song: {title}"
    yield f"reversed: {', '.join(playlist.reversed())}"
    yield f"short songs: {', '.join(playlist.shorter_than(100))}"
