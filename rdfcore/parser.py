"""Interfaces for RDF parsers that work chunk by chunk."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Iterator, Optional

from .model import Quad, Triple

__all__ = ["LineBytePosition", "ParseError", "TriplesParser", "QuadsParser"]


@dataclass(frozen=True)
class LineBytePosition:
    """A position in a text, as a line number and a byte number."""

    line_number: int
    byte_number: int


class ParseError(Exception):
    """An error raised by a parser, optionally carrying its textual position."""

    def __init__(self, message: str, position: Optional[LineBytePosition] = None):
        super().__init__(message)
        self.message = message
        self.position = position

    def textual_position(self) -> Optional[LineBytePosition]:
        """Return the position of the error in the text, if known."""
        return self.position


def _parse_all(parser: Any, callback: Callable[[Any], None]) -> None:
    while not parser.is_end():
        parser.parse_step(callback)


def _iterate(parser: Any, convert: Optional[Callable[[Any], Any]]) -> Iterator[Any]:
    convert = convert or (lambda item: item)
    while not parser.is_end():
        buffer: list = []
        parser.parse_step(lambda item: buffer.append(convert(item)))
        # Items produced by one step come out last-read first.
        yield from reversed(buffer)


class TriplesParser(ABC):
    """A parser producing triples."""

    def parse_all(self, on_triple: Callable[[Triple], None]) -> None:
        """Parse the whole input, calling ``on_triple`` for each triple read."""
        _parse_all(self, on_triple)

    @abstractmethod
    def parse_step(self, on_triple: Callable[[Triple], None]) -> None:
        """Parse a small chunk of input, calling ``on_triple`` for each triple read."""

    @abstractmethod
    def is_end(self) -> bool:
        """Return True once the input has been completely consumed."""

    def iterate(self, convert: Optional[Callable[[Triple], Any]] = None) -> Iterator[Any]:
        """Yield the triples read, passed through ``convert`` if given."""
        return _iterate(self, convert)


class QuadsParser(ABC):
    """A parser producing quads."""

    def parse_all(self, on_quad: Callable[[Quad], None]) -> None:
        """Parse the whole input, calling ``on_quad`` for each quad read."""
        _parse_all(self, on_quad)

    @abstractmethod
    def parse_step(self, on_quad: Callable[[Quad], None]) -> None:
        """Parse a small chunk of input, calling ``on_quad`` for each quad read."""

    @abstractmethod
    def is_end(self) -> bool:
        """Return True once the input has been completely consumed."""

    def iterate(self, convert: Optional[Callable[[Quad], Any]] = None) -> Iterator[Any]:
        """Yield the quads read, passed through ``convert`` if given."""
        return _iterate(self, convert)