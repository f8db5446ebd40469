"""Interfaces for RDF formatters."""

from __future__ import annotations

from abc import ABC, abstractmethod

from .model import Quad, Triple

__all__ = ["TriplesFormatter", "QuadsFormatter"]


class TriplesFormatter(ABC):
    """A formatter that writes triples."""

    @abstractmethod
    def format(self, triple: Triple) -> None:
        """Write a triple. Errors are raised as exceptions."""


class QuadsFormatter(ABC):
    """A formatter that writes quads."""

    @abstractmethod
    def format(self, quad: Quad) -> None:
        """Write a quad. Errors are raised as exceptions."""