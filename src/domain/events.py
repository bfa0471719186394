from dataclasses import dataclass

from domain.enums import Instrument, Measure


@dataclass(frozen=True)
class JenEvent:
    """Classe base para todos os eventos emitidos pelo Jen."""


@dataclass(frozen=True)
class NoteOn(JenEvent):
    """Um instrumento foi disparado."""

    instrument: Instrument


@dataclass(frozen=True)
class PlayheadBang(JenEvent):
    """O playhead cruzou o início de uma medida."""

    measure: Measure


@dataclass(frozen=True)
class PlayheadPosition(JenEvent):
    """Posição fracionária do playhead dentro de uma medida."""

    measure: Measure
    value: float
