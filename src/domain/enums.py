from enum import Enum, nonmember
from typing import Final, Self


class Instrument(Enum):
    """Fontes sonoras discretas que o Jen pode disparar."""

    SNARE = 0
    KICK = 1
    RIDE = 2
    GHOST = 3
    BASS = 4
    MELODIC = 5
    CHORDAL = 6
    ATMOS = 7

    TOTAL_VARIANTS = nonmember(8)

    @property
    def code(self) -> int:
        return self.value

    @classmethod
    def from_code(cls, code: int) -> Self | None:
        """Retorna o instrumento do código, ou `None` fora de 0..7."""
        if 0 <= code < len(_INSTRUMENTS_BY_CODE):
            return _INSTRUMENTS_BY_CODE[code]
        return None


class Measure(Enum):
    """Granularidades rítmicas, da mais grossa para a mais fina."""

    PHRASE = 0
    SEGMENT = 1
    BAR = 2
    MINIM = 3
    BEAT = 4
    QUAVER = 5
    SEMIQUAVER = 6

    TOTAL_VARIANTS = nonmember(7)

    @property
    def code(self) -> int:
        return self.value

    @classmethod
    def from_code(cls, code: int) -> Self | None:
        """Retorna a medida do código, ou `None` fora de 0..6."""
        if 0 <= code < len(MEASURES_IN_ORDER):
            return MEASURES_IN_ORDER[code]
        return None


# Tabelas de consulta indexadas pelo código
_INSTRUMENTS_BY_CODE: Final[tuple[Instrument, ...]] = (
    Instrument.SNARE,
    Instrument.KICK,
    Instrument.RIDE,
    Instrument.GHOST,
    Instrument.BASS,
    Instrument.MELODIC,
    Instrument.CHORDAL,
    Instrument.ATMOS,
)

MEASURES_IN_ORDER: Final[tuple[Measure, ...]] = (
    Measure.PHRASE,
    Measure.SEGMENT,
    Measure.BAR,
    Measure.MINIM,
    Measure.BEAT,
    Measure.QUAVER,
    Measure.SEMIQUAVER,
)

assert len(_INSTRUMENTS_BY_CODE) == Instrument.TOTAL_VARIANTS
assert len(MEASURES_IN_ORDER) == Measure.TOTAL_VARIANTS
