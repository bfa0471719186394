from dataclasses import dataclass
from typing import override


@dataclass(frozen=True)
class DecodeFault:
    """Falha recuperável ao decodificar uma mensagem.

    `position` é o índice do argumento que interrompeu a decodificação.
    """

    position: int

    def describe(self) -> str:
        return f'decode fault at arg {self.position}'


@dataclass(frozen=True)
class UnknownInstrumentCode(DecodeFault):
    code: int

    @override
    def describe(self) -> str:
        return f'unknown instrument code {self.code} at arg {self.position}'


@dataclass(frozen=True)
class UnknownMeasureCode(DecodeFault):
    code: int

    @override
    def describe(self) -> str:
        return f'unknown measure code {self.code} at arg {self.position}'


@dataclass(frozen=True)
class UnexpectedArgType(DecodeFault):
    """O argumento não corresponde ao que a posição no bloco exige."""

    value: object
    expected: str

    @override
    def describe(self) -> str:
        return (
            f'unexpected arg {self.value!r} at arg {self.position}, '
            f'expected {self.expected}'
        )
