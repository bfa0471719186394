from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import NamedTuple, Protocol

from config import JEN_ADDRESS
from domain.enums import Instrument, Measure
from domain.events import JenEvent
from domain.faults import DecodeFault

type OscArg = int | float


class Clock(Protocol):
    """Fonte de tempo injetável usada pelo armazenamento de estado."""

    def now(self) -> float: ...


@dataclass(frozen=True)
class JenMessage:
    """Mensagem endereço/argumentos entregue pelo transporte."""

    address: str
    args: tuple[OscArg, ...] = ()


@dataclass(frozen=True)
class JenBundle:
    """Pacote com mensagens e outros pacotes aninhados."""

    contents: tuple['JenMessage | JenBundle', ...] = ()


type JenPacket = JenMessage | JenBundle


def iter_messages(packet: JenPacket) -> Iterator[JenMessage]:
    """Percorre o pacote em profundidade, na ordem de chegada."""
    if isinstance(packet, JenMessage):
        yield packet
        return

    for item in packet.contents:
        yield from iter_messages(item)


@dataclass
class DecoderSettings:
    """Configuração do decodificador."""

    address: str = JEN_ADDRESS


class DecodeResult(NamedTuple):
    events: list[JenEvent]
    fault: DecodeFault | None = None


class DecodingContext:
    """Estado transitório usado apenas durante a decodificação de uma mensagem."""

    def __init__(self, args: Sequence[OscArg]) -> None:
        self.args: Sequence[OscArg] = args
        self.pos: int = 0
        self.events: list[JenEvent] = []
        self.fault: DecodeFault | None = None

    @property
    def exhausted(self) -> bool:
        return self.pos >= len(self.args)

    def peek(self) -> OscArg:
        return self.args[self.pos]

    def result(self) -> DecodeResult:
        return DecodeResult(events=self.events, fault=self.fault)


@dataclass(frozen=True)
class StateSnapshot:
    """Cópia imutável do estado do Jen em um instante."""

    note_ons: Mapping[Instrument, float] = field(
        default_factory=lambda: MappingProxyType({})
    )
    playhead_bangs: Mapping[Measure, float] = field(
        default_factory=lambda: MappingProxyType({})
    )
    playhead_positions: Mapping[Measure, float] = field(
        default_factory=lambda: MappingProxyType({})
    )
