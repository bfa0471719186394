import threading
from collections.abc import Iterable
from types import MappingProxyType

from domain.enums import Instrument, Measure
from domain.events import JenEvent, NoteOn, PlayheadBang, PlayheadPosition
from domain.models import Clock, StateSnapshot
from infrastructure.clock import MonotonicClock


class JenState:
    """O estado mais recente recebido do Jen.

    Todas as escritas e leituras passam pelo mesmo lock, então um lote de
    eventos aplicado por `apply` é visto por inteiro ou não é visto.
    """

    def __init__(self, clock: Clock | None = None) -> None:
        self.clock: Clock = clock or MonotonicClock()
        self._lock: threading.Lock = threading.Lock()
        self._note_ons: dict[Instrument, float] = {}
        self._playhead_bangs: dict[Measure, float] = {}
        self._playhead_positions: dict[Measure, float] = {}

    def apply(self, events: Iterable[JenEvent], observed_at: float) -> None:
        """Atualiza o estado com um lote de eventos capturados em `observed_at`."""
        note_ons: dict[Instrument, float] = {}
        playhead_bangs: dict[Measure, float] = {}
        playhead_positions: dict[Measure, float] = {}

        for event in events:
            match event:
                case NoteOn(instrument=instrument):
                    note_ons[instrument] = observed_at
                case PlayheadBang(measure=measure):
                    playhead_bangs[measure] = observed_at
                case PlayheadPosition(measure=measure, value=value):
                    playhead_positions[measure] = value
                case _:
                    raise TypeError(f'not a jen event: {event!r}')

        with self._lock:
            self._note_ons.update(note_ons)
            self._playhead_bangs.update(playhead_bangs)
            self._playhead_positions.update(playhead_positions)

    def apply_now(self, events: Iterable[JenEvent]) -> float:
        """Aplica o lote com o horário atual do relógio e o retorna."""
        observed_at = self.clock.now()
        self.apply(events, observed_at)
        return observed_at

    def time_since_note_on(self, inst: Instrument) -> float | None:
        """Segundos desde o último note on, ou `None` se nunca recebido."""
        with self._lock:
            then = self._note_ons.get(inst)
            now = self.clock.now()
        return _elapsed(then, now)

    def time_since_measure_bang(self, meas: Measure) -> float | None:
        """Segundos desde o último bang da medida, ou `None` se nunca recebido."""
        with self._lock:
            then = self._playhead_bangs.get(meas)
            now = self.clock.now()
        return _elapsed(then, now)

    def position_of(self, meas: Measure) -> float | None:
        with self._lock:
            return self._playhead_positions.get(meas)

    def snapshot(self) -> StateSnapshot:
        with self._lock:
            return StateSnapshot(
                note_ons=MappingProxyType(dict(self._note_ons)),
                playhead_bangs=MappingProxyType(dict(self._playhead_bangs)),
                playhead_positions=MappingProxyType(dict(self._playhead_positions)),
            )


def _elapsed(then: float | None, now: float) -> float | None:
    # Um registro no futuro (relógio adiantado) nunca vira duração negativa.
    if then is None or then > now:
        return None
    return now - then
