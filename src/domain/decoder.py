import logging
from collections.abc import Callable, Sequence

from config import MODE_TAGS, NOTE_ON, PLAYHEAD_BANG, PLAYHEAD_POSITION
from domain.enums import MEASURES_IN_ORDER, Instrument, Measure
from domain.events import NoteOn, PlayheadBang, PlayheadPosition
from domain.faults import UnexpectedArgType, UnknownInstrumentCode, UnknownMeasureCode
from domain.models import (
    DecoderSettings,
    DecodeResult,
    DecodingContext,
    JenMessage,
    OscArg,
)

logger = logging.getLogger(__name__)


def _is_int(arg: object) -> bool:
    return isinstance(arg, int) and not isinstance(arg, bool)


def _is_float(arg: object) -> bool:
    return isinstance(arg, float)


def is_mode_tag(arg: object) -> bool:
    """Testa se um argumento é uma tag de modo (apenas inteiros contam)."""
    return _is_int(arg) and arg in MODE_TAGS


class JenDecoder:
    """Converte mensagens `/jen` em eventos usando uma tabela de despacho por modo.

    Os argumentos formam uma sequência de blocos: uma tag de modo seguida da
    carga útil até a próxima tag ou o fim da mensagem. O cursor do contexto
    sempre aponta para o próximo argumento não consumido, de modo que a tag
    que encerra um bloco é lida uma única vez, como cabeçalho do seguinte.
    """

    def __init__(self, settings: DecoderSettings | None = None) -> None:
        self.settings: DecoderSettings = settings or DecoderSettings()
        self.dispatch_table: dict[int, Callable[[DecodingContext], None]] = (
            self._build_dispatch_table()
        )

    def _build_dispatch_table(self) -> dict[int, Callable[[DecodingContext], None]]:
        """Construir a tabela de mapeamento Tag -> Função."""
        return {
            NOTE_ON: self._handle_note_on,
            PLAYHEAD_BANG: self._handle_playhead_bang,
            PLAYHEAD_POSITION: self._handle_playhead_position,
        }

    def decode_message(self, message: JenMessage) -> DecodeResult:
        return self.decode(message.address, message.args)

    def decode(self, address: str, args: Sequence[OscArg]) -> DecodeResult:
        """Decodifica os argumentos em eventos.

        Nunca levanta exceção por dados malformados: a falha é devolvida
        junto com os eventos produzidos antes dela.
        """
        if address != self.settings.address:
            logger.debug('Ignorando mensagem para %s', address)
            return DecodeResult(events=[])

        context = DecodingContext(args)

        while not context.exhausted:
            arg = context.peek()
            if not is_mode_tag(arg):
                context.fault = UnexpectedArgType(
                    position=context.pos, value=arg, expected='mode tag'
                )
                break

            context.pos += 1
            self.dispatch_table[arg](context)
            if context.fault is not None:
                break

        return context.result()

    def _handle_note_on(self, context: DecodingContext) -> None:
        while not context.exhausted:
            arg = context.peek()
            if is_mode_tag(arg):
                return
            if not _is_int(arg):
                context.fault = UnexpectedArgType(
                    position=context.pos, value=arg, expected='instrument code'
                )
                return

            instrument = Instrument.from_code(arg)
            if instrument is None:
                context.fault = UnknownInstrumentCode(position=context.pos, code=arg)
                return

            context.events.append(NoteOn(instrument))
            context.pos += 1

    def _handle_playhead_bang(self, context: DecodingContext) -> None:
        while not context.exhausted:
            arg = context.peek()
            if is_mode_tag(arg):
                return
            if not _is_int(arg):
                context.fault = UnexpectedArgType(
                    position=context.pos, value=arg, expected='measure code'
                )
                return

            measure = Measure.from_code(arg)
            if measure is None:
                context.fault = UnknownMeasureCode(position=context.pos, code=arg)
                return

            context.events.append(PlayheadBang(measure))
            context.pos += 1

    def _handle_playhead_position(self, context: DecodingContext) -> None:
        # Um argumento que não é float encerra o bloco sem ser consumido;
        # o laço principal decide se ele é a próxima tag ou uma falha.
        for measure in MEASURES_IN_ORDER:
            if context.exhausted:
                return
            arg = context.peek()
            if not _is_float(arg):
                return

            context.events.append(PlayheadPosition(measure, arg))
            context.pos += 1


_default_decoder = JenDecoder()


def decode(address: str, args: Sequence[OscArg]) -> DecodeResult:
    """Decodifica com as configurações padrão (endereço `/jen`)."""
    return _default_decoder.decode(address, args)
