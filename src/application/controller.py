import logging

from domain.decoder import JenDecoder
from domain.events import JenEvent
from domain.faults import DecodeFault
from domain.models import (
    Clock,
    DecoderSettings,
    DecodeResult,
    JenMessage,
    JenPacket,
    iter_messages,
)
from domain.state import JenState

logger = logging.getLogger(__name__)


class JenController:
    """Recebe mensagens do transporte, decodifica e atualiza o estado."""

    def __init__(
        self,
        clock: Clock | None = None,
        settings: DecoderSettings | None = None,
    ) -> None:
        self.decoder: JenDecoder = JenDecoder(settings)
        self._state: JenState = JenState(clock)

    @property
    def state(self) -> JenState:
        return self._state

    def handle_message(self, message: JenMessage) -> DecodeResult:
        """Decodifica uma mensagem e aplica seus eventos com um único horário."""
        result = self._decode(message)
        if result.events:
            self._state.apply_now(result.events)
        return result

    def handle_packet(self, packet: JenPacket) -> list[DecodeFault]:
        """Converte todas as mensagens do pacote em eventos e atualiza o estado.

        A falha de uma mensagem não descarta os eventos das outras, nem os
        eventos já decodificados da própria mensagem. Todo o pacote é
        aplicado como um lote, com o mesmo horário.
        """
        events: list[JenEvent] = []
        faults: list[DecodeFault] = []

        for message in iter_messages(packet):
            result = self._decode(message)
            events.extend(result.events)
            if result.fault is not None:
                faults.append(result.fault)

        if events:
            self._state.apply_now(events)
        return faults

    def _decode(self, message: JenMessage) -> DecodeResult:
        result = self.decoder.decode_message(message)
        if result.fault is not None:
            logger.warning(
                'Mensagem %s malformada: %s (%d eventos mantidos)',
                message.address,
                result.fault.describe(),
                len(result.events),
            )
        return result
