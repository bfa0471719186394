import logging
from typing import Final

# Endereço OSC usado pelo Jen
JEN_ADDRESS: Final[str] = '/jen'

# Tags de modo reservadas (nunca são códigos válidos de instrumento ou medida)
NOTE_ON: Final[int] = 100
PLAYHEAD_BANG: Final[int] = 101
PLAYHEAD_POSITION: Final[int] = 102

MODE_TAGS: Final[frozenset[int]] = frozenset(
    (NOTE_ON, PLAYHEAD_BANG, PLAYHEAD_POSITION)
)

LOG_FORMAT: Final[str] = '%(asctime)s %(levelname)s %(name)s: %(message)s'


def configure_logging(level: int = logging.INFO) -> None:
    """Configura o logging raiz para aplicações que embutem o receptor."""
    logging.basicConfig(level=level, format=LOG_FORMAT)
