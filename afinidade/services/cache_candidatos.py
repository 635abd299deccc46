'''Cache em memória dos candidatos usados no match'''

import logging
import threading
import time
from typing import Callable, List, Optional, Protocol

from afinidade.schemas.politico import Candidato

logger = logging.getLogger(__name__)

CACHE_TTL_PADRAO = 5 * 60  # segundos


class ProvedorCandidatos(Protocol):
    def listar_candidatos_com_tags(self) -> List[Candidato]:
        ...


class CacheCandidatos:
    """Memoização de uma única entrada, válida por `ttl_segundos`.

    Duas chamadas que encontram o cache vencido ao mesmo tempo fazem duas
    buscas; isso é aceito. O lock protege só a leitura e a publicação, e
    um resultado cuja busca começou antes do snapshot atual não o substitui.
    Se a busca falhar o erro sobe para quem chamou e o snapshot antigo não
    é usado.
    """

    def __init__(self, provedor: ProvedorCandidatos,
                 ttl_segundos: float = CACHE_TTL_PADRAO,
                 relogio: Callable[[], float] = time.monotonic) -> None:
        self.provedor = provedor
        self.ttl_segundos = ttl_segundos
        self._relogio = relogio
        self._lock = threading.Lock()
        self._candidatos: Optional[List[Candidato]] = None
        self._timestamp = 0.0

    def _valido(self, agora: float) -> bool:
        return self._candidatos is not None and (agora - self._timestamp) < self.ttl_segundos

    def obter_candidatos(self) -> List[Candidato]:
        agora = self._relogio()
        with self._lock:
            if self._valido(agora):
                logger.info("Usando dados de políticos em cache")
                return self._candidatos

        logger.info("Buscando dados atualizados de políticos no banco")
        candidatos = self.provedor.listar_candidatos_com_tags()

        with self._lock:
            if self._candidatos is None or agora >= self._timestamp:
                self._candidatos = candidatos
                self._timestamp = agora
        return candidatos

    def invalidar(self) -> None:
        with self._lock:
            self._candidatos = None
            self._timestamp = 0.0
