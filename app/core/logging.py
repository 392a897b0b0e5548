import logging

from app.core.config import settings

FORMATO = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configurar_logging(nivel: str = None) -> None:
    """
    Configura o logging raiz uma única vez por processo.
    O nível vem de settings.LOG_LEVEL quando não informado.
    """
    nivel = (nivel or settings.LOG_LEVEL).upper()
    logging.basicConfig(level=nivel, format=FORMATO)
    logging.getLogger("app").setLevel(nivel)
