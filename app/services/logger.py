import logging
import os
import sys

FORMATO_LOG = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

_configurado = False


def setup_logging(nivel: str = None):
    """Configura o logging do app uma unica vez; chamadas seguintes nao fazem nada."""
    global _configurado
    if _configurado:
        return

    nivel = nivel or os.getenv("LOG_LEVEL", "INFO")
    logging.basicConfig(
        level=getattr(logging, nivel.upper(), logging.INFO),
        format=FORMATO_LOG,
        datefmt="%H:%M:%S",
        stream=sys.stdout,
        force=True,
    )
    _configurado = True


def get_logger(nome: str) -> logging.Logger:
    return logging.getLogger(nome)
