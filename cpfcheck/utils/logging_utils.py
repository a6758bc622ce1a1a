"""
Criação de loggers no mesmo formato usado pelos serviços.
"""
import logging
from typing import Optional, Union

from cpfcheck import config

LOG_FORMAT = "%(asctime)s %(levelname)s %(message)s"
DEFAULT_LEVEL = logging.WARNING


def resolve_level(level: Union[int, str]) -> int:
    """
    Converte o nível em inteiro; nome desconhecido cai para WARNING.
    Exemplo: 'debug' -> 10, 'VERBOSE' -> 30
    """
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).strip().upper())
    if not isinstance(resolved, int):
        return DEFAULT_LEVEL
    return resolved


def get_logger(name: str, level: Optional[Union[int, str]] = None) -> logging.Logger:
    """
    Retorna um logger com StreamHandler e formatter padrão.
    Parâmetros:
        name (str): nome do logger
        level (int | str, opcional): nível; padrão CPF_LOG_LEVEL na primeira configuração
    Retorno:
        logging.Logger: logger configurado
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        if level is None:
            level = config.CPF_LOG_LEVEL
    # nível já definido pela aplicação só muda com level explícito
    if level is not None:
        logger.setLevel(resolve_level(level))
    return logger


def mask_cpf(cpf) -> str:
    """Mascara o CPF para log: '11144477735' -> '111******35'."""
    if cpf is None:
        return "None"
    if not isinstance(cpf, str):
        return f"<{type(cpf).__name__}>"
    if len(cpf) <= 5:
        return "*" * len(cpf)
    return cpf[:3] + "*" * (len(cpf) - 5) + cpf[-2:]
