"""
Erros tipados da validação de CPF.
Cada falha de uso indevido tem sua própria classe, para que o chamador
possa tratar InvalidArgument, InvalidLength e InvalidDigit separadamente.
"""
from typing import Dict, Optional


class CPFError(Exception):
    """Base de todos os erros do cpfcheck."""


class InvalidArgument(CPFError, TypeError):
    def __init__(self, value: object = None):
        self.value = value
        if value is None:
            message = "argumento é None"
        else:
            message = f"CPF deve ser str, recebido {type(value).__name__}"
        super().__init__(message)


class InvalidLength(CPFError, ValueError):
    def __init__(self, value: str, expected: int = 11):
        self.value = value
        self.length = len(value)
        self.expected = expected
        super().__init__(f"CPF deve ter {expected} dígitos: {value!r} (tamanho={self.length})")


class InvalidDigit(CPFError, ValueError):
    def __init__(self, value: str, char: str, position: int):
        self.value = value
        self.char = char
        self.position = position
        super().__init__(
            f"CPF deve conter somente dígitos (0 a 9): {value!r} "
            f"(caractere {char!r} na posição {position})"
        )


class UnknownAlgorithm(CPFError, ValueError):
    def __init__(self, name: Optional[str], available=()):
        self.name = name
        self.available = tuple(available)
        super().__init__(f"Algoritmo desconhecido: {name!r}. Disponíveis: {', '.join(self.available)}")


class AlgorithmMismatch(CPFError, RuntimeError):
    """Os algoritmos discordaram sobre o mesmo CPF (nunca deveria acontecer)."""

    def __init__(self, value: str, results: Dict[str, bool]):
        self.value = value
        self.results = dict(results)
        super().__init__(f"Algoritmos divergentes para {value!r}: {self.results}")
