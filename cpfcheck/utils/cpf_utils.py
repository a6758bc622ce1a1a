"""
Módulo utilitário para validação dos dígitos verificadores de CPF.
Funções puras e reutilizáveis: extração de dígitos e dois algoritmos
equivalentes de verificação (soma ponderada direta e soma acumulada).
"""
from typing import Callable, Dict, List, Tuple

from cpfcheck.utils.errors import InvalidArgument, InvalidDigit, InvalidLength, UnknownAlgorithm

CPF_LENGTH = 11
BASE_LENGTH = 9

_DIGITS = "0123456789"


def digits_of(s: str) -> List[int]:
    """
    Converte cada caractere em seu valor inteiro.
    Parâmetros:
        s (str): sequência de caracteres numéricos, de qualquer tamanho
    Retorno:
        List[int]: um inteiro por caractere, na mesma ordem
    Exemplo: '1114' -> [1, 1, 1, 4]
    """
    if s is None or not isinstance(s, str):
        raise InvalidArgument(s)
    digits = []
    for position, char in enumerate(s):
        # str.isdigit aceitaria '²' e dígitos de outros alfabetos
        if char not in _DIGITS:
            raise InvalidDigit(s, char, position)
        digits.append(ord(char) - ord("0"))
    return digits


def ensure_cpf_shape(cpf: str, expected: int = CPF_LENGTH) -> List[int]:
    """
    Pré-condições comuns aos dois algoritmos.
    Parâmetros:
        cpf (str): CPF apenas com dígitos
        expected (int): tamanho exigido
    Retorno:
        List[int]: dígitos do CPF
    """
    if cpf is None or not isinstance(cpf, str):
        raise InvalidArgument(cpf)
    if len(cpf) != expected:
        raise InvalidLength(cpf, expected)
    return digits_of(cpf)


def _weighted_sums(d: List[int]) -> Tuple[int, int]:
    partial10 = d[0]
    partial11 = d[1]
    for i in range(1, 9):
        partial10 += d[i] * (i + 1)
    for i in range(2, 10):
        partial11 += d[i] * i
    return partial10, partial11


def validate_cpf_v1(cpf: str) -> bool:
    """
    Valida os dígitos verificadores pela soma ponderada direta (algoritmo 1).
    Parâmetros:
        cpf (str): CPF com exatamente 11 dígitos, sem máscara
    Retorno:
        bool: True se os dois dígitos verificadores conferem
    """
    d = ensure_cpf_shape(cpf)
    partial10, partial11 = _weighted_sums(d)
    digit10 = (partial10 % 11) % 10
    digit11 = (partial11 % 11) % 10
    return digit10 == d[9] and digit11 == d[10]


def validate_cpf_v2(cpf: str) -> bool:
    """
    Valida os dígitos verificadores pela soma acumulada (algoritmo 2).
    Parâmetros:
        cpf (str): CPF com exatamente 11 dígitos, sem máscara
    Retorno:
        bool: True se os dois dígitos verificadores conferem
    """
    d = ensure_cpf_shape(cpf)
    partial11 = d[8]
    partial10 = partial11
    for c in range(7, -1, -1):
        partial11 += d[c]
        partial10 += partial11
    digit10 = (partial10 % 11) % 10
    digit11 = ((partial10 - partial11 + 9 * d[9]) % 11) % 10
    return digit10 == d[9] and digit11 == d[10]


def check_digits(base: str) -> Tuple[int, int]:
    """
    Calcula os dois dígitos verificadores corretos para uma base de 9 dígitos.
    Parâmetros:
        base (str): nove primeiros dígitos do CPF
    Retorno:
        Tuple[int, int]: (décimo dígito, décimo primeiro dígito)
    Exemplo: '111444777' -> (3, 5)
    """
    d = ensure_cpf_shape(base, BASE_LENGTH)
    first = (d[0] + sum(d[i] * (i + 1) for i in range(1, 9))) % 11 % 10
    d.append(first)
    second = (d[1] + sum(d[i] * i for i in range(2, 10))) % 11 % 10
    return first, second


ALGORITHMS: Dict[str, Callable[[str], bool]] = {
    "v1": validate_cpf_v1,
    "v2": validate_cpf_v2,
}


def get_algorithm(name: str) -> Callable[[str], bool]:
    try:
        return ALGORITHMS[name]
    except (KeyError, TypeError):
        raise UnknownAlgorithm(name, ALGORITHMS) from None


def validate_cpf(cpf: str, algorithm: str = "v1") -> bool:
    """
    Valida o CPF com o algoritmo escolhido pelo nome ('v1' ou 'v2').
    """
    return get_algorithm(algorithm)(cpf)
