"""
Serviço de validação de CPF: escolhe o algoritmo, registra logs e,
opcionalmente, confere os dois algoritmos entre si.
Não faz I/O; é uma fachada em processo sobre cpfcheck.utils.cpf_utils.
"""
from typing import Dict, Optional

from cpfcheck import config
from cpfcheck.utils import cpf_utils
from cpfcheck.utils.errors import (
    AlgorithmMismatch,
    CPFError,
    InvalidArgument,
    InvalidDigit,
    InvalidLength,
    UnknownAlgorithm,
)
from cpfcheck.utils.logging_utils import get_logger, mask_cpf


class CPFValidationService:
    def __init__(self, default_algorithm: Optional[str] = None, cross_check: Optional[bool] = None, logger=None):
        """
        Inicializa o serviço de validação.
        Parâmetros:
            default_algorithm (str, opcional): 'v1' ou 'v2'; padrão CPF_DEFAULT_ALGORITHM
            cross_check (bool, opcional): roda todos os algoritmos e compara; padrão CPF_CROSS_CHECK
            logger (logging.Logger, opcional): Logger para logs
        """
        if default_algorithm is None:
            default_algorithm = config.CPF_DEFAULT_ALGORITHM
        if default_algorithm not in cpf_utils.ALGORITHMS:
            raise UnknownAlgorithm(default_algorithm, cpf_utils.ALGORITHMS)
        self.default_algorithm = default_algorithm
        self.cross_check_enabled = config.CPF_CROSS_CHECK if cross_check is None else cross_check
        if logger is None:
            logger = get_logger("cpf_validation_service")
        self.logger = logger

    def validate(self, cpf: str, algorithm: Optional[str] = None) -> bool:
        """
        Valida os dígitos verificadores do CPF.
        Parâmetros:
            cpf (str): CPF com 11 dígitos, sem máscara
            algorithm (str, opcional): sobrepõe o algoritmo padrão
        Retorno:
            bool: True se os dígitos verificadores conferem
        """
        if self.cross_check_enabled and algorithm is None:
            return self.cross_check(cpf)
        name = algorithm if algorithm is not None else self.default_algorithm
        try:
            result = cpf_utils.validate_cpf(cpf, name)
        except CPFError as exc:
            self.logger.warning(f"Falha na validação de CPF: cpf={mask_cpf(cpf)}, algoritmo={name}, erro={exc.__class__.__name__}")
            raise
        self._log_result(cpf, name, result)
        return result

    def cross_check(self, cpf: str) -> bool:
        """
        Roda todos os algoritmos registrados e exige resultado idêntico.
        Parâmetros:
            cpf (str): CPF com 11 dígitos, sem máscara
        Retorno:
            bool: resultado comum aos algoritmos
        """
        results: Dict[str, bool] = {}
        try:
            for name, func in cpf_utils.ALGORITHMS.items():
                results[name] = func(cpf)
        except CPFError as exc:
            self.logger.warning(f"Falha na validação de CPF: cpf={mask_cpf(cpf)}, erro={exc.__class__.__name__}")
            raise
        if len(set(results.values())) > 1:
            self.logger.error(f"Algoritmos divergentes: cpf={mask_cpf(cpf)}, resultados={results}")
            raise AlgorithmMismatch(cpf, results)
        result = next(iter(results.values()))
        self._log_result(cpf, "+".join(results), result)
        return result

    def is_valid(self, cpf) -> bool:
        """
        Variante tolerante: entrada mal formada vira False em vez de erro.
        """
        try:
            return self.validate(cpf)
        except (InvalidArgument, InvalidLength, InvalidDigit):
            return False

    def _log_result(self, cpf: str, algorithm: str, result: bool) -> None:
        if result:
            self.logger.debug(f"CPF válido: cpf={mask_cpf(cpf)}, algoritmo={algorithm}")
        else:
            self.logger.warning(f"CPF inválido (dígitos verificadores): cpf={mask_cpf(cpf)}, algoritmo={algorithm}")
