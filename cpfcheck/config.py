import os


# ====== Configuração via variáveis de ambiente ======
_TRUE_VALUES = {"1", "true", "yes", "on"}


def env_flag(name: str, default: bool = False) -> bool:
	value = os.getenv(name)
	if value is None or not value.strip():
		return default
	return value.strip().lower() in _TRUE_VALUES


CPF_DEFAULT_ALGORITHM = os.getenv("CPF_DEFAULT_ALGORITHM", "v1")
CPF_CROSS_CHECK = env_flag("CPF_CROSS_CHECK", False)
CPF_LOG_LEVEL = os.getenv("CPF_LOG_LEVEL", "WARNING").upper()
