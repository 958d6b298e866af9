"""
Settings Module Public API
스캐폴딩 설정 스키마와 로딩 함수
"""

from .config import ScaffoldConfig
from .loader import DEFAULT_CONFIG_FILE, load_config, resolve_env_variables

__all__ = [
    "ScaffoldConfig",
    "DEFAULT_CONFIG_FILE",
    "load_config",
    "resolve_env_variables",
]
