"""
Config Loader
.env 로드, compgen.yaml 읽기 및 환경변수 치환 후 ScaffoldConfig 검증
"""

import os
import re
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from dotenv import load_dotenv
from pydantic import ValidationError

from compgen.exceptions import ConfigError
from compgen.settings.config import ScaffoldConfig
from compgen.utils.logger import log_config

DEFAULT_CONFIG_FILE = "compgen.yaml"

_ENV_PATTERN = r"\$\{([^}]+)\}"


def resolve_env_variables(value: Any) -> Any:
    """
    재귀적으로 환경변수 치환.
    ${VAR_NAME:default} 패턴 지원.

    Args:
        value: 치환할 값 (문자열, 딕셔너리, 리스트 등)

    Returns:
        환경변수가 치환된 값
    """
    if isinstance(value, str):
        # 치환 결과는 항상 문자열, 타입 변환은 ScaffoldConfig 필드 타입에 맡김
        def replacer(match):
            expr = match.group(1)
            if ":" in expr:
                var_name, default_value = expr.split(":", 1)
                return os.getenv(var_name.strip(), default_value.strip())
            return os.getenv(expr.strip(), match.group(0))

        return re.sub(_ENV_PATTERN, replacer, value)

    elif isinstance(value, dict):
        return {k: resolve_env_variables(v) for k, v in value.items()}

    elif isinstance(value, list):
        return [resolve_env_variables(item) for item in value]

    return value


def _read_yaml(config_path: Path) -> Dict[str, Any]:
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"설정 파일을 읽을 수 없습니다: {config_path}: {e}", original_error=e) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"설정 파일 최상위는 매핑이어야 합니다: {config_path}")
    return data


def load_config(
    config_path: Optional[Union[str, Path]] = None, base_path: Optional[Path] = None
) -> ScaffoldConfig:
    """
    스캐폴딩 설정 로드.

    Args:
        config_path: 명시적 설정 파일 경로. 없으면 base_path/compgen.yaml 사용 (없어도 됨)
        base_path: .env 및 기본 설정 파일을 찾을 디렉토리 (기본값: 현재 디렉토리)

    Returns:
        검증된 ScaffoldConfig

    Raises:
        ConfigError: 명시된 파일이 없거나, 파일 내용이 유효하지 않을 때
    """
    base_path = base_path or Path.cwd()

    env_file = base_path / ".env"
    if env_file.exists():
        load_dotenv(env_file, override=False)
        log_config(f"환경변수 로드됨: {env_file}")

    data: Dict[str, Any] = {}
    if config_path is not None:
        config_path = Path(config_path)
        if not config_path.exists():
            raise ConfigError(f"설정 파일을 찾을 수 없습니다: {config_path}")
        data = _read_yaml(config_path)
    else:
        default_path = base_path / DEFAULT_CONFIG_FILE
        if default_path.exists():
            config_path = default_path
            data = _read_yaml(default_path)

    data = resolve_env_variables(data)

    try:
        config = ScaffoldConfig(**data)
    except ValidationError as e:
        raise ConfigError(f"설정 값이 올바르지 않습니다: {e}", original_error=e) from e

    if config_path is not None:
        log_config(f"설정 로드 완료: {config_path}")
    else:
        log_config("설정 파일 없음, 기본값 사용")
    return config
