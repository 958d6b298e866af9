"""
Parent index updater

상위 디렉토리의 index 파일 맨 앞에 re-export 라인을 추가합니다.
같은 라인이 이미 포함되어 있으면(부분 문자열 기준) 아무것도 하지 않습니다.
"""

import os
from pathlib import Path
from typing import Union

from compgen.exceptions import IndexUpdateError
from compgen.utils.logger import log_index

FILE_MODE = 0o644


def export_line(name: str) -> str:
    return f"export * from './{name}'"


def update_parent_index(name: str, current_dir: Union[str, Path], index_file: str = "index.ts") -> bool:
    """
    상위 index 파일에 export 라인 추가.

    Args:
        name: 컴포넌트 이름
        current_dir: index 파일이 있는 디렉토리
        index_file: index 파일 이름

    Returns:
        bool: 라인이 추가되었으면 True, 이미 있었으면 False

    Raises:
        IndexUpdateError: index 파일이 없거나 읽기/쓰기에 실패했을 때
    """
    index_path = Path(current_dir) / index_file
    line_to_add = export_line(name)
    # 인코딩과 무관하게 기존 내용은 바이트 그대로 보존
    line_bytes = line_to_add.encode("utf-8")

    try:
        content = index_path.read_bytes()
    except OSError as e:
        raise IndexUpdateError(f"Failed to read {index_path}: {e}", original_error=e) from e

    if line_bytes in content:
        log_index(f"이미 존재합니다: {line_to_add}")
        return False

    new_content = line_bytes + b"\n" + content
    try:
        fd = os.open(index_path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, FILE_MODE)
        with open(fd, "wb") as f:
            f.write(new_content)
    except OSError as e:
        raise IndexUpdateError(f"Failed to write {index_path}: {e}", original_error=e) from e

    log_index(f"추가됨: {line_to_add} → {index_path}")
    return True
