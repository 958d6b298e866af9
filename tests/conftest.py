"""
Component Scaffold - Core Test Fixtures
실제 파일시스템(tmp_path) 사용, 외부 명령(subprocess)만 mock
"""

import logging
from pathlib import Path
from typing import List, Tuple

import pytest

from compgen.generator.hooks import CommandResult

ORIGINAL_INDEX = "export * from './Card'\nexport * from './Modal'\n"


@pytest.fixture
def components_dir(tmp_path: Path) -> Path:
    """index.ts가 있는 대상 디렉토리"""
    target = tmp_path / "components"
    target.mkdir()
    (target / "index.ts").write_text(ORIGINAL_INDEX, encoding="utf-8")
    return target


class RecordingHook:
    """호출 인자를 기록하고 고정 결과를 반환하는 hook"""

    def __init__(self, result: CommandResult = CommandResult(output="ok", success=True)):
        self.result = result
        self.calls: List[Tuple[Path, Path]] = []

    def __call__(self, working_dir: Path, component_dir: Path) -> CommandResult:
        self.calls.append((working_dir, component_dir))
        return self.result


@pytest.fixture
def recording_hook() -> RecordingHook:
    return RecordingHook()


@pytest.fixture(autouse=True)
def _reset_compgen_logger():
    """테스트 간 로거 핸들러 누적 방지"""
    yield
    logger = logging.getLogger("compgen")
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
