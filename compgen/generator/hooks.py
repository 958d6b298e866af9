"""
Post-generate hooks

파일 생성 후 실행되는 외부 명령(formatter, linter).
외부 명령의 실패는 로그로만 남기고 호출자에게 예외를 전파하지 않습니다.
"""

import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, Optional

from compgen.settings.config import ScaffoldConfig
from compgen.utils.logger import log_cli, log_hook, log_hook_error


@dataclass(frozen=True)
class CommandResult:
    """외부 명령 실행 결과"""

    output: str
    success: bool


# (working_dir, component_dir) -> CommandResult
PostGenerateHook = Callable[[Path, Path], CommandResult]


def run_command(
    working_dir: Path, command: str, *args: str, timeout: Optional[float] = None
) -> CommandResult:
    """
    외부 명령 실행 후 stdout/stderr 합친 출력을 그대로 출력.

    Args:
        working_dir: 명령을 실행할 작업 디렉토리
        command: 실행할 명령
        *args: 명령 인자
        timeout: 타임아웃(초), None이면 종료까지 대기

    Returns:
        CommandResult: 출력 텍스트와 성공 여부 (실행 실패도 예외 없이 반환)
    """
    cmd = [command, *args]
    log_hook(" ".join(cmd), command=command)

    try:
        result = subprocess.run(
            cmd,
            cwd=working_dir,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
            timeout=timeout,
        )
    except subprocess.TimeoutExpired as e:
        output = e.output or ""
        if isinstance(output, bytes):
            output = output.decode("utf-8", errors="replace")
        log_hook_error(f"Error executing command: {command} timed out after {timeout}s")
        log_cli(output)
        return CommandResult(output=output, success=False)
    except OSError as e:
        log_hook_error(f"Error executing command: {e}")
        return CommandResult(output="", success=False)

    output = result.stdout or ""
    if result.returncode != 0:
        log_hook_error(f"Error executing command: exit status {result.returncode}")
    log_cli(output)
    return CommandResult(output=output, success=result.returncode == 0)


def format_hook(config: ScaffoldConfig) -> PostGenerateHook:
    """컴포넌트 디렉토리 전체를 포맷하는 hook 생성"""

    def _format(working_dir: Path, component_dir: Path) -> CommandResult:
        return run_command(
            working_dir,
            config.package_manager,
            "run",
            config.format_script,
            str(component_dir),
            timeout=config.hook_timeout,
        )

    return _format


def lint_hook(config: ScaffoldConfig) -> PostGenerateHook:
    """컴포넌트 디렉토리 하위 전체(glob)를 린트하는 hook 생성"""

    def _lint(working_dir: Path, component_dir: Path) -> CommandResult:
        return run_command(
            working_dir,
            config.package_manager,
            "run",
            config.lint_script,
            f"{component_dir.as_posix()}/**",
            timeout=config.hook_timeout,
        )

    return _lint


def default_hooks(config: ScaffoldConfig) -> List[PostGenerateHook]:
    """설정에 따른 기본 hook 목록 (format → lint 순서)"""
    if not config.run_hooks:
        return []
    return [format_hook(config), lint_hook(config)]
