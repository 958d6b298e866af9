"""
Create Command Implementation
"""

import logging
from pathlib import Path
from typing import Optional

import typer
from typing_extensions import Annotated

from compgen.cli.utils.header import (
    print_command_header,
    print_divider,
    print_item,
    print_section,
    version_callback,
)
from compgen.exceptions import ConfigError, InvalidComponentNameError, ScaffoldError
from compgen.generator import GeneratedComponent, create_component, default_hooks, update_parent_index
from compgen.settings import load_config
from compgen.utils.logger import CLI_LEVEL, setup_log_level

USAGE_MESSAGE = "Please provide the component name and directory"


def create_command(
    name: Annotated[Optional[str], typer.Argument(help="컴포넌트 이름", show_default=False)] = None,
    directory: Annotated[
        Optional[str], typer.Argument(help="컴포넌트를 생성할 디렉토리 (index.ts 위치)", show_default=False)
    ] = None,
    config: Annotated[
        Optional[Path], typer.Option("--config", "-c", help="설정 파일 경로 (기본값: ./compgen.yaml)")
    ] = None,
    no_hooks: Annotated[bool, typer.Option("--no-hooks", help="format/lint 실행 생략")] = False,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="상세 로그 출력")] = False,
    quiet: Annotated[bool, typer.Option("--quiet", "-q", help="요약 출력만 표시")] = False,
    version: Annotated[
        bool, typer.Option("--version", callback=version_callback, is_eager=True, help="버전 출력")
    ] = False,
) -> None:
    """
    컴포넌트 생성.

    <directory>/<name>/ 아래에 component, stylesheet, index, story 파일을 만들고
    <directory>/index.ts 맨 앞에 export 라인을 추가합니다.

    Args:
        name: 컴포넌트 이름 (파일명/import 경로에 그대로 사용)
        directory: 대상 디렉토리
        config: 설정 파일 경로
        no_hooks: format/lint 실행 생략 여부
        verbose: DEBUG 레벨 로그 출력
        quiet: CLI 레벨 로그만 출력
        version: 버전 출력 후 종료
    """
    if name is None or directory is None:
        typer.echo(USAGE_MESSAGE)
        raise typer.Exit(1)

    if verbose:
        setup_log_level(logging.DEBUG)
    elif quiet:
        setup_log_level(CLI_LEVEL)
    else:
        setup_log_level(logging.INFO)

    try:
        settings = load_config(config)
    except ConfigError as e:
        typer.echo(f"Error loading config: {e}")
        raise typer.Exit(1)

    if no_hooks:
        settings = settings.model_copy(update={"run_hooks": False})

    if not quiet:
        print_command_header("Create Component", name)

    try:
        generated = create_component(
            name,
            directory,
            hooks=default_hooks(settings),
            index_file=settings.index_file,
        )
    except InvalidComponentNameError as e:
        typer.echo(f"Invalid component name: {e}")
        raise typer.Exit(1)
    except ScaffoldError as e:
        typer.echo(f"Error creating component: {e}")
        raise typer.Exit(1)

    try:
        added = update_parent_index(name, directory, index_file=settings.index_file)
    except ScaffoldError as e:
        typer.echo(f"Error updating main index: {e}")
        raise typer.Exit(1)

    if not quiet:
        _show_completion_message(generated, added)


def _show_completion_message(generated: GeneratedComponent, index_added: bool) -> None:
    """완료 메시지 표시"""
    spec = generated.spec
    print_divider()
    print_section("OK", f"{spec.capitalized_name} 생성 완료", style="green", newline=False)
    for path in generated.files:
        print_item("FILE", str(path))

    index_path = spec.target_dir / spec.index_file
    if index_added:
        print_item("INDEX", f"{index_path} 갱신")
    else:
        print_item("INDEX", f"{index_path} 변경 없음 (이미 export 됨)")

    failed = [r for r in generated.hook_results if not r.success]
    if failed:
        print_section("WARN", f"format/lint 명령 {len(failed)}개 실패 (생성 결과에는 영향 없음)", style="yellow")

    print_divider()
