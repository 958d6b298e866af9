"""
Component Scaffold CLI - Main Commands Router
단순 라우팅만 담당하는 메인 CLI 진입점

명령이 하나뿐이므로 하위 명령 없이 `compgen <name> <directory>` 형태로 실행됩니다.
"""

import typer

from compgen.cli.commands.create_command import create_command

# Main CLI App
app = typer.Typer(
    help="Component Scaffold - UI 컴포넌트 파일 생성 및 index export 등록",
    context_settings={"help_option_names": ["-h", "--help"]},
    add_completion=False,
    rich_markup_mode="rich",
)

app.command("create", help="컴포넌트 생성 - 컴포넌트 디렉토리/파일 생성 및 상위 index.ts 갱신")(create_command)


if __name__ == "__main__":
    app()
