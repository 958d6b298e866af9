"""
Config Schema - 스캐폴딩 설정
compgen.yaml 파일 및 환경변수로 재정의 가능한 설정
"""

from typing import Optional

from pydantic import BaseModel, Field


class ScaffoldConfig(BaseModel):
    """컴포넌트 생성 및 후처리(format/lint) 명령 설정"""

    package_manager: str = Field("pnpm", min_length=1, description="format/lint 스크립트를 실행할 패키지 매니저")
    format_script: str = Field("format:file", min_length=1, description="포맷터 스크립트 이름")
    lint_script: str = Field("lint:file", min_length=1, description="린터 스크립트 이름")
    run_hooks: bool = Field(True, description="파일 생성 후 format/lint 실행 여부")
    hook_timeout: Optional[float] = Field(None, gt=0, description="외부 명령 타임아웃(초), None이면 무제한")
    index_file: str = Field("index.ts", min_length=1, description="상위/컴포넌트 index 파일 이름")
