"""
Template Engine for Component Scaffold
Jinja2 기반 템플릿 렌더링
"""

import logging
from pathlib import Path
from typing import Any, Dict

from jinja2 import Environment, FileSystemLoader, StrictUndefined, TemplateNotFound

logger = logging.getLogger(__name__)

# 패키지에 포함된 기본 템플릿 디렉토리
DEFAULT_TEMPLATE_DIR = Path(__file__).parent.parent / "templates"


class TemplateEngine:
    """Jinja2 기반 템플릿 렌더링 엔진.

    컴포넌트 파일(component, stylesheet, index, story) 생성을 위한 렌더링 기능 제공.
    """

    def __init__(self, template_dir: Path = DEFAULT_TEMPLATE_DIR):
        """템플릿 엔진 초기화.

        Args:
            template_dir: 템플릿 파일이 위치한 디렉토리 경로

        Raises:
            FileNotFoundError: 템플릿 디렉토리가 존재하지 않을 경우
        """
        if not template_dir.exists():
            raise FileNotFoundError(f"Template directory not found: {template_dir}")

        self.template_dir = template_dir
        # 생성 파일 내용은 템플릿과 바이트 단위로 같아야 하므로 공백 처리 옵션은 끈다
        self.env = Environment(
            loader=FileSystemLoader(str(template_dir)),
            autoescape=False,
            keep_trailing_newline=True,
            undefined=StrictUndefined,
        )

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """템플릿 파일을 렌더링하여 문자열로 반환.

        Args:
            template_name: 렌더링할 템플릿 파일 이름 (상대 경로)
            context: 템플릿에 전달할 변수 딕셔너리

        Returns:
            렌더링된 템플릿 문자열

        Raises:
            TemplateNotFound: 템플릿 파일을 찾을 수 없을 경우
        """
        try:
            template = self.env.get_template(template_name)
            return template.render(**context)
        except TemplateNotFound:
            logger.error(f"Template을 찾을 수 없습니다: {template_name}")
            raise

    def write_rendered_file(
        self,
        template_name: str,
        output_path: Path,
        context: Dict[str, Any],
    ) -> None:
        """렌더링된 템플릿을 파일로 저장 (기존 파일은 덮어씀).

        Args:
            template_name: 렌더링할 템플릿 파일 이름
            output_path: 출력 파일 경로
            context: 템플릿에 전달할 변수 딕셔너리

        Raises:
            TemplateNotFound: 템플릿 파일을 찾을 수 없을 경우
            OSError: 파일 쓰기 실패 시
        """
        rendered_content = self.render_template(template_name, context)

        try:
            # newline="" : 플랫폼과 무관하게 템플릿의 \n 그대로 기록
            with open(output_path, "w", encoding="utf-8", newline="") as f:
                f.write(rendered_content)
        except OSError as e:
            logger.error(f"파일 작성에 실패했습니다: {output_path}, 오류: {e}")
            raise
