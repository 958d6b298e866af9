"""
Component Generator

컴포넌트 디렉토리와 4개 파일(component, stylesheet, index, story)을 생성하고
생성 후 format/lint hook을 실행합니다.

파일 작성은 순차적이며 원자적이지 않습니다. 중간에 실패하면 이미 작성된 파일은 그대로 남습니다.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence, Tuple, Union

from compgen.exceptions import ComponentCreationError, InvalidComponentNameError
from compgen.generator.hooks import CommandResult, PostGenerateHook
from compgen.generator.template_engine import TemplateEngine
from compgen.utils.logger import log_gen, log_gen_debug, log_hook

DIR_MODE = 0o755


def capitalize_first_letter(name: str) -> str:
    """
    첫 글자만 대문자로 변환 (나머지는 그대로).

    Raises:
        InvalidComponentNameError: 빈 문자열일 때
    """
    if not name:
        raise InvalidComponentNameError("Component name must not be empty")
    return name[0].upper() + name[1:]


@dataclass(frozen=True)
class ComponentSpec:
    """생성할 컴포넌트 정보. capitalized_name은 한 번만 계산해 모든 템플릿에서 재사용."""

    name: str
    capitalized_name: str
    target_dir: Path
    index_file: str = "index.ts"

    @classmethod
    def from_name(
        cls, name: str, target_dir: Union[str, Path], index_file: str = "index.ts"
    ) -> "ComponentSpec":
        return cls(
            name=name,
            capitalized_name=capitalize_first_letter(name),
            target_dir=Path(target_dir),
            index_file=index_file,
        )

    @property
    def component_dir(self) -> Path:
        return self.target_dir / self.name

    def files(self) -> List[Tuple[str, Path]]:
        """(템플릿 이름, 출력 경로) 목록. 작성 순서대로."""
        return [
            ("component/component.tsx.j2", self.component_dir / f"{self.name}.tsx"),
            ("component/styles.module.scss.j2", self.component_dir / f"{self.name}.module.scss"),
            ("component/index.ts.j2", self.component_dir / self.index_file),
            ("component/stories.tsx.j2", self.component_dir / f"{self.name}.stories.tsx"),
        ]

    def context(self) -> dict:
        return {"name": self.name, "capitalized_name": self.capitalized_name}


@dataclass
class GeneratedComponent:
    """컴포넌트 생성 결과"""

    spec: ComponentSpec
    files: List[Path]
    hook_results: List[CommandResult] = field(default_factory=list)


def create_component(
    name: str,
    current_dir: Union[str, Path],
    hooks: Sequence[PostGenerateHook] = (),
    template_engine: Optional[TemplateEngine] = None,
    index_file: str = "index.ts",
) -> GeneratedComponent:
    """
    컴포넌트 디렉토리 및 파일 생성.

    Args:
        name: 컴포넌트 이름 (파일명/import 경로에 그대로 사용)
        current_dir: 컴포넌트 디렉토리를 만들 상위 디렉토리
        hooks: 파일 작성 후 실행할 hook 목록 (결과는 성공 여부에 영향 없음)
        template_engine: 템플릿 엔진 (기본값: 패키지 내장 템플릿)
        index_file: 컴포넌트 index 파일 이름

    Returns:
        GeneratedComponent: 작성된 파일 경로 및 hook 실행 결과

    Raises:
        InvalidComponentNameError: name이 비어 있을 때
        ComponentCreationError: 디렉토리 생성 또는 파일 작성 실패 시
    """
    spec = ComponentSpec.from_name(name, current_dir, index_file=index_file)
    engine = template_engine or TemplateEngine()

    # 디렉토리가 없으면 생성 (이미 있으면 재사용, 파일은 덮어씀)
    component_dir = spec.component_dir
    if not component_dir.exists():
        try:
            component_dir.mkdir(mode=DIR_MODE)
        except FileExistsError:
            pass
        except OSError as e:
            raise ComponentCreationError(
                f"Failed to create directory {component_dir}: {e}", original_error=e
            ) from e
        log_gen_debug(f"디렉토리 생성: {component_dir}")

    written: List[Path] = []
    context = spec.context()
    for template_name, output_path in spec.files():
        try:
            engine.write_rendered_file(template_name, output_path, context)
        except OSError as e:
            raise ComponentCreationError(
                f"Failed to write {output_path}: {e}", original_error=e
            ) from e
        written.append(output_path)
        log_gen("작성 완료", file=output_path.name)

    result = GeneratedComponent(spec=spec, files=written)

    # format/lint: 작업 디렉토리는 컴포넌트 디렉토리가 아닌 대상 디렉토리
    working_dir = spec.target_dir.resolve()
    for hook in hooks:
        hook_result = hook(working_dir, component_dir.resolve())
        if not hook_result.success:
            log_hook("실패했지만 계속 진행합니다")
        result.hook_results.append(hook_result)

    return result
