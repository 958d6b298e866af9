"""
Unit tests for the component generator.
Tests capitalization, file layout, literal template output and hook handling.
"""

from pathlib import Path
from unittest.mock import Mock

import pytest

from compgen.exceptions import ComponentCreationError, InvalidComponentNameError
from compgen.generator.component import ComponentSpec, capitalize_first_letter, create_component
from compgen.generator.hooks import CommandResult

BUTTON_TSX = """import React from 'react'
import s from './Button.module.scss'
export type ButtonProps = {}

export const Button: React.FC<ButtonProps> = ({}) => {
  return <div className={s.container}>Button</div>
}
"""

BUTTON_SCSS = """.container {
  // styles go here
}"""

BUTTON_INDEX = "export * from './Button'"

BUTTON_STORY = """import type { Meta, StoryObj } from '@storybook/react'
import { Button } from './'

const meta = {
  component: Button,
  tags: ['autodocs'],
  title: 'Components/Button',
} satisfies Meta<typeof Button>

export default meta
type Story = StoryObj<typeof meta>

export const Default: Story = {
  args: {},
}
"""


def _read(path: Path) -> str:
    return path.read_bytes().decode("utf-8")


class TestCapitalizeFirstLetter:
    """첫 글자만 대문자로 바꾸는지 확인"""

    @pytest.mark.parametrize(
        "name, expected",
        [
            ("button", "Button"),
            ("Button", "Button"),
            ("datePicker", "DatePicker"),
            ("b", "B"),
            ("3dView", "3dView"),
            ("_private", "_private"),
            ("éclair", "Éclair"),
            ("bUTTON", "BUTTON"),
        ],
    )
    def test_only_first_character_changes(self, name, expected):
        assert capitalize_first_letter(name) == expected

    def test_empty_name_is_rejected(self):
        with pytest.raises(InvalidComponentNameError, match="must not be empty"):
            capitalize_first_letter("")

    def test_invalid_name_error_is_value_error(self):
        with pytest.raises(ValueError):
            capitalize_first_letter("")


class TestComponentSpec:
    def test_paths_are_derived_from_raw_name(self, tmp_path):
        spec = ComponentSpec.from_name("datePicker", tmp_path)

        assert spec.capitalized_name == "DatePicker"
        assert spec.component_dir == tmp_path / "datePicker"
        assert [path.name for _, path in spec.files()] == [
            "datePicker.tsx",
            "datePicker.module.scss",
            "index.ts",
            "datePicker.stories.tsx",
        ]

    def test_custom_index_file_name(self, tmp_path):
        spec = ComponentSpec.from_name("card", tmp_path, index_file="index.tsx")
        assert spec.files()[2][1] == tmp_path / "card" / "index.tsx"


class TestCreateComponent:
    """컴포넌트 디렉토리 및 파일 생성 테스트"""

    def test_creates_exactly_four_files_with_literal_contents(self, components_dir):
        # When
        generated = create_component("Button", components_dir)

        # Then
        component_dir = components_dir / "Button"
        assert sorted(p.name for p in component_dir.iterdir()) == sorted(
            ["Button.tsx", "Button.module.scss", "index.ts", "Button.stories.tsx"]
        )
        assert _read(component_dir / "Button.tsx") == BUTTON_TSX
        assert _read(component_dir / "Button.module.scss") == BUTTON_SCSS
        assert _read(component_dir / "index.ts") == BUTTON_INDEX
        assert _read(component_dir / "Button.stories.tsx") == BUTTON_STORY
        assert generated.files == [
            component_dir / "Button.tsx",
            component_dir / "Button.module.scss",
            component_dir / "index.ts",
            component_dir / "Button.stories.tsx",
        ]

    def test_lowercase_name_used_verbatim_in_paths_and_imports(self, components_dir):
        create_component("card", components_dir)

        component_dir = components_dir / "card"
        tsx = _read(component_dir / "card.tsx")
        assert "import s from './card.module.scss'" in tsx
        assert "export const Card: React.FC<CardProps>" in tsx
        assert _read(component_dir / "index.ts") == "export * from './card'"
        assert "title: 'Components/Card'" in _read(component_dir / "card.stories.tsx")

    def test_rerun_overwrites_existing_files(self, components_dir):
        # Given: 이전 실행 결과가 수정된 상태
        create_component("Button", components_dir)
        (components_dir / "Button" / "Button.tsx").write_text("edited", encoding="utf-8")

        # When
        create_component("Button", components_dir)

        # Then
        assert _read(components_dir / "Button" / "Button.tsx") == BUTTON_TSX

    def test_empty_name_creates_nothing(self, components_dir):
        before = sorted(p.name for p in components_dir.iterdir())

        with pytest.raises(InvalidComponentNameError):
            create_component("", components_dir)

        assert sorted(p.name for p in components_dir.iterdir()) == before

    def test_missing_target_directory_fails_before_writing(self, tmp_path):
        missing = tmp_path / "does-not-exist"

        with pytest.raises(ComponentCreationError) as exc_info:
            create_component("Button", missing)

        assert isinstance(exc_info.value.original_error, FileNotFoundError)
        assert not missing.exists()

    def test_write_failure_stops_remaining_writes_without_rollback(self, components_dir):
        # Given: index.ts 자리에 디렉토리가 있어 세 번째 파일 작성이 실패
        (components_dir / "Button").mkdir()
        (components_dir / "Button" / "index.ts").mkdir()

        with pytest.raises(ComponentCreationError):
            create_component("Button", components_dir)

        component_dir = components_dir / "Button"
        assert (component_dir / "Button.tsx").exists()
        assert (component_dir / "Button.module.scss").exists()
        assert not (component_dir / "Button.stories.tsx").exists()


class TestCreateComponentHooks:
    """파일 작성 후 hook 실행 테스트"""

    def test_hooks_run_in_order_with_target_dir_as_working_dir(self, components_dir):
        order = []
        first = Mock(side_effect=lambda w, c: order.append("format") or CommandResult("", True))
        second = Mock(side_effect=lambda w, c: order.append("lint") or CommandResult("", True))

        create_component("Button", components_dir, hooks=[first, second])

        assert order == ["format", "lint"]
        first.assert_called_once_with(components_dir.resolve(), (components_dir / "Button").resolve())

    def test_hook_failure_does_not_affect_result(self, components_dir, recording_hook):
        recording_hook.result = CommandResult(output="boom", success=False)

        generated = create_component("Button", components_dir, hooks=[recording_hook])

        assert len(generated.files) == 4
        assert generated.hook_results == [CommandResult(output="boom", success=False)]

    def test_hooks_not_run_when_writes_fail(self, tmp_path, recording_hook):
        with pytest.raises(ComponentCreationError):
            create_component("Button", tmp_path / "missing", hooks=[recording_hook])

        assert recording_hook.calls == []
