"""
컴포넌트 스캐폴딩 예외 정의

파일시스템 오류(OSError)는 각 작업 경계에서 아래 예외로 감싸서 전파합니다.
외부 명령(formatter/linter) 실패는 예외가 아니라 CommandResult로 보고됩니다.
"""

from typing import Optional


class ScaffoldError(Exception):
    """
    스캐폴딩 중 발생하는 오류의 기본 클래스.
    """

    def __init__(self, message: str, original_error: Optional[Exception] = None):
        """
        Args:
            message: 오류 메시지
            original_error: 원본 예외 (있는 경우)
        """
        super().__init__(message)
        self.original_error = original_error


class InvalidComponentNameError(ScaffoldError, ValueError):
    """컴포넌트 이름이 비어 있을 때"""


class ComponentCreationError(ScaffoldError):
    """컴포넌트 디렉토리 생성 또는 파일 작성 실패"""


class IndexUpdateError(ScaffoldError):
    """상위 index 파일 읽기/쓰기 실패"""


class ConfigError(ScaffoldError):
    """설정 파일 로드 또는 검증 실패"""
