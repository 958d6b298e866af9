import logging
import sys

# CLI 전용 로그 레벨 정의 (INFO=20, WARNING=30 사이)
# -q 옵션 시 CLI_LEVEL 이상만 출력 (외부 명령 출력, 진단 메시지)
CLI_LEVEL = 25
logging.addLevelName(CLI_LEVEL, "CLI")

# 전역 로거 객체
logger = logging.getLogger("compgen")


class TerminalFormatter(logging.Formatter):
    """터미널용 포맷터: 메시지만 출력."""

    def format(self, record: logging.LogRecord) -> str:
        return record.getMessage()


def setup_log_level(level: int) -> None:
    """
    런타임 로그 레벨 설정 (-v, -q 옵션 지원).
    핸들러가 없으면 stdout 콘솔 핸들러를 추가하여 즉시 출력 가능하게 함.
    """
    logger.setLevel(level)
    logger.propagate = False

    if not logger.handlers:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level)
        console_handler.setFormatter(TerminalFormatter())
        logger.addHandler(console_handler)
    else:
        for handler in logger.handlers:
            handler.setLevel(level)
            # stdout이 교체된 경우(CliRunner 등) 현재 stdout으로 다시 연결
            if type(handler) is logging.StreamHandler:
                handler.setStream(sys.stdout)


# 카테고리별 로깅 함수
# 카테고리: GEN(파일 생성), HOOK(외부 명령), INDEX(상위 index), CONFIG(설정)


def log_gen(message: str, file: str = None) -> None:
    """파일 생성 로그"""
    if file:
        logger.info(f"[GEN:{file}] {message}")
    else:
        logger.info(f"[GEN] {message}")


def log_gen_debug(message: str) -> None:
    """파일 생성 상세 로그 (DEBUG)"""
    logger.debug(f"[GEN] {message}")


def log_hook(message: str, command: str = None) -> None:
    """외부 명령(formatter/linter) 로그"""
    if command:
        logger.info(f"[HOOK:{command}] {message}")
    else:
        logger.info(f"[HOOK] {message}")


def log_hook_error(message: str) -> None:
    """외부 명령 실패 로그 (치명적이지 않음)"""
    logger.warning(f"[HOOK] {message}")


def log_index(message: str) -> None:
    """상위 index 파일 갱신 로그"""
    logger.info(f"[INDEX] {message}")


def log_config(message: str) -> None:
    """설정 로드 관련 로그"""
    logger.debug(f"[CONFIG] {message}")


def log_cli(message: str) -> None:
    """CLI 단계 로그 (-q 모드에서도 터미널에 항상 출력)"""
    logger.log(CLI_LEVEL, message)
