import sys
import logging
from typing import Iterable
from .config import APP_CONFIG

# ============================================================
# 로깅 설정
# ============================================================
def setup_logging():
    """로깅 시스템 초기화"""
    logger = logging.getLogger("LottoRec")
    logger.setLevel(getattr(logging, APP_CONFIG['LOG_LEVEL'], logging.INFO))

    # 중복 핸들러 방지 (재임포트 시)
    if logger.handlers:
        return logger

    formatter = logging.Formatter(
        '%(asctime)s [%(levelname)s] %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    # 콘솔 핸들러
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    return logger

logger = setup_logging()

# ============================================================
# 출력 헬퍼
# ============================================================
def format_numbers(numbers: Iterable[int]) -> str:
    """번호 목록을 '1, 2, 3' 형식 문자열로 변환"""
    return ", ".join(str(n) for n in numbers)
