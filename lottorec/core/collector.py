"""
역대 당첨번호 수집기
1회차부터 순차적으로 조회하여 첫 실패(데이터 없음/오류) 시점에 종료한다.
"""
from typing import Any, Callable, Dict, Iterator, Optional, Tuple
from lottorec.config import APP_CONFIG
from lottorec.core.stats import FrequencyTable, extract_winning_numbers
from lottorec.utils import logger

FetchFunc = Callable[[int], Optional[Dict[str, Any]]]


class DrawCollector:
    """fetch(draw_no) -> dict | None 형태의 데이터 소스로부터 빈도 집계"""

    def __init__(self, fetch: FetchFunc, start: int = 1, max_draws: Optional[int] = None):
        self.fetch = fetch
        self.start = start
        self.max_draws = max_draws

    def iter_draws(self) -> Iterator[Tuple[int, Dict[str, Any]]]:
        """(회차, 응답) 순차 생성 - 첫 None에서 종료, 건너뛰기/재시도 없음"""
        draw_no = self.start
        while self.max_draws is None or draw_no - self.start < self.max_draws:
            record = self.fetch(draw_no)
            if record is None:
                logger.info(f"Collection stopped at draw #{draw_no}")
                return
            yield draw_no, record
            draw_no += 1

    def _report_progress(self, draw_no: int):
        # 처음 몇 회차는 바로 표시하여 동작 중임을 알림
        if draw_no % APP_CONFIG['PROGRESS_INTERVAL'] == 0:
            logger.info(f"Progress: analyzed up to draw #{draw_no}")
        elif draw_no <= APP_CONFIG['PROGRESS_HEAD']:
            logger.info(f"Received draw #{draw_no}")

    def collect(self) -> Tuple[FrequencyTable, int]:
        """전체 수집 실행 -> (빈도 테이블, 처리된 회차 수)"""
        table = FrequencyTable()
        for draw_no, record in self.iter_draws():
            table.add_draw(extract_winning_numbers(record))
            self._report_progress(draw_no)

        logger.info(f"Collected {table.total_draws} draws "
                    f"({table.total_appearances()} appearances)")
        return table, table.total_draws
