from typing import Any, Dict, List, Optional, Tuple, Mapping, Iterable
from lottorec.config import LOTTO_NUMBERS, MIN_NUMBER, MAX_NUMBER, WINNING_NUMBER_FIELDS
from lottorec.utils import logger

# ============================================================
# 당첨번호 추출
# ============================================================
def extract_winning_numbers(record: Mapping[str, Any]) -> List[int]:
    """API 응답(dict)에서 당첨번호 6개를 정수 목록으로 추출

    값이 없거나 정수로 변환할 수 없는 필드는 건너뛴다.
    범위 검사는 FrequencyTable.add_draw()에서 수행한다.
    """
    numbers = []
    for field in WINNING_NUMBER_FIELDS:
        try:
            numbers.append(int(record[field]))
        except (KeyError, TypeError, ValueError):
            logger.warning(f"Invalid winning number field {field}={record.get(field)!r} "
                           f"in draw #{record.get('drwNo')}")
    return numbers


# ============================================================
# 번호별 출현 빈도 테이블
# ============================================================
class FrequencyTable:
    """번호(1~45)별 출현 횟수 집계"""

    def __init__(self):
        self.number_counts: Dict[int, int] = {i: 0 for i in LOTTO_NUMBERS}
        self.total_draws = 0
        self.discarded = 0

    @classmethod
    def from_counts(cls, counts: Mapping[int, int], total_draws: int = 0) -> 'FrequencyTable':
        """기존 집계값으로 테이블 생성 (분석/테스트용)"""
        table = cls()
        for num, count in counts.items():
            if num not in table.number_counts:
                raise ValueError(f"number out of range: {num}")
            if count < 0:
                raise ValueError(f"negative count for {num}: {count}")
            table.number_counts[num] = count
        table.total_draws = total_draws
        return table

    def add_draw(self, numbers: Iterable[int]):
        """한 회차의 당첨번호 반영

        범위를 벗어난 번호는 무시하지만 회차 자체는 집계에 포함한다.
        """
        for num in numbers:
            if MIN_NUMBER <= num <= MAX_NUMBER:
                self.number_counts[num] += 1
            else:
                self.discarded += 1
                logger.warning(f"Ignored out-of-range number {num} "
                               f"(draw index {self.total_draws + 1})")
        self.total_draws += 1

    def count_of(self, number: int) -> int:
        return self.number_counts[number]

    def max_count(self) -> int:
        return max(self.number_counts.values())

    def total_appearances(self) -> int:
        return sum(self.number_counts.values())

    def expected_appearances(self) -> int:
        """검증용 기대값 (회차 수 x 6)"""
        return self.total_draws * len(WINNING_NUMBER_FIELDS)

    def weight_of(self, number: int, max_count: Optional[int] = None) -> int:
        """낮은 빈도일수록 큰 가중치 (max - count + 1, 항상 1 이상)"""
        if max_count is None:
            max_count = self.max_count()
        return max_count - self.number_counts[number] + 1

    def as_pairs(self) -> List[Tuple[int, int]]:
        """(번호, 출현 횟수) 목록 - 번호 오름차순"""
        return sorted(self.number_counts.items())
