import random
from typing import List, Optional, Tuple
from lottorec.config import APP_CONFIG, LOTTO_NUMBERS
from lottorec.core.stats import FrequencyTable

NUMBERS_PER_SET = APP_CONFIG['NUMBERS_PER_SET']


# ============================================================
# 최저 빈도 조합
# ============================================================
def select_lowest(table: FrequencyTable) -> List[int]:
    """출현 빈도가 가장 낮은 6개 번호 (동률은 작은 번호 우선)"""
    ranked = sorted(table.as_pairs(), key=lambda pair: (pair[1], pair[0]))
    return sorted(num for num, _ in ranked[:NUMBERS_PER_SET])


# ============================================================
# 빈도 역가중 번호 생성기
# ============================================================
class WeightedNumberGenerator:
    """낮은 출현 빈도 우선 가중 랜덤 생성 (비복원 추출)"""

    def __init__(self, table: FrequencyTable, rng: Optional[random.Random] = None):
        self.table = table
        self.rng = rng or random.Random()
        self.max_count = table.max_count()

    def build_pool(self) -> List[Tuple[int, int]]:
        """(번호, 가중치) 후보군 생성 - 조합마다 새로 만든다"""
        return [(num, self.table.weight_of(num, self.max_count)) for num in LOTTO_NUMBERS]

    def _pick_index(self, pool: List[Tuple[int, int]]) -> int:
        """가중치 기반 확률 선택 (누적 가중치 탐색)"""
        total_weight = sum(w for _, w in pool)
        r = self.rng.uniform(0, total_weight)
        cumulative = 0
        for idx, (_, weight) in enumerate(pool):
            cumulative += weight
            if cumulative >= r:
                return idx

        # 부동소수 오차 대비
        return len(pool) - 1

    def sample_one(self) -> List[int]:
        """조합 1개 생성"""
        pool = self.build_pool()
        result = []

        while len(result) < NUMBERS_PER_SET:
            idx = self._pick_index(pool)
            # 선택된 번호 제거 (가중치도 함께)
            num, _ = pool.pop(idx)
            result.append(num)

        return sorted(result)

    def generate(self, count: int) -> List[List[int]]:
        """서로 독립적인 조합 count개 생성"""
        return [self.sample_one() for _ in range(count)]


# ============================================================
# 추천 세트 (최저 빈도 1 + 가중 랜덤 N-1)
# ============================================================
def generate_recommendations(table: FrequencyTable, count: Optional[int] = None,
                             rng: Optional[random.Random] = None) -> List[Tuple[List[int], bool]]:
    """(조합, 최저빈도 조합 여부) 목록 반환 - 첫 항목이 최저 빈도 조합"""
    if count is None:
        count = APP_CONFIG['RECOMMEND_SETS']
    if count < 1:
        raise ValueError(f"count must be positive: {count}")

    results = [(select_lowest(table), True)]
    generator = WeightedNumberGenerator(table, rng)
    for combo in generator.generate(count - 1):
        results.append((combo, False))
    return results
