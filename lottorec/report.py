from typing import List, Tuple
from lottorec.config import DATA_SOURCE_NAME
from lottorec.core.stats import FrequencyTable
from lottorec.utils import format_numbers

SEPARATOR = "=" * 43


def render_recommendations(recommendations: List[Tuple[List[int], bool]]) -> List[str]:
    """추천 조합 출력 라인 생성"""
    lines = [
        SEPARATOR,
        f"로또 6/45 번호 추천 (낮은 출현 빈도 우선 가중 랜덤 조합 {len(recommendations)}세트):",
        SEPARATOR,
    ]
    for i, (numbers, is_lowest) in enumerate(recommendations, start=1):
        line = f"조합 {i:>2}: {format_numbers(numbers)}"
        if is_lowest:
            line += " (가장 낮은 빈도 6개 숫자 조합)"
        lines.append(line)
    return lines


def render_summary(table: FrequencyTable, elapsed: float) -> List[str]:
    """분석 결과 요약 라인 생성"""
    lines = [
        SEPARATOR,
        "              분석 결과 요약",
        SEPARATOR,
        f"처리된 총 회차 수: {table.total_draws}회",
        f"총 출현 횟수 (검증, 예상: {table.expected_appearances()}): {table.total_appearances()}",
    ]
    if table.discarded:
        lines.append(f"범위 밖 번호로 제외된 값: {table.discarded}개")
    lines += [
        f"데이터 수집 시간: {elapsed:.1f}초",
        f"데이터 출처: {DATA_SOURCE_NAME} (실시간 fetch)",
        SEPARATOR,
    ]
    return lines


def render_report(recommendations: List[Tuple[List[int], bool]],
                  table: FrequencyTable, elapsed: float) -> str:
    return "\n".join(render_recommendations(recommendations) + [""] + render_summary(table, elapsed))
