import random
import pytest


def make_record(draw_no, numbers, bonus=45):
    record = {
        "returnValue": "success",
        "drwNo": draw_no,
        "drwNoDate": "2002-12-07",
        "bnusNo": bonus,
    }
    for i, n in enumerate(numbers, start=1):
        record[f"drwtNo{i}"] = n
    return record


class FakeSource:
    """Returns prepared records for draws 1..N and None afterwards."""

    def __init__(self, draws):
        self.records = {i: make_record(i, nums) for i, nums in enumerate(draws, start=1)}
        self.calls = []

    def fetch_draw(self, draw_no):
        self.calls.append(draw_no)
        return self.records.get(draw_no)


@pytest.fixture
def rng():
    return random.Random(20021207)


@pytest.fixture
def history():
    # 12 draws, numbers 1..45 cycling so counts are uneven
    draws = []
    n = 1
    for _ in range(12):
        nums = []
        for _ in range(6):
            nums.append(n)
            n = n % 45 + 1
        draws.append(nums)
    return draws
