import random
from collections import Counter

import pytest
from lottorec.core.stats import FrequencyTable
from lottorec.core.generator import (
    WeightedNumberGenerator, generate_recommendations, select_lowest,
)


def assert_valid_combination(combo):
    assert len(combo) == 6
    assert len(set(combo)) == 6
    assert all(1 <= n <= 45 for n in combo)
    assert combo == sorted(combo)


def skewed_table():
    # count grows with the number: 1 is coldest, 45 hottest
    return FrequencyTable.from_counts({n: n for n in range(1, 46)}, total_draws=100)


def test_select_lowest_picks_smallest_counts():
    counts = {n: 10 for n in range(1, 46)}
    counts.update({40: 1, 3: 2, 17: 2, 44: 0, 9: 3, 21: 3, 30: 3})
    table = FrequencyTable.from_counts(counts)
    # 9 and 21 win the tie at 3 over 30
    assert select_lowest(table) == [3, 9, 17, 21, 40, 44]


def test_select_lowest_is_deterministic():
    table = skewed_table()
    assert select_lowest(table) == select_lowest(table) == [1, 2, 3, 4, 5, 6]


def test_select_lowest_with_zero_draws():
    combo = select_lowest(FrequencyTable())
    assert combo == [1, 2, 3, 4, 5, 6]


def test_pool_weights():
    table = FrequencyTable.from_counts({n: 5 for n in range(1, 46)})
    table.number_counts[7] = 0
    pool = dict(WeightedNumberGenerator(table).build_pool())
    assert len(pool) == 45
    assert pool[7] == 6
    assert all(w == 1 for n, w in pool.items() if n != 7)


@pytest.mark.parametrize("table", [FrequencyTable(), skewed_table(),
                                   FrequencyTable.from_counts({n: 3 for n in range(1, 46)})])
def test_sampled_combinations_are_valid(table, rng):
    generator = WeightedNumberGenerator(table, rng)
    for combo in generator.generate(500):
        assert_valid_combination(combo)


def test_sampling_is_reproducible_with_seed():
    table = skewed_table()
    first = WeightedNumberGenerator(table, random.Random(1)).generate(9)
    second = WeightedNumberGenerator(table, random.Random(1)).generate(9)
    assert first == second


def test_cold_number_is_favoured(rng):
    table = FrequencyTable.from_counts({n: 5 for n in range(1, 46)})
    table.number_counts[7] = 0
    hits = Counter()
    for combo in WeightedNumberGenerator(table, rng).generate(2000):
        hits.update(combo)

    others = max(count for n, count in hits.items() if n != 7)
    assert hits[7] > 2 * others


def test_lower_frequency_numbers_selected_more_often(rng):
    hits = Counter()
    for combo in WeightedNumberGenerator(skewed_table(), rng).generate(3000):
        hits.update(combo)

    cold = sum(hits[n] for n in range(1, 11))
    hot = sum(hits[n] for n in range(36, 46))
    assert cold > 2 * hot
    assert hits[1] > hits[45]


def test_recommendations_layout(rng):
    table = skewed_table()
    recs = generate_recommendations(table, rng=rng)
    assert len(recs) == 10
    assert recs[0] == (select_lowest(table), True)
    assert all(not is_lowest for _, is_lowest in recs[1:])
    for combo, _ in recs:
        assert_valid_combination(combo)


def test_recommendations_rejects_non_positive_count():
    with pytest.raises(ValueError):
        generate_recommendations(FrequencyTable(), count=0)
