import pytest

from mazegen.rng import M, PMRandom, choice, normalize_seed, pm_next, randint


def test_minimal_standard_checkpoint():
    # Park & Miller's published check: seed 1, 10000 steps.
    rng = PMRandom.from_seed(1)
    assert rng.next32() == 16807
    for _ in range(9999):
        rng.next32()
    assert rng.state == 1043618065


def test_seed_normalization():
    assert normalize_seed(0) == 1
    assert normalize_seed(M) == 1
    assert normalize_seed(M + 5) == 5
    assert 1 <= normalize_seed(-3) < M
    assert pm_next(normalize_seed(0)) != 0


def test_bounded_range():
    rng = PMRandom.from_seed(99)
    seen = {rng.bounded(6) for _ in range(500)}
    assert seen == {1, 2, 3, 4, 5, 6}
    with pytest.raises(ValueError):
        rng.bounded(0)


def test_randint_and_choice_inclusive():
    rng = PMRandom.from_seed(5)
    vals = {randint(rng, 3, 5) for _ in range(300)}
    assert vals == {3, 4, 5}
    assert rng.randint(7, 7) == 7
    assert {choice(rng, "ab") for _ in range(100)} == {"a", "b"}
    with pytest.raises(ValueError):
        randint(rng, 4, 3)
    with pytest.raises(IndexError):
        choice(rng, [])


def test_same_seed_same_stream():
    a, b = PMRandom.from_seed(2024), PMRandom.from_seed(2024)
    assert [a.bounded(100) for _ in range(20)] == [b.bounded(100) for _ in range(20)]


def test_clock_seed_is_valid_state():
    rng = PMRandom.from_seed(None)
    assert 1 <= rng.state < M
