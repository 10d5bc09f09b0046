from homeworkkit.boss_fight import ShieldPool, run, simulate


def test_pool_prefers_largest_not_exceeding():
    pool = ShieldPool([3, 7, 5])
    assert pool.choose(6) == 5


def test_pool_falls_back_to_smallest_larger():
    pool = ShieldPool([10, 8])
    assert pool.choose(2) == 8


def test_pool_empty_gives_zero():
    assert ShieldPool([]).choose(4) == 0


def test_heals_added_to_initial_health():
    out = simulate(10, [("H", 5), ("H", 5)], [])
    assert out.splitlines()[0] == "Initial health points: 20"
    assert out.splitlines()[-1] == "Foe Vanquished!"


def test_invalid_item_reported():
    out = simulate(10, [("X", 1)], [])
    assert out.splitlines()[0] == "Invalid item type."


def test_death_without_shield():
    assert simulate(5, [], [10]).splitlines()[-2:] == ["0", "You died."]


def test_run_matches_simulate():
    assert run("10 1\nS 3\n1\n4\n") == simulate(10, [("S", 3)], [4])