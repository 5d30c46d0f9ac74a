"""Tests for PageLayoutPlanner - page size policy and partitioning."""

import random

import pytest

from photo_album.album.domain.types import ArrangementKind
from photo_album.album.planner import PageLayoutPlanner

from conftest import SequenceRandom, make_records


def seeded_planner(seed: int) -> PageLayoutPlanner:
    return PageLayoutPlanner(rng=random.Random(seed))


class TestChoosePageSize:
    """Tests for the single-page decision."""

    def test_one_remaining_forces_single(self):
        rng = SequenceRandom([])
        assert PageLayoutPlanner(rng).choose_page_size(1) == 1
        assert rng.calls == []

    def test_two_remaining_forces_pair(self):
        rng = SequenceRandom([])
        assert PageLayoutPlanner(rng).choose_page_size(2) == 2
        assert rng.calls == []

    @pytest.mark.parametrize("roll", range(1, 8))
    def test_low_rolls_choose_three(self, roll):
        assert PageLayoutPlanner(SequenceRandom([roll])).choose_page_size(5) == 3

    @pytest.mark.parametrize("roll", [8, 9, 10])
    def test_high_rolls_choose_two(self, roll):
        assert PageLayoutPlanner(SequenceRandom([roll])).choose_page_size(5) == 2

    def test_rolls_a_ten_sided_die(self):
        rng = SequenceRandom([4])
        PageLayoutPlanner(rng).choose_page_size(3)
        assert rng.calls == [(1, 10)]

    def test_never_exceeds_remaining(self):
        planner = PageLayoutPlanner(SequenceRandom([1]))
        assert planner.choose_page_size(3) == 3

    @pytest.mark.parametrize("remaining", [0, -1])
    def test_rejects_nothing_remaining(self, remaining):
        with pytest.raises(ValueError):
            PageLayoutPlanner(SequenceRandom([])).choose_page_size(remaining)


class TestPlanShapes:
    """Tests for the shapes a plan can take."""

    def test_empty_input_gives_empty_plan(self):
        rng = SequenceRandom([])
        plan = PageLayoutPlanner(rng).plan([])
        assert plan.page_count == 0
        assert plan.sizes == []
        assert rng.calls == []

    def test_one_photo(self):
        plan = seeded_planner(0).plan(make_records(1))
        assert plan.sizes == [1]
        assert plan.groups[0].kind is ArrangementKind.SINGLE

    def test_two_photos(self):
        plan = seeded_planner(0).plan(make_records(2))
        assert plan.sizes == [2]
        assert plan.groups[0].kind is ArrangementKind.PAIR

    def test_three_photos_never_start_with_single(self):
        shapes = {tuple(seeded_planner(seed).plan(make_records(3)).sizes) for seed in range(300)}
        assert shapes == {(3,), (2, 1)}

    def test_three_photos_roll_three(self):
        plan = PageLayoutPlanner(SequenceRandom([7])).plan(make_records(3))
        assert plan.sizes == [3]
        assert plan.groups[0].kind is ArrangementKind.TRIPLE

    def test_four_photos_only_two_shapes(self):
        shapes = {tuple(seeded_planner(seed).plan(make_records(4)).sizes) for seed in range(300)}
        assert shapes == {(3, 1), (2, 2)}

    def test_greedy_left_to_right(self):
        rng = SequenceRandom([8, 1])
        plan = PageLayoutPlanner(rng).plan(make_records(7))
        # 7 -> roll 8 picks 2; 5 -> roll 1 picks 3; 2 left is forced
        assert plan.sizes == [2, 3, 2]
        assert len(rng.calls) == 2


class TestPlanInvariants:
    """Partition invariants over many sizes and seeds."""

    @pytest.mark.parametrize("count", list(range(1, 26)) + [50, 101])
    def test_partition_preserves_every_photo_in_order(self, count):
        photos = make_records(count)
        for seed in range(20):
            plan = seeded_planner(seed).plan(photos)

            assert sum(plan.sizes) == count
            assert all(size in (1, 2, 3) for size in plan.sizes)
            assert plan.photos == photos
            assert plan.photo_count == count

    @pytest.mark.parametrize("count", [5, 8, 13])
    def test_single_only_as_last_page(self, count):
        for seed in range(50):
            sizes = seeded_planner(seed).plan(make_records(count)).sizes
            assert 1 not in sizes[:-1]

    def test_group_kind_matches_size(self):
        plan = seeded_planner(7).plan(make_records(30))
        for group in plan.groups:
            assert group.kind.size == group.size


class TestRandomSource:
    """Tests for the random source ownership."""

    def test_triple_frequency_close_to_seventy_percent(self):
        planner = seeded_planner(12345)
        photos = make_records(6)
        trials = 10_000

        triples = sum(1 for _ in range(trials) if planner.plan(photos).sizes[0] == 3)

        assert 0.67 <= triples / trials <= 0.73

    def test_does_not_use_module_random(self, monkeypatch):
        def forbidden(*args, **kwargs):
            raise AssertionError("global random stream used")

        monkeypatch.setattr(random, "randint", forbidden)
        monkeypatch.setattr(random, "random", forbidden)

        plan = PageLayoutPlanner().plan(make_records(12))
        assert plan.photo_count == 12

    def test_same_seed_same_plan(self):
        photos = make_records(40)
        assert seeded_planner(99).plan(photos).sizes == seeded_planner(99).plan(photos).sizes

    def test_planners_do_not_share_stream(self):
        photos = make_records(9)
        first = PageLayoutPlanner(SequenceRandom([1, 1, 1]))
        second = PageLayoutPlanner(SequenceRandom([9, 9, 9, 9]))

        assert first.plan(photos).sizes == [3, 3, 3]
        assert second.plan(photos).sizes == [2, 2, 2, 2, 1]
