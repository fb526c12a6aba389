"""
Tests for the justified row packer.

Covers:
- The worked three-image example checked against every partition
- Row fill, contiguity and shared row geometry
- Tie-breaking towards longer rows
- Last-row capping, stacking with a window of one, oversized images
- Empty input, single image, margins and invalid configurations
"""
from __future__ import annotations

import math
from itertools import pairwise
from typing import Any

import pytest

from gallery_layout.config import LayoutConfig
from gallery_layout.errors import InvalidConfigError, InvalidDimensionError
from gallery_layout.layout import justified
from gallery_layout.layout.justified import (
    compute_row_layout,
    find_row_breaks,
    row_cost,
    row_height,
)

EPS = 1e-6


def _partitions(n: int, window: int) -> list[list[tuple[int, int]]]:
    """Enumerate every split of ``[0, n)`` into rows of at most ``window``."""
    if n == 0:
        return [[]]
    out: list[list[tuple[int, int]]] = []
    for first in range(1, min(window, n) + 1):
        for rest in _partitions(n - first, window):
            out.append([(0, first), *((a + first, b + first) for a, b in rest)])
    return out


def _partition_cost(
    ratios: list[float],
    rows: list[tuple[int, int]],
    *,
    width: float,
    target: float,
) -> float:
    total = 0.0
    for start, stop in rows:
        height = width / sum(ratios[start:stop])
        total += (height - target) ** 2
    return total


class TestWorkedExample:
    def test_dp_selects_cheapest_partition(
        self,
        example_row_images: list[dict[str, Any]],
    ) -> None:
        """The chosen rows match the minimum over all enumerated splits."""
        ratios = [2.0, 1.0, 1.5]
        candidates = _partitions(3, 3)
        costs = {
            tuple(rows): _partition_cost(ratios, rows, width=900, target=300)
            for rows in candidates
        }
        expected = min(costs, key=costs.get)

        result = compute_row_layout(
            example_row_images,
            {
                "container_width": 900,
                "target_row_height": 300,
                "margin": 0,
                "search_window": 3,
            },
        )

        assert result.rows == expected
        assert result.rows == ((0, 3),)
        assert costs[((0, 3),)] == pytest.approx(10000.0)
        assert costs[((0, 1), (1, 3))] == pytest.approx(26100.0)

    def test_single_row_geometry(
        self,
        example_row_images: list[dict[str, Any]],
    ) -> None:
        result = compute_row_layout(
            example_row_images,
            {"container_width": 900, "target_row_height": 300, "margin": 0,
             "search_window": 3},
        )
        assert [p.height for p in result] == pytest.approx([200.0] * 3)
        assert [p.width for p in result] == pytest.approx([400, 200, 300])
        assert [p.left for p in result] == pytest.approx([0, 400, 600])
        assert {p.top for p in result} == {0.0}
        assert result.container_height == pytest.approx(200.0)
        assert all(p.justified for p in result)


class TestRowInvariants:
    @pytest.fixture
    def config(self) -> LayoutConfig:
        return LayoutConfig(
            container_width=1000, target_row_height=250, margin=5,
        )

    def test_every_image_placed_in_order(
        self,
        mixed_images: list[dict[str, Any]],
        config: LayoutConfig,
    ) -> None:
        result = compute_row_layout(mixed_images, config)
        assert len(result) == len(mixed_images)
        assert [p.index for p in result] == list(range(len(mixed_images)))
        for placement, image in zip(result, mixed_images, strict=True):
            assert placement.source is image

    def test_rows_are_contiguous(
        self,
        mixed_images: list[dict[str, Any]],
        config: LayoutConfig,
    ) -> None:
        rows = compute_row_layout(mixed_images, config).rows
        assert rows[0][0] == 0
        assert rows[-1][1] == len(mixed_images)
        for (_, stop), (start, _) in pairwise(rows):
            assert stop == start
        assert all(start < stop for start, stop in rows)

    def test_rows_fill_container_width(
        self,
        mixed_images: list[dict[str, Any]],
        config: LayoutConfig,
    ) -> None:
        result = compute_row_layout(mixed_images, config)
        for row_index, (start, stop) in enumerate(result.rows):
            row = result.group(row_index)
            assert [p.index for p in row] == list(range(start, stop))
            if not row[0].justified:
                assert row_index == len(result.rows) - 1
                continue
            filled = sum(p.width + 2 * config.margin for p in row)
            assert filled == pytest.approx(config.container_width, abs=EPS)

    def test_row_members_share_top_and_height(
        self,
        mixed_images: list[dict[str, Any]],
        config: LayoutConfig,
    ) -> None:
        result = compute_row_layout(mixed_images, config)
        for row_index in range(len(result.rows)):
            row = result.group(row_index)
            assert len({p.top for p in row}) == 1
            assert len({p.height for p in row}) == 1

    def test_tops_and_container_height_accumulate(
        self,
        mixed_images: list[dict[str, Any]],
    ) -> None:
        config = LayoutConfig(
            container_width=1000, target_row_height=250, margin=5,
            extra_height=30,
        )
        result = compute_row_layout(mixed_images, config)
        offset = 0.0
        for row_index in range(len(result.rows)):
            first = result.group(row_index)[0]
            assert first.top == pytest.approx(offset + config.margin)
            offset += first.height + config.extra_height + 2 * config.margin
        assert result.container_height == pytest.approx(offset)

    def test_widths_follow_aspect_ratio(
        self,
        mixed_images: list[dict[str, Any]],
        config: LayoutConfig,
    ) -> None:
        result = compute_row_layout(mixed_images, config)
        for placement, image in zip(result, mixed_images, strict=True):
            ratio = image["width"] / image["height"]
            assert placement.width == pytest.approx(placement.height * ratio)

    def test_is_idempotent(
        self,
        mixed_images: list[dict[str, Any]],
        config: LayoutConfig,
    ) -> None:
        first = compute_row_layout(mixed_images, config)
        second = compute_row_layout(mixed_images, config)
        assert first == second


class TestRowBreaks:
    def test_ties_prefer_longer_first_row(self) -> None:
        """3+4 and 4+3 cost the same; the smaller predecessor wins."""
        breaks = find_row_breaks(
            [1.0] * 7,
            container_width=900,
            target_row_height=300,
            margin=0,
            search_window=5,
        )
        assert breaks == [0, 3, 7]

    def test_empty_sequence(self) -> None:
        breaks = find_row_breaks(
            [], container_width=900, target_row_height=300, margin=0,
            search_window=3,
        )
        assert breaks == [0]

    def test_window_limits_row_length(self) -> None:
        breaks = find_row_breaks(
            [0.5] * 9,
            container_width=900,
            target_row_height=100,
            margin=0,
            search_window=2,
        )
        assert all(b - a <= 2 for a, b in pairwise(breaks))

    def test_rows_exhausted_by_margins_are_skipped(self) -> None:
        """With 10px margins a 100px container holds at most 4 images."""
        breaks = find_row_breaks(
            [1.0] * 8,
            container_width=100,
            target_row_height=5,
            margin=10,
            search_window=10,
        )
        assert all(b - a <= 4 for a, b in pairwise(breaks))

    def test_oversized_image_forms_own_row(self) -> None:
        breaks = find_row_breaks(
            [100.0, 1.0, 1.0, 1.0],
            container_width=900,
            target_row_height=300,
            margin=0,
            search_window=4,
        )
        assert breaks == [0, 1, 4]


class TestRowHelpers:
    def test_row_height_fills_width(self) -> None:
        assert row_height([2.0, 1.0], 900, 0) == pytest.approx(300.0)
        assert row_height([1.0, 1.0], 440, 10) == pytest.approx(200.0)

    def test_row_cost_is_squared_deviation(self) -> None:
        assert row_cost([2.0, 1.0, 1.5], 900, 300, 0) == pytest.approx(1e4)
        assert row_cost([2.0, 1.0], 900, 300, 0) == 0.0

    def test_row_breaks_minimise_summed_row_cost(self) -> None:
        ratios = [1.5, 0.7, 1.0, 2.2, 0.8, 1.3]
        kwargs: dict[str, Any] = {
            "container_width": 1000, "target_row_height": 250, "margin": 5,
        }

        def total(rows: list[tuple[int, int]]) -> float:
            return sum(row_cost(ratios[a:b], **kwargs) for a, b in rows)

        breaks = find_row_breaks(ratios, search_window=4, **kwargs)
        chosen = total(list(pairwise(breaks)))
        cheapest = min(total(rows) for rows in _partitions(len(ratios), 4))
        assert chosen == pytest.approx(cheapest)


class TestLastRow:
    def test_window_of_one_stacks_and_caps_last_row(
        self,
        example_row_images: list[dict[str, Any]],
    ) -> None:
        result = compute_row_layout(
            example_row_images,
            {"container_width": 900, "target_row_height": 300, "margin": 0,
             "search_window": 1},
        )
        assert result.rows == ((0, 1), (1, 2), (2, 3))
        assert [p.height for p in result] == pytest.approx([450, 900, 300])
        assert [p.justified for p in result] == [True, True, False]
        assert result.placements[2].width == pytest.approx(450.0)
        assert result.container_height == pytest.approx(1650.0)

    def test_uncapped_last_row_fills(
        self,
        example_row_images: list[dict[str, Any]],
    ) -> None:
        result = compute_row_layout(
            example_row_images,
            {"container_width": 900, "target_row_height": 300, "margin": 0,
             "search_window": 1, "last_row_max_scale": None},
        )
        last = result.placements[-1]
        assert last.height == pytest.approx(600.0)
        assert last.width == pytest.approx(900.0)
        assert last.justified is True

    def test_custom_cap(
        self,
        example_row_images: list[dict[str, Any]],
    ) -> None:
        result = compute_row_layout(
            example_row_images,
            {"container_width": 900, "target_row_height": 300, "margin": 0,
             "search_window": 1, "last_row_max_scale": 1.5},
        )
        assert result.placements[-1].height == pytest.approx(450.0)

    def test_short_single_row_is_capped(self) -> None:
        result = compute_row_layout(
            [{"width": 1, "height": 1}] * 2,
            {"container_width": 3000, "target_row_height": 300, "margin": 0},
        )
        assert result.rows == ((0, 2),)
        assert [p.height for p in result] == pytest.approx([300.0, 300.0])
        assert [p.left for p in result] == pytest.approx([0.0, 300.0])
        assert [p.justified for p in result] == [False, False]
        assert result.container_height == pytest.approx(300.0)

    def test_single_image_fills_container(self) -> None:
        result = compute_row_layout(
            [{"width": 1000, "height": 1000}],
            {"container_width": 900, "target_row_height": 300, "margin": 0},
        )
        (only,) = result.placements
        assert only.width == pytest.approx(900.0)
        assert only.height == pytest.approx(900.0)
        assert only.justified is True
        assert result.rows == ((0, 1),)


class TestRowEdgeCases:
    def test_empty_input(self) -> None:
        result = compute_row_layout([], {"container_width": 900})
        assert result.placements == ()
        assert result.rows == ()
        assert result.container_height == 0
        assert result.direction == "row"

    def test_default_window_is_derived(
        self,
        mocker: Any,
        make_square_images: Any,
    ) -> None:
        spy = mocker.spy(justified, "resolve_search_window")
        compute_row_layout(make_square_images(4), {"container_width": 900})
        assert spy.call_count == 1

    def test_margin_wider_than_container(self) -> None:
        with pytest.raises(InvalidConfigError, match="no room"):
            compute_row_layout(
                [{"width": 1, "height": 1}],
                {"container_width": 10, "margin": 5},
            )

    @pytest.mark.parametrize(
        "config",
        [
            {"container_width": 0},
            {"container_width": 900, "target_row_height": -1},
            {"container_width": 900, "search_window": 0},
            {"container_width": float("inf")},
            {"container_width": 900, "target_row_height": float("nan")},
        ],
    )
    def test_invalid_config(self, config: dict[str, Any]) -> None:
        with pytest.raises(InvalidConfigError):
            compute_row_layout([{"width": 1, "height": 1}], config)

    def test_invalid_image_aborts(self) -> None:
        images = [{"width": 1, "height": 1}, {"width": 0, "height": 1}]
        with pytest.raises(InvalidDimensionError) as exc_info:
            compute_row_layout(images, {"container_width": 900})
        assert exc_info.value.index == 1

    def test_extreme_aspect_ratio_aborts(self) -> None:
        images = [{"width": 1e308, "height": 1e-10}, {"width": 1, "height": 1}]
        with pytest.raises(InvalidDimensionError) as exc_info:
            compute_row_layout(
                images, {"container_width": 900, "search_window": 2},
            )
        assert exc_info.value.index == 0

    def test_heights_positive_with_margins(
        self,
        make_square_images: Any,
    ) -> None:
        result = compute_row_layout(
            make_square_images(8),
            {"container_width": 100, "target_row_height": 5, "margin": 10,
             "search_window": 10},
        )
        assert all(p.height > 0 and math.isfinite(p.height) for p in result)
