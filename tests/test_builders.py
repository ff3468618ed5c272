import math
from collections import defaultdict

import numpy as np
import pytest

from models.bsp_node import BSPNode
from models.errors import BSPConstructionError
from models.line import Line
from models.point import Point
from models.segment import Segment
from builders import (
    build_deterministic_tree,
    build_random_tree,
    build_teller_tree,
    build_tree,
    evaluate_candidates,
    evaluate_teller_candidates,
    grow_tree,
    select_best_candidate,
    select_teller_candidate,
    TreeBuilder,
)
from builders.candidates import TellerCandidate
from builders.deterministic import choose_balanced_line
from utils.geometry import total_length, projected_length


ALL_BUILDERS = [
    lambda segs: build_deterministic_tree(segs),
    lambda segs: build_random_tree(segs, rng=np.random.default_rng(3)),
    lambda segs: build_teller_tree(segs, tau=0.5),
    lambda segs: build_teller_tree(segs, tau=1e-7),
    lambda segs: build_teller_tree(segs, tau=0.9999999),
]


def same_structure(a: BSPNode, b: BSPNode) -> bool:
    if a.is_leaf != b.is_leaf:
        return False
    if [(s.start, s.end) for s in a.segments] != [(s.start, s.end) for s in b.segments]:
        return False
    if a.is_leaf:
        return True
    return (
        a.partition == b.partition
        and same_structure(a.left, b.left)
        and same_structure(a.right, b.right)
    )


# ----------------------------------------------------------------------
# Tree shape
# ----------------------------------------------------------------------

@pytest.mark.parametrize("build", ALL_BUILDERS)
def test_proper_binary_tree(build, random_segments):
    root = build(random_segments)
    for node in root.iter_nodes():
        if node.is_leaf:
            assert node.left is None and node.right is None
            assert len(node.segments) <= 1
        else:
            assert node.partition is not None
            assert node.size() == 1 + node.left.size() + node.right.size()
            assert node.segments


@pytest.mark.parametrize("build", ALL_BUILDERS)
def test_splitting_conserves_geometry(build, random_segments):
    root = build(random_segments)
    fragments = list(root.iter_segments())

    assert math.isclose(total_length(fragments), total_length(random_segments), rel_tol=1e-9, abs_tol=1e-6)
    for axis in (0, 1):
        assert math.isclose(
            projected_length(fragments, axis),
            projected_length(random_segments, axis),
            rel_tol=1e-9,
            abs_tol=1e-6,
        )


@pytest.mark.parametrize("build", ALL_BUILDERS)
def test_fragments_keep_their_color(build, random_segments):
    # colors repeat in the palette, so compare per-color lengths
    expected = defaultdict(float)
    for seg in random_segments:
        expected[seg.color] += seg.length

    found = defaultdict(float)
    for seg in build(random_segments).iter_segments():
        found[seg.color] += seg.length

    assert expected.keys() == found.keys()
    for color, length in expected.items():
        assert math.isclose(found[color], length, rel_tol=1e-9, abs_tol=1e-6)


def test_empty_and_single_inputs_are_leaves():
    assert build_deterministic_tree([]).is_leaf
    seg = Segment(Point(0, 0), Point(1, 0))
    leaf = build_teller_tree([seg])
    assert leaf.is_leaf and leaf.segments == [seg]


# ----------------------------------------------------------------------
# Square scene
# ----------------------------------------------------------------------

def test_square_scene_tree(square):
    segments = square.segments
    root = build_deterministic_tree(segments)

    # the diagonal is the only perfectly balanced candidate
    assert root.partition == segments[4].support_line
    assert root.segments == [segments[4]]
    assert root.height() == 4
    assert root.leaf_count() == 6
    assert root.size() == 11
    assert root.segment_count() == 7


def test_square_scene_every_segment_appears_once(square):
    root = build_deterministic_tree(square.segments)

    by_color = defaultdict(list)
    for seg in root.iter_segments():
        by_color[seg.color].append(seg)

    assert len(by_color) == 5
    for original in square.segments:
        pieces = by_color[original.color]
        assert math.isclose(sum(p.length for p in pieces), original.length)

    # top and left walls are cut by the diagonal's line
    assert len(by_color[square.segments[2].color]) == 2
    assert len(by_color[square.segments[3].color]) == 2


# ----------------------------------------------------------------------
# Deterministic builder
# ----------------------------------------------------------------------

def test_deterministic_builder_is_idempotent(random_segments):
    first = build_deterministic_tree(random_segments)
    second = build_deterministic_tree(random_segments)
    assert same_structure(first, second)


def test_balance_prefers_free_split():
    parent = Line.from_points(Point(0, 0), Point(1, 0))
    on_parent = Segment(Point(2, 0), Point(5, 0), "free")
    others = [
        Segment(Point(0, 1), Point(0, 5), "a"),
        Segment(Point(3, 1), Point(3, 5), "b"),
    ]

    candidates = evaluate_candidates(others + [on_parent], parent)
    assert candidates[-1].balance == -math.inf
    assert select_best_candidate(candidates).line == on_parent.support_line


def test_balance_first_seen_wins_ties():
    segs = [
        Segment(Point(0, 0), Point(0, 1), "a"),
        Segment(Point(5, 0), Point(5, 1), "b"),
    ]
    candidates = evaluate_candidates(segs, None)
    assert candidates[0].balance == candidates[1].balance == 1
    assert select_best_candidate(candidates) is candidates[0]


def test_fallback_to_first_segment_when_nothing_touches_parent():
    parent = Line.from_points(Point(0, -50), Point(1, -50))
    segs = [
        Segment(Point(0, 0), Point(10, 0), "a"),
        Segment(Point(0, 10), Point(10, 10), "b"),
    ]
    assert evaluate_candidates(segs, parent) == []
    assert choose_balanced_line(segs, parent) == segs[0].support_line

    root = build_deterministic_tree(segs, parent_line=parent)
    assert root.partition == segs[0].support_line


def test_parallel_stack_uses_fallback_below_root(stacked):
    a, b, c, d = stacked.segments
    root = build_deterministic_tree(stacked.segments)

    assert root.partition == b.support_line
    assert root.right.is_leaf and root.right.segments == [a]

    # neither C nor D touches B's line: first segment of the region is used
    inner = root.left
    assert inner.partition == c.support_line
    assert inner.segments == [c]
    assert inner.left.segments == [d]
    assert inner.right.segments == []


# ----------------------------------------------------------------------
# Random builder
# ----------------------------------------------------------------------

def test_random_builder_leaves_input_untouched(random_segments):
    before = list(random_segments)
    build_random_tree(random_segments, rng=np.random.default_rng(0))
    assert random_segments == before


def test_random_builder_varies_root(stacked):
    # B and C tie for the root, the permutation decides
    rng = np.random.default_rng(12345)
    roots = [build_random_tree(stacked.segments, rng=rng).partition for _ in range(30)]
    assert any(line != roots[0] for line in roots)


def test_random_builder_is_reproducible_with_seed(random_segments):
    first = build_random_tree(random_segments, rng=np.random.default_rng(99))
    second = build_random_tree(random_segments, rng=np.random.default_rng(99))
    assert same_structure(first, second)


# ----------------------------------------------------------------------
# Teller builder
# ----------------------------------------------------------------------

@pytest.fixture
def cut_scene():
    return [
        Segment(Point(-10, 0), Point(10, 0), "h"),      # cuts both verticals
        Segment(Point(-5, -5), Point(-5, 5), "v1"),     # cuts h
        Segment(Point(5, -5), Point(5, 5), "v2"),       # cuts h
        Segment(Point(20, 20), Point(30, 20), "p"),     # cuts nothing
    ]


def test_teller_counts_cuts(cut_scene):
    candidates = evaluate_teller_candidates(cut_scene, None)
    assert [c.f for c in candidates] == [2, 1, 1, 0]
    assert [c.sigma for c in candidates] == [0.5, 0.25, 0.25, 0.0]


def test_teller_small_tau_takes_max_sigma(cut_scene):
    root = build_teller_tree(cut_scene, tau=1e-7)
    assert root.partition == cut_scene[0].support_line


def test_teller_large_tau_takes_min_f(cut_scene):
    root = build_teller_tree(cut_scene, tau=0.9999999)
    assert root.partition == cut_scene[3].support_line


def test_teller_selection_groups():
    line = Line(1, 0, 0)
    cands = [
        TellerCandidate(line, 1, 0.2),
        TellerCandidate(line, 3, 0.6),
        TellerCandidate(line, 4, 0.8),
        TellerCandidate(line, 0, 0.0),
    ]
    assert select_teller_candidate(cands, 0.5) is cands[2]
    assert select_teller_candidate(cands, 0.9) is cands[3]


def test_teller_rejects_coincident_parent():
    parent = Line.from_points(Point(-100, 0), Point(100, 0))
    segs = [
        Segment(Point(0, 0), Point(5, 0), "on parent"),
        Segment(Point(1, 1), Point(1, 4), "crossing parent"),
    ]
    candidates = evaluate_teller_candidates(segs, parent)
    assert [c.line for c in candidates] == [segs[1].support_line]
    # the balance heuristic keeps it
    assert len(evaluate_candidates(segs, parent)) == 2


def test_teller_falls_back_on_parallel_stack(stacked):
    a, b, c, d = stacked.segments
    root = build_teller_tree(stacked.segments, tau=0.5)

    assert root.partition == a.support_line
    assert root.left.partition == b.support_line
    assert root.left.left.partition == c.support_line
    assert root.height() == 3


# ----------------------------------------------------------------------
# Selection and progress check
# ----------------------------------------------------------------------

def test_build_tree_dispatch(square):
    det = build_tree(square.segments, TreeBuilder.DETERMINISTIC)
    assert same_structure(det, build_deterministic_tree(square.segments))

    by_name = build_tree(square.segments, "teller", tau=0.5)
    assert same_structure(by_name, build_teller_tree(square.segments, tau=0.5))

    rnd = build_tree(square.segments, TreeBuilder.RANDOM, rng=np.random.default_rng(1))
    assert math.isclose(rnd.total_length(), det.total_length())


def test_no_progress_raises():
    segs = [
        Segment(Point(0, 0), Point(1, 0), "a"),
        Segment(Point(0, 5), Point(1, 5), "b"),
    ]
    far_away = Line.from_points(Point(0, 100), Point(1, 100))

    with pytest.raises(BSPConstructionError):
        grow_tree(segs, lambda region, parent: far_away)
