"""
Candidate evaluation for choosing splitting lines.

This module provides:
    • Candidate / TellerCandidate
    • evaluate_candidates()          (balance heuristic)
    • select_best_candidate()
    • evaluate_teller_candidates()   (Teller ratio heuristic)
    • select_teller_candidate()

Every candidate line is the support line of one of the segments in the
current region.
"""

import math
from typing import List, NamedTuple, Optional

from models.line import Line
from models.segment import Segment
from config import get_active_params


class Candidate(NamedTuple):
    line: Line
    balance: float


class TellerCandidate(NamedTuple):
    line: Line
    f: int          # number of segments the line cuts
    sigma: float    # f / |segments|


# ----------------------------------------------------------------------
#  BALANCE HEURISTIC (deterministic and random builders)
# ----------------------------------------------------------------------

def evaluate_candidates(segments: List[Segment], parent_line: Optional[Line]) -> List[Candidate]:
    """
    For each segment's support line L:

      - skipped when a parent line exists and L does not touch it
      - balance = |#centers strictly positive - #centers strictly negative|
      - free split: both endpoints of the segment lie on the parent line
        -> balance = -inf, always preferred
    """
    epsilon = get_active_params()["EPSILON"]
    candidates = []

    for seg in segments:
        line = seg.support_line
        if parent_line is not None and not line.touches(parent_line):
            continue

        count_positive = 0
        count_negative = 0
        for other in segments:
            value = line.evaluate(other.center)
            if value > epsilon:
                count_positive += 1
            elif value < -epsilon:
                count_negative += 1

        balance = float(abs(count_positive - count_negative))

        if parent_line is not None and (
            abs(parent_line.evaluate(seg.left_endpoint)) < epsilon
            and abs(parent_line.evaluate(seg.right_endpoint)) < epsilon
        ):
            balance = -math.inf

        candidates.append(Candidate(line, balance))

    return candidates


def select_best_candidate(candidates: List[Candidate]) -> Candidate:
    """Minimum balance; the first one seen wins a tie."""
    best = candidates[0]
    for cand in candidates:
        if cand.balance < best.balance:
            best = cand
    return best


# ----------------------------------------------------------------------
#  TELLER HEURISTIC
# ----------------------------------------------------------------------

def evaluate_teller_candidates(segments: List[Segment], parent_line: Optional[Line]) -> List[TellerCandidate]:
    """
    For each segment's support line L:

      - skipped when a parent line exists and L does not intersect it
        (parallel lines are rejected, coincident ones too)
      - f = number of segments whose endpoints evaluate to opposite signs
      - sigma = f / |segments|
    """
    epsilon = get_active_params()["EPSILON"]
    total = len(segments)
    candidates = []

    for seg in segments:
        line = seg.support_line
        if parent_line is not None and not line.intersect(parent_line):
            continue

        f = 0
        for other in segments:
            e_left = line.evaluate(other.left_endpoint)
            e_right = line.evaluate(other.right_endpoint)
            if e_left * e_right < -epsilon:
                f += 1

        candidates.append(TellerCandidate(line, f, f / total))

    return candidates


def select_teller_candidate(candidates: List[TellerCandidate], tau: float) -> TellerCandidate:
    """
    group A = sigma >= tau, group B = the rest.

    A non-empty -> maximum sigma in A
    otherwise   -> minimum f in B

    The first one seen wins a tie in both groups.
    """
    group_a = [cand for cand in candidates if cand.sigma >= tau]
    group_b = [cand for cand in candidates if cand.sigma < tau]

    if group_a:
        best = group_a[0]
        for cand in group_a:
            if cand.sigma > best.sigma:
                best = cand
        return best

    best = group_b[0]
    for cand in group_b:
        if cand.f < best.f:
            best = cand
    return best
