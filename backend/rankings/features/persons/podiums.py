"""Championship podium computation over eligible final results."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import groupby
from typing import Iterable

from rankings.shared.constants import PODIUM_POSITIONS, SolveTime
from rankings.features.competitions.models import Competition
from rankings.features.results.models import Result

_LAST_PODIUM_PLACE = PODIUM_POSITIONS.stop - 1


@dataclass
class PodiumResult:
    """A result together with the place it earns among eligible competitors."""

    result: Result
    competition: Competition
    pos: int  # place after removing ineligible competitors

    @property
    def competition_id(self) -> str:
        return self.result.competition_id

    @property
    def event_id(self) -> str:
        return self.result.event_id

    @property
    def best(self) -> int:
        return self.result.best

    @property
    def average(self) -> int:
        return self.result.average


def rerank_podiums(
    rows: Iterable[tuple[Result, Competition]],
    wca_id: str,
) -> list[PodiumResult]:
    """Re-rank eligible results per (competition, event) and keep the
    competitor's podium places.

    Args:
        rows: Eligible (result, competition) pairs, grouped by competition and
            event and sorted by original position within each group.
        wca_id: Competitor whose podium places are returned.

    Results sharing an original position share the new place; the next
    place skips accordingly (1, 2, 2, 4). DNF/DNS results never take a place.
    """
    podiums: list[PodiumResult] = []
    ranked = (row for row in rows if SolveTime.succeeded(row[0].best))
    grouped = groupby(ranked, key=lambda row: (row[0].competition_id, row[0].event_id))
    for _, group in grouped:
        previous_pos = None
        place = 0
        for index, (result, competition) in enumerate(group, start=1):
            if result.pos != previous_pos:
                place = index
            previous_pos = result.pos
            if place > _LAST_PODIUM_PLACE:
                break
            if result.person_id == wca_id:
                podiums.append(PodiumResult(result=result, competition=competition, pos=place))
    return podiums
