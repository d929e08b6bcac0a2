"""Filter athlete pools and rank the survivors by suitability."""

from __future__ import annotations

import logging
import multiprocessing as mp
import os
import time
from dataclasses import dataclass
from statistics import fmean, median
from typing import Callable, Iterable, Iterator, List, Optional, Sequence, Tuple

from gemscout.models import AthleteRecord
from gemscout.scoring import score


logger = logging.getLogger(__name__)

_WORKERS_ENV = "GEMSCOUT_WORKERS"
_WORKERS_DEFAULT = 1
_CHUNK_SIZE = 256

ProgressObserver = Callable[[AthleteRecord], None]


@dataclass(frozen=True)
class ScoutCriteria:
    """Filter configuration for a single scouting pass."""

    max_age: int
    max_value_millions: float
    min_potential: int
    target_position: str

    @property
    def max_value(self) -> float:
        return self.max_value_millions * 1_000_000.0


@dataclass(frozen=True)
class RankedAthlete:
    record: AthleteRecord
    score: float
    rank: int


@dataclass(frozen=True)
class ShortlistSummary:
    """Aggregate stats for a scouting pass."""

    evaluated: int
    survivors: int
    returned: int
    score_mean: float | None
    score_median: float | None
    score_best: float | None


@dataclass(frozen=True)
class Shortlist:
    athletes: list[RankedAthlete]
    summary: ShortlistSummary


def _env_int(name: str, default: int, *, min_value: int | None = None) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Invalid int for %s: %s; using default %d", name, raw, default)
        return default
    if min_value is not None:
        value = max(min_value, value)
    return value


def _resolve_workers(workers: Optional[int]) -> int:
    if workers is None:
        workers = _env_int(_WORKERS_ENV, _WORKERS_DEFAULT, min_value=1)
    return max(1, workers)


def passes_criteria(record: AthleteRecord, criteria: ScoutCriteria) -> bool:
    if record.age > criteria.max_age:
        return False
    if record.market_value > criteria.max_value:
        return False
    if record.potential_ability < criteria.min_potential:
        return False
    return criteria.target_position.lower() in record.position.lower()


def _evaluate_chunk(payload: Tuple[List[AthleteRecord], ScoutCriteria]) -> List[bool]:
    records, criteria = payload
    return [passes_criteria(record, criteria) for record in records]


def _chunked(records: Sequence[AthleteRecord], size: int) -> List[List[AthleteRecord]]:
    return [list(records[idx : idx + size]) for idx in range(0, len(records), size)]


def _collect(
    chunks: Sequence[List[AthleteRecord]],
    masks: Iterable[List[bool]],
    progress: Optional[ProgressObserver],
) -> List[AthleteRecord]:
    survivors: List[AthleteRecord] = []
    for chunk, mask in zip(chunks, masks):
        for record, keep in zip(chunk, mask):
            if progress is not None:
                progress(record)
            if keep:
                survivors.append(record)
    return survivors


def filter_athletes(
    records: Iterable[AthleteRecord],
    criteria: ScoutCriteria,
    *,
    workers: Optional[int] = None,
    progress: Optional[ProgressObserver] = None,
) -> List[AthleteRecord]:
    """Return the records passing ``criteria`` in their input order.

    With more than one worker and more than one chunk of records, predicates
    are evaluated in spawned worker processes. ``progress`` is always called
    from the calling process, once per evaluated record.
    """

    records_list = list(records)
    workers = _resolve_workers(workers)
    chunks = _chunked(records_list, _CHUNK_SIZE)
    payloads = [(chunk, criteria) for chunk in chunks]
    start = time.perf_counter()

    if workers == 1 or len(chunks) <= 1:
        survivors = _collect(chunks, map(_evaluate_chunk, payloads), progress)
        mode = "sequential"
    else:
        ctx = mp.get_context("spawn")
        with ctx.Pool(processes=min(workers, len(chunks))) as pool:
            survivors = _collect(chunks, pool.imap(_evaluate_chunk, payloads), progress)
        mode = f"{min(workers, len(chunks))} workers"

    logger.info(
        "Filtered %s athletes to %s survivors (%s, %.2fs)",
        len(records_list),
        len(survivors),
        mode,
        time.perf_counter() - start,
    )
    return survivors


def _score_and_sort(survivors: Sequence[AthleteRecord], position: str) -> List[Tuple[AthleteRecord, float]]:
    scored = [(record, score(record, position)) for record in survivors]
    # Stable sort: equal scores keep their filter order, which callers must not rely on.
    scored.sort(key=lambda item: item[1], reverse=True)
    return scored


def _iter_ranked(scored: Sequence[Tuple[AthleteRecord, float]]) -> Iterator[RankedAthlete]:
    for index, (record, value) in enumerate(scored, start=1):
        yield RankedAthlete(record=record, score=value, rank=index)


def rank_athletes(
    records: Iterable[AthleteRecord],
    criteria: ScoutCriteria,
    *,
    workers: Optional[int] = None,
    progress: Optional[ProgressObserver] = None,
) -> List[AthleteRecord]:
    """Filter ``records`` and order the survivors most suitable first."""

    survivors = filter_athletes(records, criteria, workers=workers, progress=progress)
    return [record for record, _ in _score_and_sort(survivors, criteria.target_position)]


def build_shortlist(
    records: Iterable[AthleteRecord],
    criteria: ScoutCriteria,
    *,
    limit: Optional[int] = None,
    workers: Optional[int] = None,
    progress: Optional[ProgressObserver] = None,
) -> Shortlist:
    """Rank ``records`` and return the top ``limit`` entries with summary stats."""

    records_list = list(records)
    survivors = filter_athletes(records_list, criteria, workers=workers, progress=progress)
    scored = _score_and_sort(survivors, criteria.target_position)

    selected = scored
    if limit is not None and limit > 0:
        selected = scored[:limit]

    scores = [value for _, value in scored]
    summary = ShortlistSummary(
        evaluated=len(records_list),
        survivors=len(scored),
        returned=len(selected),
        score_mean=fmean(scores) if scores else None,
        score_median=median(scores) if scores else None,
        score_best=scores[0] if scores else None,
    )
    return Shortlist(athletes=list(_iter_ranked(selected)), summary=summary)


__all__ = [
    "ProgressObserver",
    "RankedAthlete",
    "ScoutCriteria",
    "Shortlist",
    "ShortlistSummary",
    "build_shortlist",
    "filter_athletes",
    "passes_criteria",
    "rank_athletes",
]
