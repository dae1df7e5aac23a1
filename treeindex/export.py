"""Writing collected tree statistics to a CSV file."""

from __future__ import annotations

import os
from typing import Iterable

from .stats import TreeStats

_HEADER = (
    "N_docs,"
    "ExecutionTimeInsertionMean,ExecutionTimeInsertionTotal,"
    "ExecutionTimeSearchMean,ExecutionTimeSearchMax,"
    "NumComparisonsInsertionMean,NumComparisonsInsertionTotal,"
    "NumComparisonsSearchMean,NumComparisonsSearchMax,"
    "TreeHeight,MaxBranch,MinBranch,"
    "NumNodes,"
    "TreeSizeBytes"
)


def _number(value: int | float) -> str:
    return format(value, "g") if isinstance(value, float) else str(value)


def _row(stats: TreeStats) -> str:
    values = (
        stats.n_docs,
        stats.execution_time_insertion_mean,
        stats.execution_time_insertion,
        stats.execution_time_search_mean,
        stats.execution_time_search_max,
        stats.num_comparisons_insertion_mean,
        stats.num_comparisons_insertion,
        stats.num_comparisons_search_mean,
        stats.num_comparisons_search_max,
        stats.tree_height,
        stats.tree_height,  # the longest branch is the tree height
        stats.min_branch,
        stats.num_nodes,
        stats.size,
    )
    return ",".join(_number(value) for value in values)


def export_to_csv(stats: Iterable[TreeStats], title: str | os.PathLike[str]) -> None:
    """Write one CSV row per statistics record to the file named title."""
    with open(title, "w", encoding="utf-8", newline="") as file:
        file.write(_HEADER + "\n")
        for record in stats:
            file.write(_row(record) + "\n")
    print(f"Dados exportados para {os.fspath(title)} com sucesso!")