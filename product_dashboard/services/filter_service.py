"""Free-text title filtering for the product table."""

from __future__ import annotations

import pandas as pd

from utils.helpers import fold_text


def title_matches(title: object, query: str) -> bool:
    """Case-insensitive plain substring match; missing titles match as ``""``."""
    return fold_text(query) in fold_text(title)


def apply_title_filter(dataframe: pd.DataFrame, query: str) -> pd.DataFrame:
    """Keep rows whose title contains the query, preserving row order."""
    if not query:
        return dataframe
    if "title" not in dataframe.columns:
        return dataframe.iloc[0:0]

    folded_query = fold_text(query)
    mask = pd.Series(
        [folded_query in fold_text(title) for title in dataframe["title"]],
        index=dataframe.index,
        dtype=bool,
    )
    return dataframe.loc[mask]


def filter_signature(query: str, sort_field: object, sort_direction: object) -> tuple:
    """Build a hashable signature used to detect filter/sort changes."""
    return (fold_text(query), str(sort_field), str(sort_direction))
