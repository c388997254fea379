"""DataFrame conversion utilities."""

from typing import Any, Iterable

import pandas as pd


def records_to_dataframe(
    records: Iterable[Any],
    flatten: bool = True,
) -> pd.DataFrame:
    """
    Convert decoded JSONL records to a pandas DataFrame.

    Args:
        records: Decoded JSON values (e.g. PreviewResult.items)
        flatten: If True, expand nested objects into dotted columns

    Returns:
        pandas DataFrame with one row per record

    Example:
        records = [{"id": 1, "variant": {"sku": "A-1"}}]
        df = records_to_dataframe(records)
        print(df.columns)  # ['id', 'variant.sku']
    """
    # JSONL lines may hold arrays or scalars as well as objects
    rows = [r if isinstance(r, dict) else {"value": r} for r in records]

    if not rows:
        return pd.DataFrame()

    if flatten:
        return pd.json_normalize(rows)
    return pd.DataFrame(rows)
