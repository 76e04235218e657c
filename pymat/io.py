"""
Loading delimited text files.

Two entry points:

    load_txt(path)     raw table of string fields, no type coercion
    read_matrix(path)  numeric delimited file parsed into a Matrix

load_txt leaves type coercion to the caller, which typically converts
the fields it needs and builds a Matrix from them. read_matrix does the
whole job with pandas for files that are numeric throughout.
"""

from __future__ import annotations

from pathlib import Path
import numpy as np

from pymat.core.exceptions import ValidationError
from pymat.matrix import Matrix


def load_txt(
    path: str | Path,
    delimiter: str = ',',
    header: bool = False,
) -> list[list[str]]:
    """
    Read a delimited text file into a table of strings.

    The file is split on newlines and each line on `delimiter`. A single
    trailing empty line (from a terminating newline) is ignored.

    Args:
        path: File to read (UTF-8)
        delimiter: Field separator
        header: If False, the first line is dropped; if True it is kept
            as the first row of the table

    Returns:
        List of rows, each a list of string fields
    """
    if not delimiter:
        raise ValidationError("delimiter: must be a non-empty string")

    lines = Path(path).read_text(encoding='utf-8').split('\n')
    if lines and lines[-1] == '':
        lines = lines[:-1]

    if not header:
        lines = lines[1:]

    return [line.split(delimiter) for line in lines]


def read_matrix(
    path: str | Path,
    delimiter: str = ',',
    header: bool = True,
    *,
    columns: list[str] | None = None,
) -> Matrix:
    """
    Parse a numeric delimited file into a Matrix.

    Args:
        path: File to read
        delimiter: Field separator
        header: Whether the first line holds column names
        columns: Subset of named columns to keep (requires header=True)

    Returns:
        Matrix with one row per data line

    Raises:
        ValidationError: If any kept field is not numeric
    """
    import pandas as pd

    if columns is not None and not header:
        raise ValidationError("columns: selecting by name requires header=True")

    path = Path(path)
    df = pd.read_csv(
        path,
        sep=delimiter,
        header=0 if header else None,
        usecols=columns,
    )

    try:
        values = df.to_numpy(dtype=np.float64)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{path.name}: non-numeric data: {e}") from e

    return Matrix(values)
