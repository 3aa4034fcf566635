# points_io.py
# Reading point files and writing labelled results.

import sys

import numpy as np
import pandas as pd

import settings

COLUMNS = ['x', 'y']


class PointFileError(ValueError):
    pass


def load_points(path):
    """
    Read a whitespace separated file of integer pairs, one per line.
    returns: tuple of (x, y) int tuples in file order
    """
    try:
        df = pd.read_csv(path, sep=r'\s+', header=None, skip_blank_lines=True)
    except pd.errors.EmptyDataError:
        return ()
    except (pd.errors.ParserError, UnicodeDecodeError) as e:
        raise PointFileError(f"{path}: {e}") from e

    if df.shape[1] != len(COLUMNS):
        raise PointFileError(f"{path}: expected {len(COLUMNS)} values per line, found {df.shape[1]}")
    if df.isna().any().any():
        bad = int(df.isna().any(axis=1).to_numpy().argmax())
        raise PointFileError(f"{path}: missing value in data row {bad + 1}")
    for col in df.columns:
        # values past the int64 range come back as uint64 or object
        if not pd.api.types.is_signed_integer_dtype(df[col]):
            raise PointFileError(f"{path}: column {col + 1} does not hold 64-bit signed integers")

    df.columns = COLUMNS
    return tuple((int(x), int(y)) for x, y in df.itertuples(index=False, name=None))


def assignments_frame(points, labels):
    if len(points) != len(labels):
        raise ValueError(f"got {len(labels)} labels for {len(points)} points")
    df = pd.DataFrame(list(points), columns=COLUMNS, dtype=np.int64)
    # labels are written 1-indexed
    df['label'] = np.asarray(labels, dtype=np.int64) + 1
    return df


def write_assignments(points, labels, path=None):
    """
    Write "x y label" lines to path (settings.OUTPUT_FILE by default).
    Falls back to stdout when the file cannot be opened.
    returns: the path written, or None if the results went to stdout
    """
    if path is None:
        path = settings.OUTPUT_FILE
    df = assignments_frame(points, labels)
    try:
        with open(path, 'w', newline='') as f:
            df.to_csv(f, sep=' ', header=False, index=False)
    except OSError:
        print("Error opening output file; printing to stdout.", file=sys.stderr)
        df.to_csv(sys.stdout, sep=' ', header=False, index=False)
        return None
    print(f"Wrote results to {path}")
    return path
