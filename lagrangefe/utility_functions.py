"""
Utilities

- unit grid
- number formatting for reports and plot files
- plot file writer
"""

from typing import Iterable

import numpy as np
from tqdm import tqdm

# decimals used when printing x values and estimates
X_DECIMALS = 4
Y_DECIMALS = 8


def unit_grid(steps: int) -> np.ndarray:
    """Evenly spaced points 0, 1/steps, ..., 1 (steps + 1 points).

    Note: the grid is always on [0, 1], rescale sample x values beforehand
    if the data lives on another interval.
    """
    if steps < 1:
        raise ValueError(f"Needs at least one step, got {steps}")

    return np.arange(steps + 1, dtype=float) / steps


def format_row(x: float, y: float) -> str:
    return f"{x:.{X_DECIMALS}f}, {y:.{Y_DECIMALS}f}"


def coefficient_table(coefficients: Iterable[float]) -> str:
    """Table of `degree, coefficient` rows, lowest power first."""
    lines = ["Degree, Coefficients"]
    for degree, c in enumerate(coefficients):
        lines.append(f"{degree:6d}, {c:.{Y_DECIMALS}f}")

    return "\n".join(lines)


def write_rows(
    path: str,
    rows: Iterable[tuple[float, float]],
    verbose: bool = False,
) -> bool:
    """Write (x, y) rows to a comma separated file, truncating it.

    ## returns
    - ok (bool): False if the file could not be opened or written.
    """
    if verbose:
        rows = tqdm(rows)

    try:
        with open(path, "w") as f:
            for x, y in rows:
                f.write(format_row(x, y) + "\n")
    except OSError as err:
        print(f"file {path} cannot be written: {err}")
        return False

    if verbose:
        print(f"Wrote estimates to {path}")

    return True
