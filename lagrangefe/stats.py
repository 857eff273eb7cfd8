import polars as pl

from lagrangefe.models import LagrangePolynomial


def free_energy_estimates(model: LagrangePolynomial) -> pl.DataFrame:
    """Both free energy estimates for a fitted model.

    ## Returns
    - estimates (DataFrame): one row
        - columns: lagrange, trapezoid, difference

    Note: the two are expected to differ for coarse or noisy data, a large
    difference suggests the polynomial fit is poor.
    """
    lagrange = model.integral()
    trapezoid = model.quadrature()

    return pl.DataFrame(
        {
            "lagrange": [lagrange],
            "trapezoid": [trapezoid],
            "difference": [lagrange - trapezoid],
        },
        schema={
            "lagrange": pl.Float64,
            "trapezoid": pl.Float64,
            "difference": pl.Float64,
        },
    )
