"""Free energy difference from thermodynamic integration data.

usage: lagrangefe input_file [plot_file [data_points]]
"""

import sys

from lagrangefe.errors import LagrangeError
from lagrangefe.models import LagrangePolynomial
from lagrangefe.samples import read_samples
import lagrangefe.utility_functions as util

USAGE = "\n".join(
    [
        "lagrangefe input_file [plot_file [data_points]]",
        " input_file: file contains thermodynamic integration data",
        "  plot_file: file for the plot data [optional]",
        "data_points: number of data points for plot [optional]",
    ]
)


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    if len(argv) < 1:
        print(USAGE)
        return 0

    input_file = argv[0]
    try:
        samples = read_samples(input_file)
    except OSError as err:
        print(f"failed to open the file {input_file}: {err}")
        return 1
    except LagrangeError as err:
        print(f"failed to read {input_file}: {err}")
        return 1

    try:
        model = LagrangePolynomial(samples)
    except LagrangeError as err:
        print(f"cannot interpolate {input_file}: {err}")
        return 1

    model.polynomial_coefficients(verbose=True)

    d = util.Y_DECIMALS
    print(
        "\nFree energy difference\n"
        f" Lagrange: {model.integral():.{d}f}\n"
        f"Trapezoid: {model.quadrature():.{d}f}"
    )

    if len(argv) > 1:
        plot_file = argv[1]
        try:
            steps = int(argv[2]) if len(argv) > 2 else len(samples) - 1
            model.write_estimates(plot_file, steps)
        except ValueError as err:
            print(f"no plot data written: {err}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
