"""
Command line entry point: reduce or invert a matrix and print it.

    rref-matrix                      # demo: RREF of a 3x2 sample
    rref-matrix matrix.json          # RREF of {"rows": [[...], ...]}
    rref-matrix matrix.json --invert # inverse instead of RREF

Exit codes: 0 success, 1 matrix computation error, 2 invalid input.
"""

import json
import logging
import sys
from argparse import ArgumentParser, RawDescriptionHelpFormatter

from jsonschema import ValidationError as SchemaValidationError
from pydantic import ValidationError as ModelValidationError

from rref_matrix.core.contracts import load_matrix
from rref_matrix.core.domain import Matrix
from rref_matrix.core.math import MatrixComputationError

LOG = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_COMPUTATION_ERROR = 1
EXIT_INVALID_INPUT = 2

DEMO_ROWS = [
    [1.0, 3.0],
    [2.0, 1.5],
    [-2.0, -1.5],
]


def build_parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog="rref-matrix",
        formatter_class=RawDescriptionHelpFormatter,
        description=__doc__,
    )
    parser.add_argument(
        "matrix", nargs="?", default=None,
        help='path to a JSON file of the form {"rows": [[...], ...]}',
    )
    parser.add_argument(
        "-i", "--invert", action="store_true",
        help="print the inverse instead of the reduced row echelon form",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="log every elimination step",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        matrix = load_matrix(args.matrix) if args.matrix else Matrix.from_rows(DEMO_ROWS)
    except (
        OSError,
        UnicodeDecodeError,
        json.JSONDecodeError,
        SchemaValidationError,
        ModelValidationError,
    ) as e:
        LOG.error("cannot load matrix from %s: %s", args.matrix, e)
        return EXIT_INVALID_INPUT

    try:
        result = matrix.inverse() if args.invert else matrix.to_reduced_row_echelon_form()
    except MatrixComputationError as e:
        LOG.error("%s", e)
        return EXIT_COMPUTATION_ERROR

    print(result)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
