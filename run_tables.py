#!/usr/bin/env python3
# run_tables.py
# This file is part of Tabula - A Propositional Truth Table Compiler
#
# Command-line interface for formula classification and joint satisfiability

import sys
import argparse
from pathlib import Path
from typing import List, Optional, Sequence

from formula import FormulaError, FormulaRecord, compile_formula
from analysis import (
    TruthTable,
    classify,
    find_joint_witness,
    full_table,
    joint_satisfiable,
    joint_table,
    merge_variables,
)
from utils.logger import configure_logging, get_logger

DEFAULT_MAX_VARIABLES = 16


class VariableLimitError(ValueError):
    """Raised when a formula or formula set exceeds the variable bound."""


def read_formula_file(filepath: Path) -> List[str]:
    """Read formulas from a file, one per line.

    Blank lines and lines starting with ``#`` are skipped.

    Args:
        filepath: Path to the formula file

    Returns:
        Formula strings in file order

    Raises:
        FileNotFoundError: If the formula file doesn't exist
        ValueError: If the file cannot be read
    """
    try:
        with open(filepath, "r", encoding="utf-8") as f:
            lines = f.read().splitlines()
    except FileNotFoundError:
        raise FileNotFoundError(f"Formula file not found: {filepath}")
    except OSError as e:
        raise ValueError(f"Error reading formula file: {e}")

    return [line.strip() for line in lines if line.strip() and not line.lstrip().startswith("#")]


def compile_all(sources: Sequence[str], max_variables: int) -> List[FormulaRecord]:
    """Compile every formula and enforce the per-formula variable bound.

    Raises:
        FormulaError: A formula fails to scan or parse
        VariableLimitError: A formula has more than ``max_variables`` variables
    """
    logger = get_logger()
    records = []

    for source in sources:
        try:
            record = compile_formula(source)
        except FormulaError as e:
            logger.formula_rejected(source, e.description, e.start, e.end)
            raise

        if record.variable_count > max_variables:
            raise VariableLimitError(
                f"{record.formatted} has {record.variable_count} variables "
                f"(limit {max_variables})"
            )

        logger.formula_compiled(source, record.formatted, record.variables)
        records.append(record)

    return records


def print_truth_table(table: TruthTable) -> None:
    """Print a truth table as aligned text columns."""
    logger = get_logger()
    widths = [max(len(title), 1) for title in table.header]

    logger.info(" | ".join(title.ljust(w) for title, w in zip(table.header, widths)))
    logger.info("-+-".join("-" * w for w in widths))
    for row in table.rows:
        logger.info(
            " | ".join(("T" if value else "F").ljust(w) for value, w in zip(row, widths))
        )


def report_joint(records: Sequence[FormulaRecord], max_variables: int, show_table: bool) -> None:
    """Report the joint satisfiability verdict, witness and optional table.

    Raises:
        VariableLimitError: The merged universe exceeds ``max_variables``
    """
    logger = get_logger()

    universe = merge_variables(records)
    if len(universe) > max_variables:
        raise VariableLimitError(
            f"Formula set has {len(universe)} variables (limit {max_variables})"
        )

    verdict = joint_satisfiable(records)
    witness = find_joint_witness(records)
    witness_str = None
    if witness is not None:
        witness_str = ", ".join(
            f"{name}={'T' if value else 'F'}" for name, value in witness.items()
        )
    logger.joint_result(verdict.label, witness_str)

    if show_table and records:
        print_truth_table(joint_table(records))


def create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser for command line interface.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        description="Tabula propositional truth table generator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run_tables.py "p or not p"
  python run_tables.py "p -> q" "p" --joint
  python run_tables.py -f formulas.txt --table
  python run_tables.py "p /\\ q" --table --debug

Formula file format:
  One formula per line; blank lines and lines starting with # are ignored.

Connectives:
  not: ~ ! not ¬ \\lnot \\neg        and: /\\ && and ^ ∧ \\land \\wedge
  or:  \\/ || or ∨ \\lor \\vee         implies: -> => implies → \\to \\rightarrow
  iff: <-> <=> iff ↔ \\leftrightarrow constants: T true ⊤ \\top / F false ⊥ \\bot
        """,
    )

    parser.add_argument("formulas", nargs="*", help="Formulas to analyze")

    parser.add_argument(
        "-f", "--file", type=Path, help="Path to a file with one formula per line"
    )

    parser.add_argument(
        "--table", action="store_true", help="Print the full truth table of each formula"
    )

    parser.add_argument(
        "--joint", action="store_true", help="Check joint satisfiability of all formulas"
    )

    parser.add_argument(
        "--joint-table",
        action="store_true",
        help="Print the joint truth table (implies --joint)",
    )

    parser.add_argument(
        "--max-vars",
        type=int,
        default=DEFAULT_MAX_VARIABLES,
        help=f"Reject formulas with more variables than this (default {DEFAULT_MAX_VARIABLES})",
    )

    parser.add_argument(
        "-q", "--quiet", action="store_true", help="Only report warnings and errors"
    )

    parser.add_argument(
        "--debug", action="store_true", help="Enable debug output (overrides --quiet)"
    )

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the truth table tool.

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    configure_logging(debug=args.debug, quiet=args.quiet)
    logger = get_logger()

    try:
        sources = list(args.formulas)
        if args.file is not None:
            sources.extend(read_formula_file(args.file))

        if not sources and not (args.joint or args.joint_table):
            logger.warning("No formulas given.")
            return 0

        records = compile_all(sources, args.max_vars)

        if records:
            logger.info("\n📊 Classification:")
        for record in records:
            logger.classification_result(record.formatted, classify(record).label)
            if args.table:
                print_truth_table(full_table(record))

        if args.joint or args.joint_table:
            report_joint(records, args.max_vars, args.joint_table)

        return 0

    except FormulaError:
        return 2

    except VariableLimitError as e:
        logger.error(f"Too many variables: {e}")
        return 4

    except (FileNotFoundError, ValueError) as e:
        logger.error(f"Formula file error: {e}")
        return 3

    except KeyboardInterrupt:
        logger.error("Interrupted by user")
        return 130

    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        import traceback

        traceback.print_exc()
        return 5


if __name__ == "__main__":
    sys.exit(main())
