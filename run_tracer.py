#!/usr/bin/env python3
# run_tracer.py
# This file is part of Tracer - A UPPAAL XTR Trace Printer
#
# Command-line interface printing XTR traces in human readable form

import sys
import argparse
from pathlib import Path
from typing import List, Optional

from model.system import Model
from model.trace import Trace
from parser import load_model_file, read_trace_file
from parser.exceptions import ModelFormatError, TraceFormatError
from utils.logger import configure_logging, get_logger
from utils.renderer import render

EXIT_OK = 0
EXIT_MODEL_ERROR = 1
EXIT_TRACE_ERROR = 2
EXIT_IO_ERROR = 3
EXIT_INTERRUPTED = 4
EXIT_UNEXPECTED = 5


def create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser for command line interface.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        description=(
            "Reads a model (intermediate format) and a trace (xtr/\"dot\" format) "
            "and produces a human readable trace."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run_tracer.py model.if trace.xtr
  python run_tracer.py - trace.xtr < model.if
  python run_tracer.py model.if trace.xtr --validate-only -v

The intermediate format is produced by the model checker front end, e.g.:
  UPPAAL_COMPILE_ONLY=1 verifyta model.xml - > model.if
        """,
    )

    parser.add_argument(
        "model", type=str, help="Path to the intermediate-format model ('-' for stdin)"
    )

    parser.add_argument("trace", type=Path, help="Path to the XTR trace file")

    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose output"
    )

    parser.add_argument(
        "--debug", action="store_true", help="Enable debug output (overrides --verbose)"
    )

    parser.add_argument(
        "--validate-only",
        action="store_true",
        help="Only decode model and trace, do not print the trace",
    )

    return parser


def report_validation(model: Model, trace: Trace) -> None:
    """Log what was decoded when only validating."""
    logger = get_logger()
    logger.validation_result(True, f"model: {model}")
    logger.validation_result(True, f"trace: initial state and {len(trace)} step(s)")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the tracer.

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=args.verbose, debug=args.debug)
    logger = get_logger()

    try:
        model = load_model_file(args.model)
        trace = read_trace_file(model, args.trace)

        if args.validate_only:
            report_validation(model, trace)
            return EXIT_OK

        sys.stdout.write(render(model, trace))
        return EXIT_OK

    except ModelFormatError as e:
        if args.validate_only:
            logger.validation_result(False, f"model: {e}")
        else:
            logger.error(f"Model file error: {e}")
        return EXIT_MODEL_ERROR

    except TraceFormatError as e:
        if args.validate_only:
            logger.validation_result(False, f"trace: {e}")
        else:
            logger.error(f"Trace file error: {e}")
        return EXIT_TRACE_ERROR

    except OSError as e:
        logger.error(f"Cannot open file: {e}")
        return EXIT_IO_ERROR

    except KeyboardInterrupt:
        logger.error("Interrupted by user")
        return EXIT_INTERRUPTED

    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        import traceback

        traceback.print_exc()
        return EXIT_UNEXPECTED


if __name__ == "__main__":
    sys.exit(main())
