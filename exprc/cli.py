"""
Command-line interface for exprc.

Provides the main entry point for the exprc compiler with subcommands
for compiling an expression and printing its IR.
"""

import argparse
import logging
import sys
from pathlib import Path

from .core import Session, read_source
from .errors import SourceError
from .frontend import render_tree
from .utils.settings import Settings

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI.

    Returns:
        argparse.ArgumentParser: The configured argument parser
    """
    parser = argparse.ArgumentParser(
        prog="exprc",
        description="exprc: infix expression to three-address IR compiler",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m exprc compile "3 + 4 * 2"
  python -m exprc compile "(1+2)*x" --ast --rpn
  python -m exprc compile -f expr.txt --no-optimize
        """
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    # Compile command
    compile_parser = subparsers.add_parser(
        "compile",
        help="Compile an expression and print its IR"
    )
    compile_parser.add_argument(
        "expression",
        nargs="?",
        type=str,
        help="Expression to compile"
    )
    compile_parser.add_argument(
        "-f", "--file",
        type=str,
        help="Read the expression from a file instead"
    )
    compile_parser.add_argument(
        "--no-optimize",
        action="store_true",
        help="Skip constant folding"
    )
    compile_parser.add_argument(
        "--tokens",
        action="store_true",
        help="Also print the token list"
    )
    compile_parser.add_argument(
        "--rpn",
        action="store_true",
        help="Also print the postfix token order"
    )
    compile_parser.add_argument(
        "--ast",
        action="store_true",
        help="Also print the expression tree"
    )
    compile_parser.add_argument(
        "--temp-prefix",
        type=str,
        default="t",
        help="Prefix for temporaries (default: t)"
    )
    compile_parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging"
    )

    # Version command
    subparsers.add_parser(
        "version",
        help="Show version information"
    )

    return parser


def configure_logging(verbose: bool) -> None:
    """Configure root logging for a CLI run."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    )


def handle_compile(args: argparse.Namespace) -> int:
    """Handle the compile command.

    Args:
        args: Parsed command-line arguments

    Returns:
        int: Exit code (0 for success, non-zero for failure)
    """
    if args.file and args.expression is not None:
        print("[exprc] Error: give either an expression or --file, not both", file=sys.stderr)
        return 2
    if not args.file and args.expression is None:
        print("[exprc] Error: no expression given", file=sys.stderr)
        return 2

    try:
        settings = Settings(temp_prefix=args.temp_prefix, fold_on_compile=not args.no_optimize)
    except ValueError as e:
        print(f"[exprc] Error: {e}", file=sys.stderr)
        return 2

    if args.file:
        try:
            source = read_source(Path(args.file))
        except SourceError as e:
            print(f"[exprc] Error: {e}", file=sys.stderr)
            return 1
    else:
        source = args.expression

    session = Session(settings=settings)
    result = session.compile(source)
    logger.debug("compiled expression from %s", args.file or "command line")

    if args.tokens:
        print(f"Tokens: {' '.join(result.tokens) or settings.empty_placeholder}")
    if args.rpn:
        print(f"RPN: {' '.join(result.rpn) or settings.empty_placeholder}")
    if args.ast:
        print(f"AST: {render_tree(result.root, settings.empty_placeholder)}")

    print(f"Nodes: {session.node_count}")
    print(f"IR ({session.ir_count}):")
    print(session.render_ir())
    if not args.no_optimize:
        print(f"Optimized ({session.opt_count}):")
        print(session.render_optimized())
    return 0


def handle_version(args: argparse.Namespace) -> int:
    """Handle the version command.

    Args:
        args: Parsed command-line arguments

    Returns:
        int: Exit code (always 0 for version)
    """
    from . import __version__, __author__
    print(f"exprc version {__version__}")
    print(f"Author: {__author__}")
    return 0


def main(argv: list = None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Optional command-line arguments (defaults to sys.argv)

    Returns:
        int: Exit code
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command == "compile":
        configure_logging(args.verbose)
        return handle_compile(args)
    elif args.command == "version":
        return handle_version(args)
    else:
        parser.print_help()
        return 2


if __name__ == "__main__":
    sys.exit(main())
