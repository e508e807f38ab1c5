"""
Command line front-end for the Dotlin tooling.

Usage:
    dotlin-tools tokens FILE
    dotlin-tools parse FILE [--json]
    dotlin-tools eval EXPR [--let NAME=NUMBER ...] [--no-builtins]
    dotlin-tools infer FILE NAME
    dotlin-tools quickfix FILE [--apply]

Examples:
    # Check a file and list its declarations
    dotlin-tools parse script.dl

    # Evaluate an expression with a binding
    dotlin-tools eval "a*2 + sin(0)" --let a=4

    # Add the missing type annotation to the first untyped declaration
    dotlin-tools quickfix script.dl --apply > fixed.dl

File reading happens here only; the library itself never touches the disk.
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Dict, List, Optional

from .config import ToolingConfiguration
from .lexer import tokenize, LexerError
from .parser import ParseError, parse_program, parse_expression
from .parser.ast_nodes import FunctionDeclaration, ast_to_dict, iter_declarations
from .analyzer import SemanticError, infer_type_from_usage, compute_quick_fix_for_uninitialized
from .evaluator import EvaluationError, evaluate, default_environment

logger = logging.getLogger(__name__)

FRONTEND_ERRORS = (LexerError, ParseError, SemanticError, EvaluationError)


def parse_binding(binding: str) -> tuple:
    """Parse a binding like 'name=value' into (name, float value)."""
    if '=' not in binding:
        raise ValueError(f"Invalid binding format: {binding} (expected name=value)")

    name, value_str = binding.split('=', 1)
    name = name.strip()
    if not name:
        raise ValueError(f"Invalid binding format: {binding} (missing name)")

    try:
        return (name, float(value_str.strip()))
    except ValueError:
        raise ValueError(f"Invalid binding value for {name}: {value_str!r} is not a number")


def _read_source(path_str: str) -> str:
    source_path = Path(path_str)
    if not source_path.exists():
        raise FileNotFoundError(f"File not found: {source_path}")
    return source_path.read_text(encoding='utf-8')


def cmd_tokens(args, config: ToolingConfiguration) -> int:
    """Print the token stream of a file."""
    for index, token in enumerate(tokenize(_read_source(args.file))):
        print(f"{index:4d}  {token.kind:<12} {token.lexeme!r}")
    return 0


def cmd_parse(args, config: ToolingConfiguration) -> int:
    """Parse a file and print an outline or the JSON AST."""
    program = parse_program(_read_source(args.file))

    if args.json:
        print(json.dumps(ast_to_dict(program), indent=2))
        return 0

    declarations = list(iter_declarations(program))
    print(f"OK: {args.file} - {len(program.body)} statement(s), {len(declarations)} declaration(s)")
    for declaration in declarations:
        if isinstance(declaration, FunctionDeclaration):
            print(f"  fun {declaration.name}({', '.join(declaration.params)})")
        else:
            annotation = f": {declaration.type_name}" if declaration.type_name else ""
            print(f"  {declaration.kind} {declaration.name}{annotation}")
    return 0


def cmd_eval(args, config: ToolingConfiguration) -> int:
    """Evaluate a single expression."""
    environment: Dict[str, object] = default_environment() if config.math_builtins else {}
    for binding in args.let or []:
        name, value = parse_binding(binding)
        environment[name] = value

    result = evaluate(parse_expression(args.expression), environment)
    print(result)
    return 0


def cmd_infer(args, config: ToolingConfiguration) -> int:
    """Guess a variable's type from its later assignments."""
    inferred = infer_type_from_usage(_read_source(args.file), args.name)
    print(inferred or "unknown")
    return 0


def cmd_quickfix(args, config: ToolingConfiguration) -> int:
    """Report or apply the fix for the first untyped, uninitialized declaration."""
    source = _read_source(args.file)
    fix = compute_quick_fix_for_uninitialized(source, config)

    if args.apply:
        sys.stdout.write(fix.apply(source) if fix else source)
        return 0

    if fix is None:
        print("No uninitialized declarations without a type")
        return 0
    print(f"{fix.start}-{fix.end}: insert {fix.suggested!r} after "
          f"'{source[fix.start:fix.end]}'")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='dotlin-tools',
        description='Dotlin source tooling: tokenize, parse, evaluate, infer types',
    )
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Enable debug logging')

    subparsers = parser.add_subparsers(dest='action', required=True)

    # tokens command
    tokens_parser = subparsers.add_parser('tokens', help='Print the token stream')
    tokens_parser.add_argument('file', help='Dotlin source file')
    tokens_parser.set_defaults(handler=cmd_tokens)

    # parse command
    parse_parser = subparsers.add_parser('parse', help='Parse a file and list declarations')
    parse_parser.add_argument('file', help='Dotlin source file')
    parse_parser.add_argument('--json', action='store_true',
                              help='Print the AST as JSON')
    parse_parser.set_defaults(handler=cmd_parse)

    # eval command
    eval_parser = subparsers.add_parser('eval', help='Evaluate an arithmetic expression')
    eval_parser.add_argument('expression', help='Expression text')
    eval_parser.add_argument('-l', '--let', action='append', metavar='NAME=NUMBER',
                             help='Bind a name to a number (can be repeated)')
    eval_parser.add_argument('--no-builtins', action='store_true',
                             help='Do not provide pow, sin, cos, ...')
    eval_parser.set_defaults(handler=cmd_eval)

    # infer command
    infer_parser = subparsers.add_parser('infer', help='Guess a variable type from usage')
    infer_parser.add_argument('file', help='Dotlin source file')
    infer_parser.add_argument('name', help='Variable name')
    infer_parser.set_defaults(handler=cmd_infer)

    # quickfix command
    quickfix_parser = subparsers.add_parser(
        'quickfix', help='Suggest a type for the first uninitialized declaration')
    quickfix_parser.add_argument('file', help='Dotlin source file')
    quickfix_parser.add_argument('--apply', action='store_true',
                                 help='Print the source with the fix applied')
    quickfix_parser.add_argument('--fallback-type', default='Any', metavar='TYPE',
                                 help='Annotation to use when nothing can be inferred')
    quickfix_parser.set_defaults(handler=cmd_quickfix)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
    )

    try:
        config = ToolingConfiguration(
            fallback_type=getattr(args, 'fallback_type', 'Any'),
            math_builtins=not getattr(args, 'no_builtins', False),
            debug_mode=args.verbose,
        )
        logger.debug("running %s with %s", args.action, config)
        return args.handler(args, config)
    except FRONTEND_ERRORS as e:
        print(str(e), end='', file=sys.stderr)
        return 1
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == '__main__':
    sys.exit(main())
