"""
cli.py
======
Command line entry point for building CSS selectors.
"""

import argparse
import os
import sys

import logfire
from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

from cssbuild.blueprint import build_expression, load_blueprint, parse_blueprint
from cssbuild.exceptions import CssBuildError
from cssbuild.selector import SelectorExpression
from cssbuild.utils.logging import setup_local_logging

THEME = Theme(
    {
        'info': 'dim cyan',
        'warning': 'magenta',
        'danger': 'bold red',
        'success': 'bold green',
        'step': 'bold blue',
    }
)

FRAGMENT_FLAGS = [
    (('-e', '--element'), 'element', 'Element (tag name)'),
    (('-i', '--id'), 'id', 'Id'),
    (('-c', '--class'), 'class_name', 'Class (repeatable)'),
    (('-a', '--attr'), 'attribute', 'Attribute selector text, e.g. \'href$=".png"\' (repeatable)'),
    (('-p', '--pseudo-class'), 'pseudo_class', 'Pseudo-class (repeatable)'),
    (('-P', '--pseudo-element'), 'pseudo_element', 'Pseudo-element'),
]


class AppendFragment(argparse.Action):
    """Collect fragment flags into one list, keeping command line order."""

    def __call__(self, parser, namespace, values, option_string=None):
        fragments = list(getattr(namespace, self.dest, None) or [])
        fragments.append((self.const, values))
        setattr(namespace, self.dest, fragments)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='cssbuild', description='Build CSS selectors from ordered fragments')
    parser.add_argument(
        '--log-level',
        default=os.getenv('CSSBUILD_LOG_LEVEL', 'INFO'),
        help='Log level for the file log (default: $CSSBUILD_LOG_LEVEL or INFO)',
    )
    parser.add_argument('--log-file', action='store_true', help='Write a log file to .cssbuild/logs/')

    subparsers = parser.add_subparsers(dest='command', required=True)

    build = subparsers.add_parser('build', help='Build a simple selector from fragment flags, in the order given')
    for flags, method, help_text in FRAGMENT_FLAGS:
        build.add_argument(*flags, dest='fragments', action=AppendFragment, const=method, help=help_text)
    build.add_argument('--table', action='store_true', help='Show the selector parts as a table')

    render = subparsers.add_parser('render', help='Render a selector blueprint JSON file')
    render.add_argument('file', help="Blueprint file, or '-' for stdin")

    return parser


def build_from_fragments(fragments: list[tuple[str, str]]) -> SelectorExpression:
    """Apply (method, value) pairs to a new expression in order."""
    expression = SelectorExpression()
    for method, value in fragments:
        getattr(expression, method)(value)
    return expression


def print_parts(console: Console, expression: SelectorExpression) -> None:
    table = Table(title='Selector Parts')
    table.add_column('Kind', style='cyan')
    table.add_column('Value', style='green')

    for step in expression.parts().fragments:
        table.add_row(step.kind, Text(step.value))

    console.print(table)


def run_build(console: Console, args: argparse.Namespace) -> str:
    fragments = args.fragments or []
    with logfire.span('build_selector', fragments=len(fragments)):
        expression = build_from_fragments(fragments)
        if args.table:
            print_parts(console, expression)
        return expression.stringify()


def run_render(console: Console, args: argparse.Namespace) -> str:
    with logfire.span('render_blueprint', file=args.file):
        if args.file == '-':
            node = parse_blueprint(sys.stdin.buffer.read())
        else:
            node = load_blueprint(args.file)
        return build_expression(node).stringify()


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    load_dotenv()

    console = Console(theme=THEME)
    args = build_parser().parse_args(argv)

    logfire_token = os.getenv('LOGFIRE_TOKEN')
    if logfire_token:
        logfire.configure(token=logfire_token, service_name='cssbuild')

    if args.log_file:
        log_file = setup_local_logging(args.log_level)
        console.print(f'[info]Logging to {log_file}[/info]')

    handlers = {'build': run_build, 'render': run_render}

    try:
        selector = handlers[args.command](console, args)
    except CssBuildError as e:
        logfire.error('Selector build failed', command=args.command, error=str(e))
        console.print(f'[danger]✗ {escape(str(e))}[/danger]', soft_wrap=True)
        return 1
    except OSError as e:
        logfire.error('Could not read blueprint', error=str(e))
        console.print(f'[danger]✗ {escape(str(e))}[/danger]', soft_wrap=True)
        return 1

    logfire.info('Selector built', command=args.command, selector=selector)
    console.print(selector, markup=False, emoji=False, highlight=False, soft_wrap=True)
    return 0


if __name__ == '__main__':
    sys.exit(main())
