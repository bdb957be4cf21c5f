"""
Command-line interface for the GraphDL statement parser.

- Parsing a single statement (text, JSON or GraphDL output)
- Batch parsing a file of statements, with unknown-word export
- Running the phrase and occupational-title expanders directly
"""
import sys
import argparse
import json
import logging
from pathlib import Path

from graphdl.logging_config import ProgressLogger, setup_logging, log_with_context

logger = logging.getLogger(__name__)


def _build_parser():
    from graphdl.parser import GraphDLParser
    from graphdl.lexicon import LexiconLoader

    return GraphDLParser().initialize(LexiconLoader())


def _print_statement(statement, indent=0):
    pad = "  " * indent
    print(f"{pad}{statement.original}")
    for name in ("predicate", "object", "preposition", "complement"):
        value = getattr(statement, name)
        if value is not None:
            print(f"{pad}  {name}: {value}")
    if statement.unknown_words:
        print(f"{pad}  unknown: {', '.join(statement.unknown_words)}")
    for child in statement.expansions:
        _print_statement(child, indent + 1)


def cmd_parse(args):
    """Parse one statement."""
    if args.text:
        text = args.text
    elif args.file:
        with open(args.file, 'r', encoding='utf-8') as f:
            text = f.read().strip()
    else:
        print("Enter a statement:")
        text = input().strip()

    try:
        parser = _build_parser()
        statement = parser.parse(text)
    except (OSError, ValueError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(1)

    if args.format == 'json':
        print(json.dumps(statement.to_dict(), indent=2, ensure_ascii=False))
    elif args.format == 'graphdl':
        print(parser.to_graphdl(statement))
    else:
        _print_statement(statement)
        print(f"GraphDL: {parser.to_graphdl(statement)}")


def cmd_batch(args):
    """Parse a file with one statement per line and print GraphDL."""
    path = Path(args.file)
    if not path.exists():
        print(f"ERROR: file not found: {path}", file=sys.stderr)
        sys.exit(1)

    with open(path, 'r', encoding='utf-8') as f:
        lines = [line.strip() for line in f if line.strip()]

    try:
        parser = _build_parser()
    except (OSError, ValueError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(1)

    progress = ProgressLogger(total=len(lines), desc="Parsing statements", logger=logger)
    leaf_count = 0
    for line in lines:
        statement = parser.parse(line)
        leaf_count += sum(1 for _ in statement.leaves())
        if args.format == 'json':
            print(json.dumps(statement.to_dict(), ensure_ascii=False))
        else:
            print(f"{line}\t{parser.to_graphdl(statement)}")
        progress.update()
    progress.close()

    log_with_context(
        f"Parsed {len(lines)} statements into {leaf_count} leaves",
        context={'file': path, 'unknown': parser.tracker.get_stats()},
        level=logging.INFO,
    )

    if args.unknown_out:
        count = parser.export_unknown_words(args.unknown_out)
        print(f"✓ Wrote {count} unknown words to {args.unknown_out}", file=sys.stderr)


def cmd_expand(args):
    """Run the coordination expander on a phrase (or a statement with --statement)."""
    from graphdl.expander import CoordinationExpander
    from graphdl.lexicon import LexiconLoader

    expander = CoordinationExpander(LexiconLoader().load())
    results = expander.expand_statement(args.phrase) if args.statement else expander.expand(args.phrase)
    for result in results:
        print(result)


def cmd_title(args):
    """Expand a coordinated occupation title."""
    from graphdl.noun_phrases import NounPhraseExpander

    result = NounPhraseExpander().expand(args.phrase)
    if args.format == 'json':
        print(json.dumps({
            'original': result.original,
            'expansions': result.expansions,
            'head_noun': result.head_noun,
            'context_modifier': result.context_modifier,
            'structure': result.structure,
        }, indent=2, ensure_ascii=False))
        return

    print(f"Structure: {result.structure}")
    print(f"Head noun: {result.head_noun or '(none)'}")
    print(f"Context:   {result.context_modifier or '(none)'}")
    for expansion in result.expansions:
        print(f"  - {expansion}")


def build_arg_parser():
    parser = argparse.ArgumentParser(
        prog='graphdl',
        description='Parse imperative task statements into GraphDL paths',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  graphdl parse "Prepare or present reports"
  graphdl parse "Develop plans for sustainable regeneration" --format graphdl
  graphdl batch tasks.txt --unknown-out unknown_words.tsv
  graphdl expand "plans, procedures, and guidelines"
  graphdl title "Radio, Cellular, and Tower Equipment Installers and Repairers"
        """
    )
    parser.add_argument('--debug', action='store_true', help='Verbose rule-by-rule logging')
    parser.add_argument('--log-file', default=None, help='Also write logs to this file')

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    parser_parse = subparsers.add_parser('parse', help='Parse one statement')
    parser_parse.add_argument('text', nargs='?', help='Statement to parse')
    parser_parse.add_argument('-f', '--file', help='Read the statement from a file')
    parser_parse.add_argument('--format', choices=['text', 'json', 'graphdl'], default='text',
                              help='Output format (default: text)')
    parser_parse.set_defaults(func=cmd_parse)

    parser_batch = subparsers.add_parser('batch', help='Parse one statement per line')
    parser_batch.add_argument('file', help='Input file')
    parser_batch.add_argument('--format', choices=['graphdl', 'json'], default='graphdl',
                              help='Output format (default: graphdl)')
    parser_batch.add_argument('--unknown-out', help='Write unknown words as TSV to this path')
    parser_batch.set_defaults(func=cmd_batch)

    parser_expand = subparsers.add_parser('expand', help='Expand a coordinated phrase')
    parser_expand.add_argument('phrase', help='Phrase to expand')
    parser_expand.add_argument('--statement', action='store_true',
                               help='Treat the input as a verb-led statement')
    parser_expand.set_defaults(func=cmd_expand)

    parser_title = subparsers.add_parser('title', help='Expand a coordinated occupation title')
    parser_title.add_argument('phrase', help='Occupation title')
    parser_title.add_argument('--format', choices=['text', 'json'], default='text')
    parser_title.set_defaults(func=cmd_title)

    return parser


def main(argv=None):
    """Main CLI entry point."""
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    level = logging.INFO if args.log_file else logging.WARNING
    setup_logging(log_file=args.log_file, level=level, debug=args.debug)
    args.func(args)


if __name__ == '__main__':
    main()
