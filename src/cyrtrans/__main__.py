import argparse
import sys

from .convenience import check_samples
from .engine import transliterate
from .misc import report_unmapped
from .schemas import get_schema
from .schemas import schema_names
from .schemas import UnknownSchemaError


parser = argparse.ArgumentParser(prog='cyrtrans',
                                 description='Transliterate Cyrillic text '
                                 'from input stream to Latin script.')

action_group = parser.add_mutually_exclusive_group()
action_group.add_argument('-l', '--list',
                          help='List available schemas and exit',
                          action='store_true', default=False)
action_group.add_argument('-c', '--check',
                          help='Verify the samples of every schema and exit',
                          action='store_true', default=False)

parser.add_argument('-s', '--schema', help='Name (or alias) of the schema to '
                    'use (default: %(default)s)', default='wikipedia')
parser.add_argument('--caps-words', help='Fully uppercase replacements in '
                    'words written in capitals', action='store_true',
                    default=None)
parser.add_argument('-v', '--verbose',
                    help='More extensive output (for debugging)',
                    action='count', default=0)
parser.add_argument('files', help='Input file(s). Use - for stdin (default).',
                    default=['-'], nargs='*')


def list_schemas():
    for name in schema_names():
        print(name, get_schema(name).description, sep='\t')


def check_all_schemas(verbose=0) -> int:
    """Print every sample mismatch to stderr; return the number found."""
    failures = 0
    for name in schema_names():
        mismatches = check_samples(name)
        if verbose:
            print(f'{name}: {len(get_schema(name).samples)} samples, '
                  f'{len(mismatches)} mismatches', file=sys.stderr)
        for source, expected, actual in mismatches:
            print(f'{name}: {source!r} -> {actual!r} (expected {expected!r})',
                  file=sys.stderr)
        failures += len(mismatches)
    return failures


def main(argv=None) -> int:
    args = parser.parse_args(argv)

    if args.verbose:
        print(args, file=sys.stderr)

    if args.list:
        list_schemas()
        return 0
    if args.check:
        return 1 if check_all_schemas(verbose=args.verbose) else 0

    try:
        schema = get_schema(args.schema)
    except UnknownSchemaError as e:
        print(e, file=sys.stderr)
        print('Available schemas:', ', '.join(schema_names()),
              file=sys.stderr)
        return 1

    for fname in args.files:
        if fname == '-':
            input_string = sys.stdin.read()
        else:
            with open(fname, encoding='utf-8') as f:
                input_string = f.read()
        if args.verbose:
            report_unmapped(input_string, schema)
        sys.stdout.write(transliterate(schema, input_string,
                                       caps_words=args.caps_words))
    return 0


if __name__ == '__main__':
    sys.exit(main())
