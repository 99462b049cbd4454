import sys
from argparse import ArgumentParser

from java2js import diagnostics
from java2js.compile import compile_source, read_source, write_output
from java2js.lexer import tokenize
from java2js.parse import parse
from java2js.unparse import unparse

arg_parser = ArgumentParser(prog="java2js")
arg_parser.add_argument(
    "INPUT", type=str, nargs="?", default="input.java", help="Java file to compile"
)
arg_parser.add_argument(
    "-o", "--output", type=str, default="output.js", help="JavaScript file to write"
)
arg_parser.add_argument("--dump-tokens", action="store_true", help="Dump tokens")
arg_parser.add_argument("--dump-ast", action="store_true", help="Dump the parsed AST")
arg_parser.add_argument(
    "-W",
    dest="warnings",
    action="append",
    default=[],
    choices=["all", *(d.value for d in diagnostics.Diagnostic)],
    help="Enable a diagnostic",
)


def main(argv=None) -> int:
    args = arg_parser.parse_args(argv)

    try:
        source = read_source(args.INPUT)

        if args.dump_tokens:
            for token in tokenize(source):
                print(repr(token))
        if args.dump_ast:
            for node in parse(tokenize(source)):
                print(unparse(node))

        for name in args.warnings:
            diagnostics.enable(name)
        write_output(args.output, compile_source(source))
    except (OSError, UnicodeDecodeError) as err:
        print(f"Error during compilation: {err}", file=sys.stderr)
        return 1

    print("Compilation successful!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
