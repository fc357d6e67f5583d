#!/usr/bin/env python3
"""flowc: the Flow compiler.

Usage: flowc <input.flow> [-o output.cpp] [--emit-statements] [--run]
"""

import argparse
import os
import sys

from .classifier import classify_source
from .codegen import transpile


def main(argv=None):
    argparser = argparse.ArgumentParser(description="Flow to C++ transpiler")
    argparser.add_argument("input", help="Input .flow file")
    argparser.add_argument("-o", "--output", help="Output .cpp file (default: <input>.cpp)")
    argparser.add_argument("--emit-statements", action="store_true",
                           help="Print the classified statement for each line")
    argparser.add_argument("--run", action="store_true",
                           help="Compile the output with the configured compiler and run it")

    args = argparser.parse_args(argv)

    # Read input
    try:
        with open(args.input, "r") as f:
            source = f.read()
    except FileNotFoundError:
        print(f"Error: File '{args.input}' not found", file=sys.stderr)
        sys.exit(1)

    if args.emit_statements:
        for stmt in classify_source(source):
            print(stmt)
        return

    cpp_source = transpile(source)

    # Output
    if args.output:
        out_path = args.output
    else:
        base = os.path.splitext(args.input)[0]
        out_path = base + ".cpp"

    with open(out_path, "w") as f:
        f.write(cpp_source)

    print(f"Transpiled {args.input} → {out_path}")

    if args.run:
        from ..service.runner import compile_and_run
        result = compile_and_run(cpp_source, os.getpid())
        print(result.output, end="" if result.output.endswith("\n") else "\n")
        if not result.success:
            sys.exit(1)


if __name__ == "__main__":
    main()
