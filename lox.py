"""
Lox Language Interpreter

This is the main entry point for the Lox interpreter.

Workflow:
1. The source script is read from the file specified on the command line.
2. The Scanner tokenizes the source code into tokens.
3. The Parser processes tokens into an AST following the language grammar.
4. The Interpreter walks the AST, evaluating expressions and executing statements.

With no arguments an interactive prompt (REPL) is started instead. Set
``LOXDEBUG`` in the environment to log each stage and dump the tokens and
AST before evaluation.
"""
import logging
import sys

from loxlang.runner import Lox, debug_enabled, exit_status

EX_USAGE = 64
EX_NOINPUT = 66


def print_usage():
    """
    Print usage.
    """
    print()
    print("Lox Language Interpreter")
    print()
    print("Usage:")
    print("    lox [script.lox]")
    print()
    print("Arguments:")
    print("    <script.lox>")
    print("        Path to a Lox source file to execute.")
    print()
    print("Example:")
    print("    lox hello.lox")
    print()
    print("Or run with no arguments to enter interactive mode (REPL).")
    print()
    print("Options:")
    print("    -h, --help")
    print("        Show this help message and exit.")
    print()
    print("Environment:")
    print("    LOXDEBUG    Log each stage and print tokens and AST before running.")
    print("    NO_COLOR    Disable colored error reports.")


def run_script(script_name: str) -> int:
    """
    Run a Lox script and return the process exit status.
    """
    lox = Lox()
    try:
        errors = lox.run_file(script_name)
    except OSError as e:
        print(f"{type(e).__name__}: {e}", file=sys.stderr)
        return EX_NOINPUT
    return exit_status(errors)


def run_repl() -> int:
    """
    Run the interactive REPL
    """
    print("Lox Language Interpreter - REPL")
    print("Type `exit` or `quit` to leave.")
    Lox().run_repl()
    return 0


def main(argv: list[str] | None = None) -> int:
    """
    Entry point for the CLI.

    Behaviour:
    - No arguments: enter the REPL.
    - One argument equal to ``-h`` or ``--help``: print usage and exit.
    - One argument that is not an option: treat it as the path to a script and run it.
    - Any other pattern: print usage and return a non-zero exit code.
    """
    if argv is None:
        argv = sys.argv
    if debug_enabled():
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )
    args = argv[1:]
    if not args:
        return run_repl()
    if len(args) == 1 and args[0] in ('-h', '--help'):
        print_usage()
        return 0
    if len(args) == 1 and not args[0].startswith('-'):
        return run_script(args[0])
    print_usage()
    return EX_USAGE


if __name__ == "__main__":
    sys.exit(main(sys.argv))
