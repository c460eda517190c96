"""
Nice Language Interpreter

This is the main entry point for the Nice language interpreter.

Workflow:
1. The source script is read from the file specified on the command line,
   or line by line from the interactive prompt.
2. The Lexer tokenizes the source code and every token is listed on stdout.
3. The Parser processes tokens into an AST following the language grammar.
4. The Interpreter walks the AST, evaluating expressions and executing statements.

Set ``NICEDEBUG`` in the environment to also print the parsed AST.
"""
import os
import sys

from nicelang.session import Session

EXIT_ERROR = 69
USAGE = "Usage: 69 [script]"


def debug_enabled() -> bool:
    """
    Return ``True`` when ``NICEDEBUG`` is set to a non-empty value.
    """
    return bool(os.environ.get('NICEDEBUG'))


def preserve_source_bytes() -> None:
    """
    Let bytes that are not valid UTF-8 pass through stdout and stderr unchanged.

    Scripts are decoded with ``surrogateescape``, so such bytes reach the
    output as lone surrogates and are written back as the same bytes.
    """
    for stream in (sys.stdout, sys.stderr):
        reconfigure = getattr(stream, "reconfigure", None)
        if reconfigure is not None:
            reconfigure(errors="surrogateescape")


def run_script(script_name: str, session: Session | None = None) -> int:
    """
    Run a Nice script and return the process exit code.
    """
    try:
        with open(script_name, "r", encoding="utf-8", errors="surrogateescape") as f:
            code = f.read()
    except OSError as e:
        print(f"Could not read '{script_name}': {e.strerror or e}", file=sys.stderr)
        return EXIT_ERROR

    if session is None:
        session = Session(debug=debug_enabled())
    session.run(code)

    if session.had_error or session.had_runtime_error:
        return EXIT_ERROR
    return 0


def run_repl(session: Session | None = None) -> int:
    """
    Run the interactive REPL until end of input.
    """
    if session is None:
        session = Session(debug=debug_enabled())
    while True:
        try:
            line = input("> ")
        except KeyboardInterrupt:
            print("\nInterrupted.")
            break
        except EOFError:
            print()
            break
        session.run(line)
        session.had_error = False
    return 0


def main(argv: list[str]) -> int:
    """
    Entry point for the CLI.

    Behaviour:
    - No arguments: enter the REPL.
    - One argument: treat it as the path to a script and run it.
    - Any other pattern: print usage and return 69.
    """
    args = argv[1:]
    if not args:
        return run_repl()
    if len(args) == 1:
        preserve_source_bytes()
        return run_script(args[0])
    print(USAGE)
    return EXIT_ERROR


def run() -> None:
    """
    Console script entry point.
    """
    sys.exit(main(sys.argv))


if __name__ == "__main__":
    run()
