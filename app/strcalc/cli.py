"""
Command Line Interface

Usage:
    strcalc "1,2,3"              # prints 6
    strcalc '//;\\n1;2'          # "\\n" is read as a newline
    strcalc                      # interactive mode

Every "\\n" typed in an argument or interactive line becomes a newline,
so a literal backslash-n delimiter cannot be declared from the command
line. Use the library or the HTTP API for that.
"""

import sys
from typing import List, Optional

from rich.console import Console

from .calculator import StringCalculator
from .config import load_config
from .logging_config import setup_logging

console = Console()


def decode_input(text: str) -> str:
    """Turn a typed "\\n" into a real newline."""
    return text.replace("\\n", "\n")


def run_once(calculator: StringCalculator, text: str) -> bool:
    """Evaluate one input and print the outcome. Returns True on success."""
    result = calculator.evaluate(decode_input(text))
    if result.success:
        console.print(f"[bold green]{result.total}[/bold green]")
        return True
    console.print(f"[red]Error: {result.error}[/red]")
    return False


def interactive(calculator: StringCalculator) -> int:
    console.print("[bold blue]String Calculator[/bold blue]")
    console.print("Type numbers like 1,2,3 or //;\\n1;2. Type 'exit' or 'quit' to stop.")

    while True:
        try:
            user_input = input("> ")
        except EOFError:
            break

        if user_input.strip().lower() in ("exit", "quit"):
            break

        run_once(calculator, user_input)

    console.print("Goodbye!")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """
    Entry point for the strcalc command.

    Returns:
        Process exit code
    """
    if argv is None:
        argv = sys.argv[1:]

    config = load_config()
    setup_logging(level=config.log_level, log_file=config.log_file, json_format=config.log_json)

    calculator = StringCalculator()
    if not argv:
        return interactive(calculator)

    return 0 if run_once(calculator, " ".join(argv)) else 1


if __name__ == "__main__":
    sys.exit(main())
