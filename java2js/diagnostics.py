import enum
import sys


class Diagnostic(enum.Enum):
    unknown_statement = "unknown-statement"
    incomplete_print = "incomplete-print"
    unterminated_string = "unterminated-string"

    @property
    def message(self) -> str:
        return _diagnostic_messages[self]

    def __call__(self, *args) -> None:
        warn(self, *args)


def warn(type: Diagnostic, *args) -> None:
    if type not in enabled_diagnostics:
        return

    diagnostic_message = type.message % args
    print(f"WARN({type.value}): {diagnostic_message}", file=sys.stderr)


def enable(name: str) -> None:
    """Enable a diagnostic by its command-line name, or every one for "all"."""
    if name == "all":
        enabled_diagnostics.update(Diagnostic)
    else:
        enabled_diagnostics.add(Diagnostic(name))


# Nothing is reported unless asked for; skipping input is not an error.
enabled_diagnostics: set[Diagnostic] = set()


_diagnostic_messages = {
    Diagnostic.unknown_statement: "Skipping unrecognized statement '%s'",
    Diagnostic.incomplete_print: "Skipping malformed print statement; expected %s",
    Diagnostic.unterminated_string: "Unterminated string literal '%s' runs to end of input",
}
