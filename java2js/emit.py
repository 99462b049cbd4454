import typing as t


class Emitter:
    """Collects output lines, each terminated with ``newline``."""

    def __init__(self, newline: str = "\n"):
        self._buf: t.List[str] = []
        self._newline = newline

    def emit(self, *lines: str) -> None:
        self._buf.extend(lines)

    def get(self) -> str:
        return "".join(line + self._newline for line in self._buf)
