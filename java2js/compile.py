import os
from typing import TypeAlias, Union

from java2js.codegen import generate
from java2js.lexer import tokenize
from java2js.parse import parse

StrPath: TypeAlias = Union[str, "os.PathLike[str]"]


def compile_source(source: str) -> str:
    return generate(parse(tokenize(source)))


def read_source(path: StrPath) -> str:
    # Line endings are kept exactly as written.
    with open(path, "r", encoding="utf-8", newline="") as f:
        return f.read()


def write_output(path: StrPath, js_code: str) -> None:
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(js_code)


def compile_file(input_path: StrPath, output_path: StrPath) -> None:
    """Compile the Java file at ``input_path`` into ``output_path``.

    Both files are UTF-8. I/O and decoding errors are left for the caller to
    handle.
    """
    write_output(output_path, compile_source(read_source(input_path)))
