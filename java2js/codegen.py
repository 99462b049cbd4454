from collections.abc import Iterable

from java2js import ast
from java2js.emit import Emitter


def generate(nodes: Iterable[ast.Node]) -> str:
    """Render the statements in ``nodes`` as JavaScript, one line each.

    String contents are copied into the output as they are. A literal holding
    a double quote or a backslash produces JavaScript that does not mean the
    same thing, or does not parse at all.
    """
    generator = _JsGenerator()
    for node in nodes:
        node.accept(generator)
    return generator.emitter.get()


class _JsGenerator(ast.AstVisitor):
    def __init__(self) -> None:
        self.emitter = Emitter()

    def visit_print_statement(self, print_statement: ast.PrintStatement) -> None:
        self.emitter.emit(f'console.log("{print_statement.text}");')
