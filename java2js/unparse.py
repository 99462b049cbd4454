from java2js import ast
from java2js.parse import PRINT_KEYWORD


def unparse(node: ast.Node) -> str:
    visitor = _Unparser()
    node.accept(visitor)
    return visitor.get_result()


class _Unparser(ast.AstVisitor):
    def __init__(self) -> None:
        self._strings = []

    def get_result(self) -> str:
        return "".join(self._strings)

    def _append(self, string: str) -> None:
        self._strings.append(string)

    def visit_print_statement(self, print_statement: ast.PrintStatement) -> None:
        self._append(PRINT_KEYWORD)
        self._append('("')
        self._append(print_statement.text)
        self._append('");')
