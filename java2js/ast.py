from abc import ABC, abstractmethod
from dataclasses import dataclass


class AstVisitor:
    def visit_print_statement(self, print_statement: "PrintStatement") -> None:
        pass


class Node(ABC):
    __slots__ = ()

    @abstractmethod
    def accept(self, visitor: AstVisitor) -> None:
        ...


@dataclass(frozen=True, slots=True)
class PrintStatement(Node):
    text: str

    def accept(self, visitor: AstVisitor) -> None:
        visitor.visit_print_statement(self)
