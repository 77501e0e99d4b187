"""calc/expression.py - 不可变的表达式树"""
from dataclasses import dataclass
from typing import Iterator, Tuple

from calc.operators import Operators
from utils.formatting import format_number


class Expr:
    """
    表达式树节点基类，值每次都重新计算，不缓存。
    求值和渲染都用显式栈做后序遍历，树再深也不会递归溢出。
    """
    symbol = None

    @property
    def children(self) -> Tuple["Expr", ...]:
        return ()

    @property
    def label(self) -> str:
        return self.symbol

    def combine(self, *values) -> float:
        """由子节点的值算出本节点的值"""
        return self.apply(*values)

    def postorder(self) -> Iterator["Expr"]:
        """后序遍历：先子节点（从左到右），最后本节点"""
        stack = [(self, False)]
        while stack:
            node, expanded = stack.pop()
            if expanded or not node.children:
                yield node
            else:
                stack.append((node, True))
                stack.extend((child, False) for child in reversed(node.children))

    def evaluate(self) -> float:
        values = []
        for node in self.postorder():
            start = len(values) - len(node.children)
            args = values[start:]
            del values[start:]
            values.append(node.combine(*args))
        return values[0]

    def undo(self) -> Tuple["Expr", ...]:
        """只拆一层：返回直接子节点（按操作数顺序），数字返回空元组"""
        return self.children

    def __str__(self):
        # 后缀形式：先子节点，最后操作符
        return " ".join(node.label for node in self.postorder())


@dataclass(frozen=True)
class Number(Expr):
    value: float

    @property
    def label(self):
        return format_number(self.value)

    def combine(self) -> float:
        return float(self.value)


@dataclass(frozen=True)
class BinaryExpr(Expr):
    left: Expr
    right: Expr

    @property
    def children(self):
        return (self.left, self.right)

    @staticmethod
    def apply(x, y):
        raise NotImplementedError


@dataclass(frozen=True)
class Add(BinaryExpr):
    symbol = "+"
    apply = staticmethod(Operators.add)


@dataclass(frozen=True)
class Subtract(BinaryExpr):
    symbol = "-"
    apply = staticmethod(Operators.sub)


@dataclass(frozen=True)
class Multiply(BinaryExpr):
    symbol = "*"
    apply = staticmethod(Operators.mul)


@dataclass(frozen=True)
class Divide(BinaryExpr):
    symbol = "/"
    apply = staticmethod(Operators.div)


@dataclass(frozen=True)
class Power(BinaryExpr):
    symbol = "^"
    apply = staticmethod(Operators.power)

    @property
    def base(self):
        return self.left

    @property
    def exponent(self):
        return self.right


@dataclass(frozen=True)
class Sqrt(Expr):
    symbol = "sqrt"
    operand: Expr

    @property
    def children(self):
        return (self.operand,)

    apply = staticmethod(Operators.sqrt)


# 标签名 -> 节点类，序列化时使用
EXPR_TYPES = {cls.__name__: cls for cls in (Number, Add, Subtract, Multiply, Divide, Power, Sqrt)}
