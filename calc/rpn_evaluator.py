"""RPN栈式计算器 - 由 token 构建表达式树并求值"""
import logging
from enum import Enum

from calc.converter import to_postfix
from calc.errors import MissingOperand, MissingOperands, NothingToUndo, UnknownToken
from calc.expression import Add, Divide, Multiply, Number, Power, Sqrt, Subtract
from calc.token_system import TokenType, tokenize_infix, tokenize_postfix

logger = logging.getLogger(__name__)


class Format(Enum):
    INFIX = "infix"
    POSTFIX = "postfix"

    @classmethod
    def parse(cls, name):
        """'infix' / 'postfix'（不区分大小写）-> Format"""
        try:
            return cls(str(name).strip().lower())
        except ValueError:
            raise ValueError(f"Unknown input format: {name}") from None


# 二元操作符 token -> 表达式节点类
BINARY_NODES = {
    TokenType.PLUS: Add,
    TokenType.MINUS: Subtract,
    TokenType.STAR: Multiply,
    TokenType.SLASH: Divide,
    TokenType.CARET: Power,
}


class Calc:
    """
    栈式计算器。memory 是表达式节点的 LIFO 栈：
    没有错误时，栈里恰好是尚未合并的顶层结果。
    """

    def __init__(self, memory=None):
        self._memory = list(memory or [])

    @classmethod
    def empty(cls):
        return cls()

    @classmethod
    def postfix(cls, text):
        calc = cls()
        calc.input(text, Format.POSTFIX)
        return calc

    @classmethod
    def infix(cls, text):
        calc = cls()
        calc.input(text, Format.INFIX)
        return calc

    @property
    def memory(self):
        return tuple(self._memory)

    def __len__(self):
        return len(self._memory)

    def clone(self):
        """复制栈，用于"先试再提交"的输入；节点不可变，可以共享"""
        return Calc(self._memory)

    def input(self, text, fmt=Format.POSTFIX):
        """
        处理一批输入，遇到第一个错误即停止。
        出错时之前 token 的效果保留；需要原子性的调用方应先 clone()。
        """
        fmt = fmt if isinstance(fmt, Format) else Format.parse(fmt)
        if fmt == Format.INFIX:
            tokens = to_postfix(tokenize_infix(text))
        else:
            tokens = tokenize_postfix(text)

        logger.debug(f"{fmt.value} input {text!r} -> {len(tokens)} tokens")
        for token in tokens:
            self.parse_token(token)

    feed = input

    def parse_token(self, token):
        """处理单个 token；失败时栈保持不变"""
        memory = self._memory

        if token.type in BINARY_NODES:
            if len(memory) == 0:
                raise MissingOperands()
            if len(memory) == 1:
                raise MissingOperand()
            y = memory.pop()
            x = memory.pop()
            memory.append(BINARY_NODES[token.type](x, y))

        elif token.type == TokenType.SQRT:
            if not memory:
                raise MissingOperand()
            memory.append(Sqrt(memory.pop()))

        elif token.type == TokenType.UNDO:
            if not memory:
                raise NothingToUndo()
            expr = memory.pop()
            memory.extend(expr.undo())

        elif token.type == TokenType.NUMBER:
            memory.append(Number(token.value))

        elif token.type == TokenType.UNKNOWN:
            logger.debug(f"Unknown token: {token.value!r}")
            raise UnknownToken(token.value)

        # 括号只对中缀转换有意义，这里忽略

    def evaluate_all(self):
        """按栈底到栈顶的顺序求值"""
        return [expr.evaluate() for expr in self._memory]

    def __str__(self):
        return " ".join(str(expr) for expr in self._memory)

    def __repr__(self):
        return f"Calc({str(self)!r})"

    def __eq__(self, other):
        # 只比较数值结果，不比较树的形状
        if not isinstance(other, Calc):
            return NotImplemented
        return self.evaluate_all() == other.evaluate_all()

    __hash__ = None


def new_engine():
    return Calc.empty()


def feed(engine, text, fmt=Format.POSTFIX):
    engine.input(text, fmt)


def render(engine):
    return str(engine)


def evaluate_all(engine):
    return engine.evaluate_all()
