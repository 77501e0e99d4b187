"""calc/token_system.py"""
import re
import sys
from enum import Enum

from utils.formatting import format_number


class TokenType(Enum):
    NUMBER = "number"
    PLUS = "plus"
    MINUS = "minus"
    SLASH = "slash"
    STAR = "star"
    CARET = "caret"
    SQRT = "sqrt"
    UNDO = "undo"
    GROUP_OPEN = "group_open"
    GROUP_CLOSE = "group_close"
    UNKNOWN = "unknown"


class Token:
    """不可变的 token，按 (type, value) 结构比较"""
    __slots__ = ("type", "value")

    def __init__(self, token_type, value=None):
        object.__setattr__(self, "type", token_type)
        object.__setattr__(self, "value", value)

    def __setattr__(self, name, value):
        raise AttributeError("Token is immutable")

    def __eq__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        return self.type == other.type and self.value == other.value

    def __hash__(self):
        return hash((self.type, self.value))

    def __repr__(self):
        if self.value is None:
            return f"Token({self.type.name})"
        return f"Token({self.type.name}, {self.value!r})"

    def __str__(self):
        if self.type == TokenType.NUMBER:
            return format_number(self.value)
        if self.type == TokenType.UNKNOWN:
            return self.value
        return SYMBOLS.get(self.type, "")


# 符号 -> Token（÷ 和 × 是 / 与 * 的别名）
TOKEN_DEFINITIONS = {
    '+': Token(TokenType.PLUS),
    '-': Token(TokenType.MINUS),
    '/': Token(TokenType.SLASH),
    '÷': Token(TokenType.SLASH),
    '*': Token(TokenType.STAR),
    '×': Token(TokenType.STAR),
    '^': Token(TokenType.CARET),
    # 函数
    'sqrt': Token(TokenType.SQRT),
    'undo': Token(TokenType.UNDO),
    # 分组
    '(': Token(TokenType.GROUP_OPEN),
    ')': Token(TokenType.GROUP_CLOSE),
}

# 渲染用的规范符号；UNDO 与括号渲染为空串
SYMBOLS = {
    TokenType.PLUS: '+',
    TokenType.MINUS: '-',
    TokenType.SLASH: '/',
    TokenType.STAR: '*',
    TokenType.CARET: '^',
    TokenType.SQRT: 'sqrt',
}

# 运算顺序；2 级空缺，留给以后的新层级
PRECEDENCE = {
    TokenType.NUMBER: 0,
    TokenType.UNKNOWN: 0,
    TokenType.UNDO: 0,
    TokenType.PLUS: 1,
    TokenType.MINUS: 1,
    TokenType.STAR: 3,
    TokenType.SLASH: 3,
    TokenType.CARET: 4,
    TokenType.SQRT: 4,
    TokenType.GROUP_OPEN: sys.maxsize,
    TokenType.GROUP_CLOSE: sys.maxsize,
}

BINARY_OPERATORS = frozenset({
    TokenType.PLUS, TokenType.MINUS, TokenType.SLASH, TokenType.STAR, TokenType.CARET,
})
UNARY_OPERATORS = frozenset({TokenType.SQRT})
OPERATORS = BINARY_OPERATORS | UNARY_OPERATORS
RIGHT_ASSOCIATIVE = frozenset({TokenType.CARET})

# 中缀输入的片段：数字串（可带小数部分）、字母串、或单个非空白符号
fragment_re = re.compile(r"""
    [0-9]+(?:\.[0-9]*)?  # digits [ decimal-point more-digits ]
  | \.[0-9]+             # or decimal-point digits
  | [a-zA-Z]+            # sequence of letters
  | \S                   # anything that didn't match the others
""", re.VERBOSE)


def parse_number(text):
    """按浮点字面量解析，失败返回 None"""
    if not text or '_' in text or text != text.strip():
        return None
    try:
        return float(text)
    except ValueError:
        return None


def precedence(token):
    return PRECEDENCE[token.type]


def classify(fragment):
    """把一个文本片段映射成 Token；从不抛异常"""
    token = TOKEN_DEFINITIONS.get(fragment)
    if token is not None:
        return token
    value = parse_number(fragment)
    if value is not None:
        return Token(TokenType.NUMBER, value)
    return Token(TokenType.UNKNOWN, fragment)


def scan_fragments(text):
    """中缀输入切分成片段: '2+2' -> ['2', '+', '2']"""
    return fragment_re.findall(text)


def split_postfix(text):
    """后缀输入只按空白切分"""
    return text.split()


def tokenize_infix(text):
    return [classify(fragment) for fragment in scan_fragments(text)]


def tokenize_postfix(text):
    return [classify(fragment) for fragment in split_postfix(text)]
