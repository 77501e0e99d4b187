"""计算器模块 - Token系统、中缀转换、表达式树和RPN栈式计算器"""
from .token_system import (
    TokenType, Token, TOKEN_DEFINITIONS, PRECEDENCE,
    classify, precedence, scan_fragments, split_postfix
)
from .converter import to_postfix, infix_to_postfix
from .operators import Operators
from .expression import Expr, Number, Add, Subtract, Multiply, Divide, Power, Sqrt
from .errors import CalcError, MissingOperand, MissingOperands, NothingToUndo, UnknownToken
from .rpn_evaluator import Calc, Format, new_engine, feed, render, evaluate_all
from .session import CalculatorSession

__all__ = [
    'TokenType', 'Token', 'TOKEN_DEFINITIONS', 'PRECEDENCE',
    'classify', 'precedence', 'scan_fragments', 'split_postfix',
    'to_postfix', 'infix_to_postfix', 'Operators',
    'Expr', 'Number', 'Add', 'Subtract', 'Multiply', 'Divide', 'Power', 'Sqrt',
    'CalcError', 'MissingOperand', 'MissingOperands', 'NothingToUndo', 'UnknownToken',
    'Calc', 'Format', 'new_engine', 'feed', 'render', 'evaluate_all',
    'CalculatorSession'
]
