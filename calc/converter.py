"""calc/converter.py - 中缀转后缀（shunting yard）"""
import logging

from calc.token_system import (
    TokenType, OPERATORS, RIGHT_ASSOCIATIVE, precedence, tokenize_infix
)

logger = logging.getLogger(__name__)


def _should_pop(top, token):
    """栈顶操作符是否要先于 token 输出"""
    if top.type == TokenType.GROUP_OPEN:
        return False
    # 等待中的 ^ 不会被任何新操作符挤出
    if top.type in RIGHT_ASSOCIATIVE:
        return False
    return precedence(top) >= precedence(token)


def to_postfix(tokens):
    """
    用 shunting yard 把中缀 token 序列重排成后缀顺序。

    See <http://en.wikipedia.org/wiki/Shunting_yard_algorithm>

    不抛异常：括号不匹配时静默降级，错误留给求值阶段。
    - 多余的 ')' 会把操作符栈全部弹出
    - 未闭合的 '(' 在结尾原样输出，求值时被忽略
    """
    # Output, in reverse Polish order
    out = []
    # Operator stack
    stack = []

    for token in tokens:
        if token.type == TokenType.GROUP_OPEN:
            stack.append(token)

        elif token.type == TokenType.GROUP_CLOSE:
            while stack:
                op = stack.pop()
                if op.type == TokenType.GROUP_OPEN:
                    break
                out.append(op)
            else:
                logger.debug("Unbalanced ')' drained the operator stack")

        elif token.type in OPERATORS:
            while stack and _should_pop(stack[-1], token):
                out.append(stack.pop())
            stack.append(token)

        else:
            # 数字、undo 以及未知 token 直接输出
            out.append(token)

    # Finally, pop off anything still on the stack
    while stack:
        out.append(stack.pop())

    return out


def render_tokens(tokens):
    """渲染 token 序列，跳过渲染为空串的 token"""
    return " ".join(text for text in map(str, tokens) if text)


def infix_to_postfix(text):
    """'2+2' -> '2 2 +'"""
    return render_tokens(to_postfix(tokenize_infix(text)))
