"""calc/errors.py"""


class CalcError(ValueError):
    """计算器错误基类，消息即用户可见的文本"""
    message = "Calculation error"

    def __init__(self, message=None):
        super().__init__(message or self.message)


class MissingOperand(CalcError):
    message = "Missing operand"


class MissingOperands(CalcError):
    message = "Missing operands"


class NothingToUndo(CalcError):
    message = "Nothing to undo"


class UnknownToken(CalcError):
    def __init__(self, token):
        self.token = token
        super().__init__(f"Unknown token: {token}")
