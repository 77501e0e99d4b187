"""utils/serialization.py - 表达式树/计算器状态的 JSON 互换格式

标签 + 内容（adjacently tagged）:
    Number:  {"type": "Number", "values": 2.0}
    一元:     {"type": "Sqrt", "values": <expr>}
    二元:     {"type": "Add", "values": [<left>, <right>]}
    计算器:   {"memory": [<expr>, ...]}
"""
import json
from dataclasses import dataclass, field
from typing import List

from calc.expression import EXPR_TYPES, BinaryExpr, Expr, Number, Sqrt
from calc.rpn_evaluator import Calc, Format
from config.config import SERIALIZATION_CONFIG

TAG = SERIALIZATION_CONFIG["tag_field"]
CONTENT = SERIALIZATION_CONFIG["content_field"]


class SerializationError(ValueError):
    pass


def expr_to_dict(expr):
    if isinstance(expr, Number):
        content = float(expr.value)
    elif isinstance(expr, BinaryExpr):
        content = [expr_to_dict(expr.left), expr_to_dict(expr.right)]
    elif isinstance(expr, Sqrt):
        content = expr_to_dict(expr.operand)
    else:
        raise SerializationError(f"Cannot serialize {type(expr).__name__}")
    return {TAG: type(expr).__name__, CONTENT: content}


def expr_from_dict(data):
    if not isinstance(data, dict) or TAG not in data or CONTENT not in data:
        raise SerializationError(f"Expected an object with '{TAG}' and '{CONTENT}' fields")

    name = data[TAG]
    content = data[CONTENT]
    cls = EXPR_TYPES.get(name)
    if cls is None:
        raise SerializationError(f"Unknown expression type: {name}")

    if cls is Number:
        if isinstance(content, bool) or not isinstance(content, (int, float)):
            raise SerializationError(f"Number expects a numeric value, got {content!r}")
        return Number(float(content))
    if cls is Sqrt:
        return Sqrt(expr_from_dict(content))
    if not isinstance(content, list) or len(content) != 2:
        raise SerializationError(f"{name} expects exactly two operands")
    return cls(expr_from_dict(content[0]), expr_from_dict(content[1]))


def calc_to_dict(calc):
    return {"memory": [expr_to_dict(expr) for expr in calc.memory]}


def calc_from_dict(data):
    if not isinstance(data, dict) or not isinstance(data.get("memory"), list):
        raise SerializationError("Expected an object with a 'memory' list")
    return Calc([expr_from_dict(item) for item in data["memory"]])


def dumps(obj, indent=None):
    """Calc 或 Expr -> JSON 文本（非有限值写成 NaN/Infinity）"""
    if indent is None:
        indent = SERIALIZATION_CONFIG["indent"]
    if isinstance(obj, Calc):
        data = calc_to_dict(obj)
    elif isinstance(obj, Expr):
        data = expr_to_dict(obj)
    else:
        raise SerializationError(f"Cannot serialize {type(obj).__name__}")
    return json.dumps(data, indent=indent)


def loads(text):
    """JSON 文本 -> Calc（带 memory 字段）或 Expr"""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise SerializationError(f"Invalid JSON: {e}") from e
    if isinstance(data, dict) and "memory" in data:
        return calc_from_dict(data)
    return expr_from_dict(data)


# ================== HTTP 边界上的请求/响应 ==================

@dataclass
class CalcRequest:
    input: str
    infix: bool = False

    @classmethod
    def from_dict(cls, data):
        if not isinstance(data, dict) or not isinstance(data.get("input"), str):
            raise SerializationError("Request needs a string 'input' field")
        infix = data.get("infix")
        return cls(input=data["input"], infix=bool(infix) if infix is not None else False)


@dataclass
class CalcResponse:
    output: str
    memory: List[Expr] = field(default_factory=list)

    def to_dict(self):
        return {"output": self.output, "memory": [expr_to_dict(e) for e in self.memory]}


def handle_request(request):
    """新建计算器处理一次请求；CalcError 交给调用方"""
    calc = Calc.empty()
    calc.input(request.input, Format.INFIX if request.infix else Format.POSTFIX)
    return CalcResponse(output=str(calc), memory=list(calc.memory))
