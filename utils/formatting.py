"""utils/formatting.py"""
import math

# 超过该值的整数改用科学计数法，避免 int(1e300) 打印出二进制误差位
MAX_PLAIN_INTEGER = 1e16


def format_number(value):
    """
    把浮点数渲染成可以重新解析的最短文本：
    - 整数值不带小数部分 (4.0 -> "4", -0.0 -> "-0")
    - 其他有限值使用 repr 的最短往返表示
    - 非有限值: inf / -inf / NaN
    """
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if value.is_integer() and abs(value) < MAX_PLAIN_INTEGER:
        if value == 0 and math.copysign(1.0, value) < 0:
            return "-0"
        return str(int(value))
    return repr(value)


def format_values(values, sep=" "):
    """多个结果拼接成一行"""
    return sep.join(format_number(v) for v in values)
