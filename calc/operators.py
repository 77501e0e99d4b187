"""calc/operators.py"""
import numpy as np


class Operators:
    """所有算术操作符的静态方法集合（float64, IEEE-754 语义）"""

    # 二元操作符========================================
    @staticmethod
    def add(operand1, operand2):
        """加法操作符"""
        with np.errstate(all='ignore'):
            return float(np.float64(operand1) + np.float64(operand2))

    @staticmethod
    def sub(operand1, operand2):
        """减法操作符"""
        with np.errstate(all='ignore'):
            return float(np.float64(operand1) - np.float64(operand2))

    @staticmethod
    def mul(operand1, operand2):
        """乘法操作符（溢出得到 inf）"""
        with np.errstate(all='ignore'):
            return float(np.float64(operand1) * np.float64(operand2))

    @staticmethod
    def div(operand1, operand2):
        """除法操作符：除零得到 ±inf 或 NaN，不抛异常"""
        with np.errstate(all='ignore'):
            return float(np.true_divide(np.float64(operand1), np.float64(operand2)))

    @staticmethod
    def power(base, exponent):
        """幂运算：负底数的分数次幂得到 NaN，而不是复数"""
        with np.errstate(all='ignore'):
            return float(np.power(np.float64(base), np.float64(exponent)))

    # 一元操作符====================
    @staticmethod
    def sqrt(operand):
        """实数平方根，负数得到 NaN"""
        with np.errstate(invalid='ignore'):
            return float(np.sqrt(np.float64(operand)))
