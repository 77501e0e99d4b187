"""calc/session.py - 交互式会话：先在副本上试算，出错时回到上一个有效状态"""
import logging

from calc.errors import CalcError
from calc.rpn_evaluator import Calc, Format
from config.config import CALC_CONFIG
from utils.formatting import format_values

logger = logging.getLogger(__name__)


class CalculatorSession:
    def __init__(self, calc=None, history_limit=None):
        self.calc = calc if calc is not None else Calc.empty()
        self.history_limit = history_limit if history_limit is not None else CALC_CONFIG["history_limit"]
        self.output = format_values(self.calc.evaluate_all())
        self.history = []
        self.error = None

    def submit(self, text, infix=False):
        """
        处理一次输入。
        Returns:
            True 表示输入被接受；False 表示出错，会话保持上一个有效状态
        """
        fmt = Format.INFIX if infix else Format.POSTFIX
        logger.info(f"{fmt.value.capitalize()}: {text}")

        calc = self.calc.clone()
        try:
            calc.input(text, fmt)
        except CalcError as e:
            logger.error(f"Invalid input: {e}")
            self.error = str(e)
            return False

        self.calc = calc
        self.output = format_values(calc.evaluate_all())
        self.history.insert(0, str(calc))
        if self.history_limit:
            del self.history[self.history_limit:]
        self.error = None
        return True

    def clear(self):
        logger.warning("Clear!")
        self.calc = Calc.empty()
        self.output = ""
        self.history = []
        self.error = None
