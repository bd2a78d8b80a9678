"""core/operators.py"""
import numpy as np
import logging

from config.config import EVALUATOR_CONFIG

logger = logging.getLogger(__name__)


class Operators:
    """所有二元操作符的静态方法集合，统一使用float64 (IEEE-754) 语义"""

    @staticmethod
    def add(operand1, operand2):
        """加法操作符"""
        return np.float64(operand1) + np.float64(operand2)

    @staticmethod
    def sub(operand1, operand2):
        """减法操作符"""
        return np.float64(operand1) - np.float64(operand2)

    @staticmethod
    def mul(operand1, operand2):
        """乘法操作符"""
        return np.float64(operand1) * np.float64(operand2)

    @staticmethod
    def div(operand1, operand2):
        """除法：除零得到 inf/nan 而不是异常"""
        return np.divide(np.float64(operand1), np.float64(operand2))

    @staticmethod
    def pow(operand1, operand2):
        """乘方：负底数配小数指数得到 nan"""
        return np.power(np.float64(operand1), np.float64(operand2))

    @staticmethod
    def solve(operator, operand1, operand2):
        """
        Args:
            operator: 操作符字符
            operand1: 左操作数
            operand2: 右操作数
        Returns:
            float结果；未知操作符返回固定哨兵值
        """
        op_method = _SYMBOL_TO_METHOD.get(operator)
        if op_method is None:
            logger.debug(f"Unknown operator {operator!r}, returning sentinel")
            return float(EVALUATOR_CONFIG['unknown_operator_result'])
        with np.errstate(all='ignore'):
            return float(op_method(operand1, operand2))


_SYMBOL_TO_METHOD = {
    '+': Operators.add,
    '-': Operators.sub,
    '*': Operators.mul,
    '/': Operators.div,
    '^': Operators.pow,
}
