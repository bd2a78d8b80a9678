"""RPN表达式求值器 - 调用统一的Operators类"""
import logging

from core.converter import format_postfix
from core.exceptions import InvalidExpression
from core.token_system import Token, TokenType, is_operator
from core.operators import Operators

logger = logging.getLogger(__name__)


def parse_postfix(postfix):
    """
    将后缀字符串解析为Token序列
    Args:
        postfix: 以空白分隔的后缀表达式，例如 "250 50 + 5 4 - * "
    Returns:
        Token列表
    """
    token_sequence = []
    for lexeme in postfix.split():
        if is_operator(lexeme):
            token_sequence.append(Token.operator(lexeme))
        else:
            # 非数字的字面量（如字母）在此处报错
            token_sequence.append(Token.number(lexeme, postfix))
    return token_sequence


class RPNEvaluator:
    """评估RPN表达式的值"""

    @staticmethod
    def evaluate(token_sequence):
        """
        Args:
            token_sequence: Token序列，或后缀表达式字符串
        Returns:
            float结果
        """
        if isinstance(token_sequence, str):
            postfix = token_sequence
            token_sequence = parse_postfix(token_sequence)
        else:
            token_sequence = list(token_sequence)
            postfix = format_postfix(token_sequence)

        stack = []

        for token in token_sequence:
            if token.type == TokenType.NUMBER:
                stack.append(token.value)

            elif token.type == TokenType.OPERATOR:
                if len(stack) < 2:
                    logger.error(f"Insufficient operands for {token.text} in {postfix!r}")
                    raise InvalidExpression(postfix, f"insufficient operands for '{token.text}'")
                a = stack.pop()  # 右操作数
                b = stack.pop()  # 左操作数
                stack.append(Operators.solve(token.text, b, a))

            else:
                logger.error(f"Unexpected {token.type.value} token in {postfix!r}")
                raise InvalidExpression(postfix, f"unexpected bracket '{token.text}'")

        if len(stack) == 0:
            logger.error("Empty stack after evaluation")
            raise InvalidExpression(postfix, "no result")
        if len(stack) > 1:
            logger.error(f"Stack has {len(stack)} elements after evaluation, expected 1")
            raise InvalidExpression(postfix, f"{len(stack)} operands left on stack")
        return float(stack[0])


def evaluate(postfix):
    return RPNEvaluator.evaluate(postfix)


