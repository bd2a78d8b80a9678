"""中缀表达式转后缀表达式 (shunting-yard)"""
import logging

from config.config import CONVERTER_CONFIG
from core.exceptions import MalformedExpression
from core.token_system import (
    OPENING_BRACKET, CLOSING_BRACKET, OPERATOR_DEFINITIONS, Associativity,
    Token, TokenType, PostfixValidator, is_number_char, is_operator, precedence
)

logger = logging.getLogger(__name__)


class InfixConverter:
    """将中缀表达式逐字符扫描转换为后缀Token序列"""

    @staticmethod
    def _should_pop(top, incoming, right_associative_power):
        """栈顶操作符是否需要先输出"""
        if top.type != TokenType.OPERATOR:
            return False
        associativity = OPERATOR_DEFINITIONS[incoming].associativity
        if right_associative_power and incoming == '^':
            associativity = Associativity.RIGHT
        if associativity == Associativity.RIGHT:
            return top.precedence > precedence(incoming)
        return top.precedence >= precedence(incoming)

    @staticmethod
    def to_postfix(expression, strict=None, right_associative_power=None):
        """
        Args:
            expression: 中缀表达式字符串
            strict: 是否启用严格校验（默认读取配置）
            right_associative_power: '^' 是否按右结合处理（默认读取配置）
        Returns:
            后缀Token列表
        """
        if strict is None:
            strict = CONVERTER_CONFIG['strict']
        if right_associative_power is None:
            right_associative_power = CONVERTER_CONFIG['right_associative_power']

        output = []  # 最终输出
        stack = []  # 操作符栈
        pending = []  # 当前正在累积的数字字符
        pending_start = None

        def flush_number():
            nonlocal pending_start
            if pending:
                output.append(Token.number(''.join(pending), expression, pending_start))
                pending.clear()
                pending_start = None

        for position, character in enumerate(expression):
            # 数字、字母或'.'：与前一个数字字符连续时属于同一个数字
            if is_number_char(character):
                if not pending:
                    pending_start = position
                pending.append(character)
                continue

            flush_number()

            if character.isspace():
                continue

            if character == OPENING_BRACKET:
                stack.append(Token.paren(character))

            elif character == CLOSING_BRACKET:
                # 弹出直到遇到'('
                while stack and stack[-1].type != TokenType.OPEN_PAREN:
                    output.append(stack.pop())
                if not stack:
                    logger.error(f"Unbalanced ')' at position {position} in {expression!r}")
                    raise MalformedExpression(
                        f"Unbalanced closing bracket at position {position}", expression, position
                    )
                stack.pop()  # 丢弃'('

            elif is_operator(character):
                while stack and InfixConverter._should_pop(stack[-1], character, right_associative_power):
                    output.append(stack.pop())
                stack.append(Token.operator(character))

            else:
                if strict:
                    raise MalformedExpression(
                        f"Unsupported character {character!r} at position {position}", expression, position
                    )
                logger.warning(f"Skipping unsupported character {character!r} at position {position}")

        flush_number()

        while stack:
            token = stack.pop()
            if token.type == TokenType.OPEN_PAREN:
                if strict:
                    raise MalformedExpression("Unclosed opening bracket", expression)
                logger.warning(f"Dropping unclosed '(' in {expression!r}")
                continue
            output.append(token)

        if strict and not PostfixValidator.is_complete_expression(output):
            stack_size = PostfixValidator.calculate_stack_size(output)
            if not output:
                reason = "Empty expression"
            elif stack_size < 0:
                reason = "Operator is missing an operand"
            else:
                reason = f"Expected one result, postfix leaves {stack_size} operands"
            raise MalformedExpression(reason, expression)

        logger.debug(f"{expression!r} -> {format_postfix(output)!r}")
        return output


def format_postfix(token_sequence, split_char=None):
    """后缀Token列表 -> 字符串，每个token后跟一个分隔符"""
    if split_char is None:
        split_char = CONVERTER_CONFIG['split_char']
    return ''.join(f"{token.text}{split_char}" for token in token_sequence)


def to_postfix(expression, strict=None, right_associative_power=None):
    return InfixConverter.to_postfix(expression, strict, right_associative_power)


def to_postfix_string(expression, strict=None, right_associative_power=None):
    return format_postfix(InfixConverter.to_postfix(expression, strict, right_associative_power))
