"""core/token_system.py"""
from enum import Enum
from typing import NamedTuple, Optional

from core.exceptions import ParseNumberError

NOT_AN_OPERATOR = -1
OPENING_BRACKET = '('
CLOSING_BRACKET = ')'


class Associativity(Enum):
    LEFT = "left"
    RIGHT = "right"


class TokenType(Enum):
    NUMBER = "number"  # 操作数
    OPERATOR = "operator"  # 二元操作符
    OPEN_PAREN = "open_paren"
    CLOSE_PAREN = "close_paren"


class OperatorSpec(NamedTuple):
    symbol: str
    precedence: int
    associativity: Associativity = Associativity.LEFT
    arity: int = 2


# 操作符定义字典（BEDMAS: 数字越大优先级越高）
# 注意：'^' 也是左结合，2^3^2 == (2^3)^2
OPERATOR_DEFINITIONS = {
    '+': OperatorSpec('+', 1),
    '-': OperatorSpec('-', 1),
    '*': OperatorSpec('*', 2),
    '/': OperatorSpec('/', 2),
    '^': OperatorSpec('^', 3),
}


def precedence(character):
    """
    返回操作符优先级
    3: 乘方
    2: 乘除
    1: 加减
    -1: 不支持的字符
    """
    spec = OPERATOR_DEFINITIONS.get(character)
    return spec.precedence if spec else NOT_AN_OPERATOR


def is_operator(character):
    return precedence(character) > 0


def is_number_char(character):
    """数字、字母和小数点都视为数字字面量的一部分"""
    return character.isalnum() or character == '.'


class Token(NamedTuple):
    type: TokenType
    text: str
    value: Optional[float] = None

    @classmethod
    def number(cls, text, expression=None, position=None):
        try:
            value = float(text)
        except ValueError as e:
            raise ParseNumberError(text, expression, position) from e
        return cls(TokenType.NUMBER, text, value)

    @classmethod
    def operator(cls, symbol):
        if not is_operator(symbol):
            raise ValueError(f"Unsupported operator: {symbol!r}")
        return cls(TokenType.OPERATOR, symbol)

    @classmethod
    def paren(cls, char):
        if char == OPENING_BRACKET:
            return cls(TokenType.OPEN_PAREN, char)
        if char == CLOSING_BRACKET:
            return cls(TokenType.CLOSE_PAREN, char)
        raise ValueError(f"Not a bracket: {char!r}")

    @property
    def precedence(self):
        return precedence(self.text) if self.type == TokenType.OPERATOR else NOT_AN_OPERATOR

    def __str__(self):
        return self.text


class PostfixValidator:
    @staticmethod
    def calculate_stack_size(token_sequence):
        """
        模拟栈深度；出现下溢时返回 -1
        括号token不应出现在后缀序列中，视为无效
        """
        stack_size = 0
        for token in token_sequence:
            if token.type == TokenType.NUMBER:
                stack_size += 1
            elif token.type == TokenType.OPERATOR:
                arity = OPERATOR_DEFINITIONS[token.text].arity
                if stack_size < arity:
                    return -1
                stack_size = stack_size - arity + 1
            else:
                return -1
        return stack_size

    @staticmethod
    def is_complete_expression(token_sequence):
        """完整表达式应该正好留下1个结果"""
        if not token_sequence:
            return False
        return PostfixValidator.calculate_stack_size(token_sequence) == 1
