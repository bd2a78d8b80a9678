"""核心模块 - Token系统、中缀转换器、RPN评估器和操作符"""
from .exceptions import (
    ExpressionError, MalformedExpression, ParseNumberError, InvalidExpression
)
from .token_system import (
    TokenType, Token, Associativity, OPERATOR_DEFINITIONS, NOT_AN_OPERATOR,
    precedence, PostfixValidator
)
from .operators import Operators
from .converter import InfixConverter, to_postfix, to_postfix_string, format_postfix
from .rpn_evaluator import RPNEvaluator, evaluate, parse_postfix

__all__ = [
    'ExpressionError', 'MalformedExpression', 'ParseNumberError', 'InvalidExpression',
    'TokenType', 'Token', 'Associativity', 'OPERATOR_DEFINITIONS', 'NOT_AN_OPERATOR',
    'precedence', 'PostfixValidator', 'Operators',
    'InfixConverter', 'to_postfix', 'to_postfix_string', 'format_postfix',
    'RPNEvaluator', 'evaluate', 'parse_postfix'
]
