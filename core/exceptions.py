"""core/exceptions.py"""


class ExpressionError(Exception):
    """表达式处理错误的基类"""

    def __init__(self, message, expression=None):
        super().__init__(message)
        self.expression = expression


class MalformedExpression(ExpressionError):
    """中缀表达式格式错误（括号不匹配、非法字符等）"""

    def __init__(self, message, expression=None, position=None):
        super().__init__(message, expression)
        self.position = position


class ParseNumberError(MalformedExpression):
    """数字字面量无法解析为浮点数"""

    def __init__(self, lexeme, expression=None, position=None):
        super().__init__(f"Cannot parse number: {lexeme!r}", expression, position)
        self.lexeme = lexeme


class InvalidExpression(ExpressionError):
    """后缀表达式求值失败（操作数不足或结果栈大小不为1）"""

    def __init__(self, postfix, reason=None):
        message = f"Invalid expression provided: {postfix}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message, postfix)
        self.reason = reason
