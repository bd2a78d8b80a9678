"""计算器模块 - 带缓存的中缀表达式求值和批量处理"""
from .expression_calculator import ExpressionCalculator, result_line

__all__ = ['ExpressionCalculator', 'result_line']
