import pandas as pd
import numpy as np
import logging
from collections import OrderedDict
from typing import Iterable, List, Optional

from config.config import CALCULATOR_CONFIG, CONVERTER_CONFIG
from core import (
    InfixConverter, RPNEvaluator, ExpressionError, Token, format_postfix
)

logger = logging.getLogger(__name__)


def result_line(expression, postfix, result):
    """"<input> ~ <postfix> == <result>"，去掉后缀末尾的分隔符"""
    return f"{expression} ~ {postfix.rstrip()} == {result}"


class ExpressionCalculator:

    def __init__(self, cache_size=None, strict=None, right_associative_power=None):
        self.converter = InfixConverter
        self.rpn_evaluator = RPNEvaluator
        self.strict = CONVERTER_CONFIG['strict'] if strict is None else strict
        self.right_associative_power = (CONVERTER_CONFIG['right_associative_power']
                                        if right_associative_power is None else right_associative_power)
        # 使用有限大小的OrderedDict实现LRU缓存
        self.cache_size = CALCULATOR_CONFIG['cache_size'] if cache_size is None else cache_size
        if self.cache_size < 1:
            raise ValueError(f"cache_size must be at least 1, got {self.cache_size}")
        self._postfix_cache = OrderedDict()
        self._cache_hits = 0
        self._cache_misses = 0

    def _manage_cache(self):
        """管理缓存大小"""
        while len(self._postfix_cache) > self.cache_size:
            # 删除最久未使用的条目
            self._postfix_cache.popitem(last=False)

    def clear_cache(self):
        """清空缓存（供外部调用）"""
        self._postfix_cache.clear()
        logger.info(f"Cache cleared. Hits: {self._cache_hits}, Misses: {self._cache_misses}")
        self._cache_hits = 0
        self._cache_misses = 0

    @property
    def cache_info(self):
        return {'hits': self._cache_hits, 'misses': self._cache_misses, 'size': len(self._postfix_cache)}

    def to_postfix(self, expression: str) -> List[Token]:
        if expression in self._postfix_cache:
            # 移到末尾（最近使用）
            self._postfix_cache.move_to_end(expression)
            self._cache_hits += 1
            logger.debug(f"Cache hit for expression: {expression[:50]}")
            return list(self._postfix_cache[expression])

        self._cache_misses += 1
        token_sequence = self.converter.to_postfix(
            expression, strict=self.strict, right_associative_power=self.right_associative_power
        )
        # Token不可变，缓存元组即可
        self._postfix_cache[expression] = tuple(token_sequence)
        self._manage_cache()
        return token_sequence

    def to_postfix_string(self, expression: str) -> str:
        return format_postfix(self.to_postfix(expression))

    def evaluate(self, expression: str) -> float:
        """中缀表达式 -> 后缀 -> 数值"""
        return self.rpn_evaluator.evaluate(self.to_postfix(expression))

    def format_result_line(self, expression: str) -> str:
        """生成 "<input> ~ <postfix> == <result>" 格式的一行"""
        token_sequence = self.to_postfix(expression)
        result = self.rpn_evaluator.evaluate(token_sequence)
        return result_line(expression, format_postfix(token_sequence), result)

    def evaluate_many(self, expressions: Iterable[str]) -> pd.DataFrame:
        """
        批量求值，单个表达式失败不会中断整批
        Returns:
            DataFrame，列为 expression / postfix / result / error
        """
        rows = []
        for expression in expressions:
            row = {'expression': expression, 'postfix': None, 'result': np.nan, 'error': None}
            try:
                token_sequence = self.to_postfix(expression)
                row['postfix'] = format_postfix(token_sequence)
                row['result'] = self.rpn_evaluator.evaluate(token_sequence)
            except ExpressionError as e:
                logger.warning(f"Failed to evaluate {expression[:50]!r}: {e}")
                row['error'] = str(e)
            rows.append(row)

        frame = pd.DataFrame(rows, columns=['expression', 'postfix', 'result', 'error'])
        frame['result'] = frame['result'].astype(float)
        logger.info(f"Evaluated {len(frame)} expressions, {int(frame['error'].notna().sum())} failed")
        return frame

    def failed_rows(self, frame: pd.DataFrame) -> Optional[pd.DataFrame]:
        failed = frame[frame['error'].notna()]
        return failed if not failed.empty else None
