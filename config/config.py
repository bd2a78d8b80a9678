"""配置文件"""

# 中缀转后缀参数
CONVERTER_CONFIG = {
    "split_char": " ",  # 后缀输出中token之间的分隔符
    "strict": True,  # 检查未闭合的'('、非法字符和缺少操作数的操作符
    "right_associative_power": False,  # False: 2^3^2 == (2^3)^2 == 64
}

# 后缀求值参数
EVALUATOR_CONFIG = {
    "unknown_operator_result": -1.0,  # 未知操作符返回的哨兵值
}

# 计算器门面参数
CALCULATOR_CONFIG = {
    "cache_size": 1000,
}

# 示例表达式
DEMO_CONFIG = {
    "sample_expressions": [
        "(250+50)*(5-4)",
        "(50*2)-(25+5)/3",
        "3+4*5/6",
        "3/2+0.5*1.4",
        "(((24/0.40)/15)+((25/0.40)/15)+(0.95*15))/45",
    ],
}

# 日志配置
LOGGING_CONFIG = {
    "level": "INFO",
    "format": '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
}


# 验证配置
def validate_config():
    """验证配置的合理性"""
    assert isinstance(CONVERTER_CONFIG["right_associative_power"], bool), "right_associative_power必须是布尔值"
    assert isinstance(CONVERTER_CONFIG["strict"], bool), "strict必须是布尔值"
    assert len(CONVERTER_CONFIG["split_char"]) == 1 and CONVERTER_CONFIG["split_char"].isspace(), \
        "分隔符必须是单个空白字符"
    assert CALCULATOR_CONFIG["cache_size"] > 0, "缓存大小必须为正数"
    assert DEMO_CONFIG["sample_expressions"], "至少需要一个示例表达式"
    return True
