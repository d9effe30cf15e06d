"""配置文件"""

# 表达式转换参数
NOTATION_CONFIG = {
    "strict_input": True,  # 拒绝数字、+-*/、括号以外的字符
    "allowed_characters": "0123456789+-*/()",
    "separator": " ",  # 后缀串 token 分隔符
}

# 批量求值参数
BATCH_CONFIG = {
    "input_column": "infix",
    "comment_prefix": "#",
    "output_columns": ["infix", "postfix", "result", "status", "error_kind", "error"],
}

# 日志
LOGGING_CONFIG = {
    "level": "INFO",
    "format": '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
}


# 验证配置
def validate_config():
    """验证配置的合理性"""
    allowed = set(NOTATION_CONFIG["allowed_characters"])
    assert set("0123456789") <= allowed, "数字必须在允许字符中"
    assert set("+-*/()") <= allowed, "操作符和括号必须在允许字符中"
    assert not any(c.isspace() for c in allowed), "表达式内不允许空白字符"
    assert NOTATION_CONFIG["separator"] == " ", "后缀串以单个空格分隔"
    assert BATCH_CONFIG["input_column"] in BATCH_CONFIG["output_columns"]
    assert LOGGING_CONFIG["level"] in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
    return True
