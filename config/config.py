"""配置文件"""

# 计算器参数
CALC_CONFIG = {
    "default_format": "postfix",  # 'postfix' 或 'infix'
    "history_limit": 100,  # 会话历史条数上限，None 表示不限
    "prompt": "calc> ",
}

# 日志
LOGGING_CONFIG = {
    "level": "INFO",
    "format": '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
}

# JSON 互换格式
SERIALIZATION_CONFIG = {
    "tag_field": "type",
    "content_field": "values",
    "indent": None,
}


# 验证配置
def validate_config():
    """验证配置的合理性"""
    assert CALC_CONFIG["default_format"] in ("postfix", "infix"), "输入格式只能是 postfix 或 infix"
    limit = CALC_CONFIG["history_limit"]
    assert limit is None or (isinstance(limit, int) and limit > 0), "history_limit 必须是正整数或 None"
    assert LOGGING_CONFIG["level"] in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
    assert SERIALIZATION_CONFIG["tag_field"] != SERIALIZATION_CONFIG["content_field"], "标签字段与内容字段不能同名"
