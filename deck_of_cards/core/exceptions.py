"""
牌组异常定义
牌组耗尽不是异常，deal_card以None表示，这里只定义真正的错误
"""


class DeckError(Exception):
    """牌组基础异常类"""
    pass


class InvalidCardError(DeckError, ValueError):
    """无效卡牌表示异常（字符串或索引无法解析）"""
    pass


class DeckConfigError(DeckError):
    """牌组配置错误异常"""
    pass
