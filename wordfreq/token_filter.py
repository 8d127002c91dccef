"""
分词过滤器
过滤掉：长度不超过1的分词、标点符号、字母串/代码
"""
import logging
from typing import Callable, Iterable, List, Optional, Tuple

from config import FilterConfig
from models import TaggedToken

logger = logging.getLogger(__name__)


Rule = Tuple[Callable[[TaggedToken], bool], str]


def _rules(punctuation_prefix: str = None, symbol_tag: str = None) -> List[Rule]:
    prefix = FilterConfig.PUNCTUATION_TAG_PREFIX if punctuation_prefix is None else punctuation_prefix
    symbol = FilterConfig.SYMBOL_TAG if symbol_tag is None else symbol_tag
    # 空标记不参与匹配
    return [
        (lambda t: len(t.text.strip()) < FilterConfig.MIN_TOKEN_LENGTH, "too_short"),
        (lambda t: bool(prefix) and t.tag.startswith(prefix), "punctuation"),
        (lambda t: bool(symbol) and t.tag == symbol, "symbol"),
    ]


def _first_reason(token: TaggedToken, rules: List[Rule]) -> Optional[str]:
    # 按顺序匹配，返回第一条命中的原因
    for condition, reason in rules:
        if condition(token):
            return reason
    return None


def filter_reason(
    token: TaggedToken,
    punctuation_prefix: str = None,
    symbol_tag: str = None,
) -> Optional[str]:
    """
    返回分词被过滤的原因

    Args:
        token: 分词
        punctuation_prefix: 标点符号类词性前缀，默认读取 FilterConfig
        symbol_tag: 字母串/代码类词性，默认读取 FilterConfig

    Returns:
        "too_short" / "punctuation" / "symbol"，保留时返回 None
    """
    return _first_reason(token, _rules(punctuation_prefix, symbol_tag))


def filter_tokens(
    tokens: Iterable[TaggedToken],
    punctuation_prefix: str = None,
    symbol_tag: str = None,
) -> List[TaggedToken]:
    """
    过滤噪声分词，保持原有顺序

    Args:
        tokens: 分词序列
        punctuation_prefix: 标点符号类词性前缀
        symbol_tag: 字母串/代码类词性

    Returns:
        过滤后的分词列表
    """
    rules = _rules(punctuation_prefix, symbol_tag)
    kept = []
    dropped = 0
    for token in tokens:
        if _first_reason(token, rules) is None:
            kept.append(token)
        else:
            dropped += 1
    logger.debug(f"Token filter kept {len(kept)}, dropped {dropped}")
    return kept
