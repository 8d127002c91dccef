"""
词频聚合
"""
import logging
from typing import Dict, Iterable, List

from models import TaggedToken, WordFrequency

logger = logging.getLogger(__name__)


def aggregate(tokens: Iterable[TaggedToken]) -> List[WordFrequency]:
    """
    根据分词集合统计词频

    Args:
        tokens: 分词序列（通常为过滤后的分词）

    Returns:
        WordFrequency 列表，按频次降序排列；
        排序只比较频次，同频次的相对顺序不作保证
    """
    counts: Dict[str, int] = {}
    for token in tokens:
        counts[token.text] = counts.get(token.text, 0) + 1

    frequencies = [WordFrequency(word=word, count=count) for word, count in counts.items()]
    # 稳定排序，只按频次降序
    frequencies.sort(key=lambda wf: wf.count, reverse=True)

    logger.debug(f"Aggregated {len(frequencies)} distinct words")
    return frequencies
