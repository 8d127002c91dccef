"""
基础文本相似度计算
最长公共子串（连续）与基于词集合/词频的相似度
"""
from typing import List, Optional, Set


def longest_common_substring(a: Optional[str], b: Optional[str]) -> Optional[str]:
    """
    最长公共子串（连续，非子序列）

    动态规划矩阵以 b 的位置为行、a 的位置为列，只保留上一行和当前行。
    多个等长最大值时取扫描中最先出现的一个。

    Args:
        a: 字符串A（矩阵横向）
        b: 字符串B（矩阵纵向）

    Returns:
        a 中的最长公共子串；任一参数为 None/空串，或没有任何相同字符时返回 None
    """
    if a is None or b is None:
        return None
    if a == "" or b == "":
        return None

    len1 = len(a)
    len2 = len(b)

    previous_row = [0] * len1
    current_row = [0] * len1
    max_len = 0
    # 最大值出现在第几列
    pos = 0

    for i in range(len2):
        ch = b[i]
        for j in range(len1):
            if ch == a[j]:
                # 第一列没有左上角元素
                if j == 0:
                    current_row[j] = 1
                else:
                    current_row[j] = previous_row[j - 1] + 1
                if current_row[j] > max_len:
                    max_len = current_row[j]
                    pos = j
            else:
                current_row[j] = 0
        for k in range(len1):
            previous_row[k] = current_row[k]
            current_row[k] = 0

    if max_len == 0:
        return None
    return a[pos - max_len + 1:pos + 1]


def to_set(tokens: List[str]) -> Set[str]:
    return set(t for t in tokens if t)


def jaccard_similarity(a: List[str], b: List[str]) -> float:
    sa = to_set(a)
    sb = to_set(b)
    if not sa or not sb:
        return 0.0
    inter = sa.intersection(sb)
    union = sa.union(sb)
    return round(len(inter) / len(union), 6)


def cosine_frequency_similarity(freq_a: dict, freq_b: dict) -> float:
    """基于词频表（词 -> 次数）的余弦相似度"""
    if not freq_a or not freq_b:
        return 0.0
    vocab = set(freq_a.keys()).union(freq_b.keys())
    dot = 0.0
    na = 0.0
    nb = 0.0
    for v in vocab:
        va = freq_a.get(v, 0)
        vb = freq_b.get(v, 0)
        dot += va * vb
        na += va * va
        nb += vb * vb
    if na == 0.0 or nb == 0.0:
        return 0.0
    return round(dot / ((na ** 0.5) * (nb ** 0.5)), 6)
