"""
相似度模块
负责最长公共子串与文档画像比较
"""
from .text import longest_common_substring
from .engine import SimilarityEngine

__all__ = ['longest_common_substring', 'SimilarityEngine']
