"""
词频统计模块
负责分词过滤、词频聚合与文档画像组装
"""
from .token_filter import filter_tokens, filter_reason
from .aggregator import aggregate
from .profile import ProfileBuilder, build, build_profile

__all__ = [
    'filter_tokens',
    'filter_reason',
    'aggregate',
    'ProfileBuilder',
    'build',
    'build_profile',
]
