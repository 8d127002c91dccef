"""
文档画像组装
从文件中获取文本、分词、统计词频，封装成 DocumentProfile
"""
import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Union

from config import MAX_WORKERS
from document_extract import ExtractionError, Segmenter, TextExtractor
from models import DocumentProfile, TaggedToken
from .aggregator import aggregate
from .token_filter import filter_tokens

logger = logging.getLogger(__name__)


def build(name: str, raw_text: Optional[str], tokens: Sequence[TaggedToken]) -> DocumentProfile:
    """
    组装文档画像

    Args:
        name: 文档名称
        raw_text: 原始文本
        tokens: 未过滤的分词序列

    Returns:
        DocumentProfile，tokens 保留未过滤的完整分词，frequencies 按频次降序

    Raises:
        ExtractionError: raw_text 为 None
    """
    if raw_text is None:
        raise ExtractionError(name, "文本为空")

    tokens = list(tokens)
    frequencies = aggregate(filter_tokens(tokens))
    return DocumentProfile(
        name=name,
        raw_text=raw_text,
        tokens=tokens,
        frequencies=frequencies,
    )


class ProfileBuilder:
    """文档画像生成器"""

    def __init__(self, extractor: TextExtractor = None, segmenter: Segmenter = None):
        """
        初始化生成器

        Args:
            extractor: 文本提取器
            segmenter: 分词器
        """
        self.extractor = extractor or TextExtractor()
        self.segmenter = segmenter or Segmenter()

    def build_profile(self, file_path: Union[str, Path]) -> DocumentProfile:
        """
        从文件生成文档画像，提取失败时 ExtractionError 原样抛出

        Args:
            file_path: 文件路径

        Returns:
            DocumentProfile 对象
        """
        path = Path(file_path)
        text = self.extractor.extract_text(path)
        tokens = self.segmenter.segment(text)
        profile = build(path.name, text, tokens)
        logger.info(
            f"Profiled {path.name}: {len(profile.tokens)} tokens, "
            f"{len(profile.frequencies)} distinct words"
        )
        return profile

    def build_profiles(
        self,
        file_paths: Iterable[Union[str, Path]],
        max_workers: int = None,
    ) -> List[DocumentProfile]:
        """
        并发生成多篇文档的画像，结果顺序与输入一致

        Args:
            file_paths: 文件路径列表
            max_workers: 线程数，默认读取 MAX_WORKERS

        Returns:
            DocumentProfile 列表
        """
        paths = list(file_paths)
        if not paths:
            return []

        # 词典在并发分词前加载
        if hasattr(self.segmenter, 'initialize'):
            self.segmenter.initialize()

        with ThreadPoolExecutor(max_workers=max_workers or MAX_WORKERS) as pool:
            return list(pool.map(self.build_profile, paths))


def build_profile(file_path: Union[str, Path]) -> DocumentProfile:
    """使用默认提取器和分词器生成文档画像"""
    return ProfileBuilder().build_profile(file_path)
