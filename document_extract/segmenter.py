"""
分词与词性标注
使用 jieba.posseg 将文本切分为带词性的分词序列
"""
import threading
from typing import List

import jieba
import jieba.posseg as pseg

from models import TaggedToken

_init_lock = threading.Lock()
_initialized = False


class Segmenter:
    """jieba 词性标注分词器"""

    @staticmethod
    def initialize() -> None:
        """加载 jieba 词典（只加载一次，多线程并发分词前调用）"""
        global _initialized
        with _init_lock:
            if not _initialized:
                jieba.initialize()
                _initialized = True

    def segment(self, text: str) -> List[TaggedToken]:
        """
        将文本切分为带词性的分词

        Args:
            text: 原始文本

        Returns:
            TaggedToken 列表（未过滤）
        """
        if not text:
            return []
        self.initialize()
        return [TaggedToken(text=pair.word, tag=pair.flag) for pair in pseg.cut(text)]
