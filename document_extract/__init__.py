"""
文档提取模块
负责从文件中提取纯文本，并对文本进行分词与词性标注
"""
from .extractor import TextExtractor, ExtractionError
from .segmenter import Segmenter

__all__ = ['TextExtractor', 'ExtractionError', 'Segmenter']
