"""
文本提取器
从纯文本、PDF、HTML 文件中读取一整个字符串
"""
import logging
from pathlib import Path
from typing import Union

from bs4 import BeautifulSoup
from pdfminer.high_level import extract_text as pdf_extract_text

from config import ExtractConfig

logger = logging.getLogger(__name__)


class ExtractionError(Exception):
    """文件不可读、格式不支持或内容损坏"""

    def __init__(self, path: Union[str, Path], message: str):
        self.path = Path(path)
        super().__init__(f"{self.path}: {message}")


class TextExtractor:
    """文本提取器"""

    def __init__(self, max_length: int = None):
        """
        初始化提取器

        Args:
            max_length: 提取文本的最大字符数，0 或 None 表示不限制
        """
        self.max_length = ExtractConfig.MAX_TEXT_LENGTH if max_length is None else max_length

    def extract_text(self, file_path: Union[str, Path]) -> str:
        """
        从文件中提取纯文本

        Args:
            file_path: 文件路径（支持 .txt/.md/.csv/.log, .pdf, .html/.htm）

        Returns:
            文件中的纯文本

        Raises:
            ExtractionError: 文件不存在、格式不支持或解析失败
        """
        path = Path(file_path)
        if not path.is_file():
            raise ExtractionError(path, "文件不存在")

        suffix = path.suffix.lower()
        logger.info(f"Extracting text from {path} ({path.stat().st_size} bytes)")

        try:
            if suffix in ExtractConfig.TEXT_SUFFIXES:
                text = self._read_plain(path)
            elif suffix in ExtractConfig.PDF_SUFFIXES:
                text = pdf_extract_text(str(path))
            elif suffix in ExtractConfig.HTML_SUFFIXES:
                text = self._read_html(path)
            else:
                raise ExtractionError(path, f"不支持的文件格式: {suffix or '(无后缀)'}")
        except ExtractionError:
            raise
        except Exception as e:
            logger.error(f"Failed to extract text from {path}: {e}")
            raise ExtractionError(path, f"解析失败: {e}") from e

        if self.max_length and len(text) > self.max_length:
            text = text[:self.max_length]
        return text

    def _read_plain(self, path: Path) -> str:
        """按配置的编码顺序读取纯文本"""
        data = path.read_bytes()
        for encoding in ExtractConfig.TEXT_ENCODINGS:
            try:
                return data.decode(encoding)
            except UnicodeDecodeError:
                continue
        raise ExtractionError(path, "无法识别的文本编码")

    def _read_html(self, path: Path) -> str:
        soup = BeautifulSoup(self._read_plain(path), 'html.parser')
        # 去掉脚本和样式
        for tag in soup(['script', 'style']):
            tag.decompose()
        return soup.get_text(separator='\n')
