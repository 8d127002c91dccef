"""
配置管理模块
加载和管理环境变量、过滤规则、日志配置等
"""
import logging
import os
from pathlib import Path
from dotenv import load_dotenv

# 加载 .env 文件
load_dotenv()

# =========================
# 分词过滤配置
# =========================
class FilterConfig:
    """分词过滤规则配置（默认对应 jieba 词性标注）"""
    PUNCTUATION_TAG_PREFIX = os.environ.get("PUNCTUATION_TAG_PREFIX", "x")  # 标点符号类词性前缀
    SYMBOL_TAG = os.environ.get("SYMBOL_TAG", "eng")                          # 字母串/代码类词性
    MIN_TOKEN_LENGTH = 2                                                      # 去空白后的最短长度


# =========================
# 文本提取配置
# =========================
class ExtractConfig:
    """文本提取配置"""
    # 提取文本的最大字符数，0 表示不限制
    MAX_TEXT_LENGTH = int(os.environ.get("MAX_TEXT_LENGTH", "0"))
    # 纯文本文件依次尝试的编码
    TEXT_ENCODINGS = ("utf-8", "gb18030")
    TEXT_SUFFIXES = {".txt", ".md", ".csv", ".log"}
    PDF_SUFFIXES = {".pdf"}
    HTML_SUFFIXES = {".html", ".htm"}


# 批量画像的并发线程数
MAX_WORKERS = int(os.environ.get("MAX_WORKERS", "4"))

# =========================
# 日志配置
# =========================
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
LOG_FILE = os.environ.get("LOG_FILE", "")
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(level: str = None, log_file: str = None) -> None:
    """
    配置根日志记录器

    Args:
        level: 日志级别，默认读取 LOG_LEVEL
        log_file: 日志文件路径，默认读取 LOG_FILE（为空则只输出到控制台）
    """
    handlers = [logging.StreamHandler()]
    log_file = log_file if log_file is not None else LOG_FILE
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding='utf-8'))

    logging.basicConfig(
        level=(level or LOG_LEVEL).upper(),
        format=LOG_FORMAT,
        handlers=handlers,
        force=True,
    )
