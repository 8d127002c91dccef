"""
测试公共夹具
"""
from typing import List

import pytest

from models import TaggedToken


class WhitespaceSegmenter:
    """按空白切分，词性写在 "词/词性" 中，没有词性时记为 n"""

    def segment(self, text: str) -> List[TaggedToken]:
        tokens = []
        for part in text.split():
            word, _, tag = part.partition('/')
            tokens.append(TaggedToken(text=word, tag=tag or 'n'))
        return tokens


def tok(text: str, tag: str = 'n') -> TaggedToken:
    return TaggedToken(text=text, tag=tag)


@pytest.fixture
def segmenter():
    return WhitespaceSegmenter()


@pytest.fixture
def write_doc(tmp_path):
    """在临时目录中写入文档，返回路径"""
    def _write(name: str, content, encoding: str = 'utf-8'):
        path = tmp_path / name
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding=encoding)
        return path
    return _write
