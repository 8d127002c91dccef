"""
数据模型定义
定义分词、词频、文档画像等核心数据结构
"""
from typing import Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field


# =========================
# 分词与词频模型
# =========================
class TaggedToken(BaseModel):
    """带词性标注的分词"""
    model_config = ConfigDict(frozen=True)

    text: str = Field(description="分词文本")
    tag: str = Field(description="词性代码")


class WordFrequency(BaseModel):
    """单词词频"""
    model_config = ConfigDict(frozen=True)

    word: str = Field(description="单词")
    count: int = Field(ge=1, description="出现次数")


# =========================
# 文档画像模型
# =========================
class DocumentProfile(BaseModel):
    """文档画像：原文、分词与按频次降序排列的词频表"""
    model_config = ConfigDict(frozen=True)

    name: str = Field(description="文档名称")
    raw_text: str = Field(description="原始文本")
    tokens: List[TaggedToken] = Field(description="未过滤的分词序列")
    frequencies: List[WordFrequency] = Field(description="词频表（频次降序，同频次顺序不作保证）")

    @property
    def total_count(self) -> int:
        """过滤后保留的分词总数"""
        return sum(wf.count for wf in self.frequencies)

    def top(self, n: int) -> List[WordFrequency]:
        """返回频次最高的前 n 个词"""
        return self.frequencies[:max(n, 0)]

    def frequency_map(self) -> Dict[str, int]:
        return {wf.word: wf.count for wf in self.frequencies}


# =========================
# 文档比较结果模型
# =========================
class ProfileComparison(BaseModel):
    """两篇文档的相似度比较结果"""
    model_config = ConfigDict(frozen=True)

    name_a: str = Field(description="文档A名称")
    name_b: str = Field(description="文档B名称")
    common_substring: Optional[str] = Field(default=None, description="原文最长公共子串")
    common_substring_length: int = Field(default=0, description="最长公共子串长度")
    jaccard: float = Field(description="词集合 Jaccard 相似度")
    cosine: float = Field(description="词频余弦相似度")
    score: float = Field(description="综合文本相似度")
    shared_words: List[str] = Field(default_factory=list, description="共同词（按合计频次降序）")
