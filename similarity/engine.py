"""
相似度引擎
比较两篇文档画像
"""
from typing import List, Tuple
from models import DocumentProfile, ProfileComparison
from .text import (
    jaccard_similarity,
    cosine_frequency_similarity,
    longest_common_substring,
)


class SimilarityEngine:
    def text_similarity(self, a: DocumentProfile, b: DocumentProfile) -> Tuple[float, float, float]:
        j = jaccard_similarity([wf.word for wf in a.frequencies], [wf.word for wf in b.frequencies])
        c = cosine_frequency_similarity(a.frequency_map(), b.frequency_map())
        s = round(0.5 * j + 0.5 * c, 6)
        return s, j, c

    def shared_words(self, a: DocumentProfile, b: DocumentProfile) -> List[str]:
        fa = a.frequency_map()
        fb = b.frequency_map()
        common = [w for w in fa if w in fb]
        common.sort(key=lambda w: fa[w] + fb[w], reverse=True)
        return common

    def compare(self, a: DocumentProfile, b: DocumentProfile) -> ProfileComparison:
        s, j, c = self.text_similarity(a, b)
        lcs = longest_common_substring(a.raw_text, b.raw_text)
        return ProfileComparison(
            name_a=a.name,
            name_b=b.name,
            common_substring=lcs,
            common_substring_length=len(lcs) if lcs else 0,
            jaccard=j,
            cosine=c,
            score=s,
            shared_words=self.shared_words(a, b),
        )
