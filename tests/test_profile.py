"""
Unit tests for document profile assembly.
"""
import pytest

from document_extract import ExtractionError, Segmenter
from models import WordFrequency
from wordfreq import ProfileBuilder, build, build_profile, filter_tokens
from tests.conftest import tok


def test_build_keeps_unfiltered_tokens():
    tokens = [tok('数据', 'n'), tok('，', 'x'), tok('分析', 'v'), tok('数据', 'n'), tok('的', 'uj')]
    profile = build('doc.txt', '数据，分析数据的', tokens)

    assert profile.name == 'doc.txt'
    assert profile.raw_text == '数据，分析数据的'
    assert profile.tokens == tokens
    assert profile.frequencies == [
        WordFrequency(word='数据', count=2),
        WordFrequency(word='分析', count=1),
    ]
    assert profile.total_count == len(filter_tokens(tokens))


def test_build_with_no_tokens():
    profile = build('empty.txt', '', [])
    assert profile.tokens == []
    assert profile.frequencies == []
    assert profile.total_count == 0


def test_build_rejects_absent_text():
    with pytest.raises(ExtractionError):
        build('none.txt', None, [])


def test_profile_helpers():
    tokens = [tok(w) for w in ['模型', '训练', '模型', '数据', '模型', '训练']]
    profile = build('x', '', tokens)
    assert [wf.word for wf in profile.top(2)] == ['模型', '训练']
    assert profile.top(0) == []
    assert profile.frequency_map() == {'模型': 3, '训练': 2, '数据': 1}


def test_builder_profiles_file(write_doc, segmenter):
    path = write_doc('notes.txt', '文本 挖掘 ，/x 文本 a Python/eng 分析')
    profile = ProfileBuilder(segmenter=segmenter).build_profile(path)

    assert profile.name == 'notes.txt'
    assert len(profile.tokens) == 7
    assert profile.frequencies[0] == WordFrequency(word='文本', count=2)
    assert {wf.word for wf in profile.frequencies} == {'文本', '挖掘', '分析'}


def test_builder_propagates_extraction_error(tmp_path, segmenter):
    with pytest.raises(ExtractionError):
        ProfileBuilder(segmenter=segmenter).build_profile(tmp_path / 'nope.txt')


def test_build_profiles_preserves_input_order(write_doc, segmenter):
    paths = [write_doc(f'd{i}.txt', ' '.join(['词语'] * (i + 1))) for i in range(6)]
    profiles = ProfileBuilder(segmenter=segmenter).build_profiles(paths, max_workers=3)

    assert [p.name for p in profiles] == [f'd{i}.txt' for i in range(6)]
    assert [p.frequencies[0].count for p in profiles] == [1, 2, 3, 4, 5, 6]


def test_build_profiles_empty():
    assert ProfileBuilder().build_profiles([]) == []


def test_build_profiles_raises_on_bad_document(write_doc, segmenter):
    good = write_doc('ok.txt', '正常 文档')
    bad = write_doc('bad.bin', b'\x00\x01')
    with pytest.raises(ExtractionError):
        ProfileBuilder(segmenter=segmenter).build_profiles([good, bad])


def test_jieba_segmentation_end_to_end(write_doc):
    path = write_doc('beijing.txt', '我爱北京天安门。北京欢迎你！')
    profile = ProfileBuilder(segmenter=Segmenter()).build_profile(path)

    assert any(t.text == '。' for t in profile.tokens)
    assert profile.frequencies[0] == WordFrequency(word='北京', count=2)
    assert all(len(wf.word) > 1 for wf in profile.frequencies)


def test_module_level_build_profile(write_doc):
    path = write_doc('welcome.txt', '北京欢迎你。北京欢迎你！')
    profile = build_profile(path)

    assert profile.name == 'welcome.txt'
    assert profile.raw_text == '北京欢迎你。北京欢迎你！'
    assert profile.tokens
    assert profile.total_count == sum(wf.count for wf in profile.frequencies)
    assert profile.frequency_map().get('北京') == 2
