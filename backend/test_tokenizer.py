"""
トークナイザ・かな対応表のテスト
"""
import sys
from pathlib import Path

# kanasearch モジュールをインポート可能にする
sys.path.insert(0, str(Path(__file__).parent))

import pytest

from kanasearch.search.kana import KANA_TO_ROMAN, KATA_TO_ROMAN, MAX_KANA_LENGTH, romanize
from kanasearch.search.tokenizer import SPACE, Token, fold_case, leading_whitespace, tokenize


def test_digraph_is_one_token():
    """拗音（しゃ）は2文字で1トークン"""
    tokens = tokenize("しゃけ")
    assert tokens == [Token("しゃ", ("sha",)), Token("け", ("ke",))]


def test_katakana_gets_same_romaji():
    """片仮名にも平仮名と同じローマ字が付く"""
    assert tokenize("シャケ") == [Token("シャ", ("sha",)), Token("ケ", ("ke",))]
    assert romanize("ヴ") == "vu"
    assert romanize("ヷ") == "va"


def test_whitespace_run_is_one_token():
    """連続する空白は1トークン、前後の空白は落とす"""
    tokens = tokenize("  tell   you ")
    originals = [token.original for token in tokens]
    assert originals == ["t", "e", "l", "l", "   ", "y", "o", "u"]
    assert tokens[4].equivalents == (SPACE,)


def test_full_width_space_is_whitespace():
    tokens = tokenize("初音　ミク")
    assert tokens[2] == Token("　", (SPACE,))


def test_case_folding():
    """大文字は小文字として扱う"""
    assert [token.original for token in tokenize("ABC")] == ["a", "b", "c"]


def test_case_folding_keeps_length():
    # 小文字化で長さが変わる文字はそのまま
    assert fold_case("İx") == "İx"
    assert len(fold_case("ÀÉÎ")) == 3


def test_other_scripts_have_no_equivalents():
    """漢字・英字・記号は1文字1トークンで別表記なし"""
    tokens = tokenize("桜a!")
    assert tokens == [Token("桜"), Token("a"), Token("!")]


def test_sokuon_and_long_mark_have_no_romaji():
    """っ・ー は対応表にない"""
    assert tokenize("っー") == [Token("っ"), Token("ー")]
    assert romanize("っ") is None


def test_empty_and_blank():
    assert tokenize("") == []
    assert tokenize("   ") == []


def test_leading_whitespace():
    assert leading_whitespace("  abc ") == 2
    assert leading_whitespace("abc") == 0


def test_tables_are_read_only():
    """対応表は実行中に書き換えられない"""
    with pytest.raises(TypeError):
        KANA_TO_ROMAN["あ"] = "x"  # type: ignore[index]
    assert MAX_KANA_LENGTH == 2
    assert len(KATA_TO_ROMAN) >= len(KANA_TO_ROMAN)


def test_offsets_cover_original_text():
    """トークンの original を連結すると trim 後の文字列に戻る"""
    text = "  ヒバナ -Reloaded-  "
    assert "".join(token.original for token in tokenize(text)) == fold_case(text).strip()
