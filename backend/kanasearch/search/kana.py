"""
かな→ローマ字 対応表（平仮名・片仮名）

【初心者向け】
- トークナイザが「この文字はこう読める」という別表記（equivalents）を付けるための辞書
- 2文字の拗音（しゃ→sha など）も1項目として登録。1文字より先に引く
- 片仮名表は平仮名表のコードポイントをずらして自動生成する
- 起動時に1回だけ作る読み取り専用データ（MappingProxyType）。実行中に書き換えない
"""
from types import MappingProxyType
from typing import Dict, Mapping

# 平仮名と片仮名のコードポイント差（ぁ U+3041 → ァ U+30A1）
_KATAKANA_OFFSET = 0x60

_HIRAGANA_SINGLES: Dict[str, str] = {
    "あ": "a", "い": "i", "う": "u", "え": "e", "お": "o",
    "か": "ka", "き": "ki", "く": "ku", "け": "ke", "こ": "ko",
    "さ": "sa", "し": "shi", "す": "su", "せ": "se", "そ": "so",
    "た": "ta", "ち": "chi", "つ": "tsu", "て": "te", "と": "to",
    "な": "na", "に": "ni", "ぬ": "nu", "ね": "ne", "の": "no",
    "は": "ha", "ひ": "hi", "ふ": "fu", "へ": "he", "ほ": "ho",
    "ま": "ma", "み": "mi", "む": "mu", "め": "me", "も": "mo",
    "や": "ya", "ゆ": "yu", "よ": "yo",
    "ら": "ra", "り": "ri", "る": "ru", "れ": "re", "ろ": "ro",
    "わ": "wa", "ゐ": "wi", "ゑ": "we", "を": "wo", "ん": "n",
    "が": "ga", "ぎ": "gi", "ぐ": "gu", "げ": "ge", "ご": "go",
    "ざ": "za", "じ": "ji", "ず": "zu", "ぜ": "ze", "ぞ": "zo",
    "だ": "da", "ぢ": "ji", "づ": "zu", "で": "de", "ど": "do",
    "ば": "ba", "び": "bi", "ぶ": "bu", "べ": "be", "ぼ": "bo",
    "ぱ": "pa", "ぴ": "pi", "ぷ": "pu", "ぺ": "pe", "ぽ": "po",
    "ゔ": "vu",
    # 小書き文字（単独で現れたときの読み）
    "ぁ": "a", "ぃ": "i", "ぅ": "u", "ぇ": "e", "ぉ": "o",
    "ゃ": "ya", "ゅ": "yu", "ょ": "yo", "ゎ": "wa",
    "ゕ": "ka", "ゖ": "ke",
}

# 拗音: 子音 + ゃゅょ（ローマ字の子音部分）
_YOON_CONSONANTS: Dict[str, str] = {
    "き": "ky", "ぎ": "gy", "し": "sh", "じ": "j", "ち": "ch", "ぢ": "j",
    "に": "ny", "ひ": "hy", "び": "by", "ぴ": "py", "み": "my", "り": "ry",
}
_YOON_GLIDES: Dict[str, str] = {"ゃ": "a", "ゅ": "u", "ょ": "o"}

# 外来語表記の2文字組み合わせ
_HIRAGANA_LOANWORD_DIGRAPHS: Dict[str, str] = {
    "しぇ": "she", "じぇ": "je", "ちぇ": "che",
    "てぃ": "ti", "でぃ": "di", "とぅ": "tu", "どぅ": "du",
    "てゅ": "tyu", "でゅ": "dyu",
    "ふぁ": "fa", "ふぃ": "fi", "ふぇ": "fe", "ふぉ": "fo", "ふゅ": "fyu",
    "うぃ": "wi", "うぇ": "we", "うぉ": "wo",
    "ゔぁ": "va", "ゔぃ": "vi", "ゔぇ": "ve", "ゔぉ": "vo",
    "つぁ": "tsa", "つぃ": "tsi", "つぇ": "tse", "つぉ": "tso",
    "いぇ": "ye",
}

# 片仮名にしかない文字
_KATAKANA_ONLY: Dict[str, str] = {
    "ヷ": "va", "ヸ": "vi", "ヹ": "ve", "ヺ": "vo",
}


def _to_katakana(text: str) -> str:
    """平仮名の文字列を片仮名に変換する（ぁ〜ゖ の範囲のみ）"""
    return "".join(
        chr(ord(ch) + _KATAKANA_OFFSET) if "ぁ" <= ch <= "ゖ" else ch
        for ch in text
    )


def _build_hiragana_table() -> Dict[str, str]:
    table = dict(_HIRAGANA_SINGLES)
    for consonant, head in _YOON_CONSONANTS.items():
        for glide, vowel in _YOON_GLIDES.items():
            table[consonant + glide] = head + vowel
    table.update(_HIRAGANA_LOANWORD_DIGRAPHS)
    return table


def _build_katakana_table(hiragana: Mapping[str, str]) -> Dict[str, str]:
    table = {_to_katakana(kana): roman for kana, roman in hiragana.items()}
    table.update(_KATAKANA_ONLY)
    return table


KANA_TO_ROMAN: Mapping[str, str] = MappingProxyType(_build_hiragana_table())
KATA_TO_ROMAN: Mapping[str, str] = MappingProxyType(_build_katakana_table(KANA_TO_ROMAN))

# トークナイザが引く統合表（平仮名・片仮名は重複しないので単純に合成できる）
ROMAJI_TABLE: Mapping[str, str] = MappingProxyType({**KANA_TO_ROMAN, **KATA_TO_ROMAN})

# 表に載っている最長の綴り（拗音の2文字）
MAX_KANA_LENGTH = max(len(kana) for kana in ROMAJI_TABLE)


def romanize(kana: str) -> str | None:
    """
    かな1文字または拗音1組のローマ字を返す

    Args:
        kana: 平仮名・片仮名（1〜2文字）

    Returns:
        ローマ字。表にない場合はNone
    """
    return ROMAJI_TABLE.get(kana)
