"""
トークン同士の一致度（重み）

【初心者向け】
- 1.0: original 同士が一致
- 0.9: 片方の original が、もう片方の別表記に含まれる（"sha" と "しゃ"）
- 0.8: 別表記同士が一致（"シャ" と "しゃ" → どちらも "sha"）
- 0:   一致しない
- 複数のクエリトークンをまとめた「合成トークン」でも同じ規則で判定する
"""
from typing import Sequence

from kanasearch.search.tokenizer import Token

EXACT_WEIGHT = 1.0
EQUIVALENT_WEIGHT = 0.9
SHARED_EQUIVALENT_WEIGHT = 0.8


def token_weight(a: Token, b: Token) -> float:
    """
    2つのトークンの一致度を返す（上の表の順に判定、最初に当たったもの）

    Args:
        a: クエリ側トークン
        b: 対象側トークン

    Returns:
        0, 0.8, 0.9, 1.0 のいずれか
    """
    if a.original == b.original:
        return EXACT_WEIGHT
    if a.original in b.equivalents or b.original in a.equivalents:
        return EQUIVALENT_WEIGHT
    if any(equivalent in b.equivalents for equivalent in a.equivalents):
        return SHARED_EQUIVALENT_WEIGHT
    return 0.0


def combine_tokens(tokens: Sequence[Token]) -> Token:
    """
    連続するクエリトークンを1つの合成トークンにまとめる

    - original: 各トークンの original を連結
    - equivalents: 各トークンの別表記を位置順に連結した1つの文字列
      （別表記のないトークンは何も足さない。全部なければ別表記なし）

    例: [し(shi), ゃ(ya)] -> original="しゃ", equivalents=("shiya",)
        [s, h, a]         -> original="sha",  equivalents=()
        [x, あ(a)]        -> original="xあ",  equivalents=("a",)
    """
    original = "".join(token.original for token in tokens)
    spelled = "".join(equivalent for token in tokens for equivalent in token.equivalents)
    if not spelled:
        return Token(original)
    return Token(original, (spelled,))


def group_weight(tokens: Sequence[Token], target: Token) -> float:
    """
    連続する複数のクエリトークンと1つの対象トークンの一致度

    例: [s, h, a] と しゃ(sha) -> 0.9

    Args:
        tokens: クエリトークン列の一部（1個以上）
        target: 対象側トークン

    Returns:
        0, 0.8, 0.9, 1.0 のいずれか
    """
    if not tokens:
        return 0.0
    if len(tokens) == 1:
        return token_weight(tokens[0], target)
    return token_weight(combine_tokens(tokens), target)
