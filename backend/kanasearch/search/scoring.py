"""
スコア計算（重みの合計 → 0〜1 の関連度）

score = (一致の重みの合計 / 対象トークン数) * 0.9 ^ (拾えなかったクエリトークン数)
倒序一致があった場合、各一致の重みには (1 - 倒序数 / 対象トークン数) が掛かる。
"""

MISSED_TOKEN_PENALTY = 0.9


def reversal_penalty(reversed_count: int, target_count: int) -> float:
    """倒序一致のペナルティ係数（全一致に一律で掛ける）"""
    if target_count == 0:
        return 1.0
    return 1.0 - reversed_count / target_count


def missed_penalty(missed_count: int) -> float:
    """漏字（一致しなかったクエリトークン）のペナルティ係数"""
    return MISSED_TOKEN_PENALTY ** missed_count


def relevance(weight_sum: float, target_count: int, missed_count: int) -> float:
    """
    最終スコアを計算する

    Args:
        weight_sum: 一致の重みの合計（倒序ペナルティ適用後）
        target_count: 対象トークン数
        missed_count: 一致しなかったクエリトークン数

    Returns:
        関連度（対象トークンが0個なら0.0）
    """
    if target_count == 0:
        return 0.0
    return weight_sum / target_count * missed_penalty(missed_count)
