"""
DPアライナー（クエリトークン列と対象トークン列の最適な対応付け）

【初心者向け】
- state[i][j][r] = 「クエリ先頭 i 個・対象 j 個まで見た、倒序フラグ r の最良経路」
- 遷移は4種類
  - 隔字: 対象トークンを飛ばす（その対象は未一致のまま）
  - 漏字: クエリトークンを飛ばす（打ち間違い・余計な文字として扱う）
  - 1対1一致: クエリ1個 → 対象1個
  - 多対1一致: 連続するクエリ複数個 → 対象1個（"sha" → "しゃ"）
- 倒序: 対象を位置 pivot から読み始め、末尾まで行ったら先頭へ折り返す。
  折り返した後（pivot より前の位置）への一致が倒序一致で、1経路につき1回まで。
  pivot=0 は通常の順序どおりの対応付け
- DP表は1本のリスト（フラット配列）で持ち、未到達セルは番兵 _UNREACHABLE

同点の扱い: 候補は「厳密に大きい」ときだけセルを置き換える。
セルごとに 隔字 → 漏字 → 1対1一致 → 多対1一致（開始位置の昇順）の順で試すので、
同点なら先に見つかった候補（より左の一致）が残る。pivot 間でも同様に、
同点なら順序どおりの対応付け（小さい pivot）が残る。
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

from kanasearch.search.scoring import relevance, reversal_penalty
from kanasearch.search.tokenizer import Token
from kanasearch.search.weights import group_weight

# (グループ開始, グループ終了) -> 対象トークンごとの重み
WeightTable = Dict[Tuple[int, int], List[float]]


@dataclass(frozen=True)
class Match:
    """一致1件（クエリのトークン範囲 [query_start, query_end) → 対象トークン1個）"""
    query_start: int
    query_end: int
    target_index: int
    weight: float

    @property
    def query_range(self) -> Tuple[int, int]:
        return (self.query_start, self.query_end)

    @property
    def size(self) -> int:
        return self.query_end - self.query_start


@dataclass(frozen=True)
class MatchingStrategy:
    """最良の対応付け"""
    matches: Tuple[Match, ...]   # 経路が採用した順
    reversed_count: int          # 倒序一致の数（0 か 1）
    score: float                 # 倒序ペナルティ適用後の重み合計 / 対象トークン数


@dataclass(frozen=True)
class _Path:
    # DPセルの中身。親へのリンクで一致列を辿る
    total: float
    reversed_count: int
    covered: int
    match: Optional[Match]
    parent: Optional[_Path]

    def extend(self, match: Match, reversed_count: int) -> _Path:
        return _Path(
            total=self.total + match.weight,
            reversed_count=reversed_count,
            covered=self.covered + match.size,
            match=match,
            parent=self,
        )

    def matches(self) -> Tuple[Match, ...]:
        found: List[Match] = []
        node: Optional[_Path] = self
        while node is not None and node.match is not None:
            found.append(node.match)
            node = node.parent
        found.reverse()
        return tuple(found)


_EMPTY = _Path(total=0.0, reversed_count=0, covered=0, match=None, parent=None)
_UNREACHABLE = _Path(total=float("-inf"), reversed_count=0, covered=0, match=None, parent=None)


def build_weight_table(query: Sequence[Token], target: Sequence[Token]) -> WeightTable:
    """
    クエリの連続するグループすべて × 対象トークンの重みを前計算する

    別表記のないトークンはグループの綴りに何も足さないので、
    グループの長さに上限はない

    Args:
        query: クエリトークン列
        target: 対象トークン列

    Returns:
        {(start, end): [対象トークンごとの重み]}
    """
    table: WeightTable = {}
    for end in range(1, len(query) + 1):
        for start in range(end):
            group = query[start:end]
            table[(start, end)] = [group_weight(group, token) for token in target]
    return table


def _group_starts(i: int) -> List[int]:
    # 1対1（i-1）を先に、その後は多対1を開始位置の昇順で
    if i == 0:
        return []
    return [i - 1] + list(range(i - 1))


def _align(weights: WeightTable, m: int, n: int, pivot: int) -> Tuple[_Path, _Path]:
    """
    pivot から折り返して読んだ対象列でDPを解き、終端セル (r=0, r=1) を返す
    """
    order = [(pivot + k) % n for k in range(n)]
    width = n + 1
    cells: List[_Path] = [_UNREACHABLE] * ((m + 1) * width * 2)
    cells[0] = _EMPTY

    for i in range(m + 1):
        starts = _group_starts(i)
        for j in range(n + 1):
            if i == 0 and j == 0:
                continue
            best = [_UNREACHABLE, _UNREACHABLE]

            for r in (0, 1):
                # 隔字
                if j > 0:
                    prev = cells[(i * width + j - 1) * 2 + r]
                    if prev.total > best[r].total:
                        best[r] = prev
                # 漏字
                if i > 0:
                    prev = cells[((i - 1) * width + j) * 2 + r]
                    if prev.total > best[r].total:
                        best[r] = prev

            if j > 0:
                t = order[j - 1]
                wrapped = t < pivot
                for start in starts:
                    weight = weights[(start, i)][t]
                    if weight <= 0:
                        continue
                    match = Match(start, i, t, weight)
                    for r in (0, 1):
                        prev = cells[(start * width + j - 1) * 2 + r]
                        if prev is _UNREACHABLE:
                            continue
                        if r == 0 and wrapped:
                            # 折り返し後への一致は倒序。一致をまだ持たない経路からは入らない
                            if prev.match is None:
                                continue
                            candidate = prev.extend(match, prev.reversed_count + 1)
                            slot = 1
                        else:
                            candidate = prev.extend(match, prev.reversed_count)
                            slot = r
                        if candidate.total > best[slot].total:
                            best[slot] = candidate

            base = (i * width + j) * 2
            cells[base] = best[0]
            cells[base + 1] = best[1]

    last = (m * width + n) * 2
    return cells[last], cells[last + 1]


def _final_score(path: _Path, m: int, n: int) -> float:
    if path is _UNREACHABLE:
        return float("-inf")
    weight_sum = path.total * reversal_penalty(path.reversed_count, n)
    return relevance(weight_sum, n, m - path.covered)


def find_optimal_matching(query: Sequence[Token], target: Sequence[Token]) -> MatchingStrategy:
    """
    クエリと対象の最適な対応付けを求める

    - まず順序どおり（pivot=0）で解く
    - 倒序で上回る余地がある場合だけ、一致しうる対象位置を pivot にして解き直す
    - 最後に倒序ペナルティ (1 - 倒序数 / 対象トークン数) を全一致の重みに掛ける

    Args:
        query: クエリトークン列
        target: 対象トークン列

    Returns:
        MatchingStrategy（対象トークンが0個なら一致なし・スコア0）
    """
    m, n = len(query), len(target)
    if m == 0 or n == 0:
        return MatchingStrategy(matches=(), reversed_count=0, score=0.0)

    weights = build_weight_table(query, target)
    best_per_target = [
        max((row[t] for row in weights.values()), default=0.0) for t in range(n)
    ]

    best_path, _ = _align(weights, m, n, 0)
    best_score = _final_score(best_path, m, n)

    # 倒序ありで到達しうるスコアの上限
    ceiling = relevance(sum(best_per_target) * reversal_penalty(1, n), n, 0)
    matchable = [t for t, weight in enumerate(best_per_target) if weight > 0]
    for pivot in matchable[1:]:
        if ceiling <= best_score:
            break
        for path in _align(weights, m, n, pivot):
            score = _final_score(path, m, n)
            if score > best_score:
                best_path, best_score = path, score

    penalty = reversal_penalty(best_path.reversed_count, n)
    matches = tuple(
        Match(match.query_start, match.query_end, match.target_index, match.weight * penalty)
        for match in best_path.matches()
    )
    return MatchingStrategy(
        matches=matches,
        reversed_count=best_path.reversed_count,
        score=sum(match.weight for match in matches) / n,
    )
