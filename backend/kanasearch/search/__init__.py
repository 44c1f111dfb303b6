"""あいまい検索エンジン（トークナイズ・対応付け・スコア計算）"""
from .fuzzy import FuzzyMatchResult, match
from .ranking import SearchHit, best_match, search_all
from .tokenizer import Token, tokenize

__all__ = [
    "FuzzyMatchResult",
    "SearchHit",
    "Token",
    "best_match",
    "match",
    "search_all",
    "tokenize",
]
