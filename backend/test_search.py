"""
候補リスト検索・強調表示・カタログ読み込みのテスト
"""
import json
import sys
from pathlib import Path

# kanasearch モジュールをインポート可能にする
sys.path.insert(0, str(Path(__file__).parent))

import pytest

from kanasearch.catalog import cache
from kanasearch.catalog.loader import load_catalog
from kanasearch.catalog.models import MusicInfo, MusicItem, format_credits
from kanasearch.core.settings import settings
from kanasearch.search import best_match, search_all
from kanasearch.search.highlight import display_width, highlight, pad_columns

CANDIDATES = ["ロキ", "テオ", "シャケ"]

SAMPLE_RECORDS = [
    {
        "id": 9,
        "title": "千本桜",
        "pronunciation": "せんぼんざくら",
        "lyricist": "黒うさP",
        "composer": "黒うさP",
        "arranger": "黒うさP",
        "publishedAt": 1601535600000,
        "releasedAt": 1601535600000,
        "infos": [{"title": "Senbonzakura", "creator": "黒うさP"}],
    },
    {"id": 2, "title": "ロキ", "pronunciation": "ろき", "releasedAt": 1582963200000},
]


@pytest.fixture
def catalog_file(tmp_path):
    path = tmp_path / "musics.json"
    path.write_text(json.dumps(SAMPLE_RECORDS, ensure_ascii=False), encoding="utf-8")
    return path


# ---- search_all ----

def test_results_sorted_by_score():
    """スコアの高い順に並ぶ"""
    hits = search_all("roki", CANDIDATES)
    assert [hit.item for hit in hits] == ["ロキ", "テオ", "シャケ"]
    assert hits[0].score == pytest.approx(0.9)
    assert hits[0].score > hits[1].score > hits[2].score


def test_ties_keep_candidate_order():
    """同点なら元の順序のまま"""
    hits = search_all("zzz", CANDIDATES)
    assert [hit.item for hit in hits] == CANDIDATES
    assert all(hit.score == 0 for hit in hits)


def test_offset_and_limit():
    hits = search_all("roki", CANDIDATES, limit=1, offset=1)
    assert [hit.item for hit in hits] == ["テオ"]
    assert search_all("roki", CANDIDATES, limit=0) == []
    assert search_all("roki", CANDIDATES, offset=10) == []


def test_negative_limit_or_offset():
    with pytest.raises(ValueError):
        search_all("roki", CANDIDATES, limit=-1)
    with pytest.raises(ValueError):
        search_all("roki", CANDIDATES, offset=-1)


def test_aliases_use_best_scoring_key():
    """曲名・別タイトル・読みのうち最もスコアが高いものを採用"""
    item = MusicItem(id=9, title="千本桜", pronunciation="せんぼんざくら")
    hits = search_all("senbonzakura", [item], keys=MusicItem.search_keys)
    assert hits[0].item is item
    assert hits[0].result.target == "せんぼんざくら"
    assert hits[0].score == pytest.approx(0.9)


def test_best_match_prefers_first_alias_on_tie():
    result = best_match("shake", ["シャケ", "しゃけ"])
    assert result.target == "シャケ"
    assert best_match("shake", []).score == 0


# ---- 強調表示 ----

def test_highlight():
    assert highlight("しゃけ", [(0, 2)]) == "[しゃ]け"
    assert highlight("hello world", [(0, 2), (6, 11)], "<", ">") == "<he>llo <world>"
    assert highlight("abc", []) == "abc"


def test_display_width():
    """全角文字は幅2として数える"""
    assert display_width("abc") == 3
    assert display_width("初音ミク") == 8
    assert display_width("ミクv4") == 6


def test_pad_columns():
    """列ごとに表示幅の最大値まで埋める"""
    assert pad_columns([["ryo", "kz"], ["バルーン", "x"]]) == [["ryo     ", "kz"], ["バルーン", "x "]]
    # extras の幅はその行以外も含めた全列の下限になる
    assert pad_columns([["a", "b"]], [["abcd"]]) == [["a   ", "b   "]]
    assert pad_columns([]) == []


def test_credit_lines_are_aligned():
    """クレジットの列は表示幅で揃う（全角は幅2）"""
    items = [
        MusicItem(id=1, title="メルト", lyricist="ryo", composer="ryo", arranger="ryo"),
        MusicItem(id=2, title="シャルル", lyricist="バルーン", composer="バルーン", arranger=""),
    ]
    lines = format_credits(items)
    assert lines == [
        "作詞: ryo       作曲: ryo       編曲: ryo",
        "作詞: バルーン  作曲: バルーン  編曲:    ",
    ]
    assert display_width(lines[0]) == display_width(lines[1])

    # 一致した別名の幅も列幅の下限になる
    wide = format_credits(items[:1], [["Tell Your World"]])
    assert wide == ["作詞: ryo" + " " * 12 + "  作曲: ryo" + " " * 12 + "  編曲: ryo" + " " * 12]


# ---- カタログ ----

def test_music_item_from_dict(catalog_file):
    items = load_catalog(str(catalog_file))
    assert [item.id for item in items] == [9, 2]
    sakura = items[0]
    assert sakura.released_at == 1601535600000
    assert sakura.infos == [MusicInfo(title="Senbonzakura", creator="黒うさP")]
    assert sakura.search_keys() == ["千本桜", "Senbonzakura", "せんぼんざくら"]
    assert sakura.credits() == [("作詞", "黒うさP"), ("作曲", "黒うさP"), ("編曲", "黒うさP")]
    assert items[1].credits() == [("作詞", ""), ("作曲", ""), ("編曲", "")]


def test_missing_catalog_returns_empty(tmp_path):
    assert load_catalog(str(tmp_path / "missing.json")) == []


def test_broken_json_returns_empty(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("[{", encoding="utf-8")
    assert load_catalog(str(path)) == []


def test_non_list_json_returns_empty(tmp_path):
    path = tmp_path / "object.json"
    path.write_text('{"id": 1}', encoding="utf-8")
    assert load_catalog(str(path)) == []


def test_malformed_records_are_skipped(tmp_path):
    """不正なレコードだけ飛ばして読み込む"""
    path = tmp_path / "partial.json"
    records = [{"id": 1, "title": "テオ"}, {"id": 2}, {"id": "x", "title": "?"}, "oops"]
    path.write_text(json.dumps(records, ensure_ascii=False), encoding="utf-8")
    items = load_catalog(str(path))
    assert [item.title for item in items] == ["テオ"]


def test_catalog_cache(monkeypatch, catalog_file):
    """2回目以降はキャッシュを返す"""
    monkeypatch.setattr(settings, "catalog_path", str(catalog_file))
    cache.clear_cache()
    try:
        first = cache.get_catalog()
        assert cache.get_catalog() is first
        assert cache.get_catalog(force_reload=True) is not first
        assert cache.find_music(2).title == "ロキ"
        assert cache.find_music(999) is None
    finally:
        cache.clear_cache()
