"""
楽曲タイトル検索スクリプト

カタログをあいまい検索して、スコア順に結果を表示する。
一致した部分は [ ] で囲んで表示する（曲名以外の別名で一致した場合は2行目に表示）。

使い方:
    python scripts/search_titles.py しゃけ
    python scripts/search_titles.py "tell your world" --limit 5
    python scripts/search_titles.py ろき --json
"""
import json
import sys
import logging
from pathlib import Path

# プロジェクトルートをパスに追加
repo_root = Path(__file__).parent.parent
sys.path.insert(0, str(repo_root))

from kanasearch.catalog.loader import load_catalog
from kanasearch.catalog.models import MusicItem, format_credits
from kanasearch.core.settings import settings
from kanasearch.search import search_all
from kanasearch.search.highlight import display_width, highlight

# ロガー設定
logging.basicConfig(
    level=logging.WARNING,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def search_titles(query: str, limit: int = 10, offset: int = 0, catalog_path: str = None, as_json: bool = False):
    """
    検索を実行して結果を表示

    Args:
        query: 検索語
        limit: 表示件数
        offset: 先頭から飛ばす件数
        catalog_path: カタログJSONのパス（Noneなら設定値）
        as_json: JSONで出力する
    """
    catalog = load_catalog(catalog_path or settings.catalog_path)
    if not catalog:
        print("警告: カタログが空です。CATALOG_PATH を確認してください。")
        return

    hits = search_all(query, catalog, limit=limit, offset=offset, keys=MusicItem.search_keys)

    if as_json:
        payload = [{"id": hit.item.id, "title": hit.item.title, **hit.result.to_dict()} for hit in hits]
        print(json.dumps(payload, ensure_ascii=False, indent=2))
        return

    print(f"{json.dumps(query, ensure_ascii=False)} の検索結果: {len(hits)}件")

    # スコアの表示位置を揃えるため、曲名の表示幅の最大値を求める
    max_width = max((display_width(hit.item.title) for hit in hits), default=0)

    # クレジットの列幅は一致した別名の幅も含めて揃える
    credit_lines = format_credits([hit.item for hit in hits], [[hit.result.target] for hit in hits])

    for hit, credit_line in zip(hits, credit_lines):
        item = hit.item
        result = hit.result
        marked = highlight(result.target, result.target_ranges)
        pad = " " * (max_width - display_width(item.title))
        score = f"({hit.score:.2f})"

        if result.target == item.title:
            print(f"- [{item.id}] {marked}{pad}  {score}")
        else:
            print(f"- [{item.id}] {item.title}{pad}  {score}")
            print(f"   {' ' * len(str(item.id))}  {marked}")

        print(f"  {credit_line.rstrip()}")


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="楽曲タイトルのあいまい検索")
    parser.add_argument("query", type=str, help="検索語（かな・ローマ字・漢字・英字）")
    parser.add_argument("--limit", type=int, default=settings.search_default_limit, help="表示件数")
    parser.add_argument("--offset", type=int, default=0, help="先頭から飛ばす件数")
    parser.add_argument("--catalog", type=str, default=None, help="カタログJSONのパス")
    parser.add_argument("--json", action="store_true", help="JSONで出力")

    args = parser.parse_args()

    if args.limit < 0 or args.offset < 0:
        parser.error("--limit と --offset は0以上で指定してください")

    search_titles(args.query, limit=args.limit, offset=args.offset, catalog_path=args.catalog, as_json=args.json)
