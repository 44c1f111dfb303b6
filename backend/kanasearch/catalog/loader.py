"""
カタログ読み込みモジュール
"""
import json
import logging
from pathlib import Path
from typing import List

from kanasearch.catalog.models import MusicItem

# ロガー設定
logger = logging.getLogger(__name__)


def _find_repo_root() -> Path:
    """
    リポジトリルートを取得する（backend/kanasearch/catalog/loader.py から4階層上）

    Returns:
        リポジトリルートのPathオブジェクト（絶対パス）
    """
    # loader.py -> catalog/ -> kanasearch/ -> backend/ -> repo_root
    current_file = Path(__file__).resolve()
    repo_root = current_file.parent.parent.parent.parent

    # 検証: backend/ディレクトリが存在するか確認
    if not (repo_root / "backend").is_dir():
        # フォールバック: parentsを辿ってbackend/を探す
        for parent in current_file.parents:
            if (parent / "backend").is_dir():
                repo_root = parent
                break

    return repo_root


def resolve_catalog_path(path: str) -> Path:
    """カタログのパスを絶対パスにする（相対パスはリポジトリルート基準）"""
    catalog_path = Path(path)
    if not catalog_path.is_absolute():
        catalog_path = _find_repo_root() / catalog_path
    return catalog_path.resolve()


def load_catalog(path: str) -> List[MusicItem]:
    """
    楽曲カタログ（JSON配列）を読み込む

    - ファイルがない・JSONが壊れている場合はログに記録して空リストを返す
    - 不正なレコードは警告を出してスキップ

    Args:
        path: カタログJSONのパス

    Returns:
        MusicItemのリスト（ファイル内の順序のまま）
    """
    catalog_path = resolve_catalog_path(path)

    if not catalog_path.exists():
        logger.warning(f"カタログファイルが見つかりません: {catalog_path}")
        return []

    try:
        with open(catalog_path, "r", encoding="utf-8") as f:
            records = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.error(f"カタログ読み込みエラー: {catalog_path} - {type(e).__name__}: {e}")
        return []

    if not isinstance(records, list):
        logger.error(f"カタログの形式が不正です（JSON配列ではありません）: {catalog_path}")
        return []

    items: List[MusicItem] = []
    skipped = 0
    for index, record in enumerate(records):
        try:
            items.append(MusicItem.from_dict(record))
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            skipped += 1
            logger.warning(f"不正なレコードをスキップ: index={index} - {type(e).__name__}: {e}")

    logger.info(f"カタログ読み込み: {catalog_path.name} - {len(items)}件, スキップ: {skipped}件")
    return items
