"""
カタログのキャッシュ管理

【初心者向け】
- 初回アクセスでカタログを読み込み、メモリにキャッシュ。threading.Lock で排他制御
- 検索エンジン本体は状態を持たないので、共有されるのはこのキャッシュだけ
"""
import logging
import threading
from typing import Dict, List, Optional

from kanasearch.catalog.loader import load_catalog
from kanasearch.catalog.models import MusicItem
from kanasearch.core.settings import settings

# ロガー設定
logger = logging.getLogger(__name__)

# グローバルキャッシュ（in-memory）
_cached_catalog: Optional[List[MusicItem]] = None
_catalog_lock = threading.Lock()


def get_catalog(force_reload: bool = False) -> List[MusicItem]:
    """
    キャッシュされたカタログを取得する（初回のみ読み込み）

    Args:
        force_reload: キャッシュを無視して読み直す

    Returns:
        MusicItemのリスト
    """
    global _cached_catalog

    # 並列アクセス対策（threading.Lock）
    with _catalog_lock:
        if force_reload or _cached_catalog is None:
            _cached_catalog = load_catalog(settings.catalog_path)
        return _cached_catalog


def find_music(music_id: int) -> Optional[MusicItem]:
    """IDで楽曲を探す（見つからなければNone）"""
    index: Dict[int, MusicItem] = {item.id: item for item in get_catalog()}
    return index.get(music_id)


def clear_cache() -> None:
    """
    キャッシュをクリアする（テストやリロード時に使用）
    """
    global _cached_catalog
    with _catalog_lock:
        _cached_catalog = None
    logger.info("カタログキャッシュをクリアしました")
