"""
楽曲カタログの型定義（データの形を明示）

【初心者向け】
- dataclass: フィールドだけ持つ軽量なクラス。JSONとのやりとりでよく使う
- MusicItem = 楽曲1件。検索では title・別タイトル（infos）・読み（pronunciation）を比べる
- JSONのキーはキャメルケース（releasedAt など）。from_dict で変換する
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Tuple

from kanasearch.search.highlight import pad_columns


@dataclass
class MusicInfo:
    """別表記のタイトル情報（翻訳タイトルなど）"""
    title: str
    creator: str = ""


@dataclass
class MusicItem:
    """楽曲1件"""
    id: int
    title: str
    pronunciation: str = ""   # 読み（平仮名）
    lyricist: str = ""
    composer: str = ""
    arranger: str = ""
    published_at: int = 0     # 公開日時（ミリ秒）
    released_at: int = 0      # 実装日時（ミリ秒）
    infos: List[MusicInfo] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MusicItem":
        """
        JSONの1レコードから作る

        Raises:
            KeyError: id / title がない場合
            TypeError, ValueError: id が整数に変換できない場合
        """
        infos = [
            MusicInfo(title=info["title"], creator=info.get("creator", ""))
            for info in data.get("infos") or []
            if info.get("title")
        ]
        return cls(
            id=int(data["id"]),
            title=str(data["title"]),
            pronunciation=data.get("pronunciation") or "",
            lyricist=data.get("lyricist") or "",
            composer=data.get("composer") or "",
            arranger=data.get("arranger") or "",
            published_at=int(data.get("publishedAt") or 0),
            released_at=int(data.get("releasedAt") or 0),
            infos=infos,
        )

    def search_keys(self) -> List[str]:
        """検索で比較する別名（曲名 → 別タイトル → 読み の順）"""
        keys = [self.title]
        keys.extend(info.title for info in self.infos)
        if self.pronunciation:
            keys.append(self.pronunciation)
        return keys

    def titles(self) -> List[str]:
        """重複を除いた表示用タイトル一覧"""
        return list(dict.fromkeys([self.title, *(info.title for info in self.infos)]))

    def credits(self) -> List[Tuple[str, str]]:
        """クレジット（作詞・作曲・編曲の (ラベル, 名前)。空の項目も含めて常に3つ）"""
        return [("作詞", self.lyricist), ("作曲", self.composer), ("編曲", self.arranger)]


def format_credits(
    items: Sequence[MusicItem],
    extras: Optional[Sequence[Sequence[str]]] = None,
) -> List[str]:
    """
    一覧表示用のクレジット行を作る（作詞・作曲・編曲の列を表示幅で揃える）

    Args:
        items: 表示する楽曲
        extras: 楽曲ごとに一緒に表示する文字列（一致した別名など）。列幅の下限に使う

    Returns:
        楽曲ごとのクレジット行（"作詞: ...  作曲: ...  編曲: ..."）
    """
    rows = [[name for _, name in item.credits()] for item in items]
    padded = pad_columns(rows, extras)
    return [
        "  ".join(f"{label}: {value}" for (label, _), value in zip(item.credits(), row))
        for item, row in zip(items, padded)
    ]
