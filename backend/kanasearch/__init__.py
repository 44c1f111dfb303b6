"""かな・ローマ字・漢字混在の曲名あいまい検索"""

__version__ = "0.1.0"
