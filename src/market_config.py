"""
銘柄リファレンスモジュール
サイドバーのワンクリック検索に使う代表的な銘柄一覧を中央管理します。
価格データは持たず、検索クエリ（銘柄名）の候補としてのみ使用します。
"""

from typing import TypedDict


class Instrument(TypedDict):
    """銘柄リファレンスの型定義"""

    symbol: str
    name: str
    sector: str


INSTRUMENTS: list[Instrument] = [
    # 商品
    {"symbol": "ALTIN.S1", "name": "Gram Altın", "sector": "Emtia"},
    {"symbol": "GUMUS.S1", "name": "Gram Gümüş", "sector": "Emtia"},
    # BIST 30 / 人気銘柄
    {"symbol": "THYAO", "name": "Türk Hava Yolları", "sector": "Ulaştırma"},
    {"symbol": "GARAN", "name": "Garanti BBVA", "sector": "Bankacılık"},
    {"symbol": "AKBNK", "name": "Akbank", "sector": "Bankacılık"},
    {"symbol": "ISCTR", "name": "İş Bankası (C)", "sector": "Bankacılık"},
    {"symbol": "YKBNK", "name": "Yapı Kredi", "sector": "Bankacılık"},
    {"symbol": "ASELS", "name": "Aselsan", "sector": "Savunma"},
    {"symbol": "KCHOL", "name": "Koç Holding", "sector": "Holding"},
    {"symbol": "SAHOL", "name": "Sabancı Holding", "sector": "Holding"},
    {"symbol": "EREGL", "name": "Ereğli Demir Çelik", "sector": "Sanayi"},
    {"symbol": "KRDMD", "name": "Kardemir (D)", "sector": "Sanayi"},
    {"symbol": "SISE", "name": "Şişecam", "sector": "Sanayi"},
    {"symbol": "TUPRS", "name": "Tüpraş", "sector": "Petrol & Kimya"},
    {"symbol": "PETKM", "name": "Petkim", "sector": "Petrol & Kimya"},
    {"symbol": "BIMAS", "name": "BİM Mağazalar", "sector": "Perakende"},
    {"symbol": "MGROS", "name": "Migros", "sector": "Perakende"},
    {"symbol": "SOKM", "name": "Şok Marketler", "sector": "Perakende"},
    {"symbol": "TOASO", "name": "Tofaş Oto", "sector": "Otomotiv"},
    {"symbol": "FROTO", "name": "Ford Otosan", "sector": "Otomotiv"},
    {"symbol": "TTKOM", "name": "Türk Telekom", "sector": "İletişim"},
    {"symbol": "TCELL", "name": "Turkcell", "sector": "İletişim"},
    {"symbol": "ENKAI", "name": "Enka İnşaat", "sector": "İnşaat"},
    {"symbol": "VESTL", "name": "Vestel", "sector": "Teknoloji"},
    {"symbol": "ARCLK", "name": "Arçelik", "sector": "Dayanıklı Tüketim"},
    {"symbol": "KOZAL", "name": "Koza Altın", "sector": "Madencilik"},
    {"symbol": "KOZAA", "name": "Koza Anadolu", "sector": "Madencilik"},
    {"symbol": "IPEKE", "name": "İpek Doğal Enerji", "sector": "Enerji"},
    {"symbol": "ASTOR", "name": "Astor Enerji", "sector": "Enerji"},
    {"symbol": "EUPWR", "name": "Europower Enerji", "sector": "Enerji"},
    {"symbol": "SASA", "name": "Sasa Polyester", "sector": "Kimya"},
    {"symbol": "HEKTS", "name": "Hektaş", "sector": "Tarım & Kimya"},
]


def get_instruments_by_sector() -> dict[str, list[Instrument]]:
    """
    セクターごとに銘柄をグループ化します（定義順を保持）。

    Returns:
        {セクター名: [Instrument, ...]}
    """
    grouped: dict[str, list[Instrument]] = {}
    for instrument in INSTRUMENTS:
        grouped.setdefault(instrument["sector"], []).append(instrument)
    return grouped
