"""
Localized strings for the UI and for fallback content.
Turkish is the default locale; unknown keys fall back to English.
"""
from src.constants import DEFAULT_LOCALE, LOCALE_EN, LOCALE_JA, LOCALE_TR

_STRINGS: dict[str, dict[str, str]] = {
    LOCALE_TR: {
        "language_name": "Türkçe",
        "app_title": "BorsaAI",
        "headline": "Ne Analiz Etmek İstersiniz?",
        "tagline": "Hisse senedi, emtia veya döviz... İstediğinizi yazın, yapay zeka analiz etsin.",
        "search_placeholder": "Örn: Ereğli, Ons Altın, BTC, Google...",
        "search_button": "Analiz Et",
        "loading": "Piyasa verileri taranıyor...",
        "live_badge": "CANLI ANALİZ",
        "network_error": "Veriler alınırken bir hata oluştu. Lütfen bağlantınızı kontrol edin.",
        "sentiment_unavailable": "Haber verilerine şu an ulaşılamıyor. Lütfen daha sonra tekrar deneyiniz.",
        "analysis_error": "Teknik analiz oluşturulurken bir hata oluştu.",
        "empty_answer": "Veri alınamadı.",
        "technical_signals": "Teknik Sinyaller",
        "analysis_heading": "Yapay Zeka Analizi",
        "news_heading": "Piyasa Gündemi",
        "sources_heading": "Kaynaklar",
        "sentiment_label": "Piyasa Hissiyatı",
        "trend_label": "Trend",
        "risk_label": "Risk",
        "support": "Destek",
        "resistance": "Direnç",
        "signals_heading": "Sinyaller",
        "no_signals": "Sinyal bulunamadı.",
        "signal_BUY": "AL",
        "signal_SELL": "SAT",
        "signal_HOLD": "TUT",
        "signal_NEUTRAL": "NÖTR",
        "trend_UP": "Yükseliş",
        "trend_DOWN": "Düşüş",
        "trend_FLAT": "Yatay",
        "risk_LOW": "Düşük",
        "risk_MEDIUM": "Orta",
        "risk_HIGH": "Yüksek",
        "price_axis": "Fiyat",
        "volume_axis": "Hacim",
        "price_series": "Fiyat",
        "disclaimer_title": "Bilgilendirme",
        "disclaimer_body": (
            "Bu uygulama, girdiğiniz arama terimi için yapay zeka (Gemini) kullanarak "
            "internetteki güncel verileri tarar ve yorumlar. Grafik verileri simülasyon "
            "amaçlıdır. Yatırım tavsiyesi değildir."
        ),
        "api_key_missing": "Gemini API anahtarı ayarlanmadı. Yapay zeka içerikleri kullanılamıyor.",
        "api_key_input": "Gemini API Anahtarı",
        "instruments_heading": "Hisseler & Emtialar",
        "theme_toggle": "Karanlık Mod",
        "fallback_hint": "Yedek içerik gösteriliyor.",
        "startup_error": "Uygulama başlatılırken bir hata oluştu.",
        "startup_hint": "Sayfayı yenileyin veya `.env` ya da Streamlit secrets içindeki `GEMINI_API_KEY` değerini kontrol edin.",
    },
    LOCALE_EN: {
        "language_name": "English",
        "app_title": "BorsaAI",
        "headline": "What would you like to analyze?",
        "tagline": "Stocks, commodities or currencies... type anything and let AI analyze it.",
        "search_placeholder": "e.g. Ereğli, Gold Ounce, BTC, Google...",
        "search_button": "Analyze",
        "loading": "Scanning market data...",
        "live_badge": "LIVE ANALYSIS",
        "network_error": "An error occurred while fetching data. Please check your connection.",
        "sentiment_unavailable": "News data is currently unavailable. Please try again later.",
        "analysis_error": "An error occurred while generating the technical analysis.",
        "empty_answer": "No data received.",
        "technical_signals": "Technical Signals",
        "analysis_heading": "AI Analysis",
        "news_heading": "Market Brief",
        "sources_heading": "Sources",
        "sentiment_label": "Market Sentiment",
        "trend_label": "Trend",
        "risk_label": "Risk",
        "support": "Support",
        "resistance": "Resistance",
        "signals_heading": "Signals",
        "no_signals": "No signals found.",
        "signal_BUY": "BUY",
        "signal_SELL": "SELL",
        "signal_HOLD": "HOLD",
        "signal_NEUTRAL": "NEUTRAL",
        "trend_UP": "Uptrend",
        "trend_DOWN": "Downtrend",
        "trend_FLAT": "Sideways",
        "risk_LOW": "Low",
        "risk_MEDIUM": "Medium",
        "risk_HIGH": "High",
        "price_axis": "Price",
        "volume_axis": "Volume",
        "price_series": "Price",
        "disclaimer_title": "Disclaimer",
        "disclaimer_body": (
            "This app uses AI (Gemini) to scan and interpret current information on the web "
            "for your search term. Chart data is simulated. Not investment advice."
        ),
        "api_key_missing": "Gemini API key is not set. AI content is unavailable.",
        "api_key_input": "Gemini API Key",
        "instruments_heading": "Stocks & Commodities",
        "theme_toggle": "Dark mode",
        "fallback_hint": "Showing fallback content.",
        "startup_error": "An error occurred while starting the application.",
        "startup_hint": "Reload the page, or check `GEMINI_API_KEY` in `.env` or Streamlit secrets.",
    },
    LOCALE_JA: {
        "language_name": "日本語",
        "app_title": "BorsaAI",
        "headline": "何を分析しますか？",
        "tagline": "株式・コモディティ・為替など、自由に入力するとAIが分析します。",
        "search_placeholder": "例: トヨタ, 金, BTC, Google...",
        "search_button": "分析する",
        "loading": "市場データを調査中...",
        "live_badge": "ライブ分析",
        "network_error": "データ取得中にエラーが発生しました。接続を確認してください。",
        "sentiment_unavailable": "現在ニュースデータを取得できません。時間を置いて再度お試しください。",
        "analysis_error": "テクニカル分析の生成中にエラーが発生しました。",
        "empty_answer": "データを取得できませんでした。",
        "technical_signals": "テクニカルシグナル",
        "analysis_heading": "AI分析",
        "news_heading": "マーケット概況",
        "sources_heading": "出典",
        "sentiment_label": "市場センチメント",
        "trend_label": "トレンド",
        "risk_label": "リスク",
        "support": "サポート",
        "resistance": "レジスタンス",
        "signals_heading": "シグナル",
        "no_signals": "シグナルはありません。",
        "signal_BUY": "買い",
        "signal_SELL": "売り",
        "signal_HOLD": "保持",
        "signal_NEUTRAL": "中立",
        "trend_UP": "上昇",
        "trend_DOWN": "下落",
        "trend_FLAT": "横ばい",
        "risk_LOW": "低",
        "risk_MEDIUM": "中",
        "risk_HIGH": "高",
        "price_axis": "価格",
        "volume_axis": "出来高",
        "price_series": "価格",
        "disclaimer_title": "ご注意",
        "disclaimer_body": (
            "本アプリは検索語についてAI（Gemini）でWeb上の最新情報を調査・解説します。"
            "チャートはシミュレーションです。投資助言ではありません。"
        ),
        "api_key_missing": "Gemini APIキーが未設定です。AI機能は利用できません。",
        "api_key_input": "Gemini APIキー",
        "instruments_heading": "銘柄・コモディティ",
        "theme_toggle": "ダークモード",
        "fallback_hint": "代替コンテンツを表示しています。",
        "startup_error": "アプリケーションの起動中にエラーが発生しました。",
        "startup_hint": "ページを再読み込みするか、`.env` または Streamlit secrets の `GEMINI_API_KEY` を確認してください。",
    },
}


def t(key: str, locale: str = DEFAULT_LOCALE) -> str:
    """Look up a localized string."""
    table = _STRINGS.get(locale, _STRINGS[DEFAULT_LOCALE])
    if key in table:
        return table[key]
    return _STRINGS[LOCALE_EN].get(key, key)
