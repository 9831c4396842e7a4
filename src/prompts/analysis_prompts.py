"""
AI Analysis Prompts
"""

SENTIMENT_SYSTEM_INSTRUCTION = (
    "You are a professional market analyst. Answer in {language}. "
    "Keep the answer short, concise and informative."
)

SENTIMENT_PROMPT_TEMPLATE = """Research the latest situation of "{query}" in the financial markets:
current market status, recent price action, notable news and expert commentary.

If this is a stock, commodity, currency pair or cryptocurrency, summarize the overall
investor sentiment (bullish / bearish).

Finish your answer with a single final line in exactly this format:
SCORE: <integer from 0 (very bearish) to 100 (very bullish)>
"""

TECHNICAL_ANALYSIS_PROMPT_TEMPLATE = """The JSON below is SIMULATED chart data. Using your GENERAL MARKET KNOWLEDGE
of "{query}" together with the numbers below, produce a technical commentary.

Data (last {window} candles, oldest first, positions 0-{last_index}):
{data}

Your task:
1. Analyze the numeric data with momentum and trend-strength reasoning (RSI / MACD style logic).
2. Determine support and resistance levels from the numeric data.
3. Identify BUY / SELL / HOLD / NEUTRAL points; "index" is the candle position in the data above (0-{last_index}).
4. Decide the trend while also considering the real-world trend of "{query}"
   (for example, positive recent news may indicate an uptrend).

Rules:
- Write "summary" and every "description" in {language}.
- All prices are plain numbers: no currency symbols, no thousands separators.
- Respond ONLY with JSON matching the given schema.
"""

# Gemini response_schema (OpenAPI subset understood by google-generativeai)
TECHNICAL_ANALYSIS_RESPONSE_SCHEMA = {
    "type": "object",
    "properties": {
        "summary": {"type": "string", "description": "Technical analysis commentary"},
        "supportLevels": {"type": "array", "items": {"type": "number"}},
        "resistanceLevels": {"type": "array", "items": {"type": "number"}},
        "trend": {"type": "string", "enum": ["UP", "DOWN", "FLAT"]},
        "riskLevel": {"type": "string", "enum": ["LOW", "MEDIUM", "HIGH"]},
        "signals": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "index": {
                        "type": "integer",
                        "description": "Position in the given data (0-39)",
                    },
                    "price": {"type": "number"},
                    "type": {"type": "string", "enum": ["BUY", "SELL", "HOLD", "NEUTRAL"]},
                    "description": {"type": "string", "description": "Reason for the signal"},
                },
                "required": ["index", "price", "type", "description"],
            },
        },
    },
    "required": [
        "summary",
        "supportLevels",
        "resistanceLevels",
        "trend",
        "riskLevel",
        "signals",
    ],
}
