"""
Global Constants for the BorsaAI dashboard.
"""

# AI Configuration
GEMINI_MODEL_NAME = "gemini-2.5-flash"

# Synthetic chart settings
DEFAULT_SERIES_LENGTH = 100
START_PRICE_MIN = 100.0
START_PRICE_MAX = 150.0

# Technical analysis looks at the most recent N bars only
ANALYSIS_WINDOW = 40

# Neutral midpoint used when the model gives no usable score
NEUTRAL_SENTIMENT_SCORE = 50

# Initial view
DEFAULT_QUERY = "BIST 100"

# Locales
LOCALE_TR = "tr"
LOCALE_EN = "en"
LOCALE_JA = "ja"
DEFAULT_LOCALE = LOCALE_TR
