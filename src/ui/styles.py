"""
UI Styles module
Defines custom CSS for the Streamlit app.
Flat design, professional color scheme, light and dark variants.
"""

_LIGHT_TOKENS = """
        --color-bg-primary: #ffffff;
        --color-bg-secondary: #f8f9fa;
        --color-bg-tertiary: #e9ecef;
        --color-text-primary: #212529;
        --color-text-secondary: #495057;
        --color-text-muted: #6c757d;
        --color-accent: #4f46e5; /* indigo-600 */
        --color-accent-soft: #e0e7ff; /* indigo-100 */
        --color-border: #dee2e6;
"""

_DARK_TOKENS = """
        --color-bg-primary: #0f172a; /* slate-900 */
        --color-bg-secondary: #1e293b; /* slate-800 */
        --color-bg-tertiary: #334155;
        --color-text-primary: #f8fafc;
        --color-text-secondary: #cbd5e1;
        --color-text-muted: #94a3b8;
        --color-accent: #6366f1; /* indigo-500 */
        --color-accent-soft: rgba(99, 102, 241, 0.15);
        --color-border: #334155;
"""


def get_custom_css(theme: str = "dark") -> str:
    """Returns the custom CSS for the application."""
    tokens = _DARK_TOKENS if theme == "dark" else _LIGHT_TOKENS
    return f"""
<style>
    /* ========================================
       Color Tokens
       ======================================== */
    :root {{
{tokens}
        --color-positive: #10b981; /* emerald-500 */
        --color-negative: #f43f5e; /* rose-500 */
        --color-neutral: #94a3b8;
        --radius-sm: 4px;
        --radius-md: 8px;
        --radius-lg: 12px;
        --shadow-sm: 0 1px 2px rgba(0,0,0,0.05);
    }}

    .stApp {{
        background-color: var(--color-bg-primary);
        color: var(--color-text-primary);
    }}

    .text-positive {{ color: var(--color-positive) !important; }}
    .text-negative {{ color: var(--color-negative) !important; }}
    .text-neutral {{ color: var(--color-neutral) !important; }}

    /* ========================================
       Header / Search
       ======================================== */
    .main-header {{
        font-size: 2rem;
        font-weight: 700;
        text-align: center;
        color: var(--color-text-primary);
        margin-bottom: 0.25rem;
        letter-spacing: -0.02em;
    }}

    .main-tagline {{
        text-align: center;
        color: var(--color-text-muted);
        margin-bottom: 1.25rem;
    }}

    .asset-header {{
        display: flex;
        align-items: center;
        gap: 12px;
        margin: 1rem 0;
    }}

    .asset-name {{
        font-size: 1.6rem;
        font-weight: 700;
        color: var(--color-text-primary);
    }}

    .live-badge {{
        font-size: 0.7rem;
        font-weight: 600;
        padding: 2px 8px;
        border-radius: var(--radius-sm);
        background-color: var(--color-accent-soft);
        color: var(--color-accent);
        border: 1px solid var(--color-accent);
    }}

    .error-banner {{
        background-color: rgba(244, 63, 94, 0.12);
        border: 1px solid var(--color-negative);
        color: var(--color-negative);
        padding: 0.75rem 1rem;
        border-radius: var(--radius-md);
        text-align: center;
        margin-bottom: 1rem;
    }}

    /* ========================================
       Cards
       ======================================== */
    .metric-card {{
        background-color: var(--color-bg-secondary);
        border: 1px solid var(--color-border);
        padding: 1rem;
        border-radius: var(--radius-lg);
        color: var(--color-text-primary);
        box-shadow: var(--shadow-sm);
        margin-bottom: 1rem;
    }}

    .metric-title {{
        font-size: 0.85rem;
        font-weight: 700;
        color: var(--color-text-secondary);
        margin-bottom: 0.75rem;
        border-bottom: 2px solid var(--color-border);
        padding-bottom: 0.25rem;
    }}

    .metric-row {{
        display: flex;
        justify-content: space-between;
        align-items: center;
        margin-bottom: 0.4rem;
        font-size: 0.9rem;
    }}

    .metric-label {{
        color: var(--color-text-muted);
        font-size: 0.8rem;
    }}

    .metric-value {{
        font-weight: 600;
        color: var(--color-text-primary);
        font-variant-numeric: tabular-nums;
    }}

    .signal-row {{
        padding: 0.5rem 0.75rem;
        margin: 0.25rem 0;
        border-radius: var(--radius-sm);
        border-left: 3px solid var(--color-neutral);
        background-color: var(--color-bg-tertiary);
        font-size: 0.85rem;
    }}

    .signal-BUY {{ border-left-color: var(--color-positive); }}
    .signal-SELL {{ border-left-color: var(--color-negative); }}

    .source-link {{
        display: block;
        font-size: 0.85rem;
        padding: 0.25rem 0;
        color: var(--color-accent) !important;
        text-decoration: none;
    }}

    .disclaimer-box {{
        background-color: var(--color-accent-soft);
        border: 1px solid var(--color-accent);
        border-radius: var(--radius-lg);
        padding: 0.75rem 1rem;
        font-size: 0.75rem;
        color: var(--color-text-secondary);
    }}

    .disclaimer-title {{
        color: var(--color-accent);
        font-weight: 700;
        text-transform: uppercase;
        font-size: 0.8rem;
        margin-bottom: 0.4rem;
    }}

    /* ========================================
       Button Overrides
       ======================================== */
    .stButton button {{
        border-radius: 999px;
        font-weight: 500;
        transition: background-color 0.15s ease;
    }}

    [data-testid="stBaseButton-primary"],
    [data-testid="stFormSubmitButton"] button {{
        background-color: var(--color-accent) !important;
        color: white !important;
        border-radius: var(--radius-md) !important;
    }}

    hr {{
        border: none;
        border-top: 1px solid var(--color-border);
        margin: 1.5rem 0;
    }}
</style>
"""
