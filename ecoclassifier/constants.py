"""
Constants for Historical Ecosystem Classification.
"""

ECOSYSTEM_TYPES = ['savanna', 'forest', 'grassland', 'thorn_scrub', 'wetland', 'desert', 'unknown']

LABEL_DISPLAY = {
    'savanna': {'name': 'Savanna', 'emoji': '\U0001F992', 'color': '#eab308'},
    'forest': {'name': 'Forest', 'emoji': '\U0001F332', 'color': '#15803d'},
    'grassland': {'name': 'Grassland', 'emoji': '\U0001F33E', 'color': '#84cc16'},
    'thorn_scrub': {'name': 'Thorn Scrub', 'emoji': '\U0001F335', 'color': '#b45309'},
    'wetland': {'name': 'Wetland', 'emoji': '\U0001F986', 'color': '#0ea5e9'},
    'desert': {'name': 'Desert', 'emoji': '\U0001F3DC\ufe0f', 'color': '#f97316'},
    'unknown': {'name': 'Unknown', 'emoji': '\u2753', 'color': '#6b7280'},
}

# Tie-break order when several ecosystems share the top keyword score
PREFERRED_ORDER = ['savanna', 'forest', 'grassland', 'thorn_scrub']

FUZZY_MATCH_THRESHOLD = 0.8

# Share of a historical description's terms that must recur in modern text
MATCH_THRESHOLD = 0.3

CONFIDENCE_THRESHOLD_HIGH = 0.80
CONFIDENCE_THRESHOLD_MEDIUM = 0.60

STRATEGY_KEYWORD = 'keyword'
STRATEGY_TRAINED_MODEL = 'trained_model'
STRATEGIES = [STRATEGY_KEYWORD, STRATEGY_TRAINED_MODEL]

NO_DATA_RECOMMENDATION = "No analysis data available for recommendation."
