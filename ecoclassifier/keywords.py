"""
Canonical vocabulary and keyword tables for ecosystem classification.

ECOSYSTEM_KEYWORDS drives the keyword scorer. Entries are matched by
substring OR fuzzy similarity, so near spellings in old sources
("savannah", "thorn-bush") still count.

FEATURE_KEYWORDS is the smaller table used to report features alongside
trained-model predictions. It is deliberately NOT the same list.
"""

ECOSYSTEM_KEYWORDS = {
    'savanna': [
        'acacia', 'baobab', 'elephant', 'zebra', 'grass', 'grassy', 'open',
        'scattered', 'trees', 'tree', 'savanna', 'kalahari', 'veld', 'grassland',
    ],
    'forest': [
        # Duplicates kept from the source table; they do not change scoring
        'dense', 'canopy', 'timber', 'woods', 'woodlands', 'trees', 'tree',
        'jungle', 'forest', 'understory', 'canopy', 'dense', 'wood', 'timber',
    ],
    'grassland': [
        'grass', 'grassy', 'prairie', 'steppe', 'pasture', 'meadow', 'field',
        'plain', 'plains', 'grassland', 'pampas', 'veld', 'sward',
    ],
    'thorn_scrub': [
        'thorn', 'scrub', 'bush', 'cactus', 'dry', 'arid', 'semi-arid',
        'drought', 'xeric', 'thornbush', 'acacia', 'mangrove', 'dryland',
    ],
    'unknown': [],
}

# Flora, fauna and land-use words recognised as ecological indicators
VEGETATION_WORDS = frozenset([
    'grass', 'grassy', 'savanna', 'acacia', 'baobab', 'elephant', 'zebra',
    'giraffe', 'wildlife', 'wildebeest', 'lion', 'leopard', 'cheetah',
    'tree', 'trees', 'forest', 'woodland', 'bush', 'scrub', 'thorn',
    'palms', 'palm', 'mango', 'banana', 'coconut', 'cocoa', 'coffee',
    'grain', 'crops', 'maize', 'rice', 'wheat', 'sorghum', 'millet',
])

FEATURE_KEYWORDS = {
    'savanna': ['grassy', 'scattered', 'acacia', 'drought'],
    'forest': ['dense', 'canopy', 'rainforest', 'woodland'],
    'grassland': ['grasslands', 'wildflowers', 'steppe'],
    'thorn_scrub': ['cacti', 'succulents', 'desert', 'arid'],
}

# Words that mark a passage as describing the past
TEMPORAL_WORDS = frozenset([
    'ancient', 'old', 'former', 'past', 'historical', 'traditional', 'olden',
    'medieval', 'colonial', 'early', 'century', 'years',
])

# Labelled corpus for the Bayesian text model: (sentence, ecosystem)
TRAINING_DOCUMENTS = [
    ('grassy plains with scattered trees', 'savanna'),
    ('open grasslands with acacia trees', 'savanna'),
    ('sparse vegetation with drought resistant plants', 'savanna'),
    ('dense forest with thick canopy', 'forest'),
    ('tropical rainforest with multiple layers', 'forest'),
    ('dry woodland with eucalyptus trees', 'forest'),
    ('grasslands with wildflowers', 'grassland'),
    ('steppe with tall grasses', 'grassland'),
    ('arid regions with cacti and succulents', 'thorn_scrub'),
    ('desert with sparse vegetation', 'thorn_scrub'),
]
