"""
Module: taxonomy_data
Purpose: Static tables of the three-ring emotion wheel and its fallback vocabularies.
Dependencies: None (pure data, no imports)

Separates taxonomy data from resolution logic. Edit this file to add/remove
variants or wheel entries without touching the strategies in resolver.py.
taxonomy.py validates these tables at import (every parent must exist, the
rings must form a strict tree), so a typo fails fast instead of silently
dropping records.

Keys are display names. Matching is case-insensitive throughout.
"""

# ---------------------------------------------------------------------------
# Ring 1: core emotions and the free-text variants that map straight onto them
# Order here is the wheel order and must match CoreEmotion.
# ---------------------------------------------------------------------------

CORE_EMOTION_VARIANTS: dict[str, tuple[str, ...]] = {
    "Joy": (
        "joy",
        "happiness",
        "happy",
        "pleased",
        "delight",
        "content",
        "satisfaction",
        "gladness",
        "merry",
        "jolly",
        "cheerful",
        "jubilant",
        "thrilled",
        "elated",
        "ecstatic",
        "upbeat",
        "gleeful",
        "positive",
        "lighthearted",
    ),
    "Sadness": (
        "sad",
        "sadness",
        "sorrow",
        "unhappy",
        "melancholy",
        "gloomy",
        "misery",
        "despair",
        "grief",
        "heartbroken",
        "depressed",
        "downhearted",
        "downcast",
        "dejected",
        "glum",
        "blue",
        "wistful",
        "pensive",
        "forlorn",
        "morose",
        "disappointed",
        "despondent",
        "hopeless",
        "unloved",
    ),
    "Fear": (
        "fear",
        "afraid",
        "scared",
        "frightened",
        "terrified",
        "anxious",
        "anxiety",
        "worried",
        "nervous",
        "uneasy",
        "apprehensive",
        "dread",
        "panic",
        "horror",
        "terror",
        "phobia",
        "alarmed",
        "intimidated",
        "trepidation",
        "distressed",
        "agitated",
        "distrust",
        "unsafe",
    ),
    "Surprise": (
        "surprise",
        "surprised",
        "astonished",
        "amazed",
        "astounded",
        "shocked",
        "startled",
        "stunned",
        "bewildered",
        "dumbfounded",
        "flabbergasted",
        "staggered",
        "awestruck",
        "wonder",
        "disbelief",
        "taken aback",
        "unexpected",
    ),
    "Anger": (
        "anger",
        "angry",
        "mad",
        "fury",
        "rage",
        "annoyed",
        "irritated",
        "frustrated",
        "exasperated",
        "outraged",
        "indignant",
        "incensed",
        "furious",
        "fuming",
        "livid",
        "enraged",
        "hostile",
        "bitter",
        "resentful",
        "irked",
        "vexed",
        "aggravated",
        "discontent",
    ),
    "Love": (
        "love",
        "loving",
        "affection",
        "adoration",
        "fondness",
        "tenderness",
        "compassion",
        "attachment",
        "devotion",
        "passion",
        "desire",
        "attraction",
        "infatuation",
        "admiration",
        "caring",
        "cherish",
        "enamored",
        "smitten",
        "empathy",
        "warmth",
    ),
    "Disgust": (
        "disgust",
        "disgusted",
        "repulsed",
        "revulsion",
        "aversion",
        "distaste",
        "contempt",
        "abhorrence",
        "loathing",
        "sickened",
        "revolted",
        "grossed out",
        "nauseated",
        "offended",
        "appalled",
        "repelled",
        "horrified",
        "abomination",
        "uncomfortable",
    ),
    "Trust": (
        "trust",
        "trusting",
        "reliance",
        "confidence",
        "faith",
        "belief",
        "assurance",
        "conviction",
        "dependence",
        "reliability",
        "security",
        "certainty",
        "hope",
        "optimism",
        "acceptance",
        "calm",
        "peaceful",
        "serene",
        "tranquil",
        "relaxed",
        "at ease",
        "comfortable",
    ),
}

# ---------------------------------------------------------------------------
# Ring 2: secondary emotion → core emotion
# Within a core, the first entry is the default child used when only the core
# is identifiable.
# ---------------------------------------------------------------------------

SECONDARY_TO_CORE: dict[str, str] = {
    # Joy
    "Content": "Joy",
    "Happy": "Joy",
    "Cheerful": "Joy",
    "Joyful": "Joy",
    "Proud": "Joy",
    "Optimistic": "Joy",
    "Enthusiastic": "Joy",
    "Elated": "Joy",
    "Triumphant": "Joy",
    "Excited": "Joy",
    # Joy (gratitude family)
    "Thankful": "Joy",
    "Appreciative": "Joy",
    "Recognized": "Joy",
    "Blessed": "Joy",
    "Gratitude": "Joy",
    # Sadness
    "Suffering": "Sadness",
    "Disappointed": "Sadness",
    "Shameful": "Sadness",
    "Neglected": "Sadness",
    "Despair": "Sadness",
    "Depression": "Sadness",
    "Lonely": "Sadness",
    "Grieving": "Sadness",
    # Sadness (shame family)
    "Embarrassed": "Sadness",
    "Humiliated": "Sadness",
    "Regretful": "Sadness",
    "Guilty": "Sadness",
    "Shame": "Sadness",
    # Fear
    "Scared": "Fear",
    "Terrified": "Fear",
    "Insecure": "Fear",
    "Nervous": "Fear",
    "Worried": "Fear",
    "Inadequate": "Fear",
    "Rejected": "Fear",
    "Threatened": "Fear",
    # Fear (anxiety family)
    "Anxious": "Fear",
    "Stressed": "Fear",
    "Overwhelmed": "Fear",
    "Worry": "Fear",
    "Tense": "Fear",
    "Panicky": "Fear",
    "Unsettled": "Fear",
    "Apprehensive": "Fear",
    # Surprise
    "Stunned": "Surprise",
    "Confused": "Surprise",
    "Amazed": "Surprise",
    "Overcome": "Surprise",
    "Moved": "Surprise",
    "Astonished": "Surprise",
    "Wonder": "Surprise",
    "Awe": "Surprise",
    "Startled": "Surprise",
    # Anger
    "Rage": "Anger",
    "Exasperated": "Anger",
    "Irritable": "Anger",
    "Envy": "Anger",
    "Frustration": "Anger",
    "Irritation": "Anger",
    "Resentful": "Anger",
    "Jealous": "Anger",
    # Love
    "Affection": "Love",
    "Longing": "Love",
    "Compassion": "Love",
    "Tenderness": "Love",
    "Caring": "Love",
    "Desire": "Love",
    "Fondness": "Love",
    "Passion": "Love",
    "Adoration": "Love",
    # Disgust
    "Disapproval": "Disgust",
    "Distaste": "Disgust",
    "Avoidance": "Disgust",
    "Revulsion": "Disgust",
    "Contempt": "Disgust",
    "Loathing": "Disgust",
    "Aversion": "Disgust",
    # Trust
    "Secure": "Trust",
    "Confident": "Trust",
    "Faithful": "Trust",
    "Respected": "Trust",
    "Safe": "Trust",
    "Reliable": "Trust",
    "Honored": "Trust",
    # Trust (interest family)
    "Curious": "Trust",
    "Engaged": "Trust",
    "Fascinated": "Trust",
    "Intrigued": "Trust",
    "Interest": "Trust",
    # Trust (calm family)
    "Peaceful": "Trust",
    "Relaxed": "Trust",
    "Tranquil": "Trust",
    "Serene": "Trust",
    "Composed": "Trust",
    "Balanced": "Trust",
    "Calm": "Trust",
}

# ---------------------------------------------------------------------------
# Ring 3: tertiary emotion → secondary emotion
# A name may appear on both rings (e.g. "Anxious") as long as both placements
# roll up to the same core emotion.
# ---------------------------------------------------------------------------

TERTIARY_TO_SECONDARY: dict[str, str] = {
    # Joy
    "Pleased": "Content",
    "Satisfied": "Content",
    "Amused": "Happy",
    "Delighted": "Happy",
    "Jovial": "Cheerful",
    "Blissful": "Cheerful",
    "Illustrious": "Proud",
    "Triumphant": "Proud",
    "Hopeful": "Optimistic",
    "Eager": "Optimistic",
    "Zealous": "Enthusiastic",
    "Energetic": "Enthusiastic",
    "Jubilant": "Elated",
    "Ecstatic": "Elated",
    "Indebted": "Thankful",
    "Obliged": "Thankful",
    "Acknowledged": "Appreciative",
    "Valued": "Appreciative",
    # Sadness
    "Agony": "Suffering",
    "Hurt": "Suffering",
    "Depressed": "Depression",
    "Sorrow": "Depression",
    "Dismayed": "Disappointed",
    "Displeased": "Disappointed",
    "Regretful": "Shameful",
    "Guilty": "Shameful",
    "Isolated": "Neglected",
    "Lonely": "Neglected",
    "Grief": "Despair",
    "Powerless": "Despair",
    "Mortified": "Embarrassed",
    "Self-conscious": "Embarrassed",
    "Disgraced": "Humiliated",
    "Dishonored": "Humiliated",
    "Apologetic": "Regretful",
    "Remorseful": "Regretful",
    # Fear
    "Frightened": "Scared",
    "Helpless": "Scared",
    "Horrified": "Terrified",
    "Panic": "Terrified",
    "Doubtful": "Insecure",
    "Inadequate": "Insecure",
    "Worried": "Nervous",
    "Anxious": "Nervous",
    "Overwhelmed": "Anxious",
    "Frantic": "Stressed",
    "Jittery": "Tense",
    "Restless": "Tense",
    "Uneasy": "Worried",
    "Concerned": "Worried",
    "Distressed": "Panicky",
    "Troubled": "Apprehensive",
    # Surprise
    "Shocked": "Stunned",
    "Bewildered": "Stunned",
    "Disillusioned": "Confused",
    "Perplexed": "Confused",
    "Astonished": "Amazed",
    "Awe-struck": "Amazed",
    "Speechless": "Overcome",
    "Astounded": "Overcome",
    "Stimulated": "Moved",
    "Touched": "Moved",
    # Anger
    "Hate": "Rage",
    "Hostile": "Rage",
    "Agitated": "Exasperated",
    "Frustrated": "Exasperated",
    "Annoyed": "Irritable",
    "Aggravated": "Irritable",
    "Resentful": "Envy",
    "Jealous": "Envy",
    # Love
    "Caring": "Affection",
    "Warm": "Affection",
    "Yearning": "Longing",
    "Missing": "Longing",
    "Empathetic": "Compassion",
    "Sympathetic": "Compassion",
    "Gentle": "Tenderness",
    "Soft": "Tenderness",
    # Disgust
    "Judgmental": "Disapproval",
    "Critical": "Disapproval",
    "Repulsed": "Revulsion",
    "Appalled": "Revulsion",
    "Revolted": "Revulsion",
    "Disdain": "Contempt",
    "Scornful": "Contempt",
    # Trust
    "Protected": "Secure",
    "Sheltered": "Secure",
    "Reassured": "Confident",
    "Empowered": "Confident",
    "Loyal": "Faithful",
    "Devoted": "Faithful",
    "Inquisitive": "Curious",
    "Inquiring": "Curious",
    "Attentive": "Engaged",
    "Absorbed": "Engaged",
    "Captivated": "Fascinated",
    "Enthralled": "Fascinated",
    "Quiet": "Peaceful",
    "Still": "Peaceful",
    "Rested": "Relaxed",
    "At ease": "Relaxed",
    "Centered": "Composed",
    "Collected": "Composed",
}

# ---------------------------------------------------------------------------
# Display colors (core colors plus a few secondary overrides)
# ---------------------------------------------------------------------------

DEFAULT_EMOTION_COLOR = "#999999"

EMOTION_COLORS: dict[str, str] = {
    "Joy": "#F9D71C",
    "Sadness": "#6D87C4",
    "Fear": "#8A65AA",
    "Anger": "#E43D40",
    "Disgust": "#7DB954",
    "Love": "#E91E63",
    "Surprise": "#F47B20",
    "Trust": "#8DC4BD",
    # Secondary overrides
    "Worry": "#9932CC",
    "Anxious": "#9C27B0",
    "Frustrated": "#B22222",
    "Happy": "#FFA07A",
    "Depressed": "#4682B4",
    "Shame": "#FF6B81",
    "Gratitude": "#FFB74D",
    "Calm": "#81C784",
    "Interest": "#4DB6AC",
}

# ---------------------------------------------------------------------------
# Direct mappings: common free-text (often LLM-generated) emotion words that
# are not on the wheel. Matched by substring containment in both directions.
# ---------------------------------------------------------------------------

DIRECT_MAPPINGS: dict[str, str] = {
    # Positive
    "pleased": "Joy",
    "grateful": "Joy",
    "thankful": "Joy",
    "satisfied": "Joy",
    "relief": "Joy",
    "relieved": "Joy",
    "hopeful": "Joy",
    "proud": "Joy",
    "confident": "Trust",
    "comfortable": "Trust",
    "secure": "Trust",
    "interested": "Trust",
    "curious": "Trust",
    # Negative
    "nostalgic": "Sadness",
    "upset": "Sadness",
    "melancholic": "Sadness",
    "regret": "Sadness",
    "remorse": "Sadness",
    "alone": "Sadness",
    "abandoned": "Sadness",
    "disheartened": "Sadness",
    "miserable": "Sadness",
    "misunderstood": "Sadness",
    "isolated": "Sadness",
    "empty": "Sadness",
    "void": "Sadness",
    "hollow": "Sadness",
    "numb": "Sadness",
    "disconnected": "Sadness",
    "tense": "Fear",
    "stressed": "Fear",
    "panicked": "Fear",
    "threatened": "Fear",
    "overwhelmed": "Fear",
    "envious": "Anger",
    "jealous": "Anger",
    "uncomfortable": "Disgust",
    # Complex
    "conflicted": "Surprise",
    "ambivalent": "Surprise",
    "confused": "Surprise",
    "uncertain": "Surprise",
    "intrigued": "Surprise",
    "perplexed": "Surprise",
    "affectionate": "Love",
    "attached": "Love",
    "compassionate": "Love",
    "longing": "Love",
    "yearning": "Love",
    "tender": "Love",
    "passionate": "Love",
    "adoring": "Love",
    "devoted": "Love",
    "cherished": "Love",
}

# ---------------------------------------------------------------------------
# Sentiment fallback: least precise strategy, runs after everything else
# ---------------------------------------------------------------------------

POSITIVE_SENTIMENT_WORDS: tuple[str, ...] = (
    "good",
    "great",
    "wonderful",
    "fantastic",
    "excellent",
    "amazing",
    "positive",
    "nice",
    "pleasant",
)

NEGATIVE_SENTIMENT_WORDS: tuple[str, ...] = (
    "bad",
    "terrible",
    "awful",
    "horrible",
    "negative",
    "poor",
    "unpleasant",
    "uncomfortable",
)

# Suffixes stripped (once) before the last retry of the cheap strategies
RETRY_SUFFIXES: tuple[str, ...] = ("ed", "ing")
