"""Category and purine-level classification."""

from purine_catalog.domain.catalog import Category, PurineLevel, SourceType

# Evaluated top to bottom, first match wins.
CATEGORY_RULES: tuple[tuple[Category, tuple[str, ...]], ...] = (
    (
        Category.SEAFOOD,
        (
            "fish",
            "salmon",
            "tuna",
            "shrimp",
            "crab",
            "lobster",
            "oyster",
            "clam",
            "mussel",
            "squid",
            "octopus",
            "scallop",
            "mackerel",
            "sardine",
            "anchovy",
            "herring",
            "cod",
            "halibut",
            "flounder",
            "eel",
            "carp",
            "trout",
            "roe",
            "milt",
            "seabass",
            "snail",
            "krill",
            "whitebait",
            "bonito",
            "yellowtail",
        ),
    ),
    (
        Category.MEAT,
        (
            "beef",
            "pork",
            "chicken",
            "lamb",
            "mutton",
            "veal",
            "duck",
            "goose",
            "turkey",
            "liver",
            "kidney",
            "heart",
            "tongue",
            "ham",
            "bacon",
            "sausage",
            "frankfurter",
            "salami",
            "prosciutto",
            "corned",
            "whale",
            "foie gras",
            "gizzard",
            "pate",
        ),
    ),
    (
        Category.DAIRY,
        ("milk", "cheese", "yogurt", "cream", "butter", "egg"),
    ),
    (
        Category.LEGUMES,
        ("bean", "soy", "tofu", "lentil", "pea", "chickpea", "miso", "natto", "okara"),
    ),
    (
        Category.GRAINS,
        (
            "rice",
            "bread",
            "flour",
            "noodle",
            "pasta",
            "spaghetti",
            "barley",
            "wheat",
            "oat",
            "cereal",
            "bran",
            "ramen",
            "udon",
            "soba",
        ),
    ),
    (
        Category.NUTS,
        (
            "nut",
            "almond",
            "walnut",
            "peanut",
            "cashew",
            "pistachio",
            "seed",
            "sesame",
            "chia",
        ),
    ),
    (
        Category.FRUITS,
        (
            "apple",
            "banana",
            "orange",
            "strawberry",
            "grape",
            "mango",
            "avocado",
            "goji",
            "fruit",
        ),
    ),
    (
        Category.VEGETABLES,
        (
            "spinach",
            "broccoli",
            "carrot",
            "potato",
            "tomato",
            "onion",
            "cabbage",
            "lettuce",
            "mushroom",
            "asparagus",
            "pepper",
            "corn",
            "cucumber",
            "eggplant",
            "garlic",
            "ginger",
            "pumpkin",
            "squash",
            "seaweed",
            "radish",
            "leek",
            "sprout",
            "parsley",
            "okra",
            "bamboo",
            "turnip",
            "taro",
            "cauliflower",
            "burdock",
            "green beans",
        ),
    ),
    (
        Category.BEVERAGES,
        ("tea", "coffee", "juice", "beverage", "amazake"),
    ),
)

_LEVEL_THRESHOLDS: tuple[tuple[int, PurineLevel], ...] = (
    (100, PurineLevel.LOW),
    (200, PurineLevel.MEDIUM),
    (300, PurineLevel.HIGH),
)


def classify_category(name: str, source_type: SourceType) -> Category:
    """Assign a category from keywords in the raw food name."""
    if source_type is SourceType.ALCOHOL:
        return Category.BEVERAGES
    name_lower = name.lower()
    for category, keywords in CATEGORY_RULES:
        if any(keyword in name_lower for keyword in keywords):
            return category
    return Category.OTHER


def classify_purine_level(purines: int) -> PurineLevel:
    """Map mg/100g to a purine level using half-open intervals."""
    for upper_bound, level in _LEVEL_THRESHOLDS:
        if purines < upper_bound:
            return level
    return PurineLevel.VERY_HIGH
