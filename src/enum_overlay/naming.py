"""
Naming — Derives an enum class name from an attribute name.

"order_types" -> "OrderType": singularize the last word, then camelize.
The rule table follows the usual English inflection rules for model names.
"""

import re


UNCOUNTABLE = frozenset({
    "equipment", "information", "rice", "money", "species",
    "series", "fish", "sheep", "jeans", "police", "news",
})

IRREGULAR = {
    "people": "person",
    "men": "man",
    "children": "child",
    "sexes": "sex",
    "moves": "move",
    "zombies": "zombie",
}

# First match wins
SINGULAR_RULES: list[tuple[re.Pattern[str], str]] = [
    (re.compile(p, re.IGNORECASE), r) for p, r in [
        (r"(database)s$", r"\1"),
        (r"(quiz)zes$", r"\1"),
        (r"(matr)ices$", r"\1ix"),
        (r"(vert|ind)ices$", r"\1ex"),
        (r"^(ox)en$", r"\1"),
        (r"(alias|status)(es)?$", r"\1"),
        (r"(octop|vir)(us|i)$", r"\1us"),
        (r"^(a)x[ie]s$", r"\1xis"),
        (r"(cris|test)(is|es)$", r"\1is"),
        (r"(shoe)s$", r"\1"),
        (r"(o)es$", r"\1"),
        (r"(bus)(es)?$", r"\1"),
        (r"^(m|l)ice$", r"\1ouse"),
        (r"(x|ch|ss|sh)es$", r"\1"),
        (r"(m)ovies$", r"\1ovie"),
        (r"([^aeiouy]|qu)ies$", r"\1y"),
        (r"([lr])ves$", r"\1f"),
        (r"(tive)s$", r"\1"),
        (r"(hive)s$", r"\1"),
        (r"([^f])ves$", r"\1fe"),
        (r"(^analy)(sis|ses)$", r"\1sis"),
        (r"([ti])a$", r"\1um"),
        (r"(ss)$", r"\1"),
        (r"(us)$", r"\1"),
        (r"s$", ""),
    ]
]


def singularize(word: str) -> str:
    """Singular form of a lowercase English word."""
    lowered = word.lower()
    if lowered in UNCOUNTABLE:
        return word
    if lowered in IRREGULAR:
        return IRREGULAR[lowered]
    for pattern, replacement in SINGULAR_RULES:
        if pattern.search(word):
            return pattern.sub(replacement, word, count=1)
    return word


def camelize(name: str) -> str:
    """snake_case -> CamelCase."""
    return "".join(part[:1].upper() + part[1:] for part in name.split("_") if part)


def classify(attribute: str) -> str:
    """
    Class name an attribute's enum is expected to have.
    
    Only the last underscore-separated word is singularized.
    """
    head, sep, last = attribute.rpartition("_")
    return camelize(f"{head}{sep}{singularize(last)}")
