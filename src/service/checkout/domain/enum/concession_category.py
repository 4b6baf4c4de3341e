from enum import StrEnum


class ConcessionCategory(StrEnum):
    """Concession categories, in the order the concessions step shows them"""

    COMBO = 'combo'
    POPCORN = 'popcorn'
    DRINK = 'drink'
    SNACK = 'snack'
    CANDY = 'candy'
