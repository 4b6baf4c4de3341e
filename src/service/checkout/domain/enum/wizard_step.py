from enum import IntEnum


class WizardStep(IntEnum):
    """Checkout wizard steps. Confirming on CONFIRMATION leaves the wizard."""

    SEAT_SELECTION = 1
    CONCESSIONS = 2
    CONFIRMATION = 3
