"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

# Academic calendar, September through August.
MONTHS = (
    "Septembre",
    "Octobre",
    "Novembre",
    "Décembre",
    "Janvier",
    "Février",
    "Mars",
    "Avril",
    "Mai",
    "Juin",
    "Juillet",
    "Août",
)

LEVELS = (
    "1ère Année",
    "2ème Année",
    "3ème Année",
    "Master 1",
    "Master 2",
)

DEFAULT_TOTAL_AMOUNT_DUE = 15000
DEFAULT_RECENT_STUDENTS = 4
MAX_PHOTO_BYTES = 5 * 1024 * 1024
