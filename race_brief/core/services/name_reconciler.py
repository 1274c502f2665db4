"""Reconciliation between schedule provider and overtake spreadsheet race names.

The schedule provider and the spreadsheet share no identifiers, so races are
joined through this hand-maintained table. The join is lossy: a race missing
from the table simply has no overtake data. Events that were renamed or moved
map onto the spreadsheet row of the venue they were held at.
"""

RACE_NAME_MAPPING: dict[str, str] = {
    # Europe
    "Italian Grand Prix": "Italy",
    "British Grand Prix": "Great Britain",
    "Emilia Romagna Grand Prix": "Emilia-Romagna",
    "Spanish Grand Prix": "Spain",
    "Monaco Grand Prix": "Monaco",
    "Belgian Grand Prix": "Belgium",
    "Dutch Grand Prix": "Netherlands",
    "Austrian Grand Prix": "Austria",
    "French Grand Prix": "France",
    "Hungarian Grand Prix": "Hungary",
    "Portuguese Grand Prix": "Portugal",
    "German Grand Prix": "Germany",
    "Russian Grand Prix": "Russia",
    # Americas
    "United States Grand Prix": "USA",
    "Brazilian Grand Prix": "Brazil",
    "São Paulo Grand Prix": "Brazil",
    "Mexican Grand Prix": "Mexico",
    "Mexico City Grand Prix": "Mexico",
    "Canadian Grand Prix": "Canada",
    "Miami Grand Prix": "Miami",
    "Las Vegas Grand Prix": "Las Vegas",
    # Asia Pacific
    "Japanese Grand Prix": "Japan",
    "Singapore Grand Prix": "Singapore",
    "Australian Grand Prix": "Australia",
    "Chinese Grand Prix": "China",
    "Bahrain Grand Prix": "Bahrain",
    "Saudi Arabian Grand Prix": "Saudi Arabia",
    "Qatar Grand Prix": "Qatar",
    "Korean Grand Prix": "Korea",
    "Malaysian Grand Prix": "Malaysia",
    "Indian Grand Prix": "India",
    # Middle East
    "Abu Dhabi Grand Prix": "Abu Dhabi",
    "Turkish Grand Prix": "Turkey",
    "Azerbaijan Grand Prix": "Azerbaijan",
    # One-off and relocated events
    "Styrian Grand Prix": "Austria",  # Red Bull Ring
    "70th Anniversary Grand Prix": "Great Britain",  # Silverstone
    "Eifel Grand Prix": "Germany",  # Nürburgring
    "Tuscan Grand Prix": "Italy",  # Mugello
    "Sakhir Grand Prix": "Bahrain",  # Bahrain outer circuit
}


def to_spreadsheet_name(race_name: str) -> str | None:
    """Map a schedule provider race name to the spreadsheet race name.

    Args:
        race_name: Race name as returned by the schedule provider.

    Returns:
        The spreadsheet race name, or None if the race is not mapped.
    """
    if not race_name or not isinstance(race_name, str):
        return None
    return RACE_NAME_MAPPING.get(race_name)


def has_mapping(race_name: str) -> bool:
    """Check whether a schedule provider race name has a spreadsheet mapping."""
    return to_spreadsheet_name(race_name) is not None


def all_mappings() -> dict[str, str]:
    """Return a copy of the full mapping table."""
    return dict(RACE_NAME_MAPPING)
