"""Constants for date matching and highlight rendering."""

# English month names and their standard abbreviations
MONTHS = {
    "jan": 1,
    "january": 1,
    "feb": 2,
    "february": 2,
    "mar": 3,
    "march": 3,
    "apr": 4,
    "april": 4,
    "may": 5,
    "jun": 6,
    "june": 6,
    "jul": 7,
    "july": 7,
    "aug": 8,
    "august": 8,
    "sep": 9,
    "sept": 9,
    "september": 9,
    "oct": 10,
    "october": 10,
    "nov": 11,
    "november": 11,
    "dec": 12,
    "december": 12,
}

# Qualifiers that mark a date as approximate ("Abt. 1900", "circa 1850")
APPROXIMATION_PREFIXES = ["abt", "about", "bef", "before", "aft", "after", "circa", "ca"]

# Fallbacks used when a record lacks a name
UNKNOWN_NAME = "Unknown"
UNKNOWN_SPOUSE = "Unknown"

# Shown in place of an empty bucket
NO_EVENT_PLACEHOLDER = "[No recorded Event]"

# Dataset location used when HIGHLIGHTS_DATA_SOURCE is not set
DEFAULT_DATA_SOURCE = "static/data/family-data.json"
DEFAULT_REQUEST_TIMEOUT = 10.0
DEFAULT_LOG_LEVEL = "WARNING"
