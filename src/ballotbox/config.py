"""Election constants and environment overrides.

Everything the registry, tally and entry points need to agree on lives here:
the fixed candidate list, the form options, the registration rules and the
storage keys. Deployment knobs are read from the environment.
"""

import os

# Fixed candidate set, in ballot order. Ties in the results keep this order.
CANDIDATES = (
    "Hassan Sheekh Mohamuud",
    "Mohamed Abdullaahi Farmaajo",
    "Mohamed Hussein Rooble",
    "Sheekh Shariif Sheekh Ahmed",
)

GENDERS = ("male", "female")

DISTRICTS = (
    "Abdiaziz",
    "Bondhere",
    "Daynile",
    "Dharkenley",
    "Hamar Jajab",
    "Hamar Weyne",
    "Hawl Wadaag",
    "Heliwa",
    "Hodan",
    "Kaaraan",
    "Kaxda",
    "Shangani",
    "Shibis",
    "Waberi",
    "Wadajir",
    "Wardhigley",
    "Yaqshid",
)

# registration rules
MIN_NAME_WORDS = 3
MIN_AGE_EXCLUSIVE = 18
PHONE_PREFIX = "25261"

# keys in the key-value store
VOTERS_KEY = "voters"
VOTES_KEY = "votes"

DATA_FILE = os.environ.get("BALLOTBOX_DATA_FILE", "data/ballotbox.json")
BASE_URL = os.environ.get("BALLOTBOX_URL", "http://127.0.0.1:5000")
LOG_LEVEL = os.environ.get("BALLOTBOX_LOG_LEVEL", "INFO")
