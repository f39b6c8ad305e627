"""Thematic name generator for independent railroad companies."""

from .randomness import GameRandom, default_rng

SUFFIX_WEIGHTS = {
    "Railway": 10,
    "Railroad": 10,
    "Line": 5,
    "Transportation Company": 1,
    "Rail Road": 1,
    "Rail Company": 1,
}

# Common railroad terms that work anywhere
REGIONS = ["Northern", "Southern", "Eastern", "Western", "Central"]

# Grand single names (e.g. Enterprise, Pioneer)
GRAND_NAMES = [
    "Pioneer",
    "Liberty",
    "Enterprise",
    "Commonwealth",
    "Republic",
    "Continental",
    "Overland",
    "Frontier",
    "Trailblazer",
    "Excelsior",
    "Superior",
    "Imperial",
]

GRAND_NAME_CHANCE = 0.2
INDUSTRY_NAME_CHANCE = 0.6  # cumulative with GRAND_NAME_CHANCE

# State or province code -> (display name, geographic features, industries)
STATE_CHARACTERISTICS: dict[str, tuple[str, list[str], list[str]]] = {
    "AL": (
        "Alabama",
        ["Valley", "Ridge", "Hills", "River", "Talladega", "Black Belt"],
        ["Cotton", "Iron", "Mining", "Lumber", "Agricultural"],
    ),
    "AZ": (
        "Arizona",
        ["Mesa", "Canyon", "Desert", "Mountain", "Basin"],
        ["Mining", "Copper", "Trading"],
    ),
    "AR": (
        "Arkansas",
        ["Mountain", "Highlands", "Ridge", "Ozark", "Plains"],
        ["Lumber", "Cotton", "Mining", "Agricultural"],
    ),
    "CA": (
        "California",
        ["Mountain", "Valley", "Coast", "Bay", "Desert", "Pacific"],
        ["Mining", "Lumber", "Agricultural", "Maritime", "Express"],
    ),
    "CO": (
        "Colorado",
        ["Mountain", "Peak", "Valley", "Canyon", "Mesa", "Rocky Mountain"],
        ["Mining", "Trading"],
    ),
    "CT": (
        "Connecticut",
        ["River", "Valley", "Sound", "Harbor", "Atlantic", "Brownstone"],
        ["Industrial", "Maritime", "Commercial"],
    ),
    "DC": (
        "Capital",
        ["Potomac", "Federal", "Anacostia"],
        ["Commercial", "Express"],
    ),
    "DE": (
        "Delaware",
        ["Bay", "River", "Coast", "Harbor"],
        ["Maritime", "Industrial", "Commercial"],
    ),
    "FL": (
        "Florida",
        ["Coast", "Bay", "River", "Harbor", "Atlantic"],
        ["Maritime", "Lumber", "Agricultural", "Commercial"],
    ),
    "GA": (
        "Georgia",
        ["Mountain", "River", "Coast", "Valley", "Atlantic"],
        ["Cotton", "Lumber", "Agricultural", "Maritime"],
    ),
    "ID": (
        "Idaho",
        ["Mountain", "Valley", "River", "Canyon"],
        ["Mining", "Lumber", "Trading"],
    ),
    "IL": (
        "Illinois",
        ["Prairie", "Valley", "River", "Lake", "Shawnee"],
        ["Agricultural", "Industrial", "Commercial"],
    ),
    "IN": (
        "Indiana",
        ["Prairie", "Valley", "River", "Lake"],
        ["Industrial", "Agricultural", "Commercial"],
    ),
    "IA": (
        "Iowa",
        ["Prairie", "Valley", "River", "Hills"],
        ["Agricultural", "Industrial", "Commercial"],
    ),
    "KS": (
        "Kansas",
        ["Prairie", "Plains", "River", "Valley", "Junction"],
        ["Agricultural", "Cattle", "Trading"],
    ),
    "KY": (
        "Kentucky",
        ["Mountain", "Valley", "River", "Hills"],
        ["Coal", "Agricultural", "Industrial"],
    ),
    "LA": (
        "Louisiana",
        ["River", "Bay", "Coast", "Delta"],
        ["Cotton", "Maritime", "Agricultural", "Commercial"],
    ),
    "ME": (
        "Maine",
        ["Coast", "Bay", "Harbor", "Lake", "Forest", "Atlantic"],
        ["Lumber", "Maritime", "Industrial"],
    ),
    "MD": (
        "Maryland",
        ["Bay", "Harbor", "Chesapeake", "Piedmont"],
        ["Maritime", "Industrial", "Commercial"],
    ),
    "MA": (
        "Massachusetts",
        ["Bay", "Harbor", "Cape", "Berkshire", "Granite", "Plymouth", "Housatonic"],
        ["Maritime", "Industrial", "Commercial"],
    ),
    "MI": (
        "Michigan",
        ["Lake", "Peninsula", "Forest", "Superior"],
        ["Lumber", "Mining", "Industrial", "Maritime"],
    ),
    "MN": (
        "Minnesota",
        ["Lake", "Arrowhead", "Forest", "Plains", "Superior"],
        ["Lumber", "Mining", "Agricultural"],
    ),
    "MS": (
        "Mississippi",
        ["River", "Delta", "Coast", "Bay"],
        ["Cotton", "Lumber", "Maritime", "Agricultural"],
    ),
    "MO": (
        "Missouri",
        ["River", "Valley", "Prairie", "Hills"],
        ["Mining", "Agricultural", "Industrial"],
    ),
    "MT": (
        "Montana",
        ["Mountain", "Prairie", "Canyon", "Big Sky", "Glacier"],
        ["Mining", "Cattle", "Trading"],
    ),
    "NE": (
        "Nebraska",
        ["Prairie", "Plains", "River", "Valley"],
        ["Agricultural", "Cattle"],
    ),
    "NV": (
        "Nevada",
        ["Mountain", "Desert", "Basin", "Humboldt", "Sierra"],
        ["Mining", "Trading"],
    ),
    "NH": (
        "New Hampshire",
        ["Mountain", "Valley", "Monadnock", "Timberland", "Granite"],
        ["Lumber", "Industrial", "Mining"],
    ),
    "NJ": (
        "New Jersey",
        ["Coast", "Bay", "Harbor", "Valley", "Atlantic", "Pine"],
        ["Industrial", "Maritime", "Commercial"],
    ),
    "NM": (
        "New Mexico",
        ["Mesa", "Desert", "Rio Grande", "Sangre de Cristo", "Mountain"],
        ["Mining", "Cattle", "Trading"],
    ),
    "NY": (
        "New York",
        ["Lake", "Valley", "Mountain", "Harbor", "Upstate", "Taconic", "Erie"],
        ["Agricultural", "Maritime", "Commercial"],
    ),
    "NC": (
        "North Carolina",
        ["Blue Ridge", "Piedmont", "Coast", "Sound", "Atlantic"],
        ["Lumber", "Cotton", "Maritime", "Industrial"],
    ),
    "ND": (
        "North Dakota",
        ["Prairie", "Plains", "Valley", "River"],
        ["Agricultural", "Trading"],
    ),
    "OH": (
        "Ohio",
        ["River", "Valley", "Lake", "Hills"],
        ["Industrial", "Agricultural", "Commercial"],
    ),
    "OK": (
        "Oklahoma",
        ["Prairie", "Great Plains", "Mesa", "Panhandle"],
        ["Agricultural", "Trading"],
    ),
    "OR": (
        "Oregon",
        ["Cascades", "Columbia", "Coast", "Forest", "Pacific", "Willamette"],
        ["Lumber", "Maritime"],
    ),
    "PA": (
        "Pennsylvania",
        ["Mountain", "Valley", "River", "Forest", "Keystone", "Allegheny"],
        ["Coal", "Industrial", "Commercial"],
    ),
    "RI": (
        "Rhode Island",
        ["Bay", "Harbor", "Sound", "Coast"],
        ["Maritime", "Industrial", "Commercial"],
    ),
    "SC": (
        "South Carolina",
        ["Coast", "Valley", "Harbor", "River", "Canal"],
        ["Cotton", "Maritime", "Agricultural", "Industrial"],
    ),
    "SD": (
        "South Dakota",
        ["Prairie", "Plains", "Valley", "Hills"],
        ["Agricultural", "Mining", "Trading"],
    ),
    "TN": (
        "Tennessee",
        ["Mountain", "Valley", "River", "Upland", "Blue Ridge"],
        ["Coal", "Agricultural", "Industrial"],
    ),
    "TX": (
        "Texas",
        ["Plains", "Coast", "Valley", "Gulf", "Rio Grande"],
        ["Cattle", "Cotton", "Petroleum", "Trading"],
    ),
    "UT": (
        "Utah",
        ["Mountain", "Valley", "Desert", "Glen Canyon", "Four Corners", "Wasatch"],
        ["Mining", "Cattle", "Trading"],
    ),
    "VT": (
        "Vermont",
        ["Green Mountain", "Valley", "Champlain", "Timberline", "Burlington", "River"],
        ["Lumber", "Agricultural", "Granite"],
    ),
    "VA": (
        "Virginia",
        ["Mountain", "Valley", "Coast", "Bay"],
        ["Coal", "Maritime", "Agricultural"],
    ),
    "WA": (
        "Washington",
        ["Mountain", "Puget Sound", "Coast", "Forest", "Pacific", "Cascadia"],
        ["Lumber", "Maritime"],
    ),
    "WV": (
        "West Virginia",
        ["Mountain", "Valley", "River", "Forest"],
        ["Coal", "Industrial"],
    ),
    "WI": (
        "Wisconsin",
        ["Great Lakes", "Ridge", "Forest", "Midwest"],
        ["Lumber", "Agricultural", "Manufacturing", "Dairy"],
    ),
    "WY": (
        "Wyoming",
        ["Mountain", "Valley", "Plains", "Basin"],
        ["Mining", "Cattle", "Trading"],
    ),
    "BC": (
        "British Columbia",
        ["Coast", "Okanagan", "Plateau", "Valley", "Island", "Pacific", "Glacier"],
        ["Lumber", "Maritime", "Mining", "Fishing"],
    ),
    "AB": (
        "Alberta",
        ["Prairie", "Mountain", "Foothills", "River", "Canyon"],
        ["Oil", "Gas", "Agricultural", "Mining", "Cattle"],
    ),
    "SK": (
        "Saskatchewan",
        ["Prairie", "Forest", "Aspen", "Athabasca", "Basin"],
        ["Agricultural", "Wheat", "Potash", "Mining", "Cattle"],
    ),
    "MB": (
        "Manitoba",
        ["Prairie", "Lake", "Forest", "River"],
        ["Agricultural", "Mining", "Hydro-Electric"],
    ),
    "ON": (
        "Ontario",
        ["Great Lakes", "River", "Forest", "Valley"],
        ["Manufacturing", "Agricultural", "Mining"],
    ),
    "QC": (
        "Quebec",
        ["River", "Forest", "Bay", "Coast", "Pine"],
        ["Hydro-Electric", "Forestry", "Mining", "Manufacturing"],
    ),
    "NB": (
        "New Brunswick",
        ["Coast", "Bay", "Forest", "River", "Hill"],
        ["Forestry", "Fishing", "Mining", "Maritime"],
    ),
}


def _grand_name(rng: GameRandom, suffix: str, allow_article: bool) -> str:
    prefix = "The " if allow_article and rng.random() < 0.5 else ""
    return f"{prefix}{rng.random_array_item(GRAND_NAMES)} {suffix}"


def generate_railroad_name(
    rng: GameRandom | None = None, state_code: str | None = None
) -> str:
    """Create a thematically appropriate railroad company name.

    Three styles are drawn independently of the state:
    - grand name, e.g. "The Liberty Railway" (20%, or always without a state)
    - industry name, e.g. "Michigan Northern Lumber Line" (40%)
    - paired geography, e.g. "Valley & Western Railroad" (40%)

    Args:
        rng: Random source.
        state_code: State or province code whose features and industries
            may be used in the name (e.g. "MI").

    Returns:
        Generated company name.
    """
    rng = rng or default_rng()
    suffix = rng.weighted_random(SUFFIX_WEIGHTS) or "Railroad"
    style = rng.random()

    if state_code is None or style < GRAND_NAME_CHANCE:
        return _grand_name(rng, suffix, allow_article=True)

    characteristics = STATE_CHARACTERISTICS.get(state_code)
    if characteristics is None:
        return _grand_name(rng, suffix, allow_article=False)
    state_name, features, industries = characteristics

    if style < INDUSTRY_NAME_CHANCE:
        region = f"{rng.random_array_item(REGIONS)} " if rng.random() < 0.5 else ""
        return f"{state_name} {region}{rng.random_array_item(industries)} {suffix}"

    first = rng.random_array_item(features)
    pool = [term for term in REGIONS + features if term != first]
    second = rng.random_array_item(pool)
    return f"{first} & {second} {suffix}"
