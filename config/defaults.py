"""Default configuration constants for the Fresh Cow ROI Calculator."""

# Base effect sizes (reductions as fractions, production gain in percent)
DEATH_REDUCTION_BASE = 0.113
CULLING_VOLUNTARY_REDUCTION_BASE = 0.0666
CULLING_SOLD_REDUCTION_BASE = 0.113
HEALTH_EVENT_REDUCTION_BASE = 0.549
PRODUCTION_GAIN_PERCENT_BASE = 4.94

# Efficacy scenarios: multiplier applied uniformly to every base effect
SCENARIO_MULTIPLIERS = {
    "conservative": 0.75,
    "base": 1.0,
    "optimistic": 1.25,
}
SCENARIO_LABELS = {
    "conservative": "Conservative",
    "base": "Base",
    "optimistic": "Optimistic",
}
# Captions shown under the scenario slider
SCENARIO_CAPTIONS = {
    "conservative": "Cautious",
    "base": "Most likely",
    "optimistic": "Aggressive",
}
DEFAULT_SCENARIO = "base"

# Fresh cows per year default to 135% of the milking herd
FRESH_PER_COW = 1.35

# Labor (treated as an ongoing investment)
WAGE_PER_HOUR = 20
MONTHLY_HOURS = 22 * 30
LABOR_CHANGE_FRACTION = 0.10

# Product and applicators
COST_PER_DOSE = 4.5
APPLICATOR_COST = 40
APPLICATOR_COUNT = 3
APPLICATIONS_PER_YEAR = 1

# Days per year the production response is realized
PRODUCTION_DAYS_PER_YEAR = 210

# Calendar conversions
MONTHS_PER_YEAR = 12
DAYS_PER_MONTH = 30
DAYS_PER_YEAR = 365

# Default herd inputs
DEFAULT_MILKING_COWS = 10000
DEFAULT_REPLACEMENT_COST = 3500
DEFAULT_SALVAGE_VALUE = 2000
DEFAULT_MILK_PRICE = 20        # $/cwt
DEFAULT_LB_MILK_PER_LB_DM = 1.8
DEFAULT_DM_COST = 0.13         # $/lb
DEFAULT_DEATH_EVENTS = 700
DEFAULT_SOLD_EVENTS = 3000

# Default health-event catalog: (name, key, events/year, cost per event)
DEFAULT_HEALTH_EVENTS = [
    ("Metritis", "metritis", 900, 400),
    ("Mastitis", "mastitis", 2500, 400),
    ("Clinical Hypocalcemia / Milk Fever", "milkFever", 150, 275),
    ("Ketosis", "ketosis", 600, 200),
    ("Retained Placenta", "retainedPlacenta", 400, 330),
    ("Displaced Abomasum", "da", 150, 640),
    ("Respiratory Disorders", "respiratory", 300, 400),
    ("Digestive Disorders", "digestive", 400, 250),
    ("Lameness", "lameness", 900, 225),
]

# Input field labels (with the workbook cell they mirror)
FIELD_LABELS = {
    "milking_cows": "Milking cows (B2)",
    "fresh_per_year": "Fresh/year (B3)",
    "replacement_cost": "Replacement $ (B4)",
    "salvage_value": "Cow salvage $ (B5)",
    "milk_price": "Milk price $/cwt (B6)",
    "lb_milk_per_lb_dm": "lb Milk / lb DM (B7)",
    "dm_cost": "DM cost $/lb (B8)",
    "death_events": "Death events / year (B17)",
    "sold_events": "Sold events / year (B25)",
}

# Summary text
REPORT_TITLE = "FerAppease Fresh Cow ROI Summary"

# Logging
LOG_LEVEL = "INFO"
