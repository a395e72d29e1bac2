DISCLAIMER = (
    "HomeReady estimates readiness from coarse ranges using a fixed-rate, 30-year payment model "
    "(principal, interest, property tax, insurance and mortgage insurance). "
    "Results are estimates only; lender overlays, full credit reports and underwriter discretion prevail. "
    "Down payment assistance limits reflect 2025 Utah Housing values and change periodically."
)

# Range token -> representative value. Missing or unrecognized tokens fall back
# to the matching *_DEFAULT below.
CREDIT_SCORE_RANGES = {
    "below-580": 550,
    "580-619": 600,
    "620-659": 640,
    "660-699": 680,
    "700-739": 720,
    "740-plus": 760,
    "not-sure": None,
}
INCOME_RANGES = {
    "under-40k": 35000,
    "40k-60k": 50000,
    "60k-80k": 70000,
    "80k-100k": 90000,
    "100k-150k": 125000,
    "150k-180k": 165000,
    "180k-220k": 200000,
    "220k-plus": 250000,
}
PRICE_RANGES = {
    "under-400k": 350000,
    "400k-500k": 450000,
    "500k-600k": 550000,
    "600k-700k": 650000,
    "700k-800k": 750000,
    "800k-900k": 850000,
    "900k-1m": 950000,
    "1m-plus": 1200000,
}
DOWN_PAYMENT_RANGES = {
    "under-10k": 5000,
    "10k-25k": 17500,
    "25k-50k": 37500,
    "50k-75k": 62500,
    "75k-100k": 87500,
    "100k-140k": 120000,
    "140k-180k": 160000,
    "180k-220k": 200000,
    "220k-260k": 240000,
    "260k-plus": 300000,
}
MONTHLY_DEBT_RANGES = {
    "none": 0,
    "under-250": 125,
    "250-500": 375,
    "500-1000": 750,
    "1000-2000": 1500,
    "2000-2500": 2250,
    "2500-3000": 2750,
    "3000-plus": 3500,
}

INCOME_DEFAULT = 60000
PRICE_DEFAULT = 500000
DOWN_PAYMENT_DEFAULT = 20000
MONTHLY_DEBT_DEFAULT = 0

# Inverse bands, highest first: (inclusive lower bound, token).
CREDIT_SCORE_BANDS = [(740, "740-plus"), (700, "700-739"), (660, "660-699"), (620, "620-659"), (580, "580-619")]
INCOME_BANDS = [
    (220000, "220k-plus"),
    (180000, "180k-220k"),
    (150000, "150k-180k"),
    (100000, "100k-150k"),
    (80000, "80k-100k"),
    (60000, "60k-80k"),
    (40000, "40k-60k"),
]
PRICE_BANDS = [
    (1000000, "1m-plus"),
    (900000, "900k-1m"),
    (800000, "800k-900k"),
    (700000, "700k-800k"),
    (600000, "600k-700k"),
    (500000, "500k-600k"),
    (400000, "400k-500k"),
]
DOWN_PAYMENT_BANDS = [
    (260000, "260k-plus"),
    (220000, "220k-260k"),
    (180000, "180k-220k"),
    (140000, "140k-180k"),
    (100000, "100k-140k"),
    (75000, "75k-100k"),
    (50000, "50k-75k"),
    (25000, "25k-50k"),
    (10000, "10k-25k"),
]
MONTHLY_DEBT_BANDS = [
    (3000, "3000-plus"),
    (2500, "2500-3000"),
    (2000, "2000-2500"),
    (1000, "1000-2000"),
    (500, "500-1000"),
    (250, "250-500"),
]

VETERAN_STATUSES = ("none", "active", "veteran", "guard-reserve", "spouse")
VA_ELIGIBLE_STATUSES = frozenset({"active", "veteran", "guard-reserve", "spouse"})

# Point tables: (threshold, points), first match wins.
CREDIT_POINTS = [(740, 30), (720, 27), (700, 24), (680, 20), (660, 17), (640, 14), (620, 10), (580, 5), (500, 2)]
CREDIT_UNKNOWN_POINTS = 15
DTI_POINTS = [(28, 25), (36, 22), (41, 18), (44, 14), (50, 10), (57, 5)]  # DTI strictly below threshold
DOWN_PAYMENT_POINTS = [(20, 20), (15, 17), (10, 14), (5, 10), (3.5, 7), (3, 5), (1, 3)]
DOWN_PAYMENT_FLOOR_POINTS = 1
VA_DOWN_PAYMENT_POINTS = 15
EMPLOYMENT_POINTS = 12
RESERVE_POINTS = [(6, 10), (4, 8), (3, 6), (2, 4), (1, 2)]
VETERAN_BONUS = 10
FIRST_TIME_BUYER_BONUS = 5

MAX_POINTS = {"credit": 30, "dti": 25, "down_payment": 20, "employment": 15, "reserves": 10}

# (minimum score, status, timeline, color)
STATUS_TABLE = [
    (85, "READY_NOW", "0-1 months", "red"),
    (75, "ALMOST_READY", "1-2 months", "orange"),
    (60, "GETTING_CLOSE", "3-6 months", "yellow"),
    (45, "BUILDING", "6-12 months", "blue"),
    (25, "EARLY_STAGE", "12-18 months", "blue"),
    (0, "JUST_EXPLORING", "18+ months", "blue"),
]

# DTI ceilings in percent.
COMFORTABLE_DTI = 36
LENDER_DTI = 43
FHA_MAX_DTI = 50
CRITICAL_DTI = 57

PRICE_FLOOR = 100000
PRICE_CEILING = 2000000
PRICE_STEP = 5000
MIN_SUGGESTED_PRICE = 200000
COMFORT_DOWN_PAYMENT_PCT = 0.05
MONTHLY_SAVINGS_RATE = 500
PATH_TO_GOAL_MIN_GAP = 10000

# Gap thresholds and realistic near-term gains per factor.
GAP_RULES = {
    "credit": {"below": 20, "high_below": 10, "max_gain": 10},
    "down_payment": {"below": 10, "high_below": 5, "max_gain": 7},
    "dti": {"below": 14, "high_below": 5, "max_gain": 10},
}

# 2025 Utah Housing values.
PROGRAM_LIMITS = {
    "first_home": {"income_limit": 141400, "min_credit_score": 660, "max_assistance_pct": 0.06},
    "home_again": {"income_limit": 141400, "min_credit_score": 660, "max_assistance_pct": 0.06},
    "fha": {"min_credit_35_down": 580, "min_credit_10_down": 500},
    "conventional": {"min_credit_score": 620},
}
UNKNOWN_CREDIT_ESTIMATE = 650

PROGRAM_CATALOG = ["VA Loan", "FHA Loan", "Conventional Loan", "Utah FirstHome", "Utah HomeAgain"]
