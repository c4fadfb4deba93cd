"""
Fixed tables and solver settings for the stretching-sheet similarity model.

All sweeps share these values. The parameter tables hold the three
candidate values for each dimensionless group; the first entry of each
table is the baseline used whenever that group is not the one being
swept.

IMPORTANT: No unicode characters allowed in this file (Windows charmap constraint).
"""

# Similarity coordinate domain [eta_0, eta_max]
ETA_START = 0.0
ETA_END = 1.5

# Output samples on the eta grid (endpoints included)
NUM_POINTS = 151

# State vector layout: [F, F', G, G', theta]
STATE_NAMES = ("F", "Fp", "G", "Gp", "theta")
STATE_SIZE = len(STATE_NAMES)

# Initial condition at eta = 0
Y0 = (0.0, 1.0, 0.0, 1.0, 1.0)

# Solver settings, identical for every integration
RTOL = 1e-3
ATOL = 1e-5
MAX_STEP = 0.1
METHOD = "Radau"  # implicit, handles moderately stiff trajectories

# Parameter tables (baseline = first entry)
WE_VALUES = (0.5, 1.0, 1.5)       # Weissenberg number
BETA_VALUES = (0.5, 1.0, 1.5)     # magnetic Prandtl number
LAMBDA_VALUES = (0.5, 1.0, 1.5)   # magnetic number
HS_VALUES = (0.5, 1.0, 1.5)       # heat source
OMEGA_A_VALUES = (0.5, 1.0, 1.5)  # time-relaxation number

PARAMETER_NAMES = ("We", "beta", "lambda", "Hs", "Omega_a")

# Per-curve tables, indexed by curve number 1..4
FACTORS = (1.0, 1.02, 1.04, 1.06)
LABELS = (
    "Tri-hybrid nanofluid",
    "Hybrid nanofluid",
    "Nanofluid",
    "Base fluid",
)
LINE_STYLES = ("-", "--", ":", "-.")
