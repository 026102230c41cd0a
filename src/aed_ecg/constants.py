"""Constants for AED shock analysis."""

# Default input and chart locations, relative to the working directory
DEFAULT_INPUT_FILE = "ecg.dat"
DEFAULT_PLOT_FILE = "ecg.png"

# Number of whitespace-separated fields in one trace record
RECORD_FIELDS = 3

# Default decision policy
MIN_AMPLITUDE = 0.1
MAX_BASELINE = 1.0
UNIFORMITY_THRESHOLD = 1.0
MIN_BPM_FAST = 200.0
MIN_BPM_SLOW = 150.0

# Reason codes attached to a "do not shock" decision
REASON_LOW_AMPLITUDE = "low_amplitude"
REASON_BASELINE_DRIFT = "baseline_drift"
REASON_DISORGANIZED_SLOW = "disorganized_slow"
REASON_RATE_TOO_LOW = "rate_too_low"
REASON_INSUFFICIENT_DATA = "insufficient_data"

# Console report verdicts
VERDICT_SHOCK = "YES, SHOCK!"
VERDICT_NO_SHOCK = "NO, DO NOT SHOCK"
START_BANNER = "** Starting AED Software **"
DONE_BANNER = "** Done **"
