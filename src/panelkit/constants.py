GRID_ROWS = 12
GRID_COLS = 6

# Runs shorter than this are not reported by the match scan.
MIN_MATCH_LENGTH = 3

# Seconds the editor shows "analyzing" before the scan result is delivered.
ANALYSIS_DELAY = 0.5

# Upper bounds for the continue-password time fields (inclusive).
HOURS_MAX = 9
MINUTES_MAX = 59
SECONDS_MAX = 59

DEFAULT_STAGE = "1-1"

# Number of grid snapshots the editor keeps for undo.
UNDO_DEPTH = 32
