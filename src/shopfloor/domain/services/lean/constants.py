"""Benchmarks and weights for lean workflow analysis.

These are coarse rules of thumb for small shops, not calibrated
industrial-engineering metrics.
"""

from __future__ import annotations

# ==============================================================================
# Travel and time
# ==============================================================================

# Walking speed while carrying material (ft/min)
WALKING_SPEED_FPM: float = 200.0

# Waste score loses one point per this many feet travelled
WASTE_FEET_PER_POINT: float = 5.0

# Total distance bands (ft)
CRITICAL_DISTANCE_FT: float = 500.0
WARNING_DISTANCE_FT: float = 300.0
TIP_DISTANCE_FT: float = 100.0

# A single hop longer than this is called out by name
PRIORITY_SEGMENT_FT: float = 100.0

# Hops longer than this are treated as material moving backward
BACKTRACK_SEGMENT_FT: float = 150.0

LOW_EFFICIENCY_PCT: float = 70.0
HIGH_EFFICIENCY_PCT: float = 90.0


# ==============================================================================
# Lean score
# ==============================================================================

MATERIAL_FLOW_WEIGHT: float = 0.4
WORKER_MOVEMENT_WEIGHT: float = 0.3
ORGANIZATION_WEIGHT: float = 0.2
SAFETY_WEIGHT: float = 0.1

# Categories scoring below this get issues and corrective recommendations
ACCEPTABLE_CATEGORY_SCORE: float = 70.0

# Worker movement bands: (average ft per hop upper bound, score)
WORKER_MOVEMENT_BANDS: tuple[tuple[float, int], ...] = (
    (50.0, 95),
    (100.0, 80),
    (150.0, 65),
    (200.0, 50),
)
WORKER_MOVEMENT_FLOOR_SCORE: int = 30

# Square feet per machine
GOOD_DENSITY_MIN_SQFT: float = 100.0
GOOD_DENSITY_MAX_SQFT: float = 200.0
SPARSE_DENSITY_SQFT: float = 300.0
SAFE_SPACING_SQFT: float = 150.0


# ==============================================================================
# Spaghetti diagram
# ==============================================================================

LOW_FREQUENCY_COLOR: str = "#10b981"
MEDIUM_FREQUENCY_COLOR: str = "#f59e0b"
HIGH_FREQUENCY_COLOR: str = "#ef4444"

# Trips per day above which a path turns orange, then red
MEDIUM_FREQUENCY_TRIPS: float = 20.0
HIGH_FREQUENCY_TRIPS: float = 50.0


# ==============================================================================
# Kaizen estimates
# ==============================================================================

LABOR_RATE_PER_HOUR: float = 25.0
WORKING_DAYS_PER_YEAR: int = 250

# Share of route distance a relayout is expected to remove
TRAVEL_REDUCTION_SHARE: float = 0.4

# Efficiency below this triggers the non-value-added time suggestion
KAIZEN_EFFICIENCY_PCT: float = 80.0
NON_VALUE_ADDED_MINUTES_SAVED: float = 30.0
NON_VALUE_ADDED_EFFICIENCY_GAIN: float = 15.0

# Average feet between stations above which machines should form cells
CELL_SPACING_FT: float = 100.0
CELL_DISTANCE_SHARE: float = 0.5
CELL_EFFICIENCY_GAIN: float = 10.0
CELL_ANNUAL_SAVINGS: float = 15000.0

# Lean score below this triggers the 5S suggestion
FIVE_S_LEAN_SCORE: float = 70.0
FIVE_S_EFFICIENCY_GAIN: float = 8.0
FIVE_S_ANNUAL_SAVINGS: float = 10000.0

TOOL_STORAGE_MINUTES_SAVED: float = 15.0
