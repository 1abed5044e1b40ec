"""
Defaults shared by the pipeline, the renderer and the command line.

Everything here can be overridden per call through keyword arguments
(or CLI flags); the module only provides the values used when nothing
else is given.
"""

from __future__ import annotations

import os

# Number of series switched on when a dataset is first loaded.
# None activates every series.
DEFAULT_ACTIVE_COUNT: int | None = 3

DEFAULT_TITLE = "ROCIS Low Cost Monitoring Project"
X_LABEL = "Time"
Y_LABEL = "Particle Count (per 0.01 ft³)"

COLORWAY: tuple[str, ...] = (
    "#1f77b4", "#ff7f0e", "#2ca02c", "#d62728", "#9467bd",
    "#8c564b", "#e377c2", "#7f7f7f", "#bcbd22", "#17becf",
)
CHART_HEIGHT = 680

# Tried in order after ISO-8601 parsing fails.
FALLBACK_TIME_FORMATS: tuple[str, ...] = (
    "%m/%d/%Y %H:%M:%S",
    "%m/%d/%Y %H:%M",
    "%m/%d/%Y",
    "%Y/%m/%d %H:%M:%S",
    "%Y/%m/%d %H:%M",
)

# Seconds before an HTTP load is abandoned.
REQUEST_TIMEOUT = 30.0

# Manifest files for the two monitoring cohorts, relative to the data root.
MANIFEST_TEMPLATE = "Data/manifest_{kind}.json"
COHORTS = ("small", "large")

LOG_LEVEL = os.environ.get("PARTICLECHART_LOG_LEVEL", "WARNING").upper()
