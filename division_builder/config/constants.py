"""
Engine Constants.

Central repository for the numerical and textual constants of the
division builder: division-count limits, the group color palette, the
highlighted-category code list and the labels used by the comparison
table.
"""

from __future__ import annotations


# =============================================================================
# Division count
# =============================================================================

MIN_DIVISIONS = 1
MAX_DIVISIONS = 12
DEFAULT_DIVISIONS = 3   # K at startup and after reset

DEFAULT_DIVISION_NAME = "Division {index}"

# =============================================================================
# Palette
# =============================================================================

# Ten distinguishable colors, indexed by (index - 1) mod len(DIVISION_COLORS)
DIVISION_COLORS = (
    "#1f77b4", "#ff7f0e", "#2ca02c", "#d62728", "#9467bd",
    "#8c564b", "#e377c2", "#7f7f7f", "#bcbd22", "#17becf",
)

# Map styling for units that are not in any division / are selected
POOL_FILL_COLOR = "#3388ff"
POOL_EDGE_COLOR = "#2c3e50"
SELECTED_FILL_COLOR = "#f39c12"
SELECTED_EDGE_COLOR = "#e67e22"
ASSIGNED_EDGE_COLOR = "white"

POOL_EDGE_WEIGHT = 0.8
HIGHLIGHTED_EDGE_WEIGHT = 1.5

# =============================================================================
# Highlighted category (Greater Buenos Aires partidos)
# =============================================================================

GBA_CODES = (
    "06028", "06035", "06091", "06260", "06270", "06274",
    "06371", "06408", "06410", "06412", "06427", "06434",
    "06490", "06515", "06539", "06560", "06568", "06658",
    "06749", "06756", "06760", "06805", "06840", "06861",
)

# =============================================================================
# Polygon selection
# =============================================================================

MIN_POLYGON_POINTS = 3
MAX_POLYGON_POINTS = 100  # drawing auto-finalizes at this many points

# =============================================================================
# Attribute table
# =============================================================================

AREA_ATTRIBUTE = "area"
POPULATION_ATTRIBUTE = "population_total"

# Accepted source keys for each canonical attribute, first match wins
ATTRIBUTE_ALIASES = {
    AREA_ATTRIBUTE: ("area", "superficie", "surface"),
    POPULATION_ATTRIBUTE: ("population_total", "poblacion_total", "population", "poblacion"),
}

DENSITY_SENTINEL = "0.0"
THOUSANDS_SEPARATOR = "."
MISSING_VALUE_TEXT = "-"

# =============================================================================
# Comparison table labels
# =============================================================================

TABLE_VARIABLE_HEADER = "Variable"
ROW_LABEL_COUNT = "Number of partidos"
ROW_LABEL_AREA = "Total area (km²)"
ROW_LABEL_POPULATION = "Total population"
ROW_LABEL_DENSITY = "Density (inhab/km²)"
LOADING_MESSAGE = "Loading area and population data..."

# =============================================================================
# Default input files (relative to FilesConfig.data_dir)
# =============================================================================

GEOJSON_FILE = "PBA.geojson"
ATTRIBUTES_FILE = "datos/datos_partidos.json"
REGIONS_FILE = "regiones/regiones_existentes.json"
