"""Project-wide single-source configuration constants for scoped dashboard modules."""

from pathlib import Path

# ----- Base directory configuration -------
PROJECT_ROOT = Path(__file__).resolve().parents[2]
CONFIG_YAML_PATH: Path = PROJECT_ROOT / "dashboard.yaml"

# ------ Identifier namespacing -------
ID_SEPARATOR: str = "-"          # Reserved; never allowed inside a single identifier

# ------ Host state keys -------
SESSION_ID_STATE_KEY: str = "_scoping_session_id"   # Stable per-browser-session id

# ------ Logging -------
LOG_LEVEL: str = "INFO"
LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# ------ Dashboard page -------
PAGE_TITLE: str = "Scoped Modules Dashboard"
PAGE_ICON: str = "🧩"

# ------- Demo datasets -------
DATASET_NAMES: tuple[str, ...] = ("weather", "traffic", "sales")
DATASET_DEFAULT: str = "weather"
SAMPLE_SIZE_DEFAULT: int = 500
SAMPLE_SIZE_MIN: int = 50
SAMPLE_SIZE_MAX: int = 5000
RANDOM_SEED: int = 42

# ------- Histogram module -------
HISTOGRAM_IDS: tuple[str, ...] = ("hist1", "hist2")
BINS_DEFAULT: int = 20
BINS_MIN: int = 5
BINS_MAX: int = 100
