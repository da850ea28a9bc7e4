"""rapidms constants."""

import enum
from typing import Final


class IntensityType(str, enum.Enum):
    """Intensity reported for each picked peak."""

    PEAK_HEIGHT = "peakheight"
    PEAK_AREA = "peakarea"


class MSInstrument(enum.Enum):
    """Available MS instrument types."""

    QTOF = "qtof"
    ORBITRAP = "orbitrap"
    FTICR = "fticr"


class Polarity(enum.Enum):
    """Scan polarity."""

    POSITIVE = 1
    NEGATIVE = 2


class MSDataMode(enum.Enum):
    """Raw data mode."""

    PROFILE = 1
    CENTROID = 2


class ProgressLoggerType(enum.Enum):
    """Available progress logger implementations."""

    NONE = "none"
    TQDM = "tqdm"
    LOGGING = "logging"


# spectrum fields
MZ: Final[str] = "mz"
SPINT: Final[str] = "spint"  # spectral intensity
TIME: Final[str] = "time"
MS_LEVEL: Final[str] = "ms_level"
NAME: Final[str] = "name"
INDEX: Final[str] = "index"
POLARITY: Final[str] = "polarity"
INSTRUMENT: Final[str] = "instrument"
MODE: Final[str] = "mode"
METADATA: Final[str] = "metadata"

# experiment fields
SPECTRA: Final[str] = "spectra"
SETTINGS: Final[str] = "settings"

# peak picker parameters
SIGNAL_TO_NOISE: Final[str] = "signal_to_noise"
INTENSITY_TYPE: Final[str] = "intensity_type"
MS1_ONLY: Final[str] = "ms1_only"
STRICT_FIT: Final[str] = "strict_fit"

# peak picker window
MIN_PEAK_INTENSITY: Final[float] = 1.0
MAX_SPACING_RATIO: Final[float] = 1.5
WINDOW_HALF_SIZE: Final[int] = 2
PICK_PROGRESS_LABEL: Final[str] = "picking peaks"
