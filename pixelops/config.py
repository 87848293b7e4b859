# pixelops/config.py

# -----------------------------------------------------------------------------
# Channel range
# -----------------------------------------------------------------------------
CHANNEL_MIN = 0
CHANNEL_CEILING = 255  # invert ceiling and BW-stylize white

# -----------------------------------------------------------------------------
# Tone constants
# -----------------------------------------------------------------------------
# Rows produce r', g', b' from the original (r, g, b).
SEPIA_MATRIX = (
    (0.393, 0.769, 0.189),
    (0.349, 0.686, 0.168),
    (0.272, 0.534, 0.131),
)

LUMINANCE_WEIGHTS = (0.299, 0.587, 0.114)

# -----------------------------------------------------------------------------
# Composite filter
# -----------------------------------------------------------------------------
WARM_RED_GAIN = 1.2
WARM_BLUE_DIVISOR = 1.5
HALO_WEIGHT = 0.65   # share of the working image when blending the halo
GRAIN_WEIGHT = 0.95  # share of the working image when blending the grain

# -----------------------------------------------------------------------------
# HSL domain
# -----------------------------------------------------------------------------
HUE_LIMIT = 360.0  # exclusive

# -----------------------------------------------------------------------------
# Execution
# -----------------------------------------------------------------------------
DEFAULT_WORKERS = 1

# -----------------------------------------------------------------------------
# Image I/O
# -----------------------------------------------------------------------------
SUPPORTED_EXTENSIONS = {".png", ".jpg", ".jpeg", ".bmp", ".tif", ".tiff", ".webp"}
