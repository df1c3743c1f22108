"""
Numeric constants shared by the converters, the parser and the formatter.
"""

# Channel / circle ranges
CHANNEL_MAX = 255
HUE_MAX = 360.0
HUE_SECTOR = 60.0

# Luma weights
LUMA_BT601 = (0.299, 0.587, 0.114)          # classic grayscale
LUMA_HDTV = (0.2126, 0.7152, 0.0722)        # ITU-R BT.709
LUMA_HDR = (0.2627, 0.678, 0.0593)          # ITU-R BT.2100
MONOCHROME_THRESHOLD = 128

# sRGB transfer function
SRGB_SLOPE = 12.92
SRGB_OFFSET = 0.055
SRGB_DIVISOR = 1.055
SRGB_GAMMA = 2.4
SRGB_TO_LINEAR_TH = 0.04045
LINEAR_TO_SRGB_TH = 0.00304
LUMINANCE_TH = 0.03928                      # WCAG 2.0 linearization threshold
WCAG_OFFSET = 0.05

# D65 reference white
D65_X = 0.950470
D65_Y = 1.0
D65_Z = 1.088830

# sRGB <-> XYZ (D65)
M_SRGB_XYZ = (
    (0.4124564, 0.3575761, 0.1804375),
    (0.2126729, 0.7151522, 0.0721750),
    (0.0193339, 0.1191920, 0.9503041),
)
M_XYZ_SRGB = (
    (3.2404542, -1.5371385, -0.4985314),
    (-0.9692660, 1.8760108, 0.0415560),
    (0.0556434, -0.2040259, 1.0572252),
)

# CIELAB
LAB_T0 = 4.0 / 29.0
LAB_T1 = 6.0 / 29.0
LAB_T2 = 3.0 * LAB_T1 * LAB_T1
LAB_T3 = LAB_T1 * LAB_T1 * LAB_T1
LAB_L_MAX = 100.0
ACHROMATIC_CHROMA = 1e-3

# Black-body approximation (Tanner Helland fit)
TEMPERATURE_MIN = 1000
TEMPERATURE_MAX = 40000
TEMPERATURE_EPS = 0.4
TEMP_RED = (351.97690566805693, 0.114206453784165, -40.25366309332127)
TEMP_GREEN_LOW = (-155.25485562709179, -0.44596950469579133, 104.49216199393888)
TEMP_GREEN_HIGH = (325.4494125711974, 0.07943456536662342, -28.0852963507957)
TEMP_BLUE = (-254.76935184120902, 0.8274096064007395, 115.67994401066147)

# Output precision (decimal places)
HUE_DIGITS = 2
PERCENT_DIGITS = 2
FRACTION_DIGITS = 4
ALPHA_DIGITS = 3
LAB_DIGITS = 2
