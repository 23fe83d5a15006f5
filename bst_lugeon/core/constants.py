"""Constantes globales del ensayo BST."""

# Tipos de patrón de presión
PATTERN_TYPE_A = "TYPE_A"
PATTERN_TYPE_B = "TYPE_B"
PATTERN_TYPE_C = "TYPE_C"
PATTERN_TYPE_D = "TYPE_D"

# Secuencia de referencia del patrón C (bar)
TYPE_C_SEQUENCE = (3, 6, 10, 15, 20, 25, 30, 35, 40, 45, 50)

# Coeficientes de fricción por diámetro de pozo (mm)
FRICTION_LARGE_DIAMETER_MM = 96.0
FRICTION_MEDIUM_DIAMETER_MM = 76.0
FRICTION_COEF_LARGE = 0.0001
FRICTION_COEF_MEDIUM = 0.0004
FRICTION_COEF_SMALL = 0.0012

# 10 m de columna de agua ≈ 1 bar
METERS_WATER_PER_BAR = 10.0
# Las lecturas de pérdida se toman en 10 minutos
READING_MINUTES = 10.0
# Longitud de referencia para la pérdida por fricción (m)
FRICTION_REFERENCE_DEPTH_M = 30.0

# Regímenes de flujo
FLOW_LAMINAR = "Laminar"
FLOW_TURBULENT = "Turbulent"
FLOW_DILATION = "Dilation"
FLOW_WASHOUT = "Washout"
FLOW_VOID_FILLING = "Void Filling"
FLOW_TYPES = (FLOW_LAMINAR, FLOW_TURBULENT, FLOW_DILATION, FLOW_WASHOUT, FLOW_VOID_FILLING)

# Umbrales heurísticos del clasificador (relativos al primer Lugeon)
WASHOUT_RATIO = 1.5
DILATION_RATIO = 1.2
TURBULENT_RATIO = 0.8
MIN_POSITIVE_READINGS = 3

# Clases de permeabilidad
PERMEABILITY_VERY_LOW = "Very low permeability / watertight"
PERMEABILITY_LOW = "Low permeability"
PERMEABILITY_MEDIUM = "Medium permeability"
PERMEABILITY_HIGH = "High permeability"
PERMEABILITY_VERY_HIGH = "Very high / cavitated"
PERMEABILITY_UNKNOWN = "-"

# Tipos de packer
PACKER_SINGLE = "SINGLE"
PACKER_DOUBLE = "DOUBLE"

# Configuración por defecto
DEFAULT_DIAMETER_MM = 76.0
DEFAULT_MANOMETER_HEIGHT_M = 1.0
DEFAULT_GROUNDWATER_M = 0.0
DEFAULT_STAGE_INTERVAL_M = 5.0
DEFAULT_PATTERN = PATTERN_TYPE_B
DEFAULT_MAX_PRESSURE = 6.0
DEFAULT_REVERSIBLE = True
DECIMALS = 2

# Textos aceptados como verdadero en banderas (entorno, CSV, formularios)
TRUE_WORDS = ("1", "true", "yes", "si", "sí", "on")
