POINT_EQUALITY_TOLERANCE = 1e-9  # absolute tolerance for Point ==
PRECISION = 1e-5  # tolerance for results composed from several trig calls

DEGREES_PER_REVOLUTION = 360.0

PATH_TYPE_LINE = "line"
PATH_TYPE_CIRCLE = "circle"
PATH_TYPE_ARC = "arc"
