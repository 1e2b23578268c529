from .builder import NumberFormat, WktBuilder, build_wkt, format_number
from .parser import GRAMMARS, WktParser, parse_wkt
