from .base import AxisOrder, ReprojectionConfig, Reprojector
from .cs2cs import Cs2csReprojector
from .gateway import ReprojectionGateway
