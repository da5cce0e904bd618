from .ppgeomag import geomag, geomag_V, get_model, get_inclination_declination, itrs_to_enu
from .ppgeomag import ConstModel, ArrayStorage, MemmapStorage, save_tables
from .ppgeomag import WMM2015, WMM2015v2, WMM2020, MODELS
from .ppgeomag import datetime_to_yearfrac, yearfrac_to_datetime
