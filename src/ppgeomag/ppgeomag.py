"""
MIT License

Copyright (c) 2021 Karl M. Laundal

Permission is hereby granted, free of charge, to any person obtaining a copy
of this software and associated documentation files (the "Software"), to deal
in the Software without restriction, including without limitation the rights
to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
copies of the Software, and to permit persons to whom the Software is
furnished to do so, subject to the following conditions:

The above copyright notice and this permission notice shall be included in all
copies or substantial portions of the Software.

THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
SOFTWARE.


Pure Python World Magnetic Model in Earth-centered Cartesian coordinates.

The field is calculated with the recursion for solid spherical harmonics
described in sections 3.2.4 and 3.2.5 of "Satellite Orbits: Models, Methods
and Applications" by Oliver Montenbruck and Eberhard Gill (2000). There are
no trigonometric functions or Legendre functions involved, so the
calculation is well behaved at the poles, and the only state kept during
the recursion is a handful of values per position.


Example usage:
--------------
import numpy as np
import ppgeomag

# SINGLE POSITION
r = [6371200., 0, 0] # ITRS position in meters
B = ppgeomag.geomag(2021.5, r, ppgeomag.WMM2020) # ITRS field in tesla

# MANY POSITIONS
r = np.random.normal(size = (100, 3))
r = 7e6 * r / np.linalg.norm(r, axis = 1, keepdims = True)
B = ppgeomag.geomag(2021.5, r, ppgeomag.WMM2020) # shape (100, 3)

# LOCAL COMPONENTS
Be, Bn, Bu = ppgeomag.itrs_to_enu(r, B)
inc, dec = ppgeomag.get_inclination_declination(Be, Bn, Bu)

# SINGLE PRECISION
B = ppgeomag.geomag(2021.5, r, ppgeomag.WMM2020, dtype = np.float32)



Here is a list of functions and classes:

Helper functions
----------------
is_leapyear          - Check if year is leapyear
yearfrac_to_datetime - Convert fraction of year to datetime
datetime_to_yearfrac - Convert datetime to fraction of year
numcof               - Number of coefficients for a maximum degree
itrs_to_enu          - Project ITRS vectors on local east, north, up
get_inclination_declination - Inclination and declination angles

Coefficient storage
-------------------
ArrayStorage         - Coefficient tables in memory
MemmapStorage        - Read-only memory mapped coefficient tables
save_tables          - Save coefficient tables for MemmapStorage
ConstModel           - Time dependent coefficients of a model
get_model            - Get named model with chosen storage

Main functions
--------------
geomag               - Calculate magnetic field (ITRS input/output)
geomag_V             - Calculate magnetic potential

"""

import numpy as np
import pandas as pd
import os
import warnings

from . import _tables

# Geomagnetic reference radius (mean radius of ellipsoid, WMM2015
# technical report section 1.2):
RE = 6371200. # m

# Default maximum spherical harmonic degree of WMM:
NMAX = 12

# The models are in nT, the output in T:
NT_TO_T = 1e-9

# Number of years after epoch that a WMM model is meant to be used:
WMM_LIFESPAN = 5.

DEFAULT_MODEL = 'WMM2020'



def is_leapyear(year):
    """ Check for leapyear (handles arrays and preserves shape)

    """

    # if array:
    if type(year) is np.ndarray:
        out = np.full_like(year, False, dtype = bool)

        out[ year % 4   == 0] = True
        out[ year % 100 == 0] = False
        out[ year % 400 == 0] = True

        return out

    # if scalar:
    if year % 400 == 0:
        return True

    if year % 100 == 0:
        return False

    if year % 4 == 0:
        return True

    else:
        return False


def yearfrac_to_datetime(fracyear):
    """
    Convert fraction of year to datetime

    Parameters
    ----------
    fracyear : iterable
        Date(s) in decimal year. E.g., 2021-03-28 is 2021.2356
        Must be an array, list or similar.

    Returns
    -------
    datetimes : array
        Array of datetimes
    """

    fracyear = np.atleast_1d(np.asarray(fracyear, dtype = np.float64))
    year = fracyear.astype(np.uint16) # truncate fracyear to get year
    # use pandas to_timedelta to represent time since beginning of year:
    delta_year = pd.to_timedelta((fracyear - year)*(365 + is_leapyear(year)), unit = 'D')
    # and DatetimeIndex to represent beginning of years:
    start_year = pd.DatetimeIndex(list(map(str, year)))

    # adding them produces the datetime:
    return (start_year + delta_year).to_pydatetime()


def datetime_to_yearfrac(dates):
    """
    Convert datetime to fraction of year (decimal year)

    The inverse of yearfrac_to_datetime. Decimal years are the time
    argument of geomag and geomag_V.

    Parameters
    ----------
    dates : datetime(s)
        One or more dates. If you pass a scalar, the output will be
        an array of shape (1,)

    Returns
    -------
    fracyear : array
        Array of decimal years
    """

    dates = pd.DatetimeIndex(np.atleast_1d(dates))

    # days since the beginning of the year, including time of day:
    days = (dates.dayofyear - 1).to_numpy() \
         + ((dates - dates.normalize()) / pd.Timedelta(days = 1)).to_numpy()

    return dates.year.to_numpy() + days / (365 + dates.is_leap_year)


def numcof(nmax):
    """ Number of (n, m) pairs with 0 <= m <= n <= nmax """
    return (nmax + 1) * (nmax + 2) // 2



class ArrayStorage:
    """
    Coefficient tables kept in memory

    The four tables are stacked in one read-only array of shape
    (4, numcof(nmax)), in the order given by the class constants
    MAIN_C, MAIN_S, SV_C and SV_S. The (n, m) -> index packing is
    the business of ConstModel; storage only knows flat indices.

    Parameters
    ----------
    main_c : array
        main field coefficients for cos terms [nT]
    main_s : array
        main field coefficients for sin terms [nT]
    sv_c : array
        secular variation of cos terms [nT/year]
    sv_s : array
        secular variation of sin terms [nT/year]
    dtype : numpy dtype, optional
        data type of the stored tables. Default is np.float64
    """

    MAIN_C, MAIN_S, SV_C, SV_S = range(4)

    def __init__(self, main_c, main_s, sv_c, sv_s, dtype = np.float64):

        tables = [np.asarray(t, dtype = dtype).flatten() for t in (main_c, main_s, sv_c, sv_s)]
        sizes = set(t.size for t in tables)
        if len(sizes) != 1:
            raise ValueError('Coefficient tables have different sizes: {}'.format(
                             [t.size for t in tables]))

        self._tables = np.vstack(tables)
        self._tables.flags.writeable = False

    @property
    def size(self):
        """ Number of coefficients in each table """
        return self._tables.shape[1]

    @property
    def tables(self):
        return self._tables

    def read(self, table, index):
        """ Read element index of table """
        return self._tables[table, index]


class MemmapStorage(ArrayStorage):
    """
    Coefficient tables memory mapped read-only from a .npy file

    Use this for tables that should stay on disk (or in any other
    memory that the operating system can map) instead of being copied
    into memory. The file must contain an array of shape (4, N),
    with tables in the order of ArrayStorage. Such a file is made
    by save_tables.

    Parameters
    ----------
    filename : string
        filename of .npy file
    """

    def __init__(self, filename):

        tables = np.load(filename, mmap_mode = 'r')
        if tables.ndim != 2 or tables.shape[0] != 4:
            raise ValueError('{} contains array of shape {}, expected (4, N)'.format(
                             filename, tables.shape))

        self.filename = filename
        self._tables = tables


def save_tables(model, filename):
    """
    Save the coefficient tables of model to .npy file,
    which can be read with MemmapStorage.
    """
    with open(filename, 'wb') as f:
        np.save(f, np.asarray(model.storage.tables))



class ConstModel:
    """
    Spherical harmonic model with linear time dependence

    Coefficients are unnormalized, for the solid spherical harmonics
    of the geomag recursion. The model is never modified after it is
    made, and can be shared between any number of evaluations.

    Parameters
    ----------
    epoch : float
        Reference epoch of the model, decimal year
    storage : ArrayStorage
        Storage of the coefficient tables, with numcof(nmax) elements
        in each table
    nmax : int, optional
        Maximum spherical harmonic degree. Default is 12 (WMM)
    lifespan : float, optional
        Number of years after epoch that the model is valid. geomag
        warns when used outside this range. Default is 5 (WMM)
    name : string, optional
        Name of model

    Raises
    ------
    ValueError
        If nmax is negative, or the tables do not have numcof(nmax)
        elements
    """

    def __init__(self, epoch, storage, nmax = NMAX, lifespan = WMM_LIFESPAN, name = None):

        if nmax < 0:
            raise ValueError('nmax must be non-negative, got {}'.format(nmax))

        if storage.size != numcof(nmax):
            raise ValueError('Tables of size {} do not match nmax = {} ({} coefficients)'.format(
                             storage.size, nmax, numcof(nmax)))

        self._epoch = float(epoch)
        self._storage = storage
        self._nmax = int(nmax)
        self._lifespan = float(lifespan)
        self._name = name

    @classmethod
    def from_tables(cls, epoch, main_c, main_s, sv_c, sv_s, **kwargs):
        """ Make model with ArrayStorage of the given tables """
        dtype = kwargs.pop('dtype', np.float64)
        return cls(epoch, ArrayStorage(main_c, main_s, sv_c, sv_s, dtype = dtype), **kwargs)

    @property
    def epoch(self):
        return self._epoch

    @property
    def storage(self):
        return self._storage

    @property
    def nmax(self):
        return self._nmax

    @property
    def lifespan(self):
        return self._lifespan

    @property
    def name(self):
        return self._name

    def __repr__(self):
        return '{}(name = {!r}, epoch = {}, nmax = {})'.format(
               type(self).__name__, self._name, self._epoch, self._nmax)

    def index(self, n, m):
        """
        Flat index of coefficient (n, m) in the tables

        Tables are packed order-major: all n for m = 0, then all n >= 1
        for m = 1, and so on.

        Raises
        ------
        ValueError
            If not 0 <= m <= n <= nmax
        """
        if not 0 <= m <= n <= self._nmax:
            raise ValueError('No coefficient (n, m) = ({}, {}) for nmax = {}'.format(
                             n, m, self._nmax))

        return m * (2 * self._nmax - m + 1) // 2 + n

    def _term(self, main, sv, n, m, dyear):
        i = self.index(n, m)
        return self._storage.read(main, i) + (dyear - self._epoch) * self._storage.read(sv, i)

    def cos_term(self, n, m, dyear):
        """ Cos coefficient (n, m) [nT], extrapolated to decimal year dyear """
        return self._term(ArrayStorage.MAIN_C, ArrayStorage.SV_C, n, m, dyear)

    def sin_term(self, n, m, dyear):
        """ Sin coefficient (n, m) [nT], extrapolated to decimal year dyear """
        return self._term(ArrayStorage.MAIN_S, ArrayStorage.SV_S, n, m, dyear)



def _check_dyear(dyear, model):
    """ Warn if dyear is outside the time range of model """
    if not model.epoch <= dyear <= model.epoch + model.lifespan:
        warnings.warn('You provided decimal year {} not covered by model {} ({} to {})'.format(
                      dyear, model.name, model.epoch, model.epoch + model.lifespan))


def _prepare_position(position, dtype):
    """
    Return position as (K, 3) array of dtype, and the shape to
    give the output

    Raises ValueError if position is not (..., 3), or if the squared
    length of a position is zero or not finite in dtype
    """
    position = np.asarray(position, dtype = dtype)
    if position.shape[-1:] != (3, ):
        raise ValueError('position must have shape (3,) or (..., 3), got {}'.format(position.shape))

    shape = position.shape
    position = position.reshape((-1, 3))

    # squared length can underflow to zero for nonzero vectors
    rsqrd = np.sum(position**2, axis = 1)
    if np.any(rsqrd == 0) or not np.all(np.isfinite(rsqrd)):
        raise ValueError('position can not be the zero vector, or too short or long for {}'.format(
                         np.dtype(dtype).name))

    return position, shape


def _solid_harmonics(position, nmax, dtype):
    """
    Generate solid spherical harmonics with the Cartesian recursion

    Yields (n, m, V, W) for m = 0, ..., nmax and n = m, ..., nmax,
    in that order. V and W are arrays with one value per position.
    Only the diagonal (Vtop, Wtop) and the previous value in the
    current order are kept, so there is no (nmax x nmax) buffer.

    Parameters
    ----------
    position : array
        ITRS positions [m], shape (K, 3)
    nmax : int
        maximum degree and order to calculate
    dtype : numpy dtype
        floating point type of the calculation
    """

    R = dtype(RE)
    x, y, z = position.T

    rsqrd = x**2 + y**2 + z**2
    temp = R / rsqrd
    a, b, f, g = x * temp, y * temp, z * temp, R * temp

    # degree 0:
    Vtop = R / np.sqrt(rsqrd)
    Wtop = np.zeros_like(Vtop)
    Vnm, Wnm = Vtop, Wtop
    Vprev, Wprev = np.zeros_like(Vtop), np.zeros_like(Vtop)

    for m in range(nmax + 1):
        for n in range(m, nmax + 1):
            if n == m:
                if m != 0: # step along diagonal
                    Vtop, Wtop = (2*m - 1) * (a * Vtop - b * Wtop), (2*m - 1) * (a * Wtop + b * Vtop)
                    Vprev, Wprev = np.zeros_like(Vtop), np.zeros_like(Wtop)
                    Vnm, Wnm = Vtop, Wtop
            else: # increase degree
                Vnm, Vprev = ((2*n - 1) * f * Vnm - (n + m - 1) * g * Vprev) / (n - m), Vnm
                Wnm, Wprev = ((2*n - 1) * f * Wnm - (n + m - 1) * g * Wprev) / (n - m), Wnm

            yield n, m, Vnm, Wnm


def geomag(dyear, position, model = None, dtype = np.float64):
    """
    Calculate magnetic field model components

    Input and output in International Terrestrial Reference System
    (Earth-centered, Earth-fixed Cartesian) coordinates

    The calculation is vectorized over positions. The coefficients
    are evaluated at a single time.

    Parameters
    ----------
    dyear : float
        decimal year to evaluate model, for example 2021.5. Should be
        within model lifespan after model epoch (a warning is issued
        if it is not)
    position : array
        ITRS position(s) [m], shape (3,) or (..., 3). Must be above
        the surface of the Earth, and can not be zero
    model : ConstModel, optional
        model to evaluate. Default is the model named DEFAULT_MODEL
    dtype : numpy dtype, optional
        floating point type of the calculation, np.float32 or
        np.float64. Default is np.float64

    Return
    ------
    B : array
        Magnetic field [T] in ITRS coordinates, with same shape
        as position

    Raises
    ------
    ValueError
        If a position is the zero vector, or the shape of position
        is not (..., 3)
    """

    if model is None:
        model = MODELS[DEFAULT_MODEL]

    dtype = np.dtype(dtype).type
    _check_dyear(dyear, model)
    position, shape = _prepare_position(position, dtype)

    N = model.nmax
    C = lambda n, m: dtype(model.cos_term(n, m, dyear))
    S = lambda n, m: dtype(model.sin_term(n, m, dyear))

    px = np.zeros(position.shape[0], dtype = dtype)
    py = np.zeros(position.shape[0], dtype = dtype)
    pz = np.zeros(position.shape[0], dtype = dtype)

    # the derivatives of degree N terms need degree N + 1 harmonics
    for n, m, Vnm, Wnm in _solid_harmonics(position, N + 1, dtype):

        if m < N and n >= m + 2:
            Cnm, Snm = C(n - 1, m + 1), S(n - 1, m + 1)
            px += 0.5 * (n - m) * (n - m - 1) * ( Cnm * Vnm + Snm * Wnm)
            py += 0.5 * (n - m) * (n - m - 1) * (-Cnm * Wnm + Snm * Vnm)

        if n >= 2 and m >= 2:
            Cnm, Snm = C(n - 1, m - 1), S(n - 1, m - 1)
            px += 0.5 * (-Cnm * Vnm - Snm * Wnm)
            py += 0.5 * (-Cnm * Wnm + Snm * Vnm)

        if m == 1 and n >= 2: # no sin term for m = 0
            Cnm = C(n - 1, 0)
            px += -Cnm * Vnm
            py += -Cnm * Wnm

        if n >= 2 and n > m:
            Cnm, Snm = C(n - 1, m), S(n - 1, m)
            pz += (n - m) * (-Cnm * Vnm - Snm * Wnm)

    B = -np.stack((px, py, pz), axis = 1) * dtype(NT_TO_T)
    return B.reshape(shape)


def geomag_V(dyear, position, model = None, dtype = np.float64):
    """
    Calculate magnetic potential

    Input in ITRS coordinates. The potential V is defined so that
    the magnetic field is B = -grad V

    Parameters
    ----------
    dyear : float
        decimal year to evaluate model
    position : array
        ITRS position(s) [m], shape (3,) or (..., 3)
    model : ConstModel, optional
        model to evaluate. Default is the model named DEFAULT_MODEL
    dtype : numpy dtype, optional
        floating point type of the calculation. Default is np.float64

    Return
    ------
    V : array
        Magnetic potential [T m], with shape position.shape[:-1]
    """

    if model is None:
        model = MODELS[DEFAULT_MODEL]

    dtype = np.dtype(dtype).type
    _check_dyear(dyear, model)
    position, shape = _prepare_position(position, dtype)

    V = np.zeros(position.shape[0], dtype = dtype)
    for n, m, Vnm, Wnm in _solid_harmonics(position, model.nmax, dtype):
        V += dtype(model.cos_term(n, m, dyear)) * Vnm + dtype(model.sin_term(n, m, dyear)) * Wnm

    V = V * dtype(RE * NT_TO_T)
    return V.reshape(shape[:-1])


def itrs_to_enu(position, vector):
    """
    Project ITRS vectors on local geocentric east, north and up

    The directions are those of a sphere centered at the origin, with
    north towards the z axis.

    Parameters
    ----------
    position : array
        ITRS position(s), shape (..., 3)
    vector : array
        ITRS vector(s) at position, shape (..., 3), for example
        output from geomag

    Returns
    -------
    ve : array
        Vector component in eastward direction
    vn : array
        Vector component in northward direction
    vu : array
        Vector component in upward (radial) direction
    """

    position, vector = np.broadcast_arrays(np.asarray(position, dtype = np.float64),
                                           np.asarray(vector))
    x, y, z = np.moveaxis(position, -1, 0)
    lon = np.arctan2(y, x)
    lat = np.arctan2(z, np.hypot(x, y))

    sinlon, coslon = np.sin(lon), np.cos(lon)
    sinlat, coslat = np.sin(lat), np.cos(lat)

    vx, vy, vz = np.moveaxis(vector, -1, 0)
    ve = -sinlon * vx + coslon * vy
    vn = -sinlat * coslon * vx - sinlat * sinlon * vy + coslat * vz
    vu =  coslat * coslon * vx + coslat * sinlon * vy + sinlat * vz

    return ve, vn, vu


def get_inclination_declination(Be, Bn, Bu, degrees=True):
    r"""
    Compute the inclination and declination angles of the magnetic field

    The inclination angle is defined as the angle between the magnetic field
    vector and the horizontal plane:

    .. math::

        I = \arctan \frac{-B_u}{\sqrt{B_e^2 + B_n^2}}

    And the declination angle is defined as the azimuth of the projection of
    the magnetic field vector onto the horizontal plane (starting from the
    northing direction, positive to the east and negative to the west):

    .. math::

        D = \arctan \frac{B_e}{B_n}

    with the quadrant given by the signs of B_e and B_n. Where the
    horizontal component is zero, the declination is zero and the
    inclination is +-90 degrees.

    Parameters
    ----------
    Be : float or array
        Easting component of the magnetic vector.
    Bn : float or array
        Northing component of the magnetic vector.
    Bu : float or array
        Upward component of the magnetic vector.
    degrees : bool (optional)
        If True, the angles are returned in degrees.
        If False, the angles are returned in radians.
        Default True.

    Returns
    -------
    inclination : float or array
        Inclination angle of the magnetic vector. If ``degrees`` is True,
        then the angle is returned in degrees. If ``degrees`` is False, then
        it's returned in radians.
    declination : float or array
        Declination angle of the magnetic vector. If ``degrees`` is True,
        then the angle is returned in degrees. If ``degrees`` is False, then
        it's returned in radians.
    """
    # Compute the horizontal component of B
    horizontal_component = np.hypot(Be, Bn)

    inclination = np.arctan2(-np.asarray(Bu, dtype = np.float64), horizontal_component)
    declination = np.arctan2(Be, Bn)

    # Convert to degrees if needed
    if degrees:
        inclination = np.degrees(inclination)
        declination = np.degrees(declination)
    return inclination, declination



# Models
# ------
def _make_model(name, tables):
    return ConstModel.from_tables(tables['epoch'],
                                  tables['main_field_c'], tables['main_field_s'],
                                  tables['secular_var_c'], tables['secular_var_s'],
                                  name = name)

WMM2015   = _make_model('WMM2015', _tables.WMM2015)
WMM2015v2 = _make_model('WMM2015v2', _tables.WMM2015v2)
WMM2020   = _make_model('WMM2020', _tables.WMM2020)

MODELS = {model.name: model for model in (WMM2015, WMM2015v2, WMM2020)}


def get_model(name = DEFAULT_MODEL, storage = 'memory', filename = None):
    """
    Get named model, with coefficients in the chosen storage

    Parameters
    ----------
    name : string, optional
        name of model, one of the keys of MODELS. Default is DEFAULT_MODEL
    storage : {'memory', 'mmap'}, optional
        'memory' (default) keeps the tables in memory. 'mmap' memory maps
        the tables read-only from filename. If filename does not exist,
        it is made from the tables of the named model first
    filename : string, optional
        .npy file with tables, required if storage is 'mmap'

    Returns
    -------
    model : ConstModel

    Raises
    ------
    KeyError
        If name is not a known model
    ValueError
        If storage is not known, or 'mmap' is used without filename, or
        filename holds other tables than those of the named model
    """

    if name not in MODELS:
        raise KeyError('Unknown model {}, available models are {}'.format(name, list(MODELS.keys())))
    model = MODELS[name]

    if storage == 'memory':
        return model

    if storage == 'mmap':
        if filename is None:
            raise ValueError("storage = 'mmap' requires filename")
        if not os.path.exists(filename):
            save_tables(model, filename)

        mapped = MemmapStorage(filename)
        if mapped.tables.shape != model.storage.tables.shape or \
           not np.array_equal(mapped.tables, model.storage.tables):
            raise ValueError('{} does not contain the tables of model {}'.format(filename, name))

        return ConstModel(model.epoch, mapped, nmax = model.nmax,
                          lifespan = model.lifespan, name = model.name)

    raise ValueError("storage must be 'memory' or 'mmap', got {!r}".format(storage))



if __name__ == '__main__':

    # SINGLE POSITION
    r = [6371200., 0, 0] # ITRS position in meters
    B = geomag(2021.5, r, WMM2020) # ITRS field in tesla

    # MANY POSITIONS
    r = np.random.normal(size = (100, 3))
    r = 7e6 * r / np.linalg.norm(r, axis = 1, keepdims = True)
    B = geomag(2021.5, r, WMM2020)

    Be, Bn, Bu = itrs_to_enu(r, B)
    inc, dec = get_inclination_declination(Be, Bn, Bu)
