"""
Test magnetic field
"""
import pytest
import numpy as np
import numpy.testing as npt

from ppgeomag import geomag, geomag_V, ConstModel, WMM2015, WMM2015v2, WMM2020
from ppgeomag.ppgeomag import RE

# Reference values from an independent double precision run of the recursion,
# ITRS field in tesla
PRECOMPUTED = [
    # model, decimal year, position [m], field [T]
    (WMM2015, 2015.0, (RE, 0, 0), (1.5896539988e-05, -2.6373366400e-06, 2.7640218401e-05)),
    (WMM2015, 2015.0, (0, 0, RE), (-1.8763485418e-06, -2.1482143076e-07, -5.6268500000e-05)),
    (WMM2015, 2017.5, (0, RE, 0), (1.3493010155e-06, 1.3301869781e-05, 4.0417109852e-05)),
    (WMM2015, 2017.5, (0, 0, -RE), (1.4312585301e-05, -8.4348793591e-06, -5.1819400000e-05)),
    (WMM2015v2, 2015.0, (4e6, -3e6, 5.5e6), (-2.4323156895e-05, 1.4435864156e-05, -1.2201612982e-05)),
    (WMM2015v2, 2017.5, (RE, 0, 0), (1.6040184411e-05, -2.4467154578e-06, 2.7642757497e-05)),
    (WMM2020, 2020.0, (RE, 0, 0), (1.6113271560e-05, -2.2535630791e-06, 2.7634356426e-05)),
    (WMM2020, 2020.0, (0, RE, 0), (1.3607283396e-06, 1.3161031953e-05, 4.0589994011e-05)),
    (WMM2020, 2020.0, (0, 0, RE), (-1.7976677977e-06, 1.0434226736e-07, -5.6386700000e-05)),
    (WMM2020, 2020.0, (0, 0, -RE), (1.4276485013e-05, -8.5203599921e-06, -5.1671300000e-05)),
    (WMM2020, 2020.0, (4e6, -3e6, 5.5e6), (-2.4229666240e-05, 1.4596965453e-05, -1.1988648353e-05)),
    (WMM2020, 2022.5, (RE, 0, 0), (1.6168382707e-05, -2.0549489032e-06, 2.7622244709e-05)),
    (WMM2020, 2022.5, (0, 0, RE), (-1.7289308550e-06, 2.6217862058e-07, -5.6446950000e-05)),
    (WMM2020, 2022.5, (4e6, -3e6, 5.5e6), (-2.4185219000e-05, 1.4680034508e-05, -1.1881759770e-05)),
]


def dipole_model(g10):
    """
    Model with only the axial dipole term, for which the field is
    known in closed form
    """
    main_c = np.zeros(91)
    main_c[1] = g10 # (n, m) = (1, 0)
    zeros = np.zeros(91)
    return ConstModel.from_tables(2020., main_c, zeros, zeros, zeros, name = 'dipole')


class TestGeomagKnownValues:
    """
    Test the field against precomputed values
    """

    @pytest.mark.parametrize(
        "model, dyear, position, expected",
        PRECOMPUTED,
        ids = ["{}-{}-{}".format(p[0].name, p[1], i) for i, p in enumerate(PRECOMPUTED)],
    )
    def test_geomag(self, model, dyear, position, expected):
        B = geomag(dyear, position, model)
        npt.assert_allclose(B, expected, rtol = 1e-6, atol = 1e-14)

    def test_many_positions(self):
        """
        All positions in one call give the same values as one by one
        """
        cases = [p for p in PRECOMPUTED if p[0] is WMM2020 and p[1] == 2020.0]
        positions = np.array([p[2] for p in cases], dtype = np.float64)
        expected = np.array([p[3] for p in cases])

        B = geomag(2020.0, positions, WMM2020)
        assert B.shape == positions.shape
        npt.assert_allclose(B, expected, rtol = 1e-6, atol = 1e-14)

        # and with an extra dimension:
        B = geomag(2020.0, positions.reshape((1, -1, 3)), WMM2020)
        assert B.shape == (1, len(cases), 3)
        npt.assert_allclose(B[0], expected, rtol = 1e-6, atol = 1e-14)

    def test_default_model(self):
        npt.assert_array_equal(geomag(2021., (RE, 0, 0)), geomag(2021., (RE, 0, 0), WMM2020))

    def test_north_pole_points_down(self):
        B = geomag(2020.0, (0, 0, RE), WMM2020)
        assert B[2] < -5e-5


class TestDipole:
    """
    Compare with closed form field of axial dipole,
    B = -g10 RE^3 (z_hat / r^3 - 3 z r_vec / r^5)
    """

    g10 = -29404.5

    @pytest.mark.parametrize(
        "position",
        [(RE, 0, 0), (0, 0, RE), (0, 0, -2*RE), (3e6, 4e6, 0), (1e6, -5e6, 6e6), (-7e6, 2e6, -3e6)],
    )
    def test_dipole(self, position):
        r_vec = np.array(position, dtype = np.float64)
        r = np.linalg.norm(r_vec)
        z_hat = np.array([0, 0, 1.])
        expected = -self.g10 * RE**3 * (z_hat / r**3 - 3 * r_vec[2] * r_vec / r**5) * 1e-9

        B = geomag(2020., position, dipole_model(self.g10))
        npt.assert_allclose(B, expected, rtol = 1e-10, atol = 1e-20)

    def test_equator_and_pole(self):
        model = dipole_model(self.g10)
        npt.assert_allclose(geomag(2020., (RE, 0, 0), model), [0, 0, -self.g10 * 1e-9], atol = 1e-20)
        npt.assert_allclose(geomag(2020., (0, 0, RE), model), [0, 0, 2 * self.g10 * 1e-9], atol = 1e-20)


class TestGeomagProperties:

    def test_repeated_calls_are_identical(self):
        position = np.array([[4e6, -3e6, 5.5e6], [RE, 0, 0]])
        B1 = geomag(2021.3, position, WMM2020)
        B2 = geomag(2021.3, position, WMM2020)
        npt.assert_array_equal(B1, B2)

    @pytest.mark.parametrize(
        "direction",
        [(1, 0, 0), (0, 1, 0), (0, 0, 1), (0, 0, -1), (1, 1, 1), (-0.3, 0.8, -0.5), (0.9, -0.2, 0.1)],
    )
    def test_field_decreases_with_distance(self, direction):
        direction = np.array(direction, dtype = np.float64)
        direction = direction / np.linalg.norm(direction)
        radii = np.linspace(RE, 4*RE, 31)

        B = geomag(2020.0, radii[:, np.newaxis] * direction, WMM2020)
        F = np.linalg.norm(B, axis = 1)
        assert np.all(np.diff(F) < 0)

    def test_sin_terms_of_order_zero_are_not_used(self):
        """
        Order 0 has no sin terms, so the values in those table
        entries should not change anything
        """
        tables = WMM2020.storage.tables
        main_s, sv_s = tables[1].copy(), tables[3].copy()
        main_s[:13] = 1000.
        sv_s[:13] = -50.
        model = ConstModel.from_tables(WMM2020.epoch, tables[0], main_s, tables[2], sv_s)

        position = np.array([[4e6, -3e6, 5.5e6], [RE, 0, 0], [0, 0, -RE]])
        npt.assert_array_equal(geomag(2021.5, position, model), geomag(2021.5, position, WMM2020))
        npt.assert_array_equal(geomag_V(2021.5, position, model), geomag_V(2021.5, position, WMM2020))

    def test_highest_degree_terms_are_used(self):
        """
        Changing a degree nmax coefficient changes the field
        """
        tables = WMM2020.storage.tables
        main_c = tables[0].copy()
        main_c[WMM2020.index(12, 12)] += 1.
        model = ConstModel.from_tables(WMM2020.epoch, main_c, tables[1], tables[2], tables[3])

        position = (4e6, -3e6, 5.5e6)
        assert np.all(geomag(2020., position, model) != geomag(2020., position, WMM2020))

    def test_single_precision(self):
        position = np.array([p[2] for p in PRECOMPUTED], dtype = np.float64)

        B64 = geomag(2021., position, WMM2020)
        B32 = geomag(2021., position, WMM2020, dtype = np.float32)

        assert B32.dtype == np.float32
        npt.assert_allclose(B32, B64, rtol = 0, atol = 1e-8) # 10 nT

    def test_lower_degree_model(self):
        """
        A degree 1 model only needs 3 coefficients per table
        """
        model = ConstModel.from_tables(2020., [0, -29404.5, -1450.7], [0, 0, 4652.9],
                                       [0, 6.7, 7.7], [0, 0, -25.1], nmax = 1)
        position = (4e6, -3e6, 5.5e6)

        # should equal full model with everything above degree 1 set to zero
        tables = np.zeros((4, 91))
        for table, values in zip(tables, ([0, -29404.5, -1450.7], [0, 0, 4652.9], [0, 6.7, 7.7], [0, 0, -25.1])):
            table[WMM2020.index(0, 0)] = values[0]
            table[WMM2020.index(1, 0)] = values[1]
            table[WMM2020.index(1, 1)] = values[2]
        full = ConstModel.from_tables(2020., *tables)

        npt.assert_allclose(geomag(2021., position, model), geomag(2021., position, full),
                            rtol = 1e-12, atol = 1e-20)


class TestGeomagFailures:

    def test_zero_position(self):
        with pytest.raises(ValueError):
            geomag(2020., (0, 0, 0), WMM2020)

    def test_zero_position_among_others(self):
        with pytest.raises(ValueError):
            geomag(2020., [(RE, 0, 0), (0, 0, 0)], WMM2020)

    def test_wrong_shape(self):
        with pytest.raises(ValueError):
            geomag(2020., (RE, 0), WMM2020)

    @pytest.mark.parametrize(
        "position, dtype",
        [((1e-200, 0, 0), np.float64), ((0, -1e-170, 1e-180), np.float64),
         ((1e-23, 0, 0), np.float32), ((0, 0, 1e-30), np.float32)],
    )
    def test_position_too_short(self, position, dtype):
        with pytest.raises(ValueError):
            geomag(2020., position, WMM2020, dtype = dtype)
        with pytest.raises(ValueError):
            geomag_V(2020., position, WMM2020, dtype = dtype)

    def test_position_not_finite(self):
        with pytest.raises(ValueError):
            geomag(2020., (np.nan, 0, RE), WMM2020)
        with pytest.raises(ValueError):
            geomag(2020., (np.inf, 0, 0), WMM2020)

    @pytest.mark.parametrize("dyear", [2019.5, 2025.5, 1900.])
    def test_warns_outside_lifespan(self, dyear):
        with pytest.warns(UserWarning, match = 'not covered by model WMM2020'):
            B = geomag(dyear, (RE, 0, 0), WMM2020)
        assert np.all(np.isfinite(B))


class TestPotential:

    @pytest.mark.parametrize(
        "position, expected",
        [((RE, 0, 0), 2.3833446938e+01),
         ((0, RE, 0), 3.4488968691e+01),
         ((0, 0, RE), -1.8920998624e+02),
         ((4e6, -3e6, 5.5e6), -1.0562064826e+02)],
    )
    def test_known_values(self, position, expected):
        npt.assert_allclose(geomag_V(2020.0, position, WMM2020), expected, rtol = 1e-6)

    @pytest.mark.parametrize("model, dyear", [(WMM2015, 2016.), (WMM2015v2, 2019.), (WMM2020, 2023.7)])
    def test_field_is_minus_gradient(self, model, dyear):
        """
        Central differences of the potential give the field
        """
        position = np.array([[RE, 0, 0], [0, 0, RE], [4e6, -3e6, 5.5e6], [-6e6, 1e6, -4e6]])
        h = 10. # m
        gradient = np.empty_like(position)
        for i in range(3):
            dr = np.zeros(3)
            dr[i] = h
            gradient[:, i] = (geomag_V(dyear, position + dr, model)
                              - geomag_V(dyear, position - dr, model)) / (2 * h)

        npt.assert_allclose(-gradient, geomag(dyear, position, model), rtol = 1e-6, atol = 1e-12)

    def test_shape(self):
        position = np.full((2, 5, 3), RE / np.sqrt(3))
        assert geomag_V(2020., position, WMM2020).shape == (2, 5)
