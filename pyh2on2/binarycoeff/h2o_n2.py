#!/usr/bin/python3
# -*- coding: utf-8 -*-

"""
    pyh2on2 - Water / Nitrogen Two-Phase Fluid System Properties
              Copyright (C) 2022, Mark Burgoyne

    This program is free software: you can redistribute it and/or modify
    it under the terms of the GNU General Public License as published by
    the Free Software Foundation, either version 3 of the License, or
    (at your option) any later version.

    This program is distributed in the hope that it will be useful,
    but WITHOUT ANY WARRANTY; without even the implied warranty of
    MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
    GNU General Public License for more details.

    The GNU General Public License can be found in the LICENSE directory,
    and at  <https://www.gnu.org/licenses/>.

          Contact author at mark.w.burgoyne@gmail.com
"""

import numpy as np

from pyh2on2.shared_fns import get_namespace
from pyh2on2.constants import MW_H2O, MW_N2, TC_H2O, TTRIPLE_H2O
from pyh2on2.components.iapws_if97 import p_sat

# IAPWS (2004) Guideline on the Henry's constant of gases in H2O, parameters for N2
_HENRY_E = 2388.8777
_HENRY_F = -14.9593
_HENRY_G = 42.0179
_HENRY_H = -29.4396

# Saturated liquid density expansion of pure water shared by all solutes
_HENRY_C = [1.99274064, 1.09965342, -0.510839303, -1.75493479, -45.5170352, -6.7469445e5]
_HENRY_D = [1/3, 2/3, 5/3, 16/3, 43/3, 110/3]
_HENRY_Q = -0.023767

# Fuller atomic diffusion volumes
_DIFF_VOL_H2O = 13.1
_DIFF_VOL_N2 = 18.5

_D_LIQUID_REF = 2.01e-9  # m2/s, N2 in water at T_REF
_T_REF = 298.15


def henry_iapws(E, F, G, H, T, vapor_pressure=p_sat):
    """ Returns Henry's constant (Pa) of a dissolved gas in liquid water
        IAPWS (2004) Guideline on the Henry's constant and vapor-liquid distribution constant
        for gases in H2O and D2O at high temperatures
        E, F, G, H: Solute specific fit parameters
        T: Temperature (K)
        vapor_pressure: Function returning the water vapor pressure (Pa) at T
    """
    xp = get_namespace(T)
    tau = 1.0 - T / TC_H2O
    f = 0.0
    for c, d in zip(_HENRY_C, _HENRY_D):
        f += c * tau ** d
    exponent = (_HENRY_Q * F + E / T * f
                + (F + G * tau ** (2.0 / 3.0) + H * tau) * xp.exp((TTRIPLE_H2O - T) / 100.0))
    return xp.exp(exponent) * vapor_pressure(T)


def fuller_diff_coeff(molar_masses, diff_volumes, T, p):
    """ Returns the binary diffusion coefficient (m2/s) of a gas pair, Fuller's method.
        See R. Reid, et al.: The Properties of Gases and Liquids, 4th edition, McGraw-Hill, 1987, p 587
        molar_masses: Pair of molar masses (g/mol)
        diff_volumes: Pair of atomic diffusion volumes
        T: Temperature (K)
        p: Pressure (Pa)
    """
    M0, M1 = molar_masses
    Mab = 2.0 / (1.0 / M0 + 1.0 / M1)
    tmp = diff_volumes[0] ** (1.0 / 3.0) + diff_volumes[1] ** (1.0 / 3.0)
    return 1e-4 * 143.0 * T ** 1.75 / (p * np.sqrt(Mab) * tmp * tmp)


class H2O_N2():
    """ Binary coefficients for water and nitrogen """

    def henry(self, T):
        """ Henry's constant of nitrogen dissolved in liquid water (Pa) """
        return henry_iapws(_HENRY_E, _HENRY_F, _HENRY_G, _HENRY_H, T)

    def gas_diff_coeff(self, T, p):
        """ Binary diffusion coefficient of water vapour and nitrogen in the gas phase (m2/s) """
        return fuller_diff_coeff((MW_H2O * 1e3, MW_N2 * 1e3), (_DIFF_VOL_H2O, _DIFF_VOL_N2), T, p)

    def liquid_diff_coeff(self, T, p):
        """ Diffusion coefficient of dissolved nitrogen in liquid water (m2/s).
            Reference value at 25 degC scaled linearly with temperature
        """
        return _D_LIQUID_REF * T / _T_REF + 0.0 * p
