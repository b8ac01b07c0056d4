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

from scipy.optimize import brentq

from pyh2on2.shared_fns import get_namespace
from pyh2on2.constants import R, MW_H2O, TC_H2O, PC_H2O, RHOC_H2O, OMEGA_H2O, TTRIPLE_H2O, PTRIPLE_H2O, degC2K
from pyh2on2.components.iapws_if97 import (rho_region1, h_region1, cp_region1,
                                           rho_region2, h_region2, cp_region2, p_sat,
                                           drho_dp_region2, p_region2_max)

# IAPWS 2008 viscosity, dilute gas coefficients H_i
_VISC_H0 = [1.67752, 2.20462, 0.6366564, -0.241605]

# IAPWS 2008 viscosity, residual coefficients (i, j, H_ij)
# i is the power of (1/Tbar - 1), j the power of (rhobar - 1)
_VISC_H1 = [
    (0, 0,  5.20094e-1), (1, 0,  8.50895e-2), (2, 0, -1.08374), (3, 0, -2.89555e-1),
    (0, 1,  2.22531e-1), (1, 1,  9.99115e-1), (2, 1,  1.88797), (3, 1,  1.26613), (5, 1, 1.20573e-1),
    (0, 2, -2.81378e-1), (1, 2, -9.06851e-1), (2, 2, -7.72479e-1), (3, 2, -4.89837e-1), (4, 2, -2.57040e-1),
    (0, 3,  1.61913e-1), (1, 3,  2.57399e-1),
    (0, 4, -3.25372e-2), (3, 4,  6.98452e-2),
    (4, 5,  8.72102e-3),
    (3, 6, -4.35673e-3), (5, 6, -5.93264e-4),
]

# IAPWS 1998 industrial thermal conductivity
_COND_TSTAR = 647.26    # K
_COND_RHOSTAR = 317.7   # kg/m3
_COND_A = [0.0102811, 0.0299621, 0.0156146, -0.00422464]
_COND_B = [-0.397070, 0.400302, 1.060000]
_COND_BB = [-0.171587, 2.392190]
_COND_C = [0.642857, -4.11717, -6.17937, 0.00308976, 0.0822994, 10.0932]
_COND_D = [0.0701309, 0.0118520, 0.00169937, -1.0200]


def viscosity_iapws(T, rho):
    """ Returns dynamic viscosity of water or steam (Pa.s)
        IAPWS 2008 formulation without the critical enhancement
        T: Temperature (K)
        rho: Density (kg/m3)
    """
    xp = get_namespace(T, rho)
    Tbar = T / TC_H2O
    rhobar = rho / RHOC_H2O

    # Dilute gas limit
    tmp = 0.0
    for i, H in enumerate(_VISC_H0):
        tmp += H / Tbar ** i
    mu0 = 100.0 * xp.sqrt(Tbar) / tmp

    # Finite density contribution
    dT = 1.0 / Tbar - 1.0
    dr = rhobar - 1.0
    tmp = 0.0
    for i, j, H in _VISC_H1:
        tmp += H * dT ** i * dr ** j
    mu1 = xp.exp(rhobar * tmp)

    return 1e-6 * mu0 * mu1


def thermal_conductivity_iapws(T, rho):
    """ Returns thermal conductivity of water or steam (W/(m.K))
        IAPWS 1998 formulation for industrial use
        T: Temperature (K)
        rho: Density (kg/m3)
    """
    xp = get_namespace(T, rho)
    c1, c2, c3, c4, c5, c6 = _COND_C
    d1, d2, d3, d4 = _COND_D

    Tbar = T / _COND_TSTAR
    # Floor keeps the C3/rhobar^5 term finite for vanishing (partial) pressures
    rhobar = xp.maximum(rho / _COND_RHOSTAR, 1e-10)

    Troot = xp.sqrt(Tbar)
    lam = 0.0
    Tpow = Troot
    for a in _COND_A:
        lam += a * Tpow
        Tpow = Tpow * Tbar

    lam += _COND_B[0] + _COND_B[1] * rhobar + _COND_B[2] * xp.exp(_COND_BB[0] * (rhobar + _COND_BB[1]) ** 2)

    DTbar = xp.abs(Tbar - 1.0) + c4
    DTbarpow = DTbar ** 0.6
    Q = 2.0 + c5 / DTbarpow
    S = xp.where(Tbar >= 1.0, 1.0 / DTbar, c6 / DTbarpow)

    rhobar18 = rhobar ** 1.8
    rhobarQ = rhobar ** Q

    lam += ((d1 / Tbar ** 10 + d2) * rhobar18 * xp.exp(c1 * (1.0 - rhobar * rhobar18))
            + d3 * S * rhobarQ * xp.exp((Q / (1.0 + Q)) * (1.0 - rhobar * rhobarQ))
            + d4 * xp.exp(c2 * Troot ** 3 + c3 / rhobar ** 5))
    return lam


class H2O():
    """ Pure water after IAPWS-IF97 (Region 1 liquid, Region 2 steam, Region 4 saturation)
        with IAPWS viscosity and thermal conductivity evaluated at the phase density.
        All methods take T (K) and p (Pa) and return SI values.
    """
    is_tabulated = False

    def name(self) -> str:
        return 'H2O'

    def molar_mass(self) -> float:
        return MW_H2O

    def critical_temperature(self) -> float:
        return TC_H2O

    def critical_pressure(self) -> float:
        return PC_H2O

    def acentric_factor(self) -> float:
        return OMEGA_H2O

    def triple_temperature(self) -> float:
        return TTRIPLE_H2O

    def triple_pressure(self) -> float:
        return PTRIPLE_H2O

    def liquid_is_compressible(self) -> bool:
        return True

    def gas_is_ideal(self) -> bool:
        return False

    def vapor_pressure(self, T):
        return p_sat(T)

    def saturation_temperature(self, p: float) -> float:
        """ Returns the boiling temperature (K) at pressure p (Pa), inverting vapor_pressure().
            Float only. Pressures outside the triple point to critical point range raise ValueError
        """
        p_lo = float(self.vapor_pressure(self.triple_temperature()))
        p_hi = float(self.vapor_pressure(self.critical_temperature()))
        if not p_lo <= p <= p_hi:
            raise ValueError(f"Pressure {p} Pa outside the saturation line range [{p_lo:.6g}, {p_hi:.6g}] Pa")
        return brentq(lambda T: float(self.vapor_pressure(T)) - p, self.triple_temperature(), self.critical_temperature())

    def liquid_density(self, T, p):
        return rho_region1(T, p)

    def _steam_pressure(self, T, p):
        # Region 2 pressure for the steam correlations, and the excess above it
        xp = get_namespace(T, p)
        p_max = p_region2_max(T)
        return xp.minimum(p, p_max), xp.maximum(p - p_max, 0.0)

    def gas_density(self, T, p):
        """ Steam density (kg/m3). Above the saturation pressure (the B23 boundary above
            623.15 K) the density is extrapolated linearly with its slope on that boundary
        """
        p_v, dp = self._steam_pressure(T, p)
        return rho_region2(T, p_v) + dp * drho_dp_region2(T, p_v)

    def liquid_enthalpy(self, T, p):
        return h_region1(T, p)

    def gas_enthalpy(self, T, p):
        """ Steam enthalpy (J/kg), held at its saturation value above the saturation pressure """
        p_v, _ = self._steam_pressure(T, p)
        return h_region2(T, p_v)

    def liquid_heat_capacity(self, T, p):
        return cp_region1(T, p)

    def gas_heat_capacity(self, T, p):
        p_v, _ = self._steam_pressure(T, p)
        return cp_region2(T, p_v)

    def liquid_viscosity(self, T, p):
        return viscosity_iapws(T, self.liquid_density(T, p))

    def gas_viscosity(self, T, p):
        return viscosity_iapws(T, self.gas_density(T, p))

    def liquid_thermal_conductivity(self, T, p):
        return thermal_conductivity_iapws(T, self.liquid_density(T, p))

    def gas_thermal_conductivity(self, T, p):
        return thermal_conductivity_iapws(T, self.gas_density(T, p))


class SimpleH2O(H2O):
    """ Water with an incompressible liquid and an ideal gas vapour.
        Constant transport properties and heat capacities; only the saturation
        pressure is taken from IAPWS-IF97.
    """
    T_REF = 373.15         # K, reference for the latent heat
    LATENT_HEAT = 2.257e6  # J/kg at T_REF
    CP_LIQUID = 4.180e3    # J/(kg.K)
    CP_GAS = 2.080e3       # J/(kg.K)

    def molar_mass(self) -> float:
        return 18e-3

    def liquid_is_compressible(self) -> bool:
        return False

    def gas_is_ideal(self) -> bool:
        return True

    def liquid_density(self, T, p):
        return 1000.0 + 0.0 * T

    def gas_density(self, T, p):
        return p * self.molar_mass() / (R * T)

    def liquid_enthalpy(self, T, p):
        return self.CP_LIQUID * (T - degC2K)

    def gas_enthalpy(self, T, p):
        h_ref = self.CP_LIQUID * (self.T_REF - degC2K) + self.LATENT_HEAT
        return h_ref + self.CP_GAS * (T - self.T_REF)

    def liquid_heat_capacity(self, T, p):
        return self.CP_LIQUID + 0.0 * T

    def gas_heat_capacity(self, T, p):
        return self.CP_GAS + 0.0 * T

    def liquid_viscosity(self, T, p):
        return 1e-3 + 0.0 * T

    def gas_viscosity(self, T, p):
        return 1e-5 + 0.0 * T

    def liquid_thermal_conductivity(self, T, p):
        return 0.578078 + 0.0 * T

    def gas_thermal_conductivity(self, T, p):
        return 0.028224 + 0.0 * T
