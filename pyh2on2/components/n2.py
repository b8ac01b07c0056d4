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

from pyh2on2.shared_fns import get_namespace
from pyh2on2.constants import R, MW_N2, TC_N2, PC_N2, OMEGA_N2, VC_N2, TTRIPLE_N2, PTRIPLE_N2, degC2K

# Joback ideal gas heat capacity coefficients, J/(mol.K)
_CP_A = 31.15
_CP_B = -0.01357
_CP_C = 2.680e-5
_CP_D = -1.168e-8


class N2():
    """ Pure nitrogen, treated as an ideal gas. Liquid nitrogen is not modeled.
        All methods take T (K) and p (Pa) and return SI values.
    """
    is_tabulated = False

    def name(self) -> str:
        return 'N2'

    def molar_mass(self) -> float:
        return MW_N2

    def critical_temperature(self) -> float:
        return TC_N2

    def critical_pressure(self) -> float:
        return PC_N2

    def acentric_factor(self) -> float:
        return OMEGA_N2

    def triple_temperature(self) -> float:
        return TTRIPLE_N2

    def triple_pressure(self) -> float:
        return PTRIPLE_N2

    def liquid_is_compressible(self) -> bool:
        return False

    def gas_is_ideal(self) -> bool:
        return True

    def vapor_pressure(self, T):
        """ Vapor pressure (Pa), Span et al. (2000) ancillary equation.
            Critical pressure above Tc, zero below the triple point.
        """
        xp = get_namespace(T)
        sigma = xp.maximum(1.0 - T / TC_N2, 0.0)
        exponent = (-6.12445284 * sigma
                    + 1.26327220 * sigma ** 1.5
                    - 0.765910082 * sigma ** 2.5
                    - 1.77570564 * sigma ** 5) * TC_N2 / T
        return xp.where(T < TTRIPLE_N2, 0.0, xp.exp(exponent) * PC_N2)

    def gas_density(self, T, p):
        return p * MW_N2 / (R * T)

    def gas_enthalpy(self, T, p):
        """ Specific enthalpy (J/kg), integral of the Joback heat capacity from 0 K.
            See R. Reid, et al.: The Properties of Gases and Liquids, 4th edition, McGraw-Hill, 1987, pp 154, 657, 665
        """
        return T * (_CP_A + T * (_CP_B / 2 + T * (_CP_C / 3 + T * (_CP_D / 4)))) / MW_N2

    def gas_heat_capacity(self, T, p):
        return (_CP_A + T * (_CP_B + T * (_CP_C + T * _CP_D))) / MW_N2

    def gas_viscosity(self, T, p):
        """ Dynamic viscosity (Pa.s) from the method of Chung et al., low pressure form.
            See R. Reid, et al.: The Properties of Gases and Liquids, 4th edition, McGraw-Hill, 1987, pp 396-397
        """
        xp = get_namespace(T)
        M = MW_N2 * 1e3  # g/mol
        Fc = 1 - 0.2756 * OMEGA_N2  # Nitrogen has no dipole moment
        Tstar = 1.2593 * T / TC_N2
        Omega_v = (1.16145 * Tstar ** -0.14874
                   + 0.52487 * xp.exp(-0.77320 * Tstar)
                   + 2.16178 * xp.exp(-2.43787 * Tstar))
        return 40.785 * Fc * xp.sqrt(M * T) / (VC_N2 ** (2.0 / 3.0) * Omega_v) * 1e-7

    def gas_thermal_conductivity(self, T, p):
        # Linear fit to NIST data at 1 bar. No pressure dependence
        return 6.525e-5 * (T - degC2K) + 0.024031

    def liquid_density(self, T, p):
        raise NotImplementedError("Liquid nitrogen is not modeled")

    def liquid_enthalpy(self, T, p):
        raise NotImplementedError("Liquid nitrogen is not modeled")

    def liquid_heat_capacity(self, T, p):
        raise NotImplementedError("Liquid nitrogen is not modeled")

    def liquid_viscosity(self, T, p):
        raise NotImplementedError("Liquid nitrogen is not modeled")

    def liquid_thermal_conductivity(self, T, p):
        raise NotImplementedError("Liquid nitrogen is not modeled")
