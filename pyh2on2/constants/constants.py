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


# Constants (SI)
R = 8.314462618  # Universal gas constant, J/(mol.K)
degC2K = 273.15  # Offset to convert degrees C to Kelvin

# Water (IAPWS)
MW_H2O = 18.0153e-3  # kg/mol
TC_H2O = 647.096  # K
PC_H2O = 22.064e6  # Pa
RHOC_H2O = 322.0  # kg/m3
OMEGA_H2O = 0.344  # Acentric factor
TTRIPLE_H2O = 273.16  # K
PTRIPLE_H2O = 611.657  # Pa

# Nitrogen
MW_N2 = 28.0134e-3  # kg/mol
TC_N2 = 126.192  # K
PC_N2 = 3.39858e6  # Pa
OMEGA_N2 = 0.039  # Acentric factor
VC_N2 = 90.1  # Critical molar volume, cm3/mol
TTRIPLE_N2 = 63.151  # K
PTRIPLE_N2 = 12.523e3  # Pa

# Fluid system
NUM_PHASES = 2
NUM_COMPONENTS = 2
SENTINEL = 1e100  # Returned for unmapped component lookups when assertions are disabled

# Composition-sum floors
MIN_SUM_X_DENSITY = 1e-5
MIN_SUM_X_VISCOSITY = 1e-10
