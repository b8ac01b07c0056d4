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

from pyh2on2.constants import NUM_PHASES, NUM_COMPONENTS
from pyh2on2.validate import phase_index, comp_index
from pyh2on2.shared_fns import lhs_max


class CompositionalFluidState():
    """ Temperature, pressure and composition of each phase of a fluid system.

        Values are stored as given, so floats and JAX values (including values being
        differentiated inside jax.grad) can both be set. Molar masses are taken from
        the fluid system the state belongs to.

        fluid_system: Object providing molar_mass(comp_idx), e.g. fluidsystem.H2ON2
    """

    def __init__(self, fluid_system):
        self.fluid_system = fluid_system
        self._T = [0.0] * NUM_PHASES
        self._p = [0.0] * NUM_PHASES
        self._x = [[0.0] * NUM_COMPONENTS for _ in range(NUM_PHASES)]

    def set_temperature(self, T, phase_idx=None):
        """ Sets temperature (K). All phases share one temperature unless phase_idx is given """
        if phase_idx is None:
            self._T = [T] * NUM_PHASES
        else:
            self._T[phase_index(phase_idx)] = T

    def set_pressure(self, phase_idx, p):
        self._p[phase_index(phase_idx)] = p

    def set_mole_fraction(self, phase_idx, comp_idx, x):
        self._x[phase_index(phase_idx)][comp_index(comp_idx)] = x

    def set_composition(self, phase_idx, x_h2o, x_n2):
        p = phase_index(phase_idx)
        self._x[p] = [x_h2o, x_n2]

    def temperature(self, phase_idx):
        return self._T[phase_index(phase_idx)]

    def pressure(self, phase_idx):
        return self._p[phase_index(phase_idx)]

    def mole_fraction(self, phase_idx, comp_idx):
        return self._x[phase_index(phase_idx)][comp_index(comp_idx)]

    def average_molar_mass(self, phase_idx):
        """ Mole fraction weighted molar mass of the phase (kg/mol), not normalised by the composition sum """
        p = phase_index(phase_idx)
        mw = 0.0
        for c in range(NUM_COMPONENTS):
            mw = mw + self._x[p][c] * self.fluid_system.molar_mass(c)
        return mw

    def mass_fraction(self, phase_idx, comp_idx):
        p = phase_index(phase_idx)
        c = comp_index(comp_idx)
        mw = lhs_max(self.average_molar_mass(p), 1e-40)
        return self._x[p][c] * self.fluid_system.molar_mass(c) / mw
