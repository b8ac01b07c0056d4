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

import logging

import numpy as np

from pyh2on2.classes import relations as relations_method, h2o_model, eval_type
from pyh2on2.constants import R, NUM_PHASES, NUM_COMPONENTS, SENTINEL, MIN_SUM_X_DENSITY, MIN_SUM_X_VISCOSITY
from pyh2on2.validate import validate_methods, phase_index, comp_index, check_phase, check_comp
from pyh2on2.shared_fns import to_lhs, lhs_max, lhs_sqrt
from pyh2on2.components import H2O, SimpleH2O, N2, TabulatedH2O
from pyh2on2.binarycoeff import H2O_N2

logger = logging.getLogger(__name__)

# Default tabulation grid
T_MIN_DEFAULT = 273.15   # K
T_MAX_DEFAULT = 623.15   # K
N_TEMP_DEFAULT = 100
P_MIN_DEFAULT = 0.0      # Pa
P_MAX_DEFAULT = 20e6     # Pa
N_PRESS_DEFAULT = 200

# Ideal gas molar heat capacities at constant volume, in units of R, from degrees of freedom
CV_N2_R = 2.39
CV_H2O_R = 3.37


class H2ON2():
    """ Two-phase (liquid, gas), two-component (H2O, N2) fluid system.

        Every property evaluator takes a fluid state (see fluidstate.CompositionalFluidState) and
        a phase index, and returns one value. Phase and component indices may be given as
        integers, as phase / comp Enums, or as names ('liquid', 'gas', 'H2O', 'N2').

        relations: Mixing rule fidelity, fixed for the life of the object.
                   'SIMPLE' uses dominant substance approximations, 'COMPLEX' the full mixing rules.
                   Defaults to 'COMPLEX'
        h2o: Water model. 'TABULATED' (IAPWS-IF97 interpolated from tables built by init()),
             'IAPWS' (IAPWS-IF97 evaluated directly) or 'SIMPLE' (constant property water).
             Defaults to 'TABULATED'
        h2o_component: Optional water provider object, overrides h2o
        n2_component: Optional nitrogen provider object. Defaults to components.N2()
        binary_coeff: Optional binary coefficient provider. Defaults to binarycoeff.H2O_N2()

        Each evaluator accepts lhs, the numeric representation of the result:
            None: Same representation as the fluid state values (default)
            'FLOAT' / eval_type.FLOAT: Python float, derivatives dropped
            'JAX' / eval_type.JAX: float64 JAX array, able to carry derivatives
    """
    LIQUID_PHASE_IDX = 0
    GAS_PHASE_IDX = 1
    NUM_PHASES = NUM_PHASES

    H2O_IDX = 0
    N2_IDX = 1
    NUM_COMPONENTS = NUM_COMPONENTS

    class ParameterCache():
        """ Placeholder. Nothing is cached between property calls """
        pass

    def __init__(self, relations: relations_method = relations_method.COMPLEX, h2o: h2o_model = h2o_model.TABULATED,
                 h2o_component=None, n2_component=None, binary_coeff=None):
        self._relations, h2o = validate_methods(["relations", "h2o_model"], [relations, h2o])
        if h2o_component is None:
            if h2o == h2o_model.TABULATED:
                h2o_component = TabulatedH2O(H2O())
            elif h2o == h2o_model.IAPWS:
                h2o_component = H2O()
            else:
                h2o_component = SimpleH2O()
        self.h2o = h2o_component
        self.n2 = n2_component if n2_component is not None else N2()
        self.binary_coeff = binary_coeff if binary_coeff is not None else H2O_N2()

    @property
    def relations(self):
        return self._relations

    @property
    def use_complex_relations(self) -> bool:
        return self._relations == relations_method.COMPLEX

    # ------------------------------------------------------------------
    # Initialization
    # ------------------------------------------------------------------
    def init(self, t_min: float = T_MIN_DEFAULT, t_max: float = T_MAX_DEFAULT, n_temp: int = N_TEMP_DEFAULT,
             p_min: float = P_MIN_DEFAULT, p_max: float = P_MAX_DEFAULT, n_press: int = N_PRESS_DEFAULT):
        """ Builds the water property tables if the water provider is tabulated, otherwise does nothing.
            Must complete before any property is evaluated, and must not be repeated while
            other threads are evaluating properties.

            t_min, t_max: Temperature range (K). Defaults to 273.15 - 623.15
            n_temp: Number of temperature ticks. Defaults to 100
            p_min, p_max: Pressure range (Pa). Defaults to 0 - 20e6
            n_press: Number of pressure ticks. Defaults to 200

            Raises ValueError for invalid ranges
        """
        if getattr(self.h2o, 'is_tabulated', False):
            self.h2o.init(t_min, t_max, n_temp, p_min, p_max, n_press)
        else:
            logger.debug("%s is not tabulated, nothing to initialize", self.h2o.name())

    # ------------------------------------------------------------------
    # Registry
    # ------------------------------------------------------------------
    def _phase(self, phase_idx) -> int:
        phase_idx = phase_index(phase_idx)
        check_phase(phase_idx)
        return phase_idx

    def _comp(self, comp_idx) -> int:
        comp_idx = comp_index(comp_idx)
        check_comp(comp_idx)
        return comp_idx

    def _component(self, comp_idx):
        c = self._comp(comp_idx)
        if c == self.H2O_IDX:
            return self.h2o
        if c == self.N2_IDX:
            return self.n2
        return None

    def phase_name(self, phase_idx) -> str:
        p = self._phase(phase_idx)
        names = ['liquid', 'gas']
        return names[p] if 0 <= p < NUM_PHASES else 'unknown'

    def is_liquid(self, phase_idx) -> bool:
        return self._phase(phase_idx) != self.GAS_PHASE_IDX

    def is_compressible(self, phase_idx) -> bool:
        if self._phase(phase_idx) == self.LIQUID_PHASE_IDX:
            return self.h2o.liquid_is_compressible()
        return True

    def is_ideal_gas(self, phase_idx) -> bool:
        if self._phase(phase_idx) == self.LIQUID_PHASE_IDX:
            return False
        return self.h2o.gas_is_ideal() and self.n2.gas_is_ideal()

    def is_ideal_mixture(self, phase_idx) -> bool:
        # No interaction between water and nitrogen molecules is modeled in either phase
        self._phase(phase_idx)
        return True

    def component_name(self, comp_idx) -> str:
        component = self._component(comp_idx)
        return 'unknown' if component is None else component.name()

    def molar_mass(self, comp_idx) -> float:
        component = self._component(comp_idx)
        return SENTINEL if component is None else component.molar_mass()

    def critical_temperature(self, comp_idx) -> float:
        component = self._component(comp_idx)
        return SENTINEL if component is None else component.critical_temperature()

    def critical_pressure(self, comp_idx) -> float:
        component = self._component(comp_idx)
        return SENTINEL if component is None else component.critical_pressure()

    def acentric_factor(self, comp_idx) -> float:
        component = self._component(comp_idx)
        return SENTINEL if component is None else component.acentric_factor()

    # ------------------------------------------------------------------
    # Property evaluators
    # ------------------------------------------------------------------
    def _conditions(self, fs, p, lhs):
        return to_lhs(fs.temperature(p), lhs), to_lhs(fs.pressure(p), lhs)

    def _mole_fractions(self, fs, p, lhs):
        return [to_lhs(fs.mole_fraction(p, c), lhs) for c in range(NUM_COMPONENTS)]

    def _mass_fractions(self, fs, p, lhs):
        return [to_lhs(fs.mass_fraction(p, c), lhs) for c in range(NUM_COMPONENTS)]

    def density(self, fs, phase_idx, param_cache=None, lhs: eval_type = None):
        """ Returns phase density (kg/m3)

            Liquid, SIMPLE: Pure water liquid density
            Liquid, COMPLEX: Each N2 molecule displaces one water molecule at the water molar density
            Gas, SIMPLE: Ideal gas at the fluid state average molar mass
            Gas, COMPLEX: Sum of pure substance gas densities at their partial pressures (Dalton)

            Composition sums are floored at 1e-5
        """
        lhs = validate_methods(["eval_type"], [lhs])
        p = self._phase(phase_idx)
        T, pres = self._conditions(fs, p, lhs)
        x = self._mole_fractions(fs, p, lhs)
        sum_x = lhs_max(x[0] + x[1], MIN_SUM_X_DENSITY)

        if p == self.LIQUID_PHASE_IDX:
            rho_w = self.h2o.liquid_density(T, pres)
            if not self.use_complex_relations:
                return to_lhs(rho_w, lhs)
            mw_h2o = self.h2o.molar_mass()
            c_w = rho_w / mw_h2o
            return to_lhs(c_w * (mw_h2o * x[0] + self.n2.molar_mass() * x[1]) / sum_x, lhs)

        if not self.use_complex_relations:
            mw = to_lhs(fs.average_molar_mass(p), lhs)
            return to_lhs(pres / (R * T) * mw / sum_x, lhs)
        rho_h2o = self.h2o.gas_density(T, pres * x[0])
        rho_n2 = self.n2.gas_density(T, pres * x[1])
        return to_lhs((rho_h2o + rho_n2) / sum_x, lhs)

    def viscosity(self, fs, phase_idx, param_cache=None, lhs: eval_type = None):
        """ Returns phase dynamic viscosity (Pa.s)

            Liquid: Pure water liquid viscosity
            Gas, SIMPLE: Pure nitrogen viscosity
            Gas, COMPLEX: Wilke mixing rule, with water vapour viscosity at its vapor pressure
        """
        lhs = validate_methods(["eval_type"], [lhs])
        p = self._phase(phase_idx)
        T, pres = self._conditions(fs, p, lhs)

        if p == self.LIQUID_PHASE_IDX:
            return to_lhs(self.h2o.liquid_viscosity(T, pres), lhs)
        if not self.use_complex_relations:
            return to_lhs(self.n2.gas_viscosity(T, pres), lhs)

        mu = [self.h2o.gas_viscosity(T, self.h2o.vapor_pressure(T)),
              self.n2.gas_viscosity(T, pres)]
        mw = [self.h2o.molar_mass(), self.n2.molar_mass()]
        x = self._mole_fractions(fs, p, lhs)
        sum_x = lhs_max(x[0] + x[1], MIN_SUM_X_VISCOSITY)

        mu_mix = 0.0
        for i in range(NUM_COMPONENTS):
            divisor = 0.0
            for j in range(NUM_COMPONENTS):
                phi_ij = 1.0 + lhs_sqrt(mu[i] / mu[j]) * (mw[j] / mw[i]) ** 0.25
                phi_ij = phi_ij * phi_ij / np.sqrt(8.0 * (1.0 + mw[i] / mw[j]))
                divisor = divisor + x[j] / sum_x * phi_ij
            # Zero only when the whole phase composition is zero, where the term vanishes anyway
            divisor = lhs_max(divisor, MIN_SUM_X_VISCOSITY)
            mu_mix = mu_mix + x[i] / sum_x * mu[i] / divisor
        return to_lhs(mu_mix, lhs)

    def fugacity_coefficient(self, fs, phase_idx, comp_idx, param_cache=None, lhs: eval_type = None):
        """ Returns the fugacity coefficient of a component in a phase (dimensionless)

            Liquid H2O: p_sat(T) / p
            Liquid N2: Henry's constant(T) / p
            Gas: 1 (ideal gas)
        """
        lhs = validate_methods(["eval_type"], [lhs])
        p = self._phase(phase_idx)
        c = self._comp(comp_idx)
        T, pres = self._conditions(fs, p, lhs)

        if p == self.LIQUID_PHASE_IDX:
            if c == self.H2O_IDX:
                return to_lhs(self.h2o.vapor_pressure(T) / pres, lhs)
            return to_lhs(self.binary_coeff.henry(T) / pres, lhs)
        return to_lhs(1.0, lhs)

    def diffusion_coefficient(self, fs, phase_idx, comp_idx, param_cache=None, lhs: eval_type = None):
        """ Returns the binary molecular diffusion coefficient in a phase (m2/s).
            There is only one component pair, so comp_idx does not change the result
        """
        lhs = validate_methods(["eval_type"], [lhs])
        p = self._phase(phase_idx)
        T, pres = self._conditions(fs, p, lhs)

        if p == self.LIQUID_PHASE_IDX:
            return to_lhs(self.binary_coeff.liquid_diff_coeff(T, pres), lhs)
        return to_lhs(self.binary_coeff.gas_diff_coeff(T, pres), lhs)

    def enthalpy(self, fs, phase_idx, param_cache=None, lhs: eval_type = None):
        """ Returns specific enthalpy (J/kg)

            Liquid: Pure water liquid enthalpy. Dissolved nitrogen is ignored
            Gas: Mass fraction weighted sum of pure substance gas enthalpies at phase pressure
        """
        lhs = validate_methods(["eval_type"], [lhs])
        p = self._phase(phase_idx)
        T, pres = self._conditions(fs, p, lhs)

        if p == self.LIQUID_PHASE_IDX:
            return to_lhs(self.h2o.liquid_enthalpy(T, pres), lhs)
        X = self._mass_fractions(fs, p, lhs)
        h_h2o = X[0] * self.h2o.gas_enthalpy(T, pres)
        h_n2 = X[1] * self.n2.gas_enthalpy(T, pres)
        return to_lhs(h_h2o + h_n2, lhs)

    def thermal_conductivity(self, fs, phase_idx, param_cache=None, lhs: eval_type = None):
        """ Returns thermal conductivity (W/(m.K))

            Liquid: Pure water liquid conductivity
            Gas, SIMPLE: Pure nitrogen conductivity at phase pressure
            Gas, COMPLEX: Unweighted sum of pure substance conductivities at their partial pressures
        """
        lhs = validate_methods(["eval_type"], [lhs])
        p = self._phase(phase_idx)
        T, pres = self._conditions(fs, p, lhs)

        if p == self.LIQUID_PHASE_IDX:
            return to_lhs(self.h2o.liquid_thermal_conductivity(T, pres), lhs)
        if not self.use_complex_relations:
            return to_lhs(self.n2.gas_thermal_conductivity(T, pres), lhs)
        x = self._mole_fractions(fs, p, lhs)
        lambda_n2 = self.n2.gas_thermal_conductivity(T, pres * x[1])
        lambda_h2o = self.h2o.gas_thermal_conductivity(T, pres * x[0])
        return to_lhs(lambda_n2 + lambda_h2o, lhs)

    def heat_capacity(self, fs, phase_idx, param_cache=None, lhs: eval_type = None):
        """ Returns isobaric specific heat capacity (J/(kg.K))

            Liquid: Pure water liquid heat capacity
            Gas, SIMPLE: Mass fraction weighted ideal gas values, cv = 2.39 R (N2) and 3.37 R (H2O)
            Gas, COMPLEX: Mass fraction weighted pure substance values at their partial pressures
        """
        lhs = validate_methods(["eval_type"], [lhs])
        p = self._phase(phase_idx)
        T, pres = self._conditions(fs, p, lhs)

        if p == self.LIQUID_PHASE_IDX:
            return to_lhs(self.h2o.liquid_heat_capacity(T, pres), lhs)

        X = self._mass_fractions(fs, p, lhs)
        if self.use_complex_relations:
            x = self._mole_fractions(fs, p, lhs)
            cp_n2 = self.n2.gas_heat_capacity(T, pres * x[1])
            cp_h2o = self.h2o.gas_heat_capacity(T, pres * x[0])
        else:
            cp_n2 = (R + CV_N2_R * R) / self.molar_mass(self.N2_IDX)
            cp_h2o = (R + CV_H2O_R * R) / self.molar_mass(self.H2O_IDX)
        return to_lhs(X[0] * cp_h2o + X[1] * cp_n2, lhs)
