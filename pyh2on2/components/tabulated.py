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

from pyh2on2.shared_fns import get_namespace
from pyh2on2.components.h2o import H2O

logger = logging.getLogger(__name__)

_LIQUID_PROPS = ['liquid_density', 'liquid_enthalpy', 'liquid_heat_capacity',
                 'liquid_viscosity', 'liquid_thermal_conductivity']
_GAS_PROPS = ['gas_density', 'gas_enthalpy', 'gas_heat_capacity',
              'gas_viscosity', 'gas_thermal_conductivity']


class TabulatedH2O():
    """ Water properties interpolated from tables of a raw water model.

        init() evaluates the raw model once on a temperature axis (vapor pressure) and
        on (T, p) grids for the liquid and gas properties. The pressure axis of each
        temperature row is bounded by the saturation pressure: gas rows run from p_min
        to min(p_max, 1.1 * p_sat), liquid rows from max(p_min, p_sat / 1.1) to p_max.
        Lookups are bilinear. Points off the tables, in temperature or in the pressure axis
        of either neighbouring temperature row, are evaluated with the raw model.

        The tables are read-only after init(). Build them single-threaded before
        sharing the object between threads.

        raw: Water model to tabulate. Defaults to IAPWS-IF97 H2O()
    """
    is_tabulated = True

    def __init__(self, raw=None):
        self.raw = raw if raw is not None else H2O()
        self._state = None  # (grid, pressure axes, tables), swapped in as one object

    @property
    def initialized(self) -> bool:
        return self._state is not None

    @property
    def grid(self) -> tuple:
        """ (t_min, t_max, n_temp, p_min, p_max, n_press) of the current tables, or None """
        return None if self._state is None else self._state[0]

    def init(self, t_min: float, t_max: float, n_temp: int, p_min: float, p_max: float, n_press: int):
        """ Tabulates the raw water model
            t_min, t_max: Temperature range (K)
            n_temp: Number of ticks on the temperature axis (>= 2)
            p_min, p_max: Pressure range (Pa)
            n_press: Number of ticks on the pressure axis (>= 2)
        """
        if not t_max > t_min or t_min <= 0:
            raise ValueError(f"Invalid tabulation temperature range [{t_min}, {t_max}] K")
        if not p_max > p_min or p_min < 0:
            raise ValueError(f"Invalid tabulation pressure range [{p_min}, {p_max}] Pa")
        if int(n_temp) < 2 or int(n_press) < 2:
            raise ValueError(f"Tabulation needs at least 2 ticks per axis, got n_temp={n_temp}, n_press={n_press}")

        grid = (float(t_min), float(t_max), int(n_temp), float(p_min), float(p_max), int(n_press))
        if self._state is not None:
            if self._state[0] == grid:
                logger.debug("%s tables already built for %s", self.raw.name(), grid)
                return
            logger.warning("Rebuilding %s tables, %s -> %s", self.raw.name(), self._state[0], grid)

        t_min, t_max, n_temp, p_min, p_max, n_press = grid
        logger.info("Tabulating %s: T = [%g, %g] K x %d, p = [%g, %g] Pa x %d",
                    self.raw.name(), t_min, t_max, n_temp, p_min, p_max, n_press)

        temps = np.linspace(t_min, t_max, n_temp)
        psat = np.asarray(self.raw.vapor_pressure(temps), dtype=float)

        gas_lo = np.full(n_temp, p_min)
        gas_hi = np.maximum(np.minimum(p_max, 1.1 * psat), gas_lo + 1.0)
        liq_hi = np.full(n_temp, p_max)
        liq_lo = np.minimum(np.maximum(p_min, psat / 1.1), liq_hi - 1.0)

        frac = np.linspace(0.0, 1.0, n_press)
        gas_p = gas_lo[:, None] + (gas_hi - gas_lo)[:, None] * frac[None, :]
        liq_p = liq_lo[:, None] + (liq_hi - liq_lo)[:, None] * frac[None, :]
        T2 = np.broadcast_to(temps[:, None], gas_p.shape)

        tables = {'vapor_pressure': psat}
        for prop in _LIQUID_PROPS:
            tables[prop] = np.asarray(getattr(self.raw, prop)(T2, liq_p), dtype=float)
        for prop in _GAS_PROPS:
            tables[prop] = np.asarray(getattr(self.raw, prop)(T2, gas_p), dtype=float)

        axes = {'liquid': (liq_lo, liq_hi), 'gas': (gas_lo, gas_hi)}
        self._state = (grid, axes, tables)
        logger.info("Tabulated %d %s properties", len(tables), self.raw.name())

    def _tables(self):
        if self._state is None:
            raise RuntimeError(f"Tabulated {self.raw.name()} used before init(). Call init() on the fluid system first")
        return self._state

    def _t_position(self, xp, grid, T):
        # Index of the lower temperature tick, the weight of the upper one, and where T is off the axis
        t_min, t_max, n_temp = grid[0], grid[1], grid[2]
        alpha = (T - t_min) / (t_max - t_min) * (n_temp - 1)
        outside = (alpha < 0.0) | (alpha > n_temp - 1)
        alpha = xp.clip(alpha, 0.0, n_temp - 1)
        i = xp.minimum(xp.floor(alpha), n_temp - 2)
        return i.astype(int), alpha - i, outside

    def _raw_where(self, xp, outside, value, key, *args):
        # Points off the tables are evaluated with the raw model
        if xp is np:
            if not np.any(outside):
                return value
            if np.ndim(outside) == 0:
                return getattr(self.raw, key)(*args)
        return xp.where(outside, getattr(self.raw, key)(*args), value)

    def _interpolate_t(self, key, T):
        grid, _, tables = self._tables()
        xp = get_namespace(T)
        i, w, outside = self._t_position(xp, grid, T)
        table = xp.asarray(tables[key])
        value = table[i] * (1.0 - w) + table[i + 1] * w
        return self._raw_where(xp, outside, value, key, T)

    def _interpolate_tp(self, key, phase, T, p):
        grid, axes, tables = self._tables()
        xp = get_namespace(T, p)
        n_press = grid[5]
        i, w, outside = self._t_position(xp, grid, T)
        table = xp.asarray(tables[key])
        p_lo = xp.asarray(axes[phase][0])
        p_hi = xp.asarray(axes[phase][1])

        def row(k):
            lo = p_lo[k]
            hi = p_hi[k]
            beta = (p - lo) / (hi - lo) * (n_press - 1)
            off = (beta < 0.0) | (beta > n_press - 1)
            beta = xp.clip(beta, 0.0, n_press - 1)
            j = xp.minimum(xp.floor(beta), n_press - 2)
            v = beta - j
            j = j.astype(int)
            return table[k, j] * (1.0 - v) + table[k, j + 1] * v, off

        lower, off_lower = row(i)
        upper, off_upper = row(i + 1)
        value = lower * (1.0 - w) + upper * w
        return self._raw_where(xp, outside | off_lower | off_upper, value, key, T, p)

    # Constant data comes straight from the raw model
    def name(self) -> str:
        return self.raw.name()

    def molar_mass(self) -> float:
        return self.raw.molar_mass()

    def critical_temperature(self) -> float:
        return self.raw.critical_temperature()

    def critical_pressure(self) -> float:
        return self.raw.critical_pressure()

    def acentric_factor(self) -> float:
        return self.raw.acentric_factor()

    def triple_temperature(self) -> float:
        return self.raw.triple_temperature()

    def triple_pressure(self) -> float:
        return self.raw.triple_pressure()

    def saturation_temperature(self, p: float) -> float:
        return self.raw.saturation_temperature(p)

    def liquid_is_compressible(self) -> bool:
        return self.raw.liquid_is_compressible()

    def gas_is_ideal(self) -> bool:
        return self.raw.gas_is_ideal()

    def vapor_pressure(self, T):
        return self._interpolate_t('vapor_pressure', T)

    def liquid_density(self, T, p):
        return self._interpolate_tp('liquid_density', 'liquid', T, p)

    def gas_density(self, T, p):
        return self._interpolate_tp('gas_density', 'gas', T, p)

    def liquid_enthalpy(self, T, p):
        return self._interpolate_tp('liquid_enthalpy', 'liquid', T, p)

    def gas_enthalpy(self, T, p):
        return self._interpolate_tp('gas_enthalpy', 'gas', T, p)

    def liquid_heat_capacity(self, T, p):
        return self._interpolate_tp('liquid_heat_capacity', 'liquid', T, p)

    def gas_heat_capacity(self, T, p):
        return self._interpolate_tp('gas_heat_capacity', 'gas', T, p)

    def liquid_viscosity(self, T, p):
        return self._interpolate_tp('liquid_viscosity', 'liquid', T, p)

    def gas_viscosity(self, T, p):
        return self._interpolate_tp('gas_viscosity', 'gas', T, p)

    def liquid_thermal_conductivity(self, T, p):
        return self._interpolate_tp('liquid_thermal_conductivity', 'liquid', T, p)

    def gas_thermal_conductivity(self, T, p):
        return self._interpolate_tp('gas_thermal_conductivity', 'gas', T, p)
