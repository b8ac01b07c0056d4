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
import numpy.typing as npt
import pandas as pd
from tabulate import tabulate

from pyh2on2.classes import eval_type
from pyh2on2.shared_fns import convert_to_numpy
from pyh2on2.fluidstate import CompositionalFluidState


def property_table(fluid_system, temperatures: npt.ArrayLike, pressure: float, x_n2_liquid: float, x_n2_gas: float) -> pd.DataFrame:
    """ Returns a Pandas table of liquid and gas phase properties along a temperature sweep at constant
        pressure and composition. One row per temperature.

        fluid_system: An initialized fluidsystem.H2ON2
        temperatures: Temperature, or list / array of temperatures (K)
        pressure: Pressure of both phases (Pa)
        x_n2_liquid: N2 mole fraction in the liquid phase. Water makes up the balance
        x_n2_gas: N2 mole fraction in the gas phase. Water makes up the balance
    """
    temperatures = convert_to_numpy(temperatures)
    fs = CompositionalFluidState(fluid_system)
    L, G = fluid_system.LIQUID_PHASE_IDX, fluid_system.GAS_PHASE_IDX
    H2O, N2 = fluid_system.H2O_IDX, fluid_system.N2_IDX
    fs.set_pressure(L, float(pressure))
    fs.set_pressure(G, float(pressure))
    fs.set_composition(L, 1.0 - x_n2_liquid, x_n2_liquid)
    fs.set_composition(G, 1.0 - x_n2_gas, x_n2_gas)

    rows = []
    for T in temperatures:
        fs.set_temperature(float(T))
        row = [float(T)]
        for phase in [L, G]:
            row += [
                fluid_system.density(fs, phase, lhs=eval_type.FLOAT),
                fluid_system.viscosity(fs, phase, lhs=eval_type.FLOAT),
                fluid_system.enthalpy(fs, phase, lhs=eval_type.FLOAT),
                fluid_system.heat_capacity(fs, phase, lhs=eval_type.FLOAT),
                fluid_system.thermal_conductivity(fs, phase, lhs=eval_type.FLOAT),
                fluid_system.diffusion_coefficient(fs, phase, N2, lhs=eval_type.FLOAT),
            ]
        row += [
            fluid_system.fugacity_coefficient(fs, L, H2O, lhs=eval_type.FLOAT),
            fluid_system.fugacity_coefficient(fs, L, N2, lhs=eval_type.FLOAT),
        ]
        rows.append(row)

    columns = ['T (K)']
    for phase in ['Liq', 'Gas']:
        columns += [
            f'{phase} Den (kg/m3)',
            f'{phase} Visc (Pa.s)',
            f'{phase} H (J/kg)',
            f'{phase} Cp (J/kg.K)',
            f'{phase} Cond (W/m.K)',
            f'{phase} Diff (m2/s)',
        ]
    columns += ['Phi H2O Liq', 'Phi N2 Liq']
    return pd.DataFrame(np.array(rows), columns=columns)


def print_property_table(fluid_system, temperatures: npt.ArrayLike, pressure: float, x_n2_liquid: float, x_n2_gas: float,
                         floatfmt: str = '.5g') -> str:
    """ Prints, and returns as a string, the property_table() for the same arguments """
    df = property_table(fluid_system, temperatures, pressure, x_n2_liquid, x_n2_gas)
    out = tabulate(df, headers=list(df.columns), floatfmt=floatfmt, showindex=False)
    print(out)
    return out
