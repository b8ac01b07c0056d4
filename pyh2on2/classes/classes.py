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

from enum import Enum

class phase(Enum):  # Fluid phases
    LIQUID = 0
    GAS = 1

class comp(Enum):  # Components
    H2O = 0
    N2 = 1

class relations(Enum):  # Mixing rule fidelity
    SIMPLE = 0   # Dominant substance approximations
    COMPLEX = 1  # Full mixing rules

class h2o_model(Enum):  # Pure water property model
    TABULATED = 0
    IAPWS = 1
    SIMPLE = 2

class eval_type(Enum):  # Numeric representation of returned values
    FLOAT = 0
    JAX = 1

class_dic = {
    "phase": phase,
    "comp": comp,
    "relations": relations,
    "h2o_model": h2o_model,
    "eval_type": eval_type,
}
