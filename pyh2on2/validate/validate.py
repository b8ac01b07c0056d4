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

from pyh2on2.classes import phase, comp, class_dic
from pyh2on2.constants import NUM_PHASES, NUM_COMPONENTS

def validate_methods(names, variables):
    """ Converts string method names into their Enum members, leaving Enums untouched.
        Raises ValueError for names not found in the matching Enum class.
    """
    for m, method in enumerate(names):
        if type(variables[m]) == str:
            try:
                variables[m] = class_dic[method][variables[m].upper()]
            except KeyError:
                raise ValueError(f"An incorrect {method} was specified: '{variables[m]}'") from None
    if len(variables) == 1:
        return variables[0]
    else:
        return variables

def phase_index(phase_idx) -> int:
    """ Returns integer phase index from an int, a phase Enum or a phase name ('liquid', 'gas') """
    if isinstance(phase_idx, str):
        phase_idx = validate_methods(["phase"], [phase_idx])
    if isinstance(phase_idx, Enum):
        if not isinstance(phase_idx, phase):
            raise ValueError(f"Expected a phase, got {phase_idx}")
        return phase_idx.value
    return int(phase_idx)

def comp_index(comp_idx) -> int:
    """ Returns integer component index from an int, a comp Enum or a component name ('H2O', 'N2') """
    if isinstance(comp_idx, str):
        comp_idx = validate_methods(["comp"], [comp_idx])
    if isinstance(comp_idx, Enum):
        if not isinstance(comp_idx, comp):
            raise ValueError(f"Expected a component, got {comp_idx}")
        return comp_idx.value
    return int(comp_idx)

# Contract checks. Out of range indices are programming errors, so these are plain
# assertions: active in a normal interpreter, removed when running with python -O.
def check_phase(phase_idx: int):
    assert 0 <= phase_idx < NUM_PHASES, f"Phase index {phase_idx} out of range [0, {NUM_PHASES})"

def check_comp(comp_idx: int):
    assert 0 <= comp_idx < NUM_COMPONENTS, f"Component index {comp_idx} out of range [0, {NUM_COMPONENTS})"
