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
import jax
import jax.numpy as jnp

from pyh2on2.classes import eval_type

# Derivative carrying evaluations need double precision to agree with the float path
jax.config.update("jax_enable_x64", True)

def is_jax(value) -> bool:
    """ True for JAX arrays, including tracers inside jax.grad / jax.jacfwd """
    return isinstance(value, jax.Array)

def get_namespace(*values):
    """ Returns the array namespace able to carry all of the values.
        jax.numpy if any value is a JAX array or tracer, otherwise numpy.
        All correlations are written against the returned namespace, so the same
        code evaluates plain floats, numpy arrays and derivative carrying values.
    """
    for value in values:
        if is_jax(value):
            return jnp
    return np

def to_lhs(value, lhs: eval_type = None):
    """ Converts value into the requested numeric representation
        lhs: None leaves the value as is
             eval_type.FLOAT returns a Python float (or numpy array for multi-valued input).
                             Derivatives are dropped. Concrete JAX values only - a tracer
                             cannot be converted and JAX will raise.
             eval_type.JAX returns a float64 JAX array
    """
    if lhs is None:
        return value
    if lhs is eval_type.JAX:
        return jnp.asarray(value, dtype=jnp.float64)
    value = np.asarray(value, dtype=float)
    if value.size == 1:
        return value.item()
    return value

def lhs_max(a, b):
    return get_namespace(a, b).maximum(a, b)

def lhs_sqrt(a):
    return get_namespace(a).sqrt(a)

def convert_to_numpy(input_data: npt.ArrayLike) -> np.ndarray:
    # Convert input data to a numpy array ensuring it is always sizeable
    if isinstance(input_data, np.ndarray):
        return input_data
    else:
        # Convert list, tuple, scalar, or other types to numpy array
        # Ensuring even scalars become arrays with one element
        return np.atleast_1d(input_data)
