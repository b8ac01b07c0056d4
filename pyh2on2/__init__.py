"""
pyh2on2
===================================

-----------------------------------------------------------
Water / Nitrogen Two-Phase, Two-Component Fluid Properties
-----------------------------------------------------------

Property model for a liquid / gas mixture of water and nitrogen, written to be plugged into
subsurface flow simulators. Each call takes a fluid state and a phase (and for two properties
a component) and returns one value, either as a plain float or as a JAX value that carries
derivatives for Jacobian based solvers.

Includes;

- Phase and component registry (names, molar masses, critical properties)
- Density, viscosity, enthalpy, thermal conductivity and heat capacity of each phase,
  with SIMPLE (dominant substance) or COMPLEX (full mixing rule) relations
- Fugacity and diffusion coefficients
- IAPWS-IF97 water, simple water and ideal gas nitrogen property providers
- Tabulated water with bilinear interpolation, built once by init()
- Henry's constant and diffusion coefficients for the water-nitrogen pair
- Property tables along a temperature sweep as Pandas DataFrames

"""

submodules = [
    'binarycoeff',
    'classes',
    'components',
    'constants',
    'fluidstate',
    'fluidsystem',
    'shared_fns',
    'validate'
]

__all__ = submodules

import importlib

def __dir__():
    return __all__


def __getattr__(name):
    if name in submodules:
        return importlib.import_module(f'pyh2on2.{name}')
    else:
        try:
            return globals()[name]
        except KeyError:
            raise AttributeError(
                f"Module 'pyh2on2' has no attribute '{name}'"
            )
