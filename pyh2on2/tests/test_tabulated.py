#!/usr/bin/env python3
"""
Validation tests for tabulated water and fluid system initialization.
Run with: python3 -m pytest pyh2on2/tests/ -v
Or standalone: python3 pyh2on2/tests/test_tabulated.py
"""

import sys
import os
import numpy as np

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..'))
from pyh2on2.components import H2O, SimpleH2O, TabulatedH2O
from pyh2on2.fluidsystem import H2ON2
from pyh2on2.fluidstate import CompositionalFluidState

def rel_err(a, b):
    return abs(a - b) / abs(b)

def test_uninitialized_raises():
    """Tabulated lookups before init() raise RuntimeError"""
    tab = TabulatedH2O()
    assert not tab.initialized
    try:
        tab.liquid_density(300.0, 1e5)
        assert False, "Should have raised RuntimeError"
    except RuntimeError:
        pass

def test_uninitialized_fluid_system_raises():
    """Fluid system with default tabulated water must be initialized first"""
    fsys = H2ON2()
    fs = CompositionalFluidState(fsys)
    fs.set_temperature(300.0)
    fs.set_pressure(0, 1e5)
    fs.set_composition(0, 1.0, 0.0)
    try:
        fsys.density(fs, 0)
        assert False, "Should have raised RuntimeError"
    except RuntimeError:
        pass

def test_invalid_ranges():
    """Invalid tabulation ranges raise ValueError through the fluid system"""
    fsys = H2ON2()
    bad_grids = [
        (400.0, 300.0, 10, 0.0, 1e6, 10),   # t_min > t_max
        (300.0, 300.0, 10, 0.0, 1e6, 10),   # empty temperature range
        (300.0, 400.0, 1, 0.0, 1e6, 10),    # one temperature tick
        (300.0, 400.0, 10, 1e6, 1e5, 10),   # p_min > p_max
        (300.0, 400.0, 10, -1.0, 1e6, 10),  # negative pressure
        (300.0, 400.0, 10, 0.0, 1e6, 1),    # one pressure tick
    ]
    for grid in bad_grids:
        try:
            fsys.init(*grid)
            assert False, f"Should have raised ValueError for {grid}"
        except ValueError:
            pass
    assert not fsys.h2o.initialized, "Failed init must not leave tables behind"

def test_init_not_tabulated_is_noop():
    """init() does nothing for IAPWS or SIMPLE water"""
    for h2o in ['IAPWS', 'SIMPLE']:
        fsys = H2ON2(h2o=h2o)
        fsys.init()
        fsys.init(300.0, 400.0, 10, 0.0, 1e6, 10)
        assert not getattr(fsys.h2o, 'is_tabulated', False)

def test_default_grid():
    """Parameterless init() uses 273.15 - 623.15 K x 100, 0 - 20 MPa x 200"""
    fsys = H2ON2()
    fsys.init()
    assert fsys.h2o.grid == (273.15, 623.15, 100, 0.0, 20e6, 200)

def test_reinit():
    """Same grid is a no-op; a different grid rebuilds the tables"""
    tab = TabulatedH2O()
    tab.init(280.0, 400.0, 20, 0.0, 5e6, 20)
    state = tab._state
    tab.init(280.0, 400.0, 20, 0.0, 5e6, 20)
    assert tab._state is state, "Tables rebuilt for an unchanged grid"
    tab.init(280.0, 450.0, 30, 0.0, 5e6, 20)
    assert tab._state is not state
    assert tab.grid == (280.0, 450.0, 30, 0.0, 5e6, 20)

def test_interpolation_accuracy():
    """Default tables reproduce IAPWS-IF97 between grid points"""
    raw = H2O()
    tab = TabulatedH2O(raw)
    tab.init(273.15, 623.15, 100, 0.0, 20e6, 200)
    T = 331.7
    assert rel_err(tab.vapor_pressure(T), raw.vapor_pressure(T)) < 0.01
    for p in [1e5, 3.3e6, 17.1e6]:
        assert rel_err(tab.liquid_density(T, p), raw.liquid_density(T, p)) < 1e-4
        assert rel_err(tab.liquid_viscosity(T, p), raw.liquid_viscosity(T, p)) < 2e-3
        assert rel_err(tab.liquid_heat_capacity(T, p), raw.liquid_heat_capacity(T, p)) < 1e-3
        assert rel_err(tab.liquid_thermal_conductivity(T, p), raw.liquid_thermal_conductivity(T, p)) < 1e-3
        assert rel_err(tab.liquid_enthalpy(T, p), raw.liquid_enthalpy(T, p)) < 1e-3
    p = 10e3  # Below p_sat(331.7 K), about 19 kPa
    assert rel_err(tab.gas_density(T, p), raw.gas_density(T, p)) < 1e-3
    assert rel_err(tab.gas_enthalpy(T, p), raw.gas_enthalpy(T, p)) < 1e-3
    assert rel_err(tab.gas_viscosity(T, p), raw.gas_viscosity(T, p)) < 1e-3

def test_interpolation_exact_on_grid():
    """Table nodes return the raw values"""
    raw = SimpleH2O()
    tab = TabulatedH2O(raw)
    tab.init(300.0, 400.0, 11, 0.0, 1e6, 11)
    assert rel_err(tab.vapor_pressure(350.0), raw.vapor_pressure(350.0)) < 1e-12
    assert rel_err(tab.liquid_enthalpy(350.0, 5e5), raw.liquid_enthalpy(350.0, 5e5)) < 1e-12

def test_raw_model_outside_grid():
    """Lookups off the tables return the raw model values"""
    raw = H2O()
    tab = TabulatedH2O(raw)
    tab.init(300.0, 400.0, 11, 0.0, 1e6, 11)
    assert tab.vapor_pressure(450.0) == raw.vapor_pressure(450.0)
    assert tab.liquid_density(290.0, 5e5) == raw.liquid_density(290.0, 5e5)
    assert tab.liquid_density(350.0, 5e6) == raw.liquid_density(350.0, 5e6)
    assert tab.liquid_enthalpy(420.0, 2e6) == raw.liquid_enthalpy(420.0, 2e6)
    # 600 kPa is above 1.1 * p_sat at 350 K, off the gas pressure axis
    assert tab.gas_density(350.0, 6e5) == raw.gas_density(350.0, 6e5)
    assert tab.gas_heat_capacity(350.0, 6e5) == raw.gas_heat_capacity(350.0, 6e5)
    # Inside the grid the tables are used
    assert tab.vapor_pressure(355.0) != raw.vapor_pressure(355.0)

def test_raw_model_outside_grid_arrays():
    """Arrays mixing points on and off the tables"""
    raw = H2O()
    tab = TabulatedH2O(raw)
    tab.init(300.0, 400.0, 11, 0.0, 1e6, 11)
    T = np.array([350.0, 420.0, 350.0])
    p = np.array([5e5, 5e5, 5e6])
    rho = tab.liquid_density(T, p)
    assert rho.shape == (3,)
    assert rel_err(rho[0], raw.liquid_density(350.0, 5e5)) < 1e-4
    assert rel_err(rho[1], raw.liquid_density(420.0, 5e5)) < 1e-12
    assert rel_err(rho[2], raw.liquid_density(350.0, 5e6)) < 1e-12

def test_array_lookup():
    """Interpolation is vectorized over arrays"""
    tab = TabulatedH2O()
    tab.init(300.0, 400.0, 11, 0.0, 1e6, 11)
    T = np.array([305.0, 333.3, 390.0])
    p = np.array([2e5, 5e5, 9e5])
    rho = tab.liquid_density(T, p)
    assert rho.shape == (3,)
    for i in range(3):
        assert abs(rho[i] - tab.liquid_density(T[i], p[i])) < 1e-9

def test_passthrough_constants():
    raw = H2O()
    tab = TabulatedH2O(raw)
    assert tab.is_tabulated is True
    assert tab.name() == raw.name()
    assert tab.molar_mass() == raw.molar_mass()
    assert tab.critical_temperature() == raw.critical_temperature()
    assert tab.critical_pressure() == raw.critical_pressure()
    assert tab.acentric_factor() == raw.acentric_factor()
    assert tab.liquid_is_compressible() == raw.liquid_is_compressible()
    assert tab.gas_is_ideal() == raw.gas_is_ideal()


if __name__ == '__main__':
    print("=" * 70)
    print("TABULATED WATER VALIDATION TESTS")
    print("=" * 70)

    tests = [v for k, v in globals().items() if k.startswith('test_')]
    passed = 0
    failed = 0
    errors = []

    for test in tests:
        try:
            test()
            passed += 1
            print(f"  PASS: {test.__name__}")
        except Exception as e:
            failed += 1
            errors.append((test.__name__, str(e)))
            print(f"  FAIL: {test.__name__}: {e}")

    print(f"\n{'=' * 70}")
    print(f"Results: {passed} passed, {failed} failed out of {passed + failed}")

    print("=" * 70)
    sys.exit(1 if failed > 0 else 0)
