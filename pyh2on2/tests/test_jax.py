#!/usr/bin/env python3
"""
Derivative carrying evaluation tests. Compares JAX results against the float path
and jax.grad derivatives against central finite differences.
Run with: python3 -m pytest pyh2on2/tests/ -v
Or standalone: python3 pyh2on2/tests/test_jax.py
"""

import sys
import os
import numpy as np
import jax
import jax.numpy as jnp

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..'))
from pyh2on2.classes import eval_type
from pyh2on2.shared_fns import to_lhs, get_namespace, is_jax, lhs_max, lhs_sqrt
from pyh2on2.components import TabulatedH2O
from pyh2on2.fluidsystem import H2ON2
from pyh2on2.fluidstate import CompositionalFluidState

L, G = H2ON2.LIQUID_PHASE_IDX, H2ON2.GAS_PHASE_IDX
W, N = H2ON2.H2O_IDX, H2ON2.N2_IDX

PROPERTIES = ['density', 'viscosity', 'enthalpy', 'heat_capacity', 'thermal_conductivity']

_TABULATED = None

def tabulated_h2o():
    global _TABULATED
    if _TABULATED is None:
        _TABULATED = TabulatedH2O()
        _TABULATED.init(273.15, 623.15, 100, 0.0, 20e6, 200)
    return _TABULATED

def make_state(fsys, T, p, x_n2_liquid=0.01, x_n2_gas=0.7):
    fs = CompositionalFluidState(fsys)
    fs.set_temperature(T)
    fs.set_pressure(L, p)
    fs.set_pressure(G, p)
    fs.set_composition(L, 1.0 - x_n2_liquid, x_n2_liquid)
    fs.set_composition(G, 1.0 - x_n2_gas, x_n2_gas)
    return fs

def rel_err(a, b):
    return abs(a - b) / abs(b)

def central_difference(f, x, h):
    return (f(x + h) - f(x - h)) / (2 * h)

# =============================================================================
# Numeric adapter
# =============================================================================

def test_namespace_dispatch():
    assert get_namespace(1.0) is np
    assert get_namespace(np.array([1.0, 2.0])) is np
    assert get_namespace(1.0, jnp.asarray(2.0)) is jnp
    assert is_jax(jnp.asarray(1.0)) and not is_jax(1.0)

def test_to_lhs():
    assert to_lhs(2.5) == 2.5
    assert isinstance(to_lhs(np.float64(2.5), eval_type.FLOAT), float)
    assert isinstance(to_lhs(jnp.asarray(2.5), eval_type.FLOAT), float)
    value = to_lhs(2.5, eval_type.JAX)
    assert is_jax(value) and value.dtype == jnp.float64
    arr = to_lhs([1.0, 2.0], eval_type.FLOAT)
    assert isinstance(arr, np.ndarray) and arr.shape == (2,)

def test_lhs_primitives():
    assert lhs_max(1e-12, 1e-10) == 1e-10
    assert is_jax(lhs_max(jnp.asarray(0.0), 1e-5))
    assert float(lhs_sqrt(jnp.asarray(4.0))) == 2.0
    assert lhs_sqrt(9.0) == 3.0

# =============================================================================
# Fluid system
# =============================================================================

def test_jax_matches_float():
    """Every property agrees between the float and JAX representations"""
    for h2o in ['IAPWS', 'TABULATED']:
        for rel in ['SIMPLE', 'COMPLEX']:
            if h2o == 'TABULATED':
                fsys = H2ON2(relations=rel, h2o_component=tabulated_h2o())
            else:
                fsys = H2ON2(relations=rel, h2o=h2o)
            fs = make_state(fsys, 350.0, 1e5)
            for name in PROPERTIES:
                for ph in [L, G]:
                    prop = getattr(fsys, name)
                    v_float = prop(fs, ph, lhs='FLOAT')
                    v_jax = prop(fs, ph, lhs='JAX')
                    assert is_jax(v_jax), f"{name} did not return a JAX value"
                    assert rel_err(float(v_jax), v_float) < 1e-10, f"{name} {h2o} {rel} phase {ph}: {v_jax} vs {v_float}"
            for c in [W, N]:
                v_float = fsys.fugacity_coefficient(fs, L, c, lhs=eval_type.FLOAT)
                v_jax = fsys.fugacity_coefficient(fs, L, c, lhs=eval_type.JAX)
                assert rel_err(float(v_jax), v_float) < 1e-10
                assert is_jax(fsys.fugacity_coefficient(fs, G, c, lhs='JAX'))
                assert is_jax(fsys.diffusion_coefficient(fs, G, c, lhs='JAX'))

def test_jax_state_values():
    """A fluid state holding JAX values evaluates in JAX, and converts to float on request"""
    fsys = H2ON2(h2o='IAPWS')
    fs = make_state(fsys, jnp.asarray(350.0), jnp.asarray(1e5))
    rho = fsys.density(fs, G)
    assert is_jax(rho)
    rho_float = fsys.density(fs, G, lhs='FLOAT')
    assert isinstance(rho_float, float)
    assert rel_err(float(rho), rho_float) < 1e-12

def _property_of_T(fsys, name, phase_idx, p, x_n2_gas):
    def f(T):
        fs = make_state(fsys, T, p, x_n2_gas=x_n2_gas)
        return getattr(fsys, name)(fs, phase_idx, lhs='JAX')
    return f

def _float_property_of_T(fsys, name, phase_idx, p, x_n2_gas):
    def f(T):
        fs = make_state(fsys, T, p, x_n2_gas=x_n2_gas)
        return getattr(fsys, name)(fs, phase_idx, lhs='FLOAT')
    return f

def test_temperature_derivatives_iapws():
    """jax.grad through the IAPWS-IF97 mixing rules matches finite differences"""
    fsys = H2ON2(relations='COMPLEX', h2o='IAPWS')
    T = 380.0
    for name in PROPERTIES:
        for ph, p in [(L, 5e6), (G, 1e5)]:
            dfdT = float(jax.grad(_property_of_T(fsys, name, ph, p, 0.6))(T))
            fd = central_difference(_float_property_of_T(fsys, name, ph, p, 0.6), T, 1e-3)
            assert abs(dfdT - fd) <= 1e-5 * abs(fd) + 1e-12, f"d{name}/dT phase {ph}: grad={dfdT}, fd={fd}"

def test_temperature_derivatives_tabulated():
    """jax.grad through the table interpolation matches finite differences inside a cell"""
    fsys = H2ON2(relations='COMPLEX', h2o_component=tabulated_h2o())
    T = 300.0  # Between temperature ticks 7 and 8
    for name in ['density', 'viscosity', 'enthalpy']:
        dfdT = float(jax.grad(_property_of_T(fsys, name, L, 1e6, 0.7))(T))
        fd = central_difference(_float_property_of_T(fsys, name, L, 1e6, 0.7), T, 1e-4)
        assert abs(dfdT - fd) <= 1e-5 * abs(fd) + 1e-12, f"d{name}/dT: grad={dfdT}, fd={fd}"

def test_tabulated_off_grid_jax():
    """JAX lookups off the tables take the raw model value and its derivative"""
    tab = tabulated_h2o()
    raw = tab.raw
    T = jnp.asarray([350.0, 700.0])
    p = jnp.asarray([3e4, 6e5])
    rho = tab.gas_density(T, p)
    assert is_jax(rho)
    assert rel_err(float(rho[1]), float(raw.gas_density(700.0, 6e5))) < 1e-12
    assert rel_err(float(rho[0]), float(raw.gas_density(350.0, 3e4))) < 1e-3

    # 600 kPa water partial pressure lies above the 350 K gas pressure axis
    d_tab = float(jax.grad(lambda pw: tab.gas_density(350.0, pw))(6e5))
    d_raw = float(jax.grad(lambda pw: raw.gas_density(350.0, pw))(6e5))
    assert rel_err(d_tab, d_raw) < 1e-12
    assert d_raw > 0, "Steam density rises with pressure above saturation"

def test_composition_derivative():
    """Derivative of the Wilke gas viscosity with respect to the N2 mole fraction"""
    fsys = H2ON2(relations='COMPLEX', h2o='IAPWS')

    def mu(x_n2):
        fs = make_state(fsys, 400.0, 1e5, x_n2_gas=x_n2)
        return fsys.viscosity(fs, G, lhs='JAX')

    def mu_float(x_n2):
        fs = make_state(fsys, 400.0, 1e5, x_n2_gas=x_n2)
        return fsys.viscosity(fs, G, lhs='FLOAT')

    dmu = float(jax.grad(mu)(0.5))
    fd = central_difference(mu_float, 0.5, 1e-6)
    assert abs(dmu - fd) <= 1e-5 * abs(fd), f"grad={dmu}, fd={fd}"
    assert dmu > 0, "Nitrogen is more viscous than steam"

def test_jacobian_over_pressure():
    """jax.jacfwd over a vector of inputs, as used in simulator Jacobians"""
    fsys = H2ON2(relations='COMPLEX', h2o='IAPWS')

    def props(y):
        fs = make_state(fsys, y[0], y[1], x_n2_gas=0.8)
        return jnp.stack([fsys.density(fs, G, lhs='JAX'), fsys.density(fs, L, lhs='JAX')])

    J = jax.jacfwd(props)(jnp.asarray([450.0, 2e6]))
    assert J.shape == (2, 2)
    assert float(J[0, 1]) > 0, "Gas density rises with pressure"
    assert float(J[1, 1]) > 0, "Compressible liquid density rises with pressure"
    assert float(J[0, 0]) < 0, "Gas density falls with temperature"


if __name__ == '__main__':
    print("=" * 70)
    print("JAX EVALUATION TESTS")
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
