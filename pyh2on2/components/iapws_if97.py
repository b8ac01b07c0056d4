"""
IAPWS-IF97 Regions 1, 2 and 4: liquid water, steam and the saturation line.

Standalone implementation with no external dependencies beyond numpy / jax.numpy.
Only arithmetic operators are used inside the Gibbs free energy sums, so every
function accepts floats, numpy arrays or JAX values (including tracers).

Provides:
    - rho_region1(T, P), h_region1(T, P), cp_region1(T, P), kappa_T_region1(T, P)
    - rho_region2(T, P), h_region2(T, P), cp_region2(T, P)
    - p_sat(T): saturation pressure (Region 4)

Valid range:
    Region 1: 273.15 K <= T <= 623.15 K, P_sat(T) <= P <= 100 MPa
    Region 2: 273.15 K <= T <= 623.15 K, 0 < P <= P_sat(T)
    Outside these ranges the equations are extrapolated without warning.

Reference:
    Wagner, W. et al. (2000). "The IAPWS Industrial Formulation 1997
    for the Thermodynamic Properties of Water and Steam."
    ASME J. Eng. Gas Turbines Power, 122(1), 150-182.

Units: T in K, P in Pa, rho in kg/m3, h in J/kg, cp in J/(kg.K)
"""

from pyh2on2.shared_fns import get_namespace
from pyh2on2.constants import TC_H2O

# ============================================================================
# Constants
# ============================================================================

R_SPECIFIC = 461.526     # Specific gas constant for water [J/(kg*K)]

P_STAR_1 = 16.53e6       # Region 1 reference pressure [Pa]
T_STAR_1 = 1386.0        # Region 1 reference temperature [K]
P_STAR_2 = 1.0e6         # Region 2 reference pressure [Pa]
T_STAR_2 = 540.0         # Region 2 reference temperature [K]

# ============================================================================
# Region 1 coefficients (Table 2 of IAPWS-IF97)
# Each row: (I_i, J_i, n_i)
# ============================================================================

_REGION1_IJN = [
    (0,  -2,   0.14632971213167e+00),
    (0,  -1,  -0.84548187389013e+00),
    (0,   0,  -0.37563603672040e+01),
    (0,   1,   0.33855169168385e+01),
    (0,   2,  -0.95791963387872e+00),
    (0,   3,   0.15772038513228e+00),
    (0,   4,  -0.16616417199501e-01),
    (0,   5,   0.81214629983568e-03),
    (1,  -9,   0.28319080123804e-03),
    (1,  -7,  -0.60706301565874e-03),
    (1,  -1,  -0.18990068218419e-01),
    (1,   0,  -0.32529748770505e-01),
    (1,   1,  -0.21841717175414e-01),
    (1,   3,  -0.52838357969930e-04),
    (2,  -3,  -0.47184321073267e-03),
    (2,   0,  -0.30001780793026e-03),
    (2,   1,   0.47661393906987e-04),
    (2,   3,  -0.44141845330846e-05),
    (2,  17,  -0.72694996297594e-15),
    (3,  -4,  -0.31679644845054e-04),
    (3,   0,  -0.28270797985312e-05),
    (3,   6,  -0.85205128120103e-09),
    (4,  -5,  -0.22425281908000e-05),
    (4,  -2,  -0.65171222895601e-06),
    (4,  10,  -0.14341729937924e-12),
    (5,  -8,  -0.40516996860117e-06),
    (8, -11,  -0.12734301741682e-08),
    (8,  -6,  -0.17424871230634e-09),
    (21, -29, -0.68762131295531e-18),
    (23, -31,  0.14478307828521e-19),
    (29, -38,  0.26335781662795e-22),
    (30, -39, -0.11947622640071e-22),
    (31, -40,  0.18228094581404e-23),
    (32, -41, -0.93537087292458e-25),
]

# ============================================================================
# Region 2 coefficients
# Ideal gas part (Table 10): (J0_i, n0_i)
# Residual part (Table 11): (I_i, J_i, n_i)
# ============================================================================

_REGION2_J0N0 = [
    (0,  -0.96927686500217e+01),
    (1,   0.10086655968018e+02),
    (-5, -0.56087911283020e-02),
    (-4,  0.71452738081455e-01),
    (-3, -0.40710498223928e+00),
    (-2,  0.14240819171444e+01),
    (-1, -0.43839511319450e+01),
    (2,  -0.28408632460772e+00),
    (3,   0.21268463753307e-01),
]

_REGION2_IJN = [
    (1,   0, -0.17731742473213e-02),
    (1,   1, -0.17834862292358e-01),
    (1,   2, -0.45996013696365e-01),
    (1,   3, -0.57581259083432e-01),
    (1,   6, -0.50325278727930e-01),
    (2,   1, -0.33032641670203e-04),
    (2,   2, -0.18948987516315e-03),
    (2,   4, -0.39392777243355e-02),
    (2,   7, -0.43797295650573e-01),
    (2,  36, -0.26674547914087e-04),
    (3,   0,  0.20481737692309e-07),
    (3,   1,  0.43870667284435e-06),
    (3,   3, -0.32277677238570e-04),
    (3,   6, -0.15033924542148e-02),
    (3,  35, -0.40668253562649e-01),
    (4,   1, -0.78847309559367e-09),
    (4,   2,  0.12790717852285e-07),
    (4,   3,  0.48225372718507e-06),
    (5,   7,  0.22922076337661e-05),
    (6,   3, -0.16714766451061e-10),
    (6,  16, -0.21171472321355e-02),
    (6,  35, -0.23895741934104e+02),
    (7,   0, -0.59059564324270e-17),
    (7,  11, -0.12621808899101e-05),
    (7,  25, -0.38946842435739e-01),
    (8,   8,  0.11256211360459e-10),
    (8,  36, -0.82311340897998e+01),
    (9,  13,  0.19809712802088e-07),
    (10,  4,  0.10406965210174e-18),
    (10, 10, -0.10234747095929e-12),
    (10, 14, -0.10018179379511e-08),
    (16, 29, -0.80882908646985e-10),
    (16, 50,  0.10693031879409e+00),
    (18, 57, -0.33662250574171e+00),
    (20, 20,  0.89185845355421e-24),
    (20, 35,  0.30629316876232e-12),
    (20, 48, -0.42002467698208e-05),
    (21, 21, -0.59056029685639e-25),
    (22, 53,  0.37826947613457e-05),
    (23, 39, -0.12768608934681e-14),
    (24, 26,  0.73087610595061e-28),
    (24, 40,  0.55414715350778e-16),
    (24, 58, -0.94369707241210e-06),
]

# ============================================================================
# Region 4 coefficients (Table 34)
# ============================================================================

_REGION4_N = [
    0.11670521452767e+04,
    -0.72421316703206e+06,
    -0.17073846940092e+02,
    0.12020824702470e+05,
    -0.32325550322333e+07,
    0.14915108613530e+02,
    -0.48232657361591e+04,
    0.40511340542057e+06,
    -0.23855557567849e+00,
    0.65017534844798e+03,
]

# Boundary between Regions 2 and 3 (Eq. 5), p in MPa, T in K
_B23_N = [0.34805185628969e+03, -0.11671859879975e+01, 0.10192970039326e-02]
T_B23_MIN = 623.15  # K, below which Region 2 ends at the saturation line


def _region1_derivatives(pi, tau):
    """
    Compute gamma_pi, gamma_pipi, gamma_tau and gamma_tautau for Region 1.

    gamma = sum( n_i * (7.1 - pi)^I_i * (tau - 1.222)^J_i )

    Returns:
        (gamma_pi, gamma_pipi, gamma_tau, gamma_tautau)
    """
    a = 7.1 - pi
    b = tau - 1.222

    gp = 0.0
    gpp = 0.0
    gt = 0.0
    gtt = 0.0

    for I, J, n in _REGION1_IJN:
        bJ = b ** J
        aI = a ** I
        gt += n * aI * J * b ** (J - 1)
        gtt += n * aI * J * (J - 1) * b ** (J - 2)
        if I == 0:
            continue
        aI1 = a ** (I - 1)
        gp += -n * I * aI1 * bJ
        if I > 1:
            gpp += n * I * (I - 1) * a ** (I - 2) * bJ

    return gp, gpp, gt, gtt


def _region2_derivatives(pi, tau):
    """
    Residual and ideal gas parts of the Region 2 Gibbs free energy.

    gamma0 = ln(pi) + sum( n0_i * tau^J0_i )
    gammar = sum( n_i * pi^I_i * (tau - 0.5)^J_i )

    Returns:
        (gammar_pi, gamma0_tau + gammar_tau, gamma0_tautau + gammar_tautau)
    """
    b = tau - 0.5

    g0t = 0.0
    g0tt = 0.0
    for J0, n0 in _REGION2_J0N0:
        g0t += n0 * J0 * tau ** (J0 - 1)
        g0tt += n0 * J0 * (J0 - 1) * tau ** (J0 - 2)

    grp = 0.0
    grt = 0.0
    grtt = 0.0
    for I, J, n in _REGION2_IJN:
        piI = pi ** I
        grp += n * I * pi ** (I - 1) * b ** J
        grt += n * piI * J * b ** (J - 1)
        grtt += n * piI * J * (J - 1) * b ** (J - 2)

    return grp, g0t + grt, g0tt + grtt


def _region2_gammar_pipi(pi, tau):
    """ Second pressure derivative of the Region 2 residual Gibbs free energy """
    b = tau - 0.5
    grpp = 0.0
    for I, J, n in _REGION2_IJN:
        if I > 1:
            grpp += n * I * (I - 1) * pi ** (I - 2) * b ** J
    return grpp


def rho_region1(T, P):
    """
    Liquid water density from IAPWS-IF97 Region 1.

    Parameters:
        T: temperature in K (273.15 - 623.15)
        P: pressure in Pa (up to 100 MPa)

    Returns:
        density in kg/m3
    """
    pi = P / P_STAR_1
    tau = T_STAR_1 / T
    gp, _, _, _ = _region1_derivatives(pi, tau)
    return P_STAR_1 / (R_SPECIFIC * T * gp)


def h_region1(T, P):
    """ Specific enthalpy of liquid water (J/kg), Region 1 """
    pi = P / P_STAR_1
    tau = T_STAR_1 / T
    _, _, gt, _ = _region1_derivatives(pi, tau)
    return R_SPECIFIC * T * tau * gt


def cp_region1(T, P):
    """ Isobaric heat capacity of liquid water (J/(kg.K)), Region 1 """
    pi = P / P_STAR_1
    tau = T_STAR_1 / T
    _, _, _, gtt = _region1_derivatives(pi, tau)
    return -R_SPECIFIC * tau * tau * gtt


def kappa_T_region1(T, P):
    """
    Isothermal compressibility of liquid water from IAPWS-IF97 Region 1.

    Returns:
        kappa_T in 1/Pa
    """
    pi = P / P_STAR_1
    tau = T_STAR_1 / T
    gp, gpp, _, _ = _region1_derivatives(pi, tau)
    return -gpp / (gp * P_STAR_1)


def rho_region2(T, P):
    """
    Steam density from IAPWS-IF97 Region 2.

    Written as P / (R*T*(1 + pi*gammar_pi)) so that it is well defined,
    and zero, at vanishing (partial) pressure.

    Parameters:
        T: temperature in K
        P: pressure in Pa

    Returns:
        density in kg/m3
    """
    pi = P / P_STAR_2
    tau = T_STAR_2 / T
    grp, _, _ = _region2_derivatives(pi, tau)
    return P / (R_SPECIFIC * T * (1.0 + pi * grp))


def h_region2(T, P):
    """ Specific enthalpy of steam (J/kg), Region 2 """
    pi = P / P_STAR_2
    tau = T_STAR_2 / T
    _, gt, _ = _region2_derivatives(pi, tau)
    return R_SPECIFIC * T * tau * gt


def cp_region2(T, P):
    """ Isobaric heat capacity of steam (J/(kg.K)), Region 2 """
    pi = P / P_STAR_2
    tau = T_STAR_2 / T
    _, _, gtt = _region2_derivatives(pi, tau)
    return -R_SPECIFIC * tau * tau * gtt


def p_sat(T):
    """
    Saturation pressure of water (Region 4, Eq. 30).
    Temperatures above the critical point return the critical pressure.

    Parameters:
        T: temperature in K

    Returns:
        saturation pressure in Pa
    """
    xp = get_namespace(T)
    n = _REGION4_N
    T = xp.minimum(T, TC_H2O)
    theta = T + n[8] / (T - n[9])
    A = theta * theta + n[0] * theta + n[1]
    B = n[2] * theta * theta + n[3] * theta + n[4]
    C = n[5] * theta * theta + n[6] * theta + n[7]
    return 1e6 * (2.0 * C / (-B + xp.sqrt(B * B - 4.0 * A * C))) ** 4


def drho_dp_region2(T, P):
    """
    Isothermal pressure derivative of the Region 2 steam density.

    d(rho)/dP = (1 - pi^2*gammar_pipi) / (R*T*(1 + pi*gammar_pi)^2)

    Returns:
        d(rho)/dP in kg/(m3.Pa) = s2/m2
    """
    pi = P / P_STAR_2
    tau = T_STAR_2 / T
    grp, _, _ = _region2_derivatives(pi, tau)
    grpp = _region2_gammar_pipi(pi, tau)
    D = 1.0 + pi * grp
    return (1.0 - pi * pi * grpp) / (R_SPECIFIC * T * D * D)


def p_b23(T):
    """ Pressure on the Region 2 / Region 3 boundary (Pa), Eq. 5 """
    n = _B23_N
    return 1e6 * (n[0] + n[1] * T + n[2] * T * T)


def p_region2_max(T):
    """
    Highest pressure at which the Region 2 (steam) equations apply.
    The saturation pressure up to 623.15 K, the B23 boundary above it.

    Parameters:
        T: temperature in K

    Returns:
        pressure in Pa
    """
    xp = get_namespace(T)
    p_low = p_sat(xp.minimum(T, T_B23_MIN))
    p_high = p_b23(xp.maximum(T, T_B23_MIN))
    return xp.where(T <= T_B23_MIN, p_low, p_high)
