from .h2o_n2 import H2O_N2, henry_iapws, fuller_diff_coeff
