from .h2o import H2O, SimpleH2O, viscosity_iapws, thermal_conductivity_iapws
from .n2 import N2
from .tabulated import TabulatedH2O
