from .fluidsystem import H2ON2, CV_N2_R, CV_H2O_R
from .tables import property_table, print_property_table
