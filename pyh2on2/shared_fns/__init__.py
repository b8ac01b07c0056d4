from .shared_fns import is_jax, get_namespace, to_lhs, lhs_max, lhs_sqrt, convert_to_numpy
