from .validate import validate_methods, phase_index, comp_index, check_phase, check_comp
