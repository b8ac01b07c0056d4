from .classes import phase, comp, relations, h2o_model, eval_type, class_dic
