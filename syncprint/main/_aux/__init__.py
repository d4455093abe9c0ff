from ._aux import iter_update_dict

__all__ = ["iter_update_dict"]
