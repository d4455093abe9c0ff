import copy


def iter_update_dict(dt_base: dict, dt_new: dict) -> dict:
    """
    Recursively update a dictionary with another dictionary.

    Nested dictionaries are merged key by key; any other value in dt_new
    replaces the one in dt_base.

    Args:
        dt_base (dict): The original dictionary to be updated.
        dt_new (dict): The dictionary with updates.

    Returns:
        dict: The updated dictionary.
    """
    for k, vv in (dt_new or {}).items():
        v = dt_base.get(k)
        if isinstance(v, dict) and isinstance(vv, dict):
            dt_base[k] = iter_update_dict(v, vv)
        else:
            dt_base[k] = copy.deepcopy(vv)
    return dt_base
