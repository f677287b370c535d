def apply_changes(entity, changes, fields=None):
    """
    Copy a validated patch onto a model instance.

    Only keys present in `changes` are touched; `fields` restricts which
    attributes may be written.
    """
    changed = []
    for field, value in changes.items():
        if fields is not None and field not in fields:
            continue
        if getattr(entity, field) != value:
            setattr(entity, field, value)
            changed.append(field)
    return changed
