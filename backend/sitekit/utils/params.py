from werkzeug.exceptions import BadRequest

TRUE_VALUES = {"true", "1", "yes"}
FALSE_VALUES = {"false", "0", "no"}


def query_bool(args, name, default=False):
    raw = args.get(name)
    if raw is None or raw == "":
        return default
    value = raw.lower()
    if value in TRUE_VALUES:
        return True
    if value in FALSE_VALUES:
        return False
    raise BadRequest(f"'{name}' must be a boolean")


def query_enum(args, name, enum_cls):
    raw = args.get(name)
    if raw is None or raw == "":
        return None
    try:
        return enum_cls(raw)
    except ValueError:
        allowed = ", ".join(member.value for member in enum_cls)
        raise BadRequest(f"'{name}' must be one of: {allowed}")


def parse_enum(value, enum_cls, name):
    """Path-parameter counterpart of query_enum."""
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(member.value for member in enum_cls)
        raise BadRequest(f"'{name}' must be one of: {allowed}")
