from sqlalchemy import or_
from sitekit.models.enums import Environment


def for_environment(query, model, environment):
    """
    Restrict a query to rows scoped to `environment` or to every environment.
    """
    if environment is None:
        return query
    return query.filter(
        or_(
            model.environment == Environment(environment).value,
            model.environment == Environment.ALL.value,
        )
    )
