from typing import Any, Mapping, Optional, Type, TypeVar

from pydantic import BaseModel

FiltersT = TypeVar("FiltersT", bound=BaseModel)


def coerce_filters(model: Type[FiltersT], filters: FiltersT | Mapping[str, Any] | None) -> Optional[FiltersT]:
    """
    Validates a plain filter mapping against its model; models pass through.

    Falsy entries are dropped first, since they are never sent anyway.
    """
    if filters is None or isinstance(filters, model):
        return filters
    return model.model_validate({key: value for key, value in filters.items() if value})
