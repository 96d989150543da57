"""Query string encoding for options models."""

from typing import Optional
from urllib.parse import urlencode, urlsplit, urlunsplit

from pydantic import BaseModel

from ...exceptions import RequestBuildError


def add_options(url: str, opts: Optional[BaseModel]) -> str:
    """Add the set fields of ``opts`` to ``url`` as query parameters.

    Members that are ``None``, empty strings or zero are left out. Any
    query string already on ``url`` is replaced.

    :param url: Relative request URL
    :type url: str
    :param opts: Options model, or None for no parameters
    :type opts: Optional[BaseModel]
    :return: URL with the encoded query string
    :rtype: str
    :raises RequestBuildError: If the URL cannot be parsed
    """
    if opts is None:
        return url

    try:
        parts = urlsplit(url)
    except ValueError as e:
        raise RequestBuildError(f"invalid request URL {url!r}", original_error=e) from e

    values = opts.model_dump(mode="json", by_alias=True, exclude_none=True)
    params = sorted(
        (key, value) for key, value in values.items() if value != "" and value != 0
    )
    return urlunsplit(parts._replace(query=urlencode(params)))
