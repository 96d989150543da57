"""Custom field operations.

MailerLite API docs: https://developers.mailerlite.com/reference/all-fields
"""

import logging
from typing import List, Optional, Tuple

from ..models.resources import Field, FieldUpdate, NewField
from ..utils.http import DecodeMode, Response
from .base import Service

logger = logging.getLogger(__name__)


class FieldsService(Service):
    """Handles the field related methods of the MailerLite API."""

    async def list(self) -> Tuple[List[Field], Response]:
        """List all fields.

        :return: Fields of the account and the response
        :rtype: Tuple[List[Field], Response]
        """
        request = self._client.new_request("GET", "fields")
        fields, response = await self._client.do(request, List[Field])
        return fields or [], response

    async def create(self, new_field: NewField) -> Tuple[Optional[Field], Response]:
        """Create a new field.

        MailerLite API docs: https://developers.mailerlite.com/reference/create-field

        :param new_field: Title and type of the field
        :type new_field: NewField
        :return: The created field and the response
        :rtype: Tuple[Optional[Field], Response]
        """
        request = self._client.new_request("POST", "fields", new_field)
        field, response = await self._client.do(request, Field)
        logger.debug("Created field %s", field.id if field else None)
        return field, response

    async def update(self, id: int, update: FieldUpdate) -> Tuple[Optional[Field], Response]:
        """Update a field.

        MailerLite API docs: https://developers.mailerlite.com/reference/update-field

        :param id: Field identifier
        :type id: int
        :param update: Members to change; unset members are left alone
        :type update: FieldUpdate
        :return: The updated field and the response
        :rtype: Tuple[Optional[Field], Response]
        """
        request = self._client.new_request("PUT", f"fields/{int(id)}", update)
        return await self._client.do(request, Field)

    async def delete(self, id: int) -> Response:
        """Delete a field.

        :param id: Field identifier
        :type id: int
        :return: The response
        :rtype: Response
        """
        request = self._client.new_request("DELETE", f"fields/{int(id)}")
        _, response = await self._client.do(request, mode=DecodeMode.NONE)
        return response
